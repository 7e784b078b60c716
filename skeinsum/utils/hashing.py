"""Streaming digest computation over files and byte streams."""

import io
import sys
from contextlib import contextmanager
from typing import BinaryIO, Callable, Iterator

from skeinsum.engine.base import DigestEngine, EngineError
from skeinsum.models.checksum import Digest, DigestConfig, ReadMode, StreamResult
from skeinsum.utils.logging import logger

DEFAULT_CHUNK_SIZE = 4 * 1024

# Conventional name for the standard input stream
STDIN_NAME = "-"


class StreamHasher:
    """Drives a digest engine over one input stream at a time.

    The engine is reset after every stream, whether or not hashing
    succeeded, so consecutive digests are independent.
    """

    def __init__(
        self,
        engine: DigestEngine,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        stdin: Callable[[], BinaryIO] | None = None,
    ) -> None:
        """Initialize hasher.

        Args:
            engine: Digest engine to drive.
            chunk_size: Bytes per read; any value >= 1 gives the same digest.
            stdin: Factory for the binary stream used when a source is "-".
        """
        if chunk_size < 1:
            raise ValueError(f"chunk size must be at least 1, got {chunk_size}")
        self.engine = engine
        self.chunk_size = chunk_size
        self._stdin = stdin or (lambda: sys.stdin.buffer)

    def digest_of(self, stream: BinaryIO, config: DigestConfig) -> Digest:
        """Compute the digest of everything remaining in a stream.

        Args:
            stream: Readable binary stream.
            config: Digest parameters.

        Returns:
            Digest of the stream contents.

        Raises:
            OSError: If the stream cannot be fully read.
            EngineError: If the engine rejects the parameters or fails to finalize.
        """
        try:
            self.engine.prepare(config.state_width)
            self.engine.init(config.output_bits)

            total = 0
            while True:
                chunk = stream.read(self.chunk_size)
                if not chunk:
                    break
                self.engine.update(chunk)
                total += len(chunk)

            data = self.engine.final()
            logger.debug(f"Hashed {total} bytes with {config}")
        finally:
            self.engine.reset()

        if len(data) < config.output_bytes:
            raise EngineError(
                f"engine returned {len(data)} bytes, expected {config.output_bytes}"
            )
        return Digest(data=bytes(data[: config.output_bytes]), output_bits=config.output_bits)

    def hash_bytes(self, data: bytes, config: DigestConfig) -> Digest:
        """Compute the digest of an in-memory byte string."""
        return self.digest_of(io.BytesIO(data), config)

    def hash_file(
        self,
        source: str,
        config: DigestConfig,
        read_mode: ReadMode = ReadMode.TEXT,
    ) -> StreamResult:
        """Open a source, hash it and report the outcome.

        Open and read failures, as well as engine errors, are captured in
        the returned result instead of being raised, so callers can carry on
        with the next source.

        Args:
            source: File path, or "-" for standard input.
            config: Digest parameters.
            read_mode: Mode recorded for the source.

        Returns:
            StreamResult with either a digest or the error.
        """
        logger.debug(f"Opening {source} in {read_mode.name.lower()} mode")
        try:
            with self.open_source(source) as stream:
                digest = self.digest_of(stream, config)
        except (OSError, EngineError) as e:
            logger.debug(f"{source}: {type(e).__name__}: {e}")
            return StreamResult(source=source, error=e)

        return StreamResult(source=source, digest=digest)

    @contextmanager
    def open_source(self, source: str) -> Iterator[BinaryIO]:
        """Open a source for reading, leaving standard input open on exit.

        Both read modes open the file as raw bytes: no line-ending
        translation is applied on any platform.
        """
        if source == STDIN_NAME:
            yield self._stdin()
            return

        with open(source, "rb") as f:
            yield f

"""Manifest production: hash sources and emit checksum lines."""

from typing import TYPE_CHECKING, Iterable

from skeinsum.models.checksum import DigestConfig, ProduceResult, ReadMode
from skeinsum.utils.hashing import STDIN_NAME, StreamHasher
from skeinsum.utils.logging import logger
from skeinsum.utils.manifest import format_line

if TYPE_CHECKING:
    from skeinsum.cli.output import ChecksumOutput


class Producer:
    """Computes digests for a list of sources and writes one manifest line each.

    Sources are processed strictly in the order given. A source that cannot
    be hashed is reported on the error channel and skipped.
    """

    def __init__(
        self,
        hasher: StreamHasher,
        config: DigestConfig,
        output: "ChecksumOutput",
        read_mode: ReadMode = ReadMode.TEXT,
    ) -> None:
        """Initialize producer.

        Args:
            hasher: Stream hasher wrapping the digest engine.
            config: Digest parameters for every source.
            output: Output sink for lines and diagnostics.
            read_mode: Mode recorded in each emitted line.
        """
        self.hasher = hasher
        self.config = config
        self.output = output
        self.read_mode = read_mode

    def produce(self, sources: Iterable[str] | None = None) -> ProduceResult:
        """Hash every source and emit manifest lines.

        Args:
            sources: File names; "-" or an empty list means standard input.

        Returns:
            ProduceResult with counts of written and failed sources.
        """
        names = list(sources or []) or [STDIN_NAME]
        result = ProduceResult()

        for source in names:
            stream_result = self.hasher.hash_file(source, self.config, self.read_mode)
            result.results.append(stream_result)

            if not stream_result.ok:
                result.failed += 1
                self.output.print_source_error(source, stream_result.error_message)
                continue

            self.output.write_line(
                format_line(
                    stream_result.digest.hex,
                    source,
                    binary=self.read_mode is ReadMode.BINARY,
                )
            )
            result.written += 1

        logger.debug(
            f"Produced {result.written} line(s), {result.failed} source(s) failed"
        )
        return result

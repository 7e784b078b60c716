"""Tests for streaming digest computation."""

import hashlib
import io
from pathlib import Path

import pytest

from skeinsum.engine.base import EngineError
from skeinsum.engine.shake import ShakeEngine
from skeinsum.models.checksum import DigestConfig, ReadMode
from skeinsum.utils.hashing import StreamHasher


class TestDigestOf:
    """Tests for StreamHasher.digest_of."""

    @pytest.mark.slow
    def test_chunking_independence(self, config: DigestConfig):
        """Test the digest does not depend on the read size."""
        data = bytes(range(256)) * 37 + b"tail"
        expected = StreamHasher(ShakeEngine()).hash_bytes(data, config)

        for chunk_size in (1, 2, 3, 63, 64, 4096, len(data), len(data) + 1):
            hasher = StreamHasher(ShakeEngine(), chunk_size=chunk_size)
            assert hasher.hash_bytes(data, config) == expected

    def test_empty_input(self, hasher: StreamHasher, config: DigestConfig):
        """Test empty input gives a stable 128-character digest."""
        first = hasher.hash_bytes(b"", config).hex
        second = hasher.hash_bytes(b"", config).hex

        assert len(first) == 128
        assert first == second
        assert first == hashlib.shake_256(b"").hexdigest(64)

    def test_truncated_output_is_prefix(self, hasher: StreamHasher):
        """Test 512/256 equals the first 32 bytes of 512/512."""
        full = hasher.hash_bytes(b"", DigestConfig(512, 512))
        half = hasher.hash_bytes(b"", DigestConfig(512, 256))

        assert len(half.hex) == 64
        assert half.data == full.data[:32]

    def test_successive_streams_independent(self, hasher: StreamHasher, config: DigestConfig):
        """Test a previous stream does not affect the next digest."""
        alone = hasher.hash_bytes(b"second", config)

        hasher.hash_bytes(b"first", config)
        after_other = hasher.hash_bytes(b"second", config)

        assert alone == after_other

    def test_different_inputs_differ(self, hasher: StreamHasher, config: DigestConfig):
        """Test distinct inputs give distinct digests."""
        assert hasher.hash_bytes(b"a", config) != hasher.hash_bytes(b"b", config)

    def test_call_protocol(self, recording_engine, config: DigestConfig):
        """Test engine call order including the final short chunk."""
        hasher = StreamHasher(recording_engine, chunk_size=4)
        hasher.hash_bytes(b"0123456789", config)

        assert recording_engine.calls == [
            "prepare", "init", "update", "update", "update", "final", "reset",
        ]

    def test_empty_stream_finalizes(self, recording_engine, config: DigestConfig):
        """Test a zero-byte stream still calls final once."""
        StreamHasher(recording_engine).hash_bytes(b"", config)
        assert recording_engine.calls == ["prepare", "init", "final", "reset"]

    def test_read_error_aborts(self, recording_engine, failing_stream, config: DigestConfig):
        """Test a mid-stream read error skips final and still resets."""
        hasher = StreamHasher(recording_engine)

        with pytest.raises(OSError):
            hasher.digest_of(failing_stream, config)

        assert "final" not in recording_engine.calls
        assert recording_engine.calls[-1] == "reset"

    @pytest.mark.parametrize("stage", ["prepare", "init", "final"])
    def test_engine_errors_propagate(self, engine_factory, config: DigestConfig, stage: str):
        """Test engine rejections surface as EngineError and reset the engine."""
        engine = engine_factory(fail_on=stage)
        hasher = StreamHasher(engine)

        with pytest.raises(EngineError):
            hasher.hash_bytes(b"data", config)
        assert engine.calls[-1] == "reset"

    def test_invalid_chunk_size(self):
        """Test chunk size must be positive."""
        with pytest.raises(ValueError):
            StreamHasher(ShakeEngine(), chunk_size=0)


class TestHashFile:
    """Tests for StreamHasher.hash_file."""

    def test_file_matches_bytes(self, hasher: StreamHasher, config: DigestConfig, sample_files):
        """Test hashing a file equals hashing its contents."""
        path = sample_files["large"]
        result = hasher.hash_file(str(path), config)

        assert result.ok
        assert result.source == str(path)
        assert result.digest == hasher.hash_bytes(path.read_bytes(), config)

    def test_read_modes_agree(self, hasher: StreamHasher, config: DigestConfig, sample_files):
        """Test text and binary modes read identical bytes."""
        path = str(sample_files["hello"])
        text = hasher.hash_file(path, config, ReadMode.TEXT)
        binary = hasher.hash_file(path, config, ReadMode.BINARY)
        assert text.digest == binary.digest

    def test_missing_file(self, hasher: StreamHasher, config: DigestConfig, tmp_path: Path):
        """Test a missing file yields an error result instead of raising."""
        result = hasher.hash_file(str(tmp_path / "nope"), config)

        assert not result.ok
        assert result.digest is None
        assert isinstance(result.error, FileNotFoundError)

    def test_directory_is_unreadable(self, hasher: StreamHasher, config: DigestConfig, tmp_path: Path):
        """Test a directory cannot be hashed."""
        result = hasher.hash_file(str(tmp_path), config)
        assert not result.ok

    def test_engine_error_captured(self, engine_factory, config: DigestConfig, sample_files):
        """Test engine failures are reported in the result."""
        hasher = StreamHasher(engine_factory(fail_on="final"))
        result = hasher.hash_file(str(sample_files["hello"]), config)

        assert not result.ok
        assert isinstance(result.error, EngineError)
        assert result.error_message == "final rejected"

    def test_stdin(self, config: DigestConfig):
        """Test "-" reads from the standard input stream."""
        stdin = io.BytesIO(b"from stdin")
        hasher = StreamHasher(ShakeEngine(), stdin=lambda: stdin)

        result = hasher.hash_file("-", config)

        assert result.ok
        assert result.digest == hasher.hash_bytes(b"from stdin", config)
        assert not stdin.closed

"""Pytest configuration and shared fixtures."""

import io
from pathlib import Path

import pytest
from rich.console import Console

from skeinsum.cli.output import ChecksumOutput
from skeinsum.engine.base import EngineError
from skeinsum.engine.shake import ShakeEngine
from skeinsum.models.checksum import DigestConfig
from skeinsum.utils.hashing import StreamHasher


class RecordingEngine:
    """Fake digest engine that records every call.

    The "digest" is a running XOR/sum of the input, which is enough to
    tell streams apart and to detect state leaking between them.
    """

    def __init__(self, fail_on: str | None = None) -> None:
        self.calls: list[str] = []
        self.fail_on = fail_on
        self._acc: bytearray | None = None
        self._nbytes = 0

    def prepare(self, state_width: int) -> None:
        self.calls.append("prepare")
        if self.fail_on == "prepare":
            raise EngineError("prepare rejected")

    def init(self, output_bits: int) -> None:
        self.calls.append("init")
        if self.fail_on == "init":
            raise EngineError("init rejected")
        self._nbytes = (output_bits + 7) // 8
        self._acc = bytearray(self._nbytes)

    def update(self, data: bytes) -> None:
        self.calls.append("update")
        for i, b in enumerate(data):
            self._acc[i % self._nbytes] = (self._acc[i % self._nbytes] + b) & 0xFF

    def final(self) -> bytes:
        self.calls.append("final")
        if self.fail_on == "final":
            raise EngineError("final rejected")
        return bytes(self._acc)

    def reset(self) -> None:
        self.calls.append("reset")
        self._acc = None


class FailingStream(io.RawIOBase):
    """Binary stream that yields some data, then raises on read."""

    def __init__(self, data: bytes = b"partial") -> None:
        self._data = data
        self._served = False

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        if not self._served:
            self._served = True
            return self._data
        raise OSError(5, "Input/output error")


@pytest.fixture
def config() -> DigestConfig:
    """Default 512/512 digest configuration."""
    return DigestConfig(state_width=512, output_bits=512)


@pytest.fixture
def hasher() -> StreamHasher:
    """Stream hasher over the bundled engine."""
    return StreamHasher(ShakeEngine())


@pytest.fixture
def recording_engine() -> RecordingEngine:
    """Fake engine recording its call sequence."""
    return RecordingEngine()


@pytest.fixture
def captured_output() -> ChecksumOutput:
    """Output sink writing into in-memory consoles.

    Read results back with ``out.console.file.getvalue()`` and
    ``out.error_console.file.getvalue()``.
    """
    return ChecksumOutput(
        console=Console(file=io.StringIO(), highlight=False, width=200),
        error_console=Console(file=io.StringIO(), highlight=False, width=200),
    )


@pytest.fixture
def sample_files(tmp_path: Path) -> dict[str, Path]:
    """Create a few files with known contents."""
    files = {
        "empty": tmp_path / "empty.bin",
        "hello": tmp_path / "hello.txt",
        "large": tmp_path / "large.bin",
    }
    files["empty"].write_bytes(b"")
    files["hello"].write_bytes(b"hello world\n")
    files["large"].write_bytes(bytes(range(256)) * 100)
    return files


@pytest.fixture
def engine_factory():
    """Factory for fake engines, optionally failing at a given call."""
    return RecordingEngine


@pytest.fixture
def failing_stream() -> FailingStream:
    """Stream that breaks after its first read."""
    return FailingStream()


# Markers for test categories
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow running"
    )

"""Data models for checksum processing."""

from skeinsum.models.checksum import (
    ConfigError,
    Digest,
    DigestConfig,
    MalformedLine,
    Outcome,
    ReadMode,
    RunSummary,
    StreamResult,
    WellFormedLine,
)

__all__ = [
    "ConfigError",
    "Digest",
    "DigestConfig",
    "MalformedLine",
    "Outcome",
    "ReadMode",
    "RunSummary",
    "StreamResult",
    "WellFormedLine",
]

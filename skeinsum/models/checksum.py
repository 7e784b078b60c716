"""Data models for checksum production and verification."""

from dataclasses import dataclass, field
from enum import Enum

VALID_STATE_WIDTHS = (256, 512, 1024)
MIN_OUTPUT_BITS = 8
MAX_OUTPUT_BITS = 1024

# Largest digest any supported configuration can produce
MAX_DIGEST_BYTES = (MAX_OUTPUT_BITS + 7) // 8


def bits_to_bytes(nbits: int) -> int:
    """Number of bytes needed to hold nbits."""
    return (nbits + 7) // 8


class ConfigError(Exception):
    """Raised when digest parameters or run options are invalid."""

    pass


@dataclass(frozen=True)
class DigestConfig:
    """Digest engine parameters, validated on construction."""

    state_width: int = 512
    output_bits: int = 512

    def __post_init__(self) -> None:
        """Validate state width and output length."""
        if self.state_width not in VALID_STATE_WIDTHS:
            raise ConfigError(
                f"invalid state size: {self.state_width} "
                f"(must be 256, 512, or 1024)"
            )
        if not MIN_OUTPUT_BITS <= self.output_bits <= MAX_OUTPUT_BITS:
            raise ConfigError(f"invalid bit length size: {self.output_bits}")
        if self.output_bits > self.state_width:
            raise ConfigError(
                f"invalid bit length size: {self.output_bits} "
                f"(exceeds state size {self.state_width})"
            )

    @property
    def output_bytes(self) -> int:
        """Digest length in bytes."""
        return bits_to_bytes(self.output_bits)

    @property
    def hex_length(self) -> int:
        """Number of hex characters in an encoded digest."""
        return self.output_bytes * 2

    def __str__(self) -> str:
        return f"Skein-{self.state_width}-{self.output_bits}"


@dataclass(frozen=True)
class Digest:
    """Finalized digest of one stream."""

    data: bytes
    output_bits: int

    def __post_init__(self) -> None:
        """Check the buffer holds exactly the configured output."""
        expected = bits_to_bytes(self.output_bits)
        if len(self.data) != expected or expected > MAX_DIGEST_BYTES:
            raise ValueError(
                f"digest is {len(self.data)} bytes, expected {expected}"
            )

    @property
    def hex(self) -> str:
        """Lowercase hex encoding."""
        from skeinsum.utils.hexcodec import encode

        return encode(self.data, self.output_bits)


class ReadMode(Enum):
    """How a file was (or is to be) opened for hashing."""

    TEXT = " "
    BINARY = "*"

    @property
    def marker(self) -> str:
        """Separator character recorded in manifest lines."""
        return self.value

    @classmethod
    def from_marker(cls, marker: str) -> "ReadMode":
        """Look up mode by manifest separator character."""
        return cls(marker)


@dataclass(frozen=True)
class WellFormedLine:
    """A manifest record that parsed cleanly."""

    hex_digest: str
    filename: str
    read_mode: ReadMode = ReadMode.TEXT
    line_number: int = 0

    @property
    def binary(self) -> bool:
        """True if the record was produced in binary mode."""
        return self.read_mode is ReadMode.BINARY


@dataclass(frozen=True)
class MalformedLine:
    """A manifest record that could not be parsed."""

    raw_text: str
    line_number: int = 0


ManifestLine = WellFormedLine | MalformedLine


@dataclass
class StreamResult:
    """Outcome of hashing one source."""

    source: str
    digest: Digest | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """True if a digest was produced."""
        return self.digest is not None and self.error is None

    @property
    def error_message(self) -> str:
        """Human-readable reason for a failed source."""
        if self.error is None:
            return ""
        if isinstance(self.error, OSError) and self.error.strerror:
            return self.error.strerror
        return str(self.error)


class Outcome(Enum):
    """Per-line verification result."""

    MATCH = "match"
    MISMATCH = "mismatch"
    MALFORMED = "malformed"
    UNREADABLE = "unreadable"


@dataclass
class RunSummary:
    """Aggregate counters for one verification run."""

    matched: int = 0
    mismatched: int = 0
    malformed: int = 0
    unreadable: int = 0
    manifests_without_entries: int = 0
    outcomes: list[Outcome] = field(default_factory=list, repr=False)

    def record(self, outcome: Outcome) -> None:
        """Count one line outcome."""
        self.outcomes.append(outcome)
        if outcome is Outcome.MATCH:
            self.matched += 1
        elif outcome is Outcome.MISMATCH:
            self.mismatched += 1
        elif outcome is Outcome.MALFORMED:
            self.malformed += 1
        else:
            self.unreadable += 1

    def merge(self, other: "RunSummary") -> None:
        """Fold another summary into this one."""
        self.matched += other.matched
        self.mismatched += other.mismatched
        self.malformed += other.malformed
        self.unreadable += other.unreadable
        self.manifests_without_entries += other.manifests_without_entries
        self.outcomes.extend(other.outcomes)

    @property
    def well_formed(self) -> int:
        """Number of lines that were recomputed (or attempted)."""
        return self.matched + self.mismatched + self.unreadable

    @property
    def failed(self) -> bool:
        """True if the run must exit with failure status."""
        return self.mismatched > 0 or self.unreadable > 0

    @property
    def exit_code(self) -> int:
        """Process exit status for this summary."""
        return 1 if self.failed else 0


@dataclass
class ProduceResult:
    """Result of producing manifest lines for a list of sources."""

    written: int = 0
    failed: int = 0
    results: list[StreamResult] = field(default_factory=list, repr=False)

    @property
    def exit_code(self) -> int:
        """Process exit status for produce mode."""
        return 1 if self.failed else 0

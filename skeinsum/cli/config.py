"""Run configuration built from command-line values."""

from dataclasses import dataclass, field

from skeinsum.models.checksum import ConfigError, DigestConfig, ReadMode

DEFAULT_STATE_WIDTH = 512


@dataclass
class RunOptions:
    """Complete configuration for one invocation."""

    digest: DigestConfig = field(default_factory=DigestConfig)
    read_mode: ReadMode = ReadMode.TEXT
    check: bool = False
    quiet: bool = False
    status: bool = False
    warn: bool = False
    verbose: bool = False


def _parse_int(value: str, message: str) -> int:
    """Parse an integer option value, raising ConfigError on junk."""
    try:
        return int(value.strip())
    except ValueError:
        raise ConfigError(message) from None


def build_run_options(
    statesize: str | None = None,
    length: str | None = None,
    binary: bool = False,
    check: bool = False,
    quiet: bool = False,
    status: bool = False,
    warn: bool = False,
    verbose: bool = False,
) -> RunOptions:
    """Validate raw option values into RunOptions.

    The output length defaults to the state size.

    Args:
        statesize: Value of --statesize, or None for the default.
        length: Value of --length, or None to match the state size.
        binary: True for --binary, False for --text.
        check: Verify manifests instead of producing them.
        quiet: Suppress OK lines when checking.
        status: Suppress all output when checking.
        warn: Report malformed manifest lines.
        verbose: Enable debug logging.

    Returns:
        Validated RunOptions.

    Raises:
        ConfigError: If any digest parameter is invalid.
    """
    state_width = DEFAULT_STATE_WIDTH
    if statesize is not None:
        state_width = _parse_int(
            statesize,
            f"invalid state size: {statesize} (must be 256, 512, or 1024)",
        )

    output_bits = state_width
    if length is not None:
        output_bits = _parse_int(length, f"invalid bit length size: {length}")

    return RunOptions(
        digest=DigestConfig(state_width=state_width, output_bits=output_bits),
        read_mode=ReadMode.BINARY if binary else ReadMode.TEXT,
        check=check,
        quiet=quiet,
        status=status,
        warn=warn,
        verbose=verbose,
    )


def validate_options(options: RunOptions) -> list[str]:
    """Validate option combinations, return list of non-fatal issues.

    Args:
        options: Options to validate.

    Returns:
        List of validation issue messages.
    """
    issues = []

    if not options.check:
        for flag, enabled in (
            ("--quiet", options.quiet),
            ("--status", options.status),
            ("--warn", options.warn),
        ):
            if enabled:
                issues.append(f"the {flag} option is meaningful only when verifying checksums")
    elif options.read_mode is ReadMode.BINARY:
        issues.append("the --binary option is ignored when verifying checksums")

    return issues

"""CLI command using Typer."""

from pathlib import Path
from typing import List, Optional

import typer

from skeinsum import __version__
from skeinsum.cli.config import build_run_options, validate_options
from skeinsum.cli.output import PROG_NAME, ChecksumOutput
from skeinsum.engine.shake import ShakeEngine
from skeinsum.models.checksum import ConfigError
from skeinsum.processor.producer import Producer
from skeinsum.processor.verifier import Verifier
from skeinsum.utils.hashing import StreamHasher
from skeinsum.utils.logging import setup_logging

app = typer.Typer(
    name=PROG_NAME,
    help="Print or check Skein checksums.",
    add_completion=False,
)
output = ChecksumOutput()


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"{PROG_NAME} version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    files: Optional[List[str]] = typer.Argument(
        None,
        help="Files to hash, or manifests to check with --check. With no FILE, or when FILE is -, read standard input.",
        show_default=False,
    ),
    statesize: Optional[str] = typer.Option(
        None,
        "--statesize",
        "-s",
        metavar="SIZE",
        help="Use internal state size SIZE, one of 256, 512, or 1024 (default 512)",
    ),
    length: Optional[str] = typer.Option(
        None,
        "--length",
        "--len",
        "-l",
        metavar="LEN",
        help="Use output length LEN in bits (default: equals state size)",
    ),
    binary: bool = typer.Option(
        False,
        "--binary/--text",
        "-b/-t",
        help="Read files in binary mode, or text mode (default)",
    ),
    check: bool = typer.Option(
        False,
        "--check",
        "-c",
        help="Read Skein sums from the FILEs and check them",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Don't print OK for each successfully verified file",
    ),
    status: bool = typer.Option(
        False,
        "--status",
        help="Don't output anything, status code shows success",
    ),
    warn: bool = typer.Option(
        False,
        "--warn",
        "-w",
        help="Warn about improperly formatted checksum lines",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log debug information to standard error",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also write debug log to this file",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version number and exit",
    ),
) -> None:
    """Print or check Skein checksums.

    Without --check, prints one checksum line per FILE. With --check, each
    FILE is a list of checksum lines produced earlier; every listed file is
    re-hashed and compared.
    """
    try:
        options = build_run_options(
            statesize=statesize,
            length=length,
            binary=binary,
            check=check,
            quiet=quiet,
            status=status,
            warn=warn,
            verbose=verbose,
        )
    except ConfigError as e:
        output.print_error(str(e), hint=True)
        raise typer.Exit(1)

    setup_logging(verbose=options.verbose, log_file=log_file)

    for issue in validate_options(options):
        output.print_warning(issue)

    hasher = StreamHasher(ShakeEngine())

    if options.check:
        verifier = Verifier(
            hasher,
            options.digest,
            output,
            quiet=options.quiet,
            status=options.status,
            warn=options.warn,
        )
        summary = verifier.verify_all(files)
        raise typer.Exit(summary.exit_code)

    producer = Producer(hasher, options.digest, output, read_mode=options.read_mode)
    result = producer.produce(files)
    raise typer.Exit(result.exit_code)


if __name__ == "__main__":
    app()

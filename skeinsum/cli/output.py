"""Rich console output for checksum results and diagnostics."""

import os

from rich.console import Console

PROG_NAME = "skeinsum"


class ChecksumOutput:
    """Writes protocol lines to standard output and diagnostics to standard error.

    The Rich consoles pick the destination streams; lines are written to
    them as raw bytes, bypassing Rich rendering, so filenames with tabs,
    control characters or undecodable bytes come out exactly as given.
    """

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
        prog_name: str = PROG_NAME,
    ) -> None:
        """Initialize with Rich consoles.

        Args:
            console: Console for results (standard output).
            error_console: Console for diagnostics (standard error).
            prog_name: Program name used to prefix diagnostics.
        """
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(stderr=True, highlight=False)
        self.prog_name = prog_name

    def _write(self, console: Console, text: str) -> None:
        """Write text to the console's stream without Rich rendering."""
        stream = console.file
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            # In-memory text streams accept surrogates as-is
            stream.write(text)
            stream.flush()
            return

        stream.flush()
        buffer.write(os.fsencode(text))
        buffer.flush()

    def write_line(self, line: str) -> None:
        """Write one manifest line (which already carries its newline)."""
        self._write(self.console, line)

    def print_ok(self, filename: str) -> None:
        """Report a verified file."""
        self._write(self.console, f"{filename}: OK\n")

    def print_failed(self, filename: str) -> None:
        """Report a checksum mismatch."""
        self._write(self.console, f"{filename}: FAILED\n")

    def print_unreadable(self, filename: str) -> None:
        """Report a listed file that could not be opened or read."""
        self._write(self.console, f"{filename}: FAILED open or read\n")

    def print_source_error(self, source: str, reason: str) -> None:
        """Report an open/read/engine failure for one source."""
        self._write(self.error_console, f"{self.prog_name}: {source}: {reason}\n")

    def print_malformed(self, manifest: str, line_number: int) -> None:
        """Report an improperly formatted manifest line."""
        self._write(
            self.error_console,
            f"{manifest}: {line_number}: improperly formatted Skein checksum line\n",
        )

    def print_no_entries(self, manifest: str) -> None:
        """Report a manifest without any well-formed line."""
        self._write(
            self.error_console,
            f"{self.prog_name}: {manifest}: no properly formatted Skein checksum lines found\n",
        )

    def print_warning(self, message: str) -> None:
        """Display warning message."""
        self.error_console.print(
            f"{self.prog_name}: WARNING: {message}", markup=False, soft_wrap=True
        )

    def print_error(self, message: str, hint: bool = False) -> None:
        """Display error message, optionally followed by the --help hint."""
        # Message may echo raw option values
        self._write(self.error_console, f"{self.prog_name}: {message}\n")
        if hint:
            self.error_console.print(
                f"Try `{self.prog_name} --help' for more info.", markup=False, soft_wrap=True
            )

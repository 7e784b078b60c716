"""Manifest verification: recompute digests and compare with recorded ones."""

from typing import TYPE_CHECKING, Iterable

from skeinsum.models.checksum import (
    DigestConfig,
    ManifestLine,
    MalformedLine,
    Outcome,
    RunSummary,
    WellFormedLine,
)
from skeinsum.utils.hashing import STDIN_NAME, StreamHasher
from skeinsum.utils.logging import logger
from skeinsum.utils.manifest import decode_lines, read_manifest

if TYPE_CHECKING:
    from skeinsum.cli.output import ChecksumOutput


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


class Verifier:
    """Checks files against previously produced manifest lines.

    Each line is classified as a match, mismatch, malformed line or
    unreadable file. A failure on one line never stops the rest of the
    manifest from being checked.

    Reporting is controlled by three flags:
        quiet: don't print OK lines.
        status: print nothing; the exit status carries the result.
        warn: print a diagnostic for each malformed line.
    """

    def __init__(
        self,
        hasher: StreamHasher,
        config: DigestConfig,
        output: "ChecksumOutput",
        quiet: bool = False,
        status: bool = False,
        warn: bool = False,
    ) -> None:
        """Initialize verifier.

        Args:
            hasher: Stream hasher wrapping the digest engine.
            config: Digest parameters used to recompute every file.
            output: Output sink for results and diagnostics.
            quiet: Suppress OK lines.
            status: Suppress all output.
            warn: Report malformed lines.
        """
        self.hasher = hasher
        self.config = config
        self.output = output
        self.quiet = quiet
        self.status = status
        self.warn = warn

    def verify_all(self, manifests: Iterable[str] | None = None) -> RunSummary:
        """Verify every manifest in order and aggregate the results.

        Args:
            manifests: Manifest paths; "-" or an empty list means standard input.

        Returns:
            Combined RunSummary for the whole run.
        """
        names = list(manifests or []) or [STDIN_NAME]
        summary = RunSummary()

        for name in names:
            summary.merge(self.verify_path(name))

        logger.debug(f"Verification finished: {summary}")
        return summary

    def verify_path(self, name: str) -> RunSummary:
        """Open one manifest by name and verify it.

        A manifest that cannot be opened or read counts as unreadable;
        lines checked before a read error keep their outcomes.
        """
        summary = RunSummary()
        try:
            with self.hasher.open_source(name) as stream:
                return self.verify_manifest(decode_lines(stream), name, summary)
        except OSError as e:
            logger.debug(f"Cannot read manifest {name}: {e}")
            if not self.status:
                self.output.print_source_error(name, e.strerror or str(e))
            summary.record(Outcome.UNREADABLE)
            return summary

    def verify_manifest(
        self,
        lines: Iterable[str],
        name: str,
        summary: RunSummary | None = None,
    ) -> RunSummary:
        """Verify every line of one manifest.

        Args:
            lines: Manifest text lines.
            name: Manifest name used in diagnostics.
            summary: Summary to accumulate into; a new one if omitted.

        Returns:
            RunSummary for this manifest.
        """
        if summary is None:
            summary = RunSummary()

        for line in read_manifest(lines):
            summary.record(self.check_line(line, name))

        if summary.well_formed == 0:
            summary.manifests_without_entries += 1
            if not self.status:
                self.output.print_no_entries(name)
        elif not self.status:
            self._print_summary_warnings(summary)

        return summary

    def check_line(self, line: ManifestLine, manifest: str = STDIN_NAME) -> Outcome:
        """Classify a single parsed manifest line, reporting as configured."""
        if isinstance(line, MalformedLine):
            if self.warn and not self.status:
                self.output.print_malformed(manifest, line.line_number)
            return Outcome.MALFORMED

        outcome = self._compare(line, manifest)

        if not self.status:
            if outcome is Outcome.MATCH:
                if not self.quiet:
                    self.output.print_ok(line.filename)
            elif outcome is Outcome.MISMATCH:
                self.output.print_failed(line.filename)
            else:
                self.output.print_unreadable(line.filename)

        return outcome

    def _compare(self, line: WellFormedLine, manifest: str) -> Outcome:
        if line.filename == STDIN_NAME and manifest == STDIN_NAME:
            # Standard input is already being consumed as the manifest
            if not self.status:
                self.output.print_source_error(
                    line.filename, "standard input is already read as the manifest"
                )
            return Outcome.UNREADABLE

        result = self.hasher.hash_file(line.filename, self.config, line.read_mode)

        if not result.ok:
            if not self.status:
                self.output.print_source_error(line.filename, result.error_message)
            return Outcome.UNREADABLE

        if result.digest.hex.lower() == line.hex_digest.lower():
            return Outcome.MATCH

        logger.debug(
            f"{line.filename}: expected {line.hex_digest}, computed {result.digest.hex}"
        )
        return Outcome.MISMATCH

    def _print_summary_warnings(self, summary: RunSummary) -> None:
        if summary.malformed:
            self.output.print_warning(
                f"{summary.malformed} "
                f"{_plural(summary.malformed, 'line is', 'lines are')} improperly formatted"
            )
        if summary.unreadable:
            self.output.print_warning(
                f"{summary.unreadable} listed "
                f"{_plural(summary.unreadable, 'file', 'files')} could not be read"
            )
        if summary.mismatched:
            self.output.print_warning(
                f"{summary.mismatched} computed "
                f"{_plural(summary.mismatched, 'checksum', 'checksums')} did NOT match"
            )

"""Checksum manifest parsing and verification."""

import os
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from md5check.models.checksum import (
    EntryResult,
    ManifestEntry,
    VerificationOutcome,
    VerificationSummary,
)
from md5check.utils.hashing import compute_digest
from md5check.utils.logging import OperationLogger, logger

BINARY_MARKER = "*"


def display_path(path: Path | str) -> str:
    """Render a path for printing without failing on undecodable bytes.

    Paths decoded with os.fsdecode may carry lone surrogates for bytes that
    aren't valid UTF-8. Those bytes are shown as backslash escapes.

    Args:
        path: Path as read from a manifest or the command line.

    Returns:
        Printable string.
    """
    return os.fsencode(path).decode("utf-8", "backslashreplace")


def parse_manifest_line(line: str) -> ManifestEntry | None:
    """Parse one manifest line into digest and path.

    A line is well-formed only if it splits into exactly two whitespace
    separated tokens. The "*" binary marker belongs to the path side:
    "<digest> *<path>" and "<digest>*<path>" both yield the bare path.

    Args:
        line: Line with its terminator already stripped.

    Returns:
        ManifestEntry, or None if the line is malformed.
    """
    tokens = line.split()

    # "<digest>*<path>" is what format_line(binary=True) emits
    if len(tokens) == 1 and BINARY_MARKER in tokens[0]:
        digest, _, path = tokens[0].partition(BINARY_MARKER)
        tokens = [digest, BINARY_MARKER + path]

    if len(tokens) != 2:
        return None

    digest, path = tokens
    if path.startswith(BINARY_MARKER):
        path = path[len(BINARY_MARKER):]

    if not digest or not path:
        return None

    return ManifestEntry(expected_digest=digest, target_path=path)


class ManifestVerifier:
    """Verifies files listed in a checksum manifest.

    Results go to ``out`` ("<path>: OK" / "<path>: FAILED"), diagnostics to
    ``err``. A malformed line or an unreadable target never stops the run;
    only failing to open the manifest itself is fatal.
    """

    def __init__(
        self,
        out: TextIO | None = None,
        err: TextIO | None = None,
        quiet: bool = False,
        operation_logger: OperationLogger | None = None,
    ) -> None:
        """Initialize verifier.

        Args:
            out: Stream for results. Defaults to stdout at write time.
            err: Stream for diagnostics. Defaults to stderr at write time.
            quiet: Don't print OK lines.
            operation_logger: Optional audit log.
        """
        self._out = out
        self._err = err
        self.quiet = quiet
        self.operation_logger = operation_logger

    @property
    def out(self) -> TextIO:
        """Stream for OK/FAILED lines."""
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        """Stream for diagnostics."""
        return self._err or sys.stderr

    def verify(self, manifest_path: Path | str) -> VerificationSummary:
        """Verify every entry of a manifest.

        Args:
            manifest_path: Path to the manifest file.

        Returns:
            Summary with one result per manifest line, in order.

        Raises:
            OSError: If the manifest can't be opened.
        """
        summary = VerificationSummary(manifest_path=Path(manifest_path))
        summary.results.extend(self.iter_results(manifest_path))
        return summary

    def iter_results(self, manifest_path: Path | str) -> Iterator[EntryResult]:
        """Verify entries lazily, yielding each result as it is reported.

        Args:
            manifest_path: Path to the manifest file.

        Yields:
            EntryResult per manifest line.

        Raises:
            OSError: If the manifest can't be opened.
        """
        with open(manifest_path, "rb") as manifest:
            logger.debug(f"Verifying manifest {display_path(manifest_path)}")

            for line_number, raw in enumerate(manifest, start=1):
                line = os.fsdecode(raw.rstrip(b"\r\n"))
                entry = parse_manifest_line(line)

                if entry is None:
                    result = EntryResult(
                        line_number=line_number,
                        outcome=VerificationOutcome.MALFORMED_ENTRY,
                        message=f"{display_path(manifest_path)}: improperly formatted checksum line",
                    )
                else:
                    result = self.check_entry(entry, line_number)

                self._report(result)
                yield result

    def check_entry(self, entry: ManifestEntry, line_number: int = 0) -> EntryResult:
        """Hash one target and compare against its expected digest.

        Args:
            entry: Parsed manifest entry.
            line_number: Line the entry came from.

        Returns:
            EntryResult; never raises for target I/O errors.
        """
        path = entry.target_path

        try:
            target = open(path, "rb")
        except OSError as e:
            logger.debug(f"Line {line_number}: cannot open {display_path(path)}: {e}")
            return EntryResult(
                line_number=line_number,
                outcome=VerificationOutcome.TARGET_UNREADABLE,
                entry=entry,
                message=f"{display_path(path)}: No such file or directory",
            )

        with target:
            try:
                actual = compute_digest(target)
            except OSError as e:
                logger.debug(f"Line {line_number}: read error on {display_path(path)}: {e}")
                return EntryResult(
                    line_number=line_number,
                    outcome=VerificationOutcome.TARGET_UNREADABLE,
                    entry=entry,
                    message=f"{display_path(path)}: {e.strerror or e}",
                )

        outcome = (
            VerificationOutcome.MATCH
            if actual == entry.expected_digest
            else VerificationOutcome.MISMATCH
        )
        return EntryResult(
            line_number=line_number,
            outcome=outcome,
            entry=entry,
            actual_digest=actual,
        )

    def _report(self, result: EntryResult) -> None:
        """Write a result to the matching channel and the audit log."""
        if result.outcome is VerificationOutcome.MATCH:
            if not self.quiet:
                print(f"{display_path(result.path)}: OK", file=self.out)
        elif result.outcome is VerificationOutcome.MISMATCH:
            print(f"{display_path(result.path)}: FAILED", file=self.out)
        else:
            print(result.message, file=self.err)

        if self.operation_logger:
            self.operation_logger.log_operation(
                "verify",
                result.path or f"line {result.line_number}",
                success=result.is_ok,
                details=result.to_dict(),
            )


def verify_manifest(
    manifest_path: Path | str,
    out: TextIO | None = None,
    err: TextIO | None = None,
    quiet: bool = False,
    operation_logger: OperationLogger | None = None,
) -> VerificationSummary:
    """Verify a checksum manifest, writing one line per entry.

    Args:
        manifest_path: Path to the manifest file.
        out: Stream for OK/FAILED lines.
        err: Stream for diagnostics.
        quiet: Don't print OK lines.
        operation_logger: Optional audit log.

    Returns:
        VerificationSummary in manifest order.

    Raises:
        OSError: If the manifest can't be opened.
    """
    verifier = ManifestVerifier(
        out=out,
        err=err,
        quiet=quiet,
        operation_logger=operation_logger,
    )
    return verifier.verify(manifest_path)

"""Data models for checksum manifests and verification results."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

DIGEST_LENGTH = 32  # Hex characters in an MD5 digest


class VerificationOutcome(str, Enum):
    """Result of checking a single manifest line."""

    MATCH = "match"
    MISMATCH = "mismatch"
    TARGET_UNREADABLE = "target_unreadable"
    MALFORMED_ENTRY = "malformed_entry"


@dataclass(frozen=True)
class ManifestEntry:
    """One parsed manifest line."""

    expected_digest: str
    target_path: str


@dataclass
class EntryResult:
    """Outcome of verifying one manifest line."""

    line_number: int
    outcome: VerificationOutcome
    entry: ManifestEntry | None = None  # None for malformed lines
    actual_digest: str | None = None
    message: str | None = None  # Diagnostic text written to the error channel

    @property
    def path(self) -> str | None:
        """Target path, if the line was well-formed."""
        return self.entry.target_path if self.entry else None

    @property
    def is_ok(self) -> bool:
        """Check if the target matched its expected digest."""
        return self.outcome is VerificationOutcome.MATCH

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for the audit log."""
        return {
            "line_number": self.line_number,
            "outcome": self.outcome.value,
            "path": self.path,
            "expected_digest": self.entry.expected_digest if self.entry else None,
            "actual_digest": self.actual_digest,
            "message": self.message,
        }


@dataclass
class VerificationSummary:
    """Ordered results for one manifest."""

    manifest_path: Path
    results: list[EntryResult] = field(default_factory=list)

    def _count(self, outcome: VerificationOutcome) -> int:
        return sum(1 for r in self.results if r.outcome is outcome)

    @property
    def matched(self) -> int:
        """Number of targets whose digest matched."""
        return self._count(VerificationOutcome.MATCH)

    @property
    def mismatched(self) -> int:
        """Number of targets reported as FAILED."""
        return self._count(VerificationOutcome.MISMATCH)

    @property
    def unreadable(self) -> int:
        """Number of targets that could not be opened or read."""
        return self._count(VerificationOutcome.TARGET_UNREADABLE)

    @property
    def malformed(self) -> int:
        """Number of improperly formatted lines."""
        return self._count(VerificationOutcome.MALFORMED_ENTRY)

    @property
    def all_ok(self) -> bool:
        """True when no target failed or was unreadable."""
        return self.mismatched == 0 and self.unreadable == 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for the audit log."""
        return {
            "manifest_path": str(self.manifest_path),
            "matched": self.matched,
            "mismatched": self.mismatched,
            "unreadable": self.unreadable,
            "malformed": self.malformed,
        }

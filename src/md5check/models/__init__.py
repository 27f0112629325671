"""Data models for checksum verification."""

from md5check.models.checksum import (
    EntryResult,
    ManifestEntry,
    VerificationOutcome,
    VerificationSummary,
)

__all__ = ["ManifestEntry", "VerificationOutcome", "EntryResult", "VerificationSummary"]

"""Utility modules for hashing, manifests, and logging."""

from md5check.utils.hashing import compute_digest, compute_file_digest, format_line
from md5check.utils.manifest import (
    ManifestVerifier,
    display_path,
    parse_manifest_line,
    verify_manifest,
)

__all__ = [
    "compute_digest",
    "compute_file_digest",
    "format_line",
    "display_path",
    "parse_manifest_line",
    "verify_manifest",
    "ManifestVerifier",
]

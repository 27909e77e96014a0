"""sha256 verification of downloaded binaries."""

from __future__ import annotations

import hashlib
from pathlib import Path

from endorscan.bootstrap.errors import ChecksumMismatchError, DownloadError
from endorscan.core.logging import get_logger

LOGGER = get_logger(__name__)

_CHUNK_SIZE = 64 * 1024


def compute_sha256(path: Path, chunk_size: int = _CHUNK_SIZE) -> str:
    """Return the lowercase hex sha256 digest of a file, read in chunks."""
    digest = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            digest.update(chunk)
    return digest.hexdigest()


def verify_checksum(path: Path, expected: str) -> str:
    """Check a file against its expected sha256 digest.

    The comparison is exact: ``expected`` must already be lowercase hex.

    Args:
        path: File to verify.
        expected: Expected hex digest.

    Returns:
        The verified digest.

    Raises:
        ChecksumMismatchError: If the digests differ.
        DownloadError: If the downloaded file cannot be read.
    """
    try:
        actual = compute_sha256(path)
    except OSError as e:
        raise DownloadError(f"Failed to read downloaded endorctl at {path}: {e}") from e
    if actual != expected:
        raise ChecksumMismatchError(expected=expected, actual=actual)

    LOGGER.info(f"Binary checksum: {actual}")
    return actual

"""
Bootstrap module for endorctl binary provisioning.

This module handles:
- Platform resolution (runner OS + architecture)
- Version and checksum resolution (pinned or from the metadata API)
- Download, sha256 verification and installation of endorctl

The whole sequence is driven by
``endorscan.bootstrap.provision.provision_endorctl``.
"""

from endorscan.bootstrap.errors import (
    ChecksumMismatchError,
    DownloadError,
    InstallError,
    MetadataFetchError,
    MetadataParseError,
    ProvisioningError,
    UnrecognizedPlatformKeyError,
    UnsupportedArchError,
    UnsupportedCombinationError,
    UnsupportedOSError,
    UnsupportedPlatformError,
)
from endorscan.bootstrap.platform import PlatformKey, ResolvedPlatform, resolve_platform

__all__ = [
    "ChecksumMismatchError",
    "DownloadError",
    "InstallError",
    "MetadataFetchError",
    "MetadataParseError",
    "ProvisioningError",
    "UnrecognizedPlatformKeyError",
    "UnsupportedArchError",
    "UnsupportedCombinationError",
    "UnsupportedOSError",
    "UnsupportedPlatformError",
    "PlatformKey",
    "ResolvedPlatform",
    "resolve_platform",
]

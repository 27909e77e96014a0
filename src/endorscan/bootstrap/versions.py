"""endorctl version and checksum resolution.

The version to install is either pinned by the caller or read from the
Endor Labs metadata endpoint ``{api}/meta/version``, whose response looks
like::

    {
        "Service": {"Version": "v1.6.0", ...},
        "ClientChecksums": {
            "ARCH_TYPE_LINUX_AMD64": "<sha256>",
            "ARCH_TYPE_MACOS_AMD64": "<sha256>",
            "ARCH_TYPE_MACOS_ARM64": "<sha256>",
            "ARCH_TYPE_WINDOWS_AMD64": "<sha256>",
            ...
        }
    }
"""

from __future__ import annotations

import http.client
import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional
from urllib.error import HTTPError, URLError

from endorscan.bootstrap.download import secure_urlopen
from endorscan.bootstrap.errors import (
    MetadataFetchError,
    MetadataParseError,
    UnrecognizedPlatformKeyError,
)
from endorscan.bootstrap.platform import PlatformKey
from endorscan.core.logging import get_logger
from endorscan.core.models import ProvisioningRequest, ResolvedVersion

LOGGER = get_logger(__name__)

VERSION_ENDPOINT = "/meta/version"

# Longest response body echoed back in parse errors
MAX_BODY_PREVIEW = 1024


@dataclass(frozen=True)
class VersionMetadata:
    """Validated content of a metadata response."""

    version: str
    checksums: Dict[str, str] = field(default_factory=dict)


def _preview(body: str) -> str:
    if len(body) <= MAX_BODY_PREVIEW:
        return body
    return f"{body[:MAX_BODY_PREVIEW]}... ({len(body) - MAX_BODY_PREVIEW} more characters)"


def _invalid(body: str) -> MetadataParseError:
    return MetadataParseError(
        f"Invalid response from Endor Labs API: `{_preview(body)}`",
        body=_preview(body),
    )


def parse_version_metadata(body: str) -> VersionMetadata:
    """Parse and validate a metadata response body.

    Raises:
        MetadataParseError: If the body is not JSON or lacks the
            ``Service`` and ``ClientChecksums`` objects.
    """
    try:
        data: Any = json.loads(body)
    except json.JSONDecodeError as e:
        raise _invalid(body) from e

    if not isinstance(data, dict):
        raise _invalid(body)

    service = data.get("Service")
    checksums = data.get("ClientChecksums")
    if not isinstance(service, dict) or not isinstance(checksums, dict):
        raise _invalid(body)

    version = service.get("Version")
    if not isinstance(version, str) or not version:
        raise _invalid(body)

    return VersionMetadata(
        version=version,
        checksums={k: v for k, v in checksums.items() if isinstance(v, str)},
    )


def fetch_version_metadata(api: str, timeout: Optional[float] = 30.0) -> VersionMetadata:
    """Query the metadata endpoint for the latest endorctl release.

    Args:
        api: Endor Labs API base URL.
        timeout: Request timeout in seconds.

    Raises:
        MetadataFetchError: If the request fails.
        MetadataParseError: If the response is malformed.
    """
    url = f"{api.rstrip('/')}{VERSION_ENDPOINT}"
    LOGGER.debug(f"Fetching latest endorctl version from {url}")

    try:
        with secure_urlopen(url, timeout=timeout, headers={"Accept": "application/json"}) as response:
            body = response.read().decode("utf-8", errors="replace")
    except HTTPError as e:
        raise MetadataFetchError(
            "Failed to fetch latest version of endorctl from Endor Labs API: "
            f"HTTP {e.code} - {e.reason}"
        ) from e
    except URLError as e:
        raise MetadataFetchError(
            f"Failed to fetch latest version of endorctl from Endor Labs API: {e.reason}"
        ) from e
    except (OSError, ValueError, http.client.HTTPException) as e:
        raise MetadataFetchError(
            f"Failed to fetch latest version of endorctl from Endor Labs API: {e}"
        ) from e

    return parse_version_metadata(body)


def select_checksum(checksums: Dict[str, str], platform: PlatformKey) -> str:
    """Return the checksum for a platform, or "" when there is none."""
    return checksums.get(platform.checksum_key, "")


def resolve_version(
    request: ProvisioningRequest,
    platform: PlatformKey,
    fetch: Optional[Callable[[str], VersionMetadata]] = None,
    strict: bool = True,
) -> ResolvedVersion:
    """Resolve the endorctl version and expected checksum.

    Args:
        request: Pinned values and API base URL.
        platform: Resolved target platform.
        fetch: Metadata fetcher called with the API base URL
            (defaults to fetch_version_metadata).
        strict: Raise when the metadata has no checksum for ``platform``.
            When False an empty checksum is returned and the download is
            rejected later by checksum verification.

    Raises:
        MetadataFetchError: If the metadata request fails.
        MetadataParseError: If the metadata response is malformed.
        UnrecognizedPlatformKeyError: In strict mode, if no checksum exists
            for the platform.
    """
    if request.is_pinned:
        LOGGER.info(f"Using pinned endorctl version {request.version}")
        return ResolvedVersion(version=request.version, checksum=request.checksum, pinned=True)

    LOGGER.info("Endorctl version not provided, using latest version")
    metadata = (fetch or fetch_version_metadata)(request.api)
    checksum = select_checksum(metadata.checksums, platform)

    if not checksum and strict:
        raise UnrecognizedPlatformKeyError(
            f"Endor Labs API returned no checksum for {platform.checksum_key}",
            key=platform.checksum_key,
        )

    return ResolvedVersion(version=metadata.version, checksum=checksum)

"""Secure download utilities for endorctl.

HTTPS requests go through an SSL context built from certifi's CA bundle so
that certificate verification works on runners whose Python cannot see
the system certificate store.
"""

from __future__ import annotations

import http.client
import os
import shutil
import ssl
import tempfile
from pathlib import Path
from typing import Dict, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

import certifi

from endorscan import __version__ as ENDORSCAN_VERSION
from endorscan.bootstrap.errors import DownloadError
from endorscan.bootstrap.platform import PlatformKey
from endorscan.core.logging import get_logger

LOGGER = get_logger(__name__)

DEFAULT_DOWNLOAD_BASE_URL = "https://storage.googleapis.com/endorlabs"

USER_AGENT = f"endorscan/{ENDORSCAN_VERSION}"

_CHUNK_SIZE = 1024 * 1024


def get_ssl_context() -> ssl.SSLContext:
    """Get an SSL context that uses certifi's CA bundle."""
    return ssl.create_default_context(cafile=certifi.where())


def secure_urlopen(
    url: str,
    timeout: Optional[float] = 30.0,
    headers: Optional[Dict[str, str]] = None,
):
    """Open a URL with proper SSL certificate verification.

    Args:
        url: The URL to open.
        timeout: Connection timeout in seconds.
        headers: Extra request headers.

    Returns:
        A file-like object for reading the response.

    Raises:
        URLError: If the URL cannot be opened.
        ValueError: If the URL is not HTTPS.
    """
    if not url.startswith("https://"):
        raise ValueError(f"Only HTTPS URLs are supported: {url}")

    request = Request(url, headers={"User-Agent": USER_AGENT, **(headers or {})})
    return urlopen(request, timeout=timeout, context=get_ssl_context())  # nosec B310


def construct_download_url(
    version: str, platform: PlatformKey, base_url: str = DEFAULT_DOWNLOAD_BASE_URL
) -> str:
    """Construct the download URL of an endorctl release binary.

    Example:
        https://storage.googleapis.com/endorlabs/v1.2.3/binaries/endorctl_v1.2.3_macos_arm64
    """
    file_name = (
        f"endorctl_{version}_{platform.os.value}_{platform.arch.value}"
        f"{platform.binary_suffix}"
    )
    return f"{base_url.rstrip('/')}/{version}/binaries/{file_name}"


def download_binary(
    version: str,
    platform: PlatformKey,
    base_url: str = DEFAULT_DOWNLOAD_BASE_URL,
    timeout: Optional[float] = 300.0,
) -> Path:
    """Download endorctl into a unique temporary file.

    Args:
        version: endorctl version (e.g. "v1.2.3").
        platform: Target platform.
        base_url: Base URL of the release bucket.
        timeout: Connection timeout in seconds.

    Returns:
        Path to the downloaded, not yet verified, file.

    Raises:
        DownloadError: If the transfer fails for any reason.
    """
    url = construct_download_url(version, platform, base_url)
    LOGGER.info(f"Downloading endorctl version {version}")
    LOGGER.debug(f"Downloading from {url}")

    fd, temp_name = tempfile.mkstemp(prefix="endorctl-", suffix=platform.binary_suffix)
    os.close(fd)
    temp_path = Path(temp_name)

    try:
        with secure_urlopen(url, timeout=timeout) as response:
            total_size = response.getheader("Content-Length")
            if total_size:
                LOGGER.debug(f"Binary size: {int(total_size) / 1024 / 1024:.1f} MB")
            with open(temp_path, "wb") as f:
                shutil.copyfileobj(response, f, _CHUNK_SIZE)
    except HTTPError as e:
        temp_path.unlink(missing_ok=True)
        raise DownloadError(
            f"Failed to download endorctl from {url}: HTTP {e.code} - {e.reason}"
        ) from e
    except URLError as e:
        temp_path.unlink(missing_ok=True)
        raise DownloadError(
            f"Failed to download endorctl from {url}: {e.reason}. "
            "Check your network connection."
        ) from e
    except (OSError, ValueError, http.client.HTTPException) as e:
        temp_path.unlink(missing_ok=True)
        raise DownloadError(f"Failed to download endorctl from {url}: {e}") from e

    LOGGER.debug(f"Downloaded endorctl to {temp_path}")
    return temp_path

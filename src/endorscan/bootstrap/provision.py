"""End-to-end provisioning of the endorctl binary.

Stages run strictly in order and the first failure aborts the run:

    Start -> PlatformResolved -> VersionResolved -> Downloaded
          -> Verified -> Installed

A binary that fails verification is deleted and never installed.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

from endorscan.bootstrap.download import DEFAULT_DOWNLOAD_BASE_URL, download_binary
from endorscan.bootstrap.errors import ProvisioningError
from endorscan.bootstrap.installer import DEFAULT_BIN_DIR, install_binary
from endorscan.bootstrap.integrity import verify_checksum
from endorscan.bootstrap.platform import PlatformKey, resolve_runner_platform
from endorscan.bootstrap.retry import call_with_retries
from endorscan.bootstrap.versions import resolve_version
from endorscan.core.logging import get_logger
from endorscan.core.models import InstalledBinary, ProvisioningRequest

LOGGER = get_logger(__name__)


class ProvisioningState(str, Enum):
    """Stages of a provisioning run."""

    START = "start"
    PLATFORM_RESOLVED = "platform_resolved"
    VERSION_RESOLVED = "version_resolved"
    DOWNLOADED = "downloaded"
    VERIFIED = "verified"
    INSTALLED = "installed"
    FAILED = "failed"


def provision_endorctl(
    request: ProvisioningRequest,
    platform: Optional[PlatformKey] = None,
    environ: Optional[Mapping[str, str]] = None,
    bin_dir: Path = DEFAULT_BIN_DIR,
    retries: int = 0,
    strict_checksum: bool = True,
    download_base_url: str = DEFAULT_DOWNLOAD_BASE_URL,
) -> InstalledBinary:
    """Resolve, download, verify and install endorctl.

    Args:
        request: Pinned version/checksum and metadata API base URL.
        platform: Target platform. Resolved from RUNNER_OS/RUNNER_ARCH in
            ``environ`` when omitted.
        environ: Environment used for platform resolution.
        bin_dir: Installation directory.
        retries: Extra attempts for the metadata request and the download.
        strict_checksum: Fail as soon as the metadata has no checksum for
            the platform instead of at verification time.
        download_base_url: Base URL of the release bucket.

    Returns:
        The installed binary. Its ``path_entry`` still has to be published
        to the caller's search path.

    Raises:
        ProvisioningError: On the first failing stage.
    """
    state = ProvisioningState.START
    try:
        if platform is None:
            platform = resolve_runner_platform(environ)
        state = _advance(state, ProvisioningState.PLATFORM_RESOLVED, f"platform {platform}")

        resolved = call_with_retries(
            lambda: resolve_version(request, platform, strict=strict_checksum),
            attempts=retries + 1,
        )
        state = _advance(state, ProvisioningState.VERSION_RESOLVED, f"endorctl {resolved.version}")

        downloaded = call_with_retries(
            lambda: download_binary(resolved.version, platform, base_url=download_base_url),
            attempts=retries + 1,
        )
        state = _advance(state, ProvisioningState.DOWNLOADED, str(downloaded))

        try:
            digest = verify_checksum(downloaded, resolved.checksum)
        except ProvisioningError:
            downloaded.unlink(missing_ok=True)
            raise
        state = _advance(state, ProvisioningState.VERIFIED, digest)

        installed = install_binary(
            downloaded,
            platform,
            version=resolved.version,
            bin_dir=bin_dir,
            checksum=digest,
        )
        _advance(state, ProvisioningState.INSTALLED, str(installed.path))
        return installed

    except ProvisioningError as e:
        LOGGER.error(f"Provisioning failed after stage '{state.value}': {e}")
        raise


def _advance(
    current: ProvisioningState, target: ProvisioningState, detail: str
) -> ProvisioningState:
    LOGGER.debug(f"Provisioning {current.value} -> {target.value}: {detail}")
    return target

"""Installation of a verified endorctl binary."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Optional

from endorscan.bootstrap.errors import InstallError
from endorscan.bootstrap.platform import PlatformKey
from endorscan.core.logging import get_logger
from endorscan.core.models import InstalledBinary

LOGGER = get_logger(__name__)

BINARY_NAME = "endorctl"

# Relative to the job's working directory
DEFAULT_BIN_DIR = Path(".")


def binary_file_name(platform: PlatformKey) -> str:
    """Return "endorctl" or "endorctl.exe" depending on the platform."""
    return f"{BINARY_NAME}{platform.binary_suffix}"


def install_binary(
    verified_path: Path,
    platform: PlatformKey,
    version: str = "",
    bin_dir: Path = DEFAULT_BIN_DIR,
    checksum: Optional[str] = None,
) -> InstalledBinary:
    """Make a verified binary executable and move it to its final location.

    The caller is responsible for adding ``path_entry`` of the result to
    its search path.

    Args:
        verified_path: Downloaded file that passed checksum verification.
        platform: Platform the binary was built for.
        version: Installed version, recorded on the result.
        bin_dir: Destination directory.
        checksum: Verified digest, recorded on the result.

    Raises:
        InstallError: If setting permissions or moving the file fails.
    """
    destination = bin_dir / binary_file_name(platform)

    try:
        if not platform.is_windows:
            verified_path.chmod(verified_path.stat().st_mode | 0o111)
        bin_dir.mkdir(parents=True, exist_ok=True)
        shutil.move(str(verified_path), str(destination))
    except OSError as e:
        raise InstallError(f"Failed to install endorctl to {destination}: {e}") from e

    LOGGER.info(f"Endorctl installed to {destination}")
    return InstalledBinary(
        path=destination,
        path_entry=bin_dir,
        platform=platform,
        version=version,
        checksum=checksum,
    )

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from endorscan.bootstrap.platform import PlatformKey


@dataclass(frozen=True)
class ProvisioningRequest:
    """Caller input for provisioning endorctl.

    When ``version`` is set the metadata service is not queried and
    ``checksum`` is trusted as given, even when empty.
    """

    api: str
    version: str = ""
    checksum: str = ""

    @property
    def is_pinned(self) -> bool:
        return bool(self.version)


@dataclass(frozen=True)
class ResolvedVersion:
    """Version and expected checksum to download."""

    version: str
    checksum: str
    pinned: bool = False


@dataclass(frozen=True)
class InstalledBinary:
    """The endorctl executable placed for this job.

    Attributes:
        path: Location of the executable.
        path_entry: Directory the caller should add to its search path.
        platform: Platform the binary was built for.
        version: Installed endorctl version.
        checksum: Verified sha256 digest.
    """

    path: Path
    path_entry: Path
    platform: PlatformKey
    version: str = ""
    checksum: Optional[str] = None

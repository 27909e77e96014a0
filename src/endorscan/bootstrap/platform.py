"""Platform resolution for the endorctl binary.

Maps the OS and architecture reported by the CI runner to the vocabulary
used in endorctl download URLs and checksum keys.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional

from endorscan.bootstrap.errors import (
    UnsupportedArchError,
    UnsupportedCombinationError,
    UnsupportedOSError,
    UnsupportedPlatformError,
)

# Environment variables set by GitHub Actions runners
RUNNER_OS_ENV = "RUNNER_OS"
RUNNER_ARCH_ENV = "RUNNER_ARCH"


class RunnerOS(str, Enum):
    """Operating systems as reported by the runner (RUNNER_OS)."""

    LINUX = "Linux"
    MACOS = "macOS"
    WINDOWS = "Windows"


class RunnerArch(str, Enum):
    """Architectures as reported by the runner (RUNNER_ARCH)."""

    X64 = "X64"
    ARM64 = "ARM64"


class EndorctlOS(str, Enum):
    """Operating systems endorctl is published for."""

    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"


class EndorctlArch(str, Enum):
    """Architectures endorctl is published for."""

    AMD64 = "amd64"
    ARM64 = "arm64"


RUNNER_TO_ENDORCTL_OS: Dict[RunnerOS, EndorctlOS] = {
    RunnerOS.LINUX: EndorctlOS.LINUX,
    RunnerOS.MACOS: EndorctlOS.MACOS,
    RunnerOS.WINDOWS: EndorctlOS.WINDOWS,
}

RUNNER_TO_ENDORCTL_ARCH: Dict[RunnerArch, EndorctlArch] = {
    RunnerArch.X64: EndorctlArch.AMD64,
    RunnerArch.ARM64: EndorctlArch.ARM64,
}

# Only macOS ships an arm64 build
ARM64_OS = frozenset({RunnerOS.MACOS})


@dataclass(frozen=True)
class PlatformKey:
    """A supported endorctl platform.

    Attributes:
        os: Canonical operating system.
        arch: Canonical CPU architecture.
    """

    os: EndorctlOS
    arch: EndorctlArch

    @property
    def is_windows(self) -> bool:
        return self.os == EndorctlOS.WINDOWS

    @property
    def binary_suffix(self) -> str:
        """File suffix for executables on this platform."""
        return ".exe" if self.is_windows else ""

    @property
    def checksum_key(self) -> str:
        """Key of this platform in the metadata ``ClientChecksums`` object.

        Example: "ARCH_TYPE_MACOS_ARM64"
        """
        return f"ARCH_TYPE_{self.os.value.upper()}_{self.arch.value.upper()}"

    def __str__(self) -> str:
        return f"{self.os.value}_{self.arch.value}"


def resolve_platform(reported_os: Optional[str], reported_arch: Optional[str]) -> PlatformKey:
    """Resolve the runner-reported platform to an endorctl platform.

    Args:
        reported_os: Raw OS string (e.g. "macOS").
        reported_arch: Raw architecture string (e.g. "ARM64").

    Returns:
        The matching PlatformKey.

    Raises:
        UnsupportedOSError: If the OS is empty or unknown.
        UnsupportedArchError: If the architecture is empty or unknown.
        UnsupportedCombinationError: If ARM64 is requested on a non-macOS OS.
    """
    try:
        runner_os = RunnerOS(reported_os)
    except ValueError:
        raise UnsupportedOSError(
            "Unsupported OS! This action requires one of "
            f"[{', '.join(o.value for o in RunnerOS)}], got {reported_os!r}."
        ) from None

    try:
        runner_arch = RunnerArch(reported_arch)
    except ValueError:
        raise UnsupportedArchError(
            "Unsupported Architecture! This action requires one of "
            f"[AMD64(X64), ARM64], got {reported_arch!r}."
        ) from None

    if runner_arch == RunnerArch.ARM64 and runner_os not in ARM64_OS:
        raise UnsupportedCombinationError(
            f"Architecture {runner_arch.value} not supported for {runner_os.value}!"
        )

    return PlatformKey(
        os=RUNNER_TO_ENDORCTL_OS[runner_os],
        arch=RUNNER_TO_ENDORCTL_ARCH[runner_arch],
    )


def resolve_runner_platform(environ: Optional[Mapping[str, str]] = None) -> PlatformKey:
    """Resolve the platform from RUNNER_OS and RUNNER_ARCH.

    Args:
        environ: Environment to read from (defaults to os.environ).
    """
    env = os.environ if environ is None else environ
    return resolve_platform(env.get(RUNNER_OS_ENV), env.get(RUNNER_ARCH_ENV))


@dataclass(frozen=True)
class ResolvedPlatform:
    """Outcome of platform resolution as a value.

    Exactly one of ``platform`` and ``error`` is set.
    """

    platform: Optional[PlatformKey] = None
    error: Optional[UnsupportedPlatformError] = None

    @classmethod
    def from_runner(
        cls, reported_os: Optional[str], reported_arch: Optional[str]
    ) -> "ResolvedPlatform":
        try:
            return cls(platform=resolve_platform(reported_os, reported_arch))
        except UnsupportedPlatformError as e:
            return cls(error=e)

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "ResolvedPlatform":
        env = os.environ if environ is None else environ
        return cls.from_runner(env.get(RUNNER_OS_ENV), env.get(RUNNER_ARCH_ENV))

    @property
    def ok(self) -> bool:
        return self.platform is not None

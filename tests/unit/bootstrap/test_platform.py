"""Tests for platform resolution."""

from __future__ import annotations

import pytest

from endorscan.bootstrap.errors import (
    UnsupportedArchError,
    UnsupportedCombinationError,
    UnsupportedOSError,
    UnsupportedPlatformError,
)
from endorscan.bootstrap.platform import (
    RUNNER_TO_ENDORCTL_ARCH,
    RUNNER_TO_ENDORCTL_OS,
    EndorctlArch,
    EndorctlOS,
    PlatformKey,
    ResolvedPlatform,
    RunnerArch,
    RunnerOS,
    resolve_platform,
    resolve_runner_platform,
)


class TestMappingTables:
    """Tests for the runner to endorctl vocabulary tables."""

    def test_os_mapping_is_total(self) -> None:
        assert set(RUNNER_TO_ENDORCTL_OS) == set(RunnerOS)
        assert set(RUNNER_TO_ENDORCTL_OS.values()) == set(EndorctlOS)

    def test_arch_mapping_is_total(self) -> None:
        assert set(RUNNER_TO_ENDORCTL_ARCH) == set(RunnerArch)
        assert set(RUNNER_TO_ENDORCTL_ARCH.values()) == set(EndorctlArch)


class TestResolvePlatform:
    """Tests for resolve_platform."""

    @pytest.mark.parametrize(
        "runner_os,runner_arch,expected_os,expected_arch",
        [
            ("Linux", "X64", EndorctlOS.LINUX, EndorctlArch.AMD64),
            ("macOS", "X64", EndorctlOS.MACOS, EndorctlArch.AMD64),
            ("macOS", "ARM64", EndorctlOS.MACOS, EndorctlArch.ARM64),
            ("Windows", "X64", EndorctlOS.WINDOWS, EndorctlArch.AMD64),
        ],
    )
    def test_supported_matrix(
        self,
        runner_os: str,
        runner_arch: str,
        expected_os: EndorctlOS,
        expected_arch: EndorctlArch,
    ) -> None:
        platform = resolve_platform(runner_os, runner_arch)
        assert platform == PlatformKey(os=expected_os, arch=expected_arch)

    @pytest.mark.parametrize("runner_os", ["Linux", "Windows"])
    def test_arm64_only_on_macos(self, runner_os: str) -> None:
        with pytest.raises(UnsupportedCombinationError, match="ARM64 not supported"):
            resolve_platform(runner_os, "ARM64")

    def test_empty_os_raises(self) -> None:
        with pytest.raises(UnsupportedOSError, match="Unsupported OS"):
            resolve_platform("", "X64")

    def test_missing_os_raises(self) -> None:
        with pytest.raises(UnsupportedOSError):
            resolve_platform(None, "X64")

    def test_unknown_os_raises(self) -> None:
        with pytest.raises(UnsupportedOSError):
            resolve_platform("FreeBSD", "X64")

    def test_os_is_case_sensitive(self) -> None:
        with pytest.raises(UnsupportedOSError):
            resolve_platform("linux", "X64")

    def test_empty_arch_raises(self) -> None:
        with pytest.raises(UnsupportedArchError, match="Unsupported Architecture"):
            resolve_platform("Linux", "")

    @pytest.mark.parametrize("runner_arch", ["X86", "ARM", "amd64"])
    def test_unknown_arch_raises(self, runner_arch: str) -> None:
        with pytest.raises(UnsupportedArchError):
            resolve_platform("Linux", runner_arch)

    def test_os_checked_before_arch(self) -> None:
        with pytest.raises(UnsupportedOSError):
            resolve_platform("", "")

    def test_errors_share_base_class(self) -> None:
        with pytest.raises(UnsupportedPlatformError):
            resolve_platform("Windows", "ARM64")


class TestResolveRunnerPlatform:
    """Tests for resolving from RUNNER_OS / RUNNER_ARCH."""

    def test_reads_environment(self) -> None:
        platform = resolve_runner_platform({"RUNNER_OS": "macOS", "RUNNER_ARCH": "ARM64"})
        assert platform.os == EndorctlOS.MACOS
        assert platform.arch == EndorctlArch.ARM64

    def test_missing_variables_raise(self) -> None:
        with pytest.raises(UnsupportedOSError):
            resolve_runner_platform({})


class TestPlatformKey:
    """Tests for PlatformKey."""

    def test_checksum_key(self) -> None:
        key = PlatformKey(os=EndorctlOS.MACOS, arch=EndorctlArch.ARM64)
        assert key.checksum_key == "ARCH_TYPE_MACOS_ARM64"

    def test_windows_suffix(self) -> None:
        key = PlatformKey(os=EndorctlOS.WINDOWS, arch=EndorctlArch.AMD64)
        assert key.is_windows is True
        assert key.binary_suffix == ".exe"

    def test_linux_has_no_suffix(self) -> None:
        key = PlatformKey(os=EndorctlOS.LINUX, arch=EndorctlArch.AMD64)
        assert key.binary_suffix == ""

    def test_str(self) -> None:
        assert str(PlatformKey(os=EndorctlOS.LINUX, arch=EndorctlArch.AMD64)) == "linux_amd64"


class TestResolvedPlatform:
    """Tests for the value form of platform resolution."""

    def test_success_sets_only_platform(self) -> None:
        resolved = ResolvedPlatform.from_runner("Linux", "X64")
        assert resolved.ok is True
        assert resolved.platform is not None
        assert resolved.error is None

    def test_failure_sets_only_error(self) -> None:
        resolved = ResolvedPlatform.from_runner("Windows", "ARM64")
        assert resolved.ok is False
        assert resolved.platform is None
        assert isinstance(resolved.error, UnsupportedCombinationError)

    def test_from_environ(self) -> None:
        resolved = ResolvedPlatform.from_environ({"RUNNER_OS": "Linux"})
        assert isinstance(resolved.error, UnsupportedArchError)

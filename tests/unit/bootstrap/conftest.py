"""Shared fixtures for bootstrap tests."""

from __future__ import annotations

import io
from http.client import IncompleteRead
from typing import Dict, Optional

import pytest

from endorscan.bootstrap.platform import EndorctlArch, EndorctlOS, PlatformKey


class FakeResponse(io.BytesIO):
    """Minimal stand-in for the object returned by urlopen."""

    def __init__(self, body: bytes, headers: Optional[Dict[str, str]] = None) -> None:
        super().__init__(body)
        self._headers = headers or {}

    def getheader(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._headers.get(name, default)


@pytest.fixture
def linux_amd64() -> PlatformKey:
    return PlatformKey(os=EndorctlOS.LINUX, arch=EndorctlArch.AMD64)


@pytest.fixture
def macos_arm64() -> PlatformKey:
    return PlatformKey(os=EndorctlOS.MACOS, arch=EndorctlArch.ARM64)


@pytest.fixture
def windows_amd64() -> PlatformKey:
    return PlatformKey(os=EndorctlOS.WINDOWS, arch=EndorctlArch.AMD64)


class TruncatedResponse(FakeResponse):
    """Response whose body ends before its declared length."""

    def read(self, *args) -> bytes:
        raise IncompleteRead(b"part", 100)

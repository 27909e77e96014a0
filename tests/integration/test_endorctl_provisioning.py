"""Integration tests that download endorctl from Endor Labs.

These need network access and are skipped unless ENDORSCAN_INTEGRATION=1.
"""

from __future__ import annotations

import os
import platform
import subprocess
from pathlib import Path

import pytest

from endorscan.bootstrap.provision import provision_endorctl
from endorscan.config.models import DEFAULT_API
from endorscan.core.models import ProvisioningRequest

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        os.environ.get("ENDORSCAN_INTEGRATION") != "1",
        reason="set ENDORSCAN_INTEGRATION=1 to run network tests",
    ),
]

_RUNNER_OS = {"Linux": "Linux", "Darwin": "macOS", "Windows": "Windows"}
_RUNNER_ARCH = {"x86_64": "X64", "AMD64": "X64", "arm64": "ARM64", "aarch64": "ARM64"}


def _local_runner_environ() -> dict:
    return {
        "RUNNER_OS": _RUNNER_OS.get(platform.system(), platform.system()),
        "RUNNER_ARCH": _RUNNER_ARCH.get(platform.machine(), platform.machine()),
    }


class TestEndorctlProvisioning:
    """Provision the latest endorctl for the local machine."""

    def test_latest_endorctl_runs(self, tmp_path: Path) -> None:
        installed = provision_endorctl(
            ProvisioningRequest(api=DEFAULT_API),
            environ=_local_runner_environ(),
            bin_dir=tmp_path,
            retries=2,
        )

        assert installed.path.exists()
        assert installed.version
        result = subprocess.run(
            [str(installed.path), "--version"],
            capture_output=True,
            text=True,
            timeout=60,
        )
        assert result.returncode == 0

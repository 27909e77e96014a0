"""Fixtures for CLI tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture
def runner_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate the process environment as a Linux X64 runner.

    Returns the GITHUB_OUTPUT file.
    """
    for key in list(os.environ):
        if key.startswith(("INPUT_", "GITHUB_", "RUNNER_")):
            monkeypatch.delenv(key)

    output_file = tmp_path / "github_output"
    monkeypatch.setenv("RUNNER_OS", "Linux")
    monkeypatch.setenv("RUNNER_ARCH", "X64")
    monkeypatch.setenv("RUNNER_TEMP", str(tmp_path / "runner_temp"))
    monkeypatch.setenv("GITHUB_RUN_ID", "77")
    monkeypatch.setenv("GITHUB_REPOSITORY", "endorlabs/demo")
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))
    monkeypatch.setenv("GITHUB_PATH", str(tmp_path / "github_path"))
    monkeypatch.setenv("PATH", os.environ.get("PATH", ""))
    monkeypatch.chdir(tmp_path)
    return output_file

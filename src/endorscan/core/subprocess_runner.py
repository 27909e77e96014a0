"""Subprocess runner with output echoing.

Runs external tools while copying their stdout to the job log line by
line. Output is still captured and returned for further processing.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Union

from endorscan.core.logging import get_logger

LOGGER = get_logger(__name__)


def run_with_echo(
    cmd: List[str],
    cwd: Union[str, Path],
    tool_name: str,
    echo: Optional[TextIO] = None,
    timeout: Optional[float] = None,
) -> subprocess.CompletedProcess:
    """Run a command, echoing and capturing its stdout.

    stderr is not captured; it goes straight to the job log.

    Args:
        cmd: Command and arguments to run.
        cwd: Working directory for the command.
        tool_name: Name of the tool (used in log messages).
        echo: Stream receiving stdout lines (defaults to sys.stdout).
        timeout: Seconds to wait for the process after its output closes.

    Returns:
        CompletedProcess with stdout captured.

    Raises:
        FileNotFoundError: If the executable cannot be found.
        subprocess.TimeoutExpired: If the command times out.
    """
    out = echo if echo is not None else sys.stdout
    stdout_lines: List[str] = []

    LOGGER.debug(f"Running {tool_name} in {cwd}")

    with subprocess.Popen(
        cmd,
        stdout=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
        cwd=str(cwd),
    ) as proc:
        assert proc.stdout is not None
        for line in proc.stdout:
            stdout_lines.append(line)
            out.write(line)
        out.flush()

        try:
            returncode = proc.wait(timeout=timeout)
        except subprocess.TimeoutExpired:
            proc.kill()
            LOGGER.error(f"{tool_name} timed out after {timeout} seconds")
            raise

    return subprocess.CompletedProcess(
        args=cmd,
        returncode=returncode,
        stdout="".join(stdout_lines),
        stderr="",
    )

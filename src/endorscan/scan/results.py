"""Export of scan output to a result file for artifact upload."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from endorscan.core.logging import get_logger
from endorscan.github.context import WorkflowContext

LOGGER = get_logger(__name__)

ARTIFACT_NAME = "endor-scan"


@dataclass(frozen=True)
class ResultFile:
    """Location of a written scan result.

    Attributes:
        file_name: Base name of the file.
        file_path: Absolute path of the file.
        upload_path: Root directory for the artifact upload.
    """

    file_name: str
    file_path: Path
    upload_path: Path


def write_scan_result(
    scan_result: str,
    context: WorkflowContext,
    fallback_dir: Optional[Path] = None,
) -> ResultFile:
    """Write JSON scan output to ``result-<run id>.json``.

    The file goes to RUNNER_TEMP, or ``fallback_dir`` (default: the
    working directory) outside of a runner.

    Raises:
        OSError: If the file cannot be written.
    """
    file_name = f"result-{context.run_id or 'local'}.json"
    if context.runner_temp:
        upload_path = Path(context.runner_temp).resolve()
    else:
        upload_path = (fallback_dir or Path.cwd()).resolve()

    upload_path.mkdir(parents=True, exist_ok=True)
    file_path = upload_path / file_name
    file_path.write_text(scan_result, encoding="utf-8")

    LOGGER.info(f"Scan result written to {file_path}")
    return ResultFile(file_name=file_name, file_path=file_path, upload_path=upload_path)

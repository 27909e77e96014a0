"""Running endorctl scans and exporting their results."""

from endorscan.scan.arguments import build_scan_command, build_scan_options
from endorscan.scan.results import ARTIFACT_NAME, ResultFile, write_scan_result

__all__ = [
    "ARTIFACT_NAME",
    "ResultFile",
    "build_scan_command",
    "build_scan_options",
    "write_scan_result",
]

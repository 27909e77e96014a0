"""Bridge between CLI arguments and action inputs."""

from __future__ import annotations

import argparse
from typing import Any, Dict

# CLI destination -> input name
_ARG_TO_INPUT = {
    "api": "api",
    "namespace": "namespace",
    "endorctl_version": "endorctl_version",
    "endorctl_checksum": "endorctl_checksum",
    "retries": "download_retries",
    "output_type": "scan_summary_output_type",
    "log_level": "log_level",
    "sarif_file": "sarif_file",
    "additional_args": "additional_args",
    "path": "scan_path",
}


class ConfigBridge:
    """Translates CLI arguments to input overrides."""

    @staticmethod
    def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
        """Convert CLI arguments to an input override dict.

        Only arguments given on the command line are included, so inputs
        from the environment or a config file are kept otherwise.
        """
        overrides: Dict[str, Any] = {}
        for dest, input_name in _ARG_TO_INPUT.items():
            value = getattr(args, dest, None)
            if value is not None:
                overrides[input_name] = value

        if getattr(args, "no_run_stats", False):
            overrides["run_stats"] = False
        if getattr(args, "no_export", False):
            overrides["export_scan_result_artifact"] = False

        return overrides

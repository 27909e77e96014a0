"""Scan command implementation."""

from __future__ import annotations

import subprocess
from argparse import Namespace
from pathlib import Path

from endorscan.cli.commands import Command
from endorscan.cli.commands.setup import SetupCommand
from endorscan.cli.exit_codes import (
    EXIT_BOOTSTRAP_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_SCANNER_ERROR,
    EXIT_SUCCESS,
)
from endorscan.config.models import ActionInputs
from endorscan.config.validation import ValidationSeverity, validate_inputs
from endorscan.core.logging import get_logger
from endorscan.core.subprocess_runner import run_with_echo
from endorscan.github import toolkit
from endorscan.github.context import WorkflowContext
from endorscan.scan.arguments import build_scan_command, redact_command
from endorscan.scan.results import write_scan_result

LOGGER = get_logger(__name__)


class ScanCommand(Command):
    """Provisions endorctl and runs ``endorctl scan``."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "scan"

    def execute(self, args: Namespace, inputs: ActionInputs | None = None) -> int:
        """Execute the scan command.

        Args:
            args: Parsed command-line arguments.
            inputs: Loaded action inputs.

        Returns:
            Exit code.
        """
        inputs = inputs or ActionInputs()

        issues = validate_inputs(inputs)
        for issue in issues:
            if issue.severity == ValidationSeverity.ERROR:
                toolkit.error(issue.message)
            else:
                LOGGER.warning(issue.format())
        if any(i.severity == ValidationSeverity.ERROR for i in issues):
            return EXIT_INVALID_USAGE

        LOGGER.info(f"Endor Namespace: {inputs.namespace}")

        installed = SetupCommand.provision(
            inputs,
            bin_dir=getattr(args, "bin_dir", Path(".")),
            strict_checksum=not getattr(args, "lenient_checksum", False),
        )
        if installed is None:
            return EXIT_BOOTSTRAP_FAILURE

        context = WorkflowContext.from_environ()
        LOGGER.info(f"Scanning repository {context.repo_name or Path.cwd().name}")

        cmd = build_scan_command(
            inputs,
            installed.platform,
            pr_number=context.pull_request_number,
            executable=str(installed.path.resolve()),
        )
        LOGGER.debug(f"Running: {' '.join(redact_command(cmd))}")

        try:
            result = run_with_echo(cmd, cwd=Path.cwd(), tool_name="endorctl")
        except (OSError, subprocess.SubprocessError) as e:
            toolkit.error(f"Endorctl Scan Failed: {e}")
            return EXIT_SCANNER_ERROR

        if result.returncode != 0:
            toolkit.error(f"Endorctl Scan Failed (exit code {result.returncode})")
            return EXIT_SCANNER_ERROR

        LOGGER.info("Scan completed successfully!")
        scan_result = result.stdout
        if not scan_result.strip():
            LOGGER.info("No vulnerabilities found for given filters.")
            return EXIT_SUCCESS

        if inputs.export_scan_result_artifact and inputs.scan_summary_output_type == "json":
            try:
                result_file = write_scan_result(scan_result, context)
            except OSError as e:
                LOGGER.error(f"Failed to export scan result: {e}")
            else:
                toolkit.set_output("result-file", str(result_file.file_path))
                LOGGER.info("Scan result exported for artifact upload")

        return EXIT_SUCCESS

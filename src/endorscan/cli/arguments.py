"""Argument parser construction for endorscan CLI.

This module builds the argument parser with subcommands:
- endorscan setup  - Provision endorctl and add it to PATH
- endorscan scan   - Provision endorctl and scan the repository
- endorscan status - Show platform support and endorctl status
"""

from __future__ import annotations

import argparse
from pathlib import Path

from endorscan.config.models import VALID_LOG_LEVELS, VALID_OUTPUT_TYPES


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    """Add global options available to all commands."""
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show endorscan version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Reduce logging output to errors only.",
    )


def _add_input_options(parser: argparse.ArgumentParser) -> None:
    """Add options shared by commands that read action inputs."""
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="YAML file with input values (overridden by INPUT_* variables).",
    )


def _add_provisioning_options(parser: argparse.ArgumentParser) -> None:
    """Add options controlling how endorctl is provisioned."""
    group = parser.add_argument_group("provisioning")
    group.add_argument(
        "--api",
        metavar="URL",
        help="Endor Labs API base URL used to look up the latest endorctl.",
    )
    group.add_argument(
        "--endorctl-version",
        metavar="VERSION",
        help="Pin the endorctl version instead of using the latest.",
    )
    group.add_argument(
        "--endorctl-checksum",
        metavar="SHA256",
        help="Expected sha256 of the pinned endorctl binary.",
    )
    group.add_argument(
        "--bin-dir",
        metavar="DIR",
        type=Path,
        default=Path("."),
        help="Directory to install endorctl into (default: current directory).",
    )
    group.add_argument(
        "--retries",
        type=int,
        metavar="N",
        help="Extra attempts for the version lookup and download (default: 0).",
    )
    group.add_argument(
        "--lenient-checksum",
        action="store_true",
        help=(
            "Do not fail early when the API has no checksum for this platform; "
            "the download is then rejected by verification instead."
        ),
    )


def _build_setup_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'setup' subcommand parser."""
    setup_parser = subparsers.add_parser(
        "setup",
        help="Download, verify and install endorctl.",
        description=(
            "Resolve the endorctl build for this runner, verify its checksum "
            "and install it on PATH for later steps."
        ),
    )
    _add_input_options(setup_parser)
    _add_provisioning_options(setup_parser)


def _build_scan_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'scan' subcommand parser."""
    scan_parser = subparsers.add_parser(
        "scan",
        help="Install endorctl and scan the repository.",
        description=(
            "Provision endorctl, run `endorctl scan` with the action inputs "
            "and export the JSON result for artifact upload."
        ),
    )
    scan_parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path to scan (default: scan_path input or current directory).",
    )
    _add_input_options(scan_parser)
    _add_provisioning_options(scan_parser)

    scan_group = scan_parser.add_argument_group("scan")
    scan_group.add_argument(
        "--namespace",
        help="Endor Labs namespace to scan into.",
    )
    scan_group.add_argument(
        "--output-type",
        choices=list(VALID_OUTPUT_TYPES),
        default=None,
        help="Scan summary output type.",
    )
    scan_group.add_argument(
        "--log-level",
        choices=list(VALID_LOG_LEVELS),
        default=None,
        help="endorctl log level.",
    )
    scan_group.add_argument(
        "--sarif-file",
        metavar="PATH",
        help="Write SARIF output to this file.",
    )
    scan_group.add_argument(
        "--additional-args",
        metavar="ARGS",
        help="Extra arguments appended to the endorctl command line.",
    )
    scan_group.add_argument(
        "--no-run-stats",
        action="store_true",
        help="Do not wrap the scan in `time`.",
    )
    scan_group.add_argument(
        "--no-export",
        action="store_true",
        help="Do not write the JSON result file.",
    )


def _build_status_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'status' subcommand parser."""
    status_parser = subparsers.add_parser(
        "status",
        help="Show platform support and endorctl status.",
        description=(
            "Display endorscan version, the resolved runner platform "
            "and whether endorctl is installed."
        ),
    )
    status_parser.add_argument(
        "--bin-dir",
        metavar="DIR",
        type=Path,
        default=Path("."),
        help="Directory endorctl is installed in (default: current directory).",
    )
    status_parser.add_argument(
        "--inputs",
        action="store_true",
        dest="show_inputs",
        help="Show effective action inputs (secrets redacted).",
    )
    _add_input_options(status_parser)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser for endorscan CLI."""
    parser = argparse.ArgumentParser(
        prog="endorscan",
        description="endorscan - Endor Labs scanning step for CI pipelines.",
        epilog=(
            "Examples:\n"
            "  endorscan setup                               # Install latest endorctl\n"
            "  endorscan setup --endorctl-version v1.6.0 \\\n"
            "      --endorctl-checksum <sha256>              # Install a pinned build\n"
            "  endorscan scan --namespace my-org             # Scan the repository\n"
            "  endorscan status --inputs                     # Show platform and inputs\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    _add_global_options(parser)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands:",
        metavar="COMMAND",
    )

    _build_setup_parser(subparsers)
    _build_scan_parser(subparsers)
    _build_status_parser(subparsers)

    return parser

"""Assembly of the ``endorctl scan`` command line."""

from __future__ import annotations

import shlex
from typing import List, Optional

from endorscan.bootstrap.platform import EndorctlOS, PlatformKey
from endorscan.config.models import ActionInputs
from endorscan.core.logging import get_logger

LOGGER = get_logger(__name__)

ENDORCTL = "endorctl"

# Progress bars are unreadable in CI logs
SHOW_PROGRESS = False

# Resource usage wrappers for run_stats
TIME_WRAPPERS = {
    EndorctlOS.LINUX: ["time", "-v"],
    EndorctlOS.MACOS: ["/usr/bin/time", "-l"],
}


def _flag(value: bool) -> str:
    return "true" if value else "false"


def build_scan_options(inputs: ActionInputs, pr_number: Optional[int] = None) -> List[str]:
    """Build the options passed to ``endorctl scan``.

    Args:
        inputs: Action inputs.
        pr_number: Pull request number when running for a pull request.

    Returns:
        Option list, without the executable and subcommand.
    """
    options = [
        f"--namespace={inputs.namespace}",
        f"--show-progress={_flag(SHOW_PROGRESS)}",
        f"--verbose={_flag(inputs.log_verbose)}",
        f"--output-type={inputs.scan_summary_output_type}",
        f"--log-level={inputs.log_level}",
        f"--ci-run={_flag(inputs.ci_run)}",
    ]

    if inputs.api:
        options.append(f"--api={inputs.api}")

    if inputs.enable_github_action_token:
        options.append("--enable-github-action-token=true")
    elif inputs.has_api_key_auth:
        options.extend([f"--api-key={inputs.api_key}", f"--api-secret={inputs.api_secret}"])
    elif inputs.gcp_service_account:
        options.append(f"--gcp-service-account={inputs.gcp_service_account}")

    if inputs.enable_pr_comments and pr_number:
        if not inputs.ci_run:
            LOGGER.error(
                "ci_run option must be enabled for PR comments. "
                "Either enable CI Run or disable PR comments"
            )
        elif not inputs.github_token:
            LOGGER.error("GITHUB_TOKEN is required for PR comments")
        else:
            options.extend([
                "--enable-pr-comments=true",
                f"--github-pr-id={pr_number}",
                f"--github-token={inputs.github_token}",
            ])

    if inputs.ci_run_tags:
        options.append(f"--ci-run-tags={inputs.ci_run_tags}")
    if inputs.additional_args:
        options.extend(shlex.split(inputs.additional_args))
    if inputs.sarif_file:
        options.append(f"--sarif-file={inputs.sarif_file}")

    return options


def build_scan_command(
    inputs: ActionInputs,
    platform: PlatformKey,
    pr_number: Optional[int] = None,
    executable: str = ENDORCTL,
) -> List[str]:
    """Build the full scan argv, wrapped in ``time`` when run_stats is on.

    Args:
        inputs: Action inputs.
        platform: Runner platform, used to pick the timing wrapper.
        pr_number: Pull request number when running for a pull request.
        executable: endorctl executable name or path.
    """
    cmd = [executable, "scan", f"--path={inputs.scan_path}"]
    cmd.extend(build_scan_options(inputs, pr_number))

    if inputs.run_stats:
        wrapper = TIME_WRAPPERS.get(platform.os)
        if wrapper is None:
            LOGGER.info(f"Timing is not supported on {platform.os.value} runners")
        else:
            cmd = [*wrapper, *cmd]

    return cmd


def redact_command(cmd: List[str]) -> List[str]:
    """Hide secret flag values for logging."""
    secret_flags = ("--api-key=", "--api-secret=", "--github-token=", "--gcp-service-account=")
    return [
        arg.split("=", 1)[0] + "=***" if arg.startswith(secret_flags) else arg
        for arg in cmd
    ]

"""Validation of action inputs.

Checks required inputs and allowed values. Unknown keys in an input file
produce warnings with suggestions for likely typos.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from enum import Enum
from typing import Any, Dict, List, Optional

from endorscan.config.models import VALID_LOG_LEVELS, VALID_OUTPUT_TYPES, ActionInputs


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Scan cannot run
    WARNING = "warning"  # Likely mistake but inputs usable


@dataclass
class InputValidationIssue:
    """A validation issue for action inputs."""

    message: str
    source: str
    severity: ValidationSeverity
    key: Optional[str] = None
    suggestion: Optional[str] = None

    def format(self) -> str:
        text = f"{self.source}: {self.message}"
        if self.suggestion:
            text += f" Did you mean '{self.suggestion}'?"
        return text


def check_unknown_keys(data: Dict[str, Any], source: str) -> List[InputValidationIssue]:
    """Warn about keys that are not action inputs."""
    valid = ActionInputs.field_names()
    issues: List[InputValidationIssue] = []
    for key in data:
        if key in valid:
            continue
        matches = get_close_matches(key, valid, n=1, cutoff=0.6)
        issues.append(
            InputValidationIssue(
                message=f"Unknown input '{key}'.",
                source=source,
                severity=ValidationSeverity.WARNING,
                key=key,
                suggestion=matches[0] if matches else None,
            )
        )
    return issues


def validate_inputs(inputs: ActionInputs, source: str = "inputs") -> List[InputValidationIssue]:
    """Validate inputs required to run a scan.

    Args:
        inputs: Loaded action inputs.
        source: Label used in issue messages.

    Returns:
        List of issues, errors first.
    """
    issues: List[InputValidationIssue] = []

    def add(message: str, key: str, severity: ValidationSeverity = ValidationSeverity.ERROR,
            suggestion: Optional[str] = None) -> None:
        issues.append(InputValidationIssue(message, source, severity, key, suggestion))

    if not inputs.namespace:
        add("namespace is required and must be passed as an input from the workflow", "namespace")

    if not (
        inputs.enable_github_action_token
        or inputs.has_api_key_auth
        or inputs.gcp_service_account
    ):
        add(
            "Authentication info not found. Either set enable_github_action_token: true "
            "or provide one of gcp_service_account or api_key and api_secret combination",
            "enable_github_action_token",
        )

    if bool(inputs.api_key) != bool(inputs.api_secret):
        add(
            "api_key and api_secret must be provided together; the one given is ignored.",
            "api_key" if inputs.api_key else "api_secret",
            ValidationSeverity.WARNING,
        )

    output_type = inputs.scan_summary_output_type
    if output_type not in VALID_OUTPUT_TYPES:
        matches = get_close_matches(output_type, VALID_OUTPUT_TYPES, n=1)
        add(
            f"Invalid scan_summary_output_type '{output_type}'. "
            f"Valid values: {', '.join(VALID_OUTPUT_TYPES)}.",
            "scan_summary_output_type",
            suggestion=matches[0] if matches else None,
        )

    if inputs.log_level not in VALID_LOG_LEVELS:
        matches = get_close_matches(inputs.log_level, VALID_LOG_LEVELS, n=1)
        add(
            f"Invalid log_level '{inputs.log_level}'. "
            f"Valid values: {', '.join(VALID_LOG_LEVELS)}.",
            "log_level",
            suggestion=matches[0] if matches else None,
        )

    if inputs.endorctl_checksum and not inputs.endorctl_version:
        add(
            "endorctl_checksum is ignored unless endorctl_version is also set.",
            "endorctl_checksum",
            ValidationSeverity.WARNING,
        )

    if inputs.endorctl_version and not inputs.endorctl_checksum:
        add(
            "endorctl_version is pinned without endorctl_checksum; verification will fail.",
            "endorctl_checksum",
            ValidationSeverity.WARNING,
        )

    issues.sort(key=lambda i: i.severity != ValidationSeverity.ERROR)
    return issues


def has_errors(issues: List[InputValidationIssue]) -> bool:
    return any(i.severity == ValidationSeverity.ERROR for i in issues)

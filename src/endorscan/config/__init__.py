"""Action input loading and validation for endorscan."""

from endorscan.config.loader import ConfigError, load_inputs
from endorscan.config.models import ActionInputs
from endorscan.config.validation import (
    InputValidationIssue,
    ValidationSeverity,
    has_errors,
    validate_inputs,
)

__all__ = [
    "ActionInputs",
    "ConfigError",
    "InputValidationIssue",
    "ValidationSeverity",
    "has_errors",
    "load_inputs",
    "validate_inputs",
]

"""GitHub Actions integration for endorscan."""

from endorscan.github.context import WorkflowContext
from endorscan.github.toolkit import (
    InputError,
    add_path,
    error,
    get_boolean_input,
    get_input,
    set_output,
)

__all__ = [
    "WorkflowContext",
    "InputError",
    "add_path",
    "error",
    "get_boolean_input",
    "get_input",
    "set_output",
]

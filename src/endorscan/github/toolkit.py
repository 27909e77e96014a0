"""GitHub Actions runner integration.

Implements the parts of the runner protocol this step needs: reading
inputs from ``INPUT_*`` variables, appending to the ``GITHUB_PATH`` and
``GITHUB_OUTPUT`` files, and emitting workflow commands for annotations.
"""

from __future__ import annotations

import os
import sys
import uuid
from pathlib import Path
from typing import Mapping, MutableMapping, Optional, TextIO

from endorscan.core.logging import get_logger

LOGGER = get_logger(__name__)

GITHUB_PATH_ENV = "GITHUB_PATH"
GITHUB_OUTPUT_ENV = "GITHUB_OUTPUT"

# YAML 1.2 core schema booleans, as accepted by actions/toolkit
TRUE_VALUES = frozenset({"true", "True", "TRUE"})
FALSE_VALUES = frozenset({"false", "False", "FALSE"})


class InputError(ValueError):
    """An action input is missing or malformed."""

    pass


def input_env_name(name: str) -> str:
    """Return the environment variable carrying an input.

    Example: "api key" -> "INPUT_API_KEY"
    """
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(
    name: str,
    environ: Optional[Mapping[str, str]] = None,
    required: bool = False,
) -> str:
    """Read an action input, trimmed of surrounding whitespace.

    Raises:
        InputError: If ``required`` and the input is empty.
    """
    env = os.environ if environ is None else environ
    value = env.get(input_env_name(name), "").strip()
    if required and not value:
        raise InputError(f"Input required and not supplied: {name}")
    return value


def parse_boolean(name: str, value: str) -> bool:
    """Parse a boolean input value.

    Raises:
        InputError: If the value is not a YAML 1.2 core schema boolean.
    """
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise InputError(
        f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
        "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
    )


def get_boolean_input(name: str, environ: Optional[Mapping[str, str]] = None) -> bool:
    """Read a boolean action input."""
    return parse_boolean(name, get_input(name, environ))


def _append_to_file(env_var: str, content: str, environ: Mapping[str, str]) -> bool:
    file_path = environ.get(env_var)
    if not file_path:
        return False
    with open(file_path, "a", encoding="utf-8") as f:
        f.write(content)
    return True


def add_path(directory: Path, environ: Optional[MutableMapping[str, str]] = None) -> None:
    """Prepend a directory to PATH for this process and later job steps."""
    env = os.environ if environ is None else environ
    entry = str(directory)
    if not _append_to_file(GITHUB_PATH_ENV, f"{entry}\n", env):
        LOGGER.debug(f"{GITHUB_PATH_ENV} not set; only updating PATH of this process")
    env["PATH"] = f"{entry}{os.pathsep}{env.get('PATH', '')}"


def set_output(name: str, value: str, environ: Optional[Mapping[str, str]] = None) -> None:
    """Set a step output."""
    env = os.environ if environ is None else environ
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if not _append_to_file(
        GITHUB_OUTPUT_ENV, f"{name}<<{delimiter}\n{value}\n{delimiter}\n", env
    ):
        LOGGER.debug(f"{GITHUB_OUTPUT_ENV} not set; output {name}={value} not published")


def escape_data(message: str) -> str:
    """Escape a workflow command message."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def issue_command(command: str, message: str, stream: Optional[TextIO] = None) -> None:
    """Write a ``::command::message`` workflow command."""
    out = stream if stream is not None else sys.stdout
    out.write(f"::{command}::{escape_data(message)}\n")
    out.flush()


def error(message: str, stream: Optional[TextIO] = None) -> None:
    """Emit an error annotation."""
    issue_command("error", message, stream)

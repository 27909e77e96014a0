"""CLI commands package.

This module provides the base Command class and exports all command implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from endorscan.config.models import ActionInputs


class Command(ABC):
    """Base class for CLI commands."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Command identifier."""

    @abstractmethod
    def execute(self, args: Namespace, inputs: "ActionInputs | None" = None) -> int:
        """Execute the command.

        Args:
            args: Parsed command-line arguments.
            inputs: Loaded action inputs.

        Returns:
            Exit code (0 for success, non-zero for error).
        """


# ruff: noqa: E402
from endorscan.cli.commands.setup import SetupCommand
from endorscan.cli.commands.scan import ScanCommand
from endorscan.cli.commands.status import StatusCommand

__all__ = [
    "Command",
    "SetupCommand",
    "ScanCommand",
    "StatusCommand",
]

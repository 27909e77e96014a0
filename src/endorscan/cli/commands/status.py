"""Status command implementation."""

from __future__ import annotations

import os
from argparse import Namespace
from pathlib import Path

from endorscan.bootstrap.installer import binary_file_name
from endorscan.bootstrap.platform import ResolvedPlatform
from endorscan.cli.commands import Command
from endorscan.cli.exit_codes import EXIT_SUCCESS
from endorscan.config.models import ActionInputs


class StatusCommand(Command):
    """Shows runner platform support and endorctl installation status."""

    def __init__(self, version: str):
        """Initialize StatusCommand.

        Args:
            version: Current endorscan version string.
        """
        self._version = version

    @property
    def name(self) -> str:
        """Command identifier."""
        return "status"

    def execute(self, args: Namespace, inputs: ActionInputs | None = None) -> int:
        """Execute the status command.

        Returns:
            Exit code (always 0 for status).
        """
        resolved = ResolvedPlatform.from_environ()

        print(f"endorscan version: {self._version}")
        if resolved.platform is not None:
            platform = resolved.platform
            print(f"Platform: {platform} (checksum key {platform.checksum_key})")

            bin_dir = getattr(args, "bin_dir", Path("."))
            binary = bin_dir / binary_file_name(platform)
            if not binary.exists():
                print(f"endorctl: not installed ({binary})")
            elif not platform.is_windows and not os.access(binary, os.X_OK):
                print(f"endorctl: not executable ({binary})")
            else:
                print(f"endorctl: installed ({binary})")
        else:
            print(f"Platform: unsupported ({resolved.error})")

        if getattr(args, "show_inputs", False) and inputs is not None:
            print()
            print("Inputs:")
            for key, value in inputs.to_dict().items():
                print(f"  {key}: {value}")

        return EXIT_SUCCESS

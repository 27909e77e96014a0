"""CLI runner orchestration.

This module handles command dispatch and execution for the endorscan CLI.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from typing import Iterable, Optional

from endorscan.cli.arguments import build_parser
from endorscan.cli.commands.scan import ScanCommand
from endorscan.cli.commands.setup import SetupCommand
from endorscan.cli.commands.status import StatusCommand
from endorscan.cli.config_bridge import ConfigBridge
from endorscan.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from endorscan.config.loader import ConfigError, load_inputs
from endorscan.config.models import ActionInputs
from endorscan.core.logging import configure_logging, get_logger
from endorscan.github import toolkit

LOGGER = get_logger(__name__)


def get_version() -> str:
    """Get endorscan version.

    Returns:
        Version string from package metadata or fallback.
    """
    try:
        return version("endorscan")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from endorscan import __version__
        return __version__


class CLIRunner:
    """Orchestrates CLI execution with subcommand dispatch."""

    def __init__(self) -> None:
        """Initialize CLIRunner with parser and commands."""
        self.parser = build_parser()
        self._version = get_version()
        self.setup_cmd = SetupCommand()
        self.scan_cmd = ScanCommand()
        self.status_cmd = StatusCommand(version=self._version)

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        # Handle --help specially to return 0
        if argv is not None:
            argv_list = list(argv)
            if argv_list[:1] in (["--help"], ["-h"]):
                self.parser.print_help()
                return EXIT_SUCCESS
        else:
            argv_list = None

        args = self.parser.parse_args(argv_list)

        configure_logging(
            debug=args.debug,
            verbose=args.verbose,
            quiet=args.quiet,
        )

        if args.version:
            print(self._version)
            return EXIT_SUCCESS

        command = getattr(args, "command", None)
        commands = {
            "setup": self.setup_cmd,
            "scan": self.scan_cmd,
            "status": self.status_cmd,
        }
        if command not in commands:
            self.parser.print_help()
            return EXIT_SUCCESS

        inputs = self._load_inputs(args)
        if inputs is None:
            return EXIT_INVALID_USAGE

        if inputs.log_verbose and not (args.debug or args.quiet):
            configure_logging(debug=True)

        return commands[command].execute(args, inputs)

    def _load_inputs(self, args) -> Optional[ActionInputs]:
        """Load action inputs, reporting errors.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Loaded inputs, or None if they are invalid.
        """
        try:
            return load_inputs(
                config_path=getattr(args, "config", None),
                cli_overrides=ConfigBridge.args_to_overrides(args),
            )
        except ConfigError as e:
            toolkit.error(str(e))
            return None

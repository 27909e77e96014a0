"""endorscan CLI package.

This package provides the command-line interface for endorscan.
"""

from __future__ import annotations

from typing import Iterable, Optional

from endorscan.cli.runner import CLIRunner, get_version
from endorscan.cli.arguments import build_parser
from endorscan.cli.exit_codes import (
    EXIT_SUCCESS,
    EXIT_SCANNER_ERROR,
    EXIT_INVALID_USAGE,
    EXIT_BOOTSTRAP_FAILURE,
)


def main(argv: Optional[Iterable[str]] = None) -> int:
    """CLI entrypoint.

    Args:
        argv: Command-line arguments (defaults to sys.argv).

    Returns:
        Exit code.
    """
    runner = CLIRunner()
    return runner.run(argv)


__all__ = [
    "main",
    "build_parser",
    "get_version",
    "CLIRunner",
    "EXIT_SUCCESS",
    "EXIT_SCANNER_ERROR",
    "EXIT_INVALID_USAGE",
    "EXIT_BOOTSTRAP_FAILURE",
]


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""Logging setup for endorscan.

Log lines go to stderr and end up in the CI job log next to endorctl's
own output. The composite action passes ``--verbose`` so provisioning
progress is shown by default; the ``log_verbose`` input switches to DEBUG.
"""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> None:
    """Set the root log level from the global CLI flags.

    ``--quiet`` wins over ``--debug``, which wins over ``--verbose``.
    Without any flag only warnings and errors are shown. Calling this
    again replaces the previous configuration.
    """
    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    # No timestamps: the runner prefixes every line already
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the logger for an endorscan module."""
    return logging.getLogger(name if name is not None else "endorscan")

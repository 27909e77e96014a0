"""Workflow run context read from the runner environment."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from endorscan.core.logging import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class WorkflowContext:
    """Subset of the GitHub Actions context used by the scan step."""

    repository: str = ""
    run_id: str = ""
    runner_temp: str = ""
    pull_request_number: Optional[int] = None

    @property
    def repo_name(self) -> str:
        """Repository name without the owner."""
        return self.repository.split("/", 1)[-1]

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "WorkflowContext":
        env = os.environ if environ is None else environ
        event = load_event(env.get("GITHUB_EVENT_PATH"))
        return cls(
            repository=env.get("GITHUB_REPOSITORY", ""),
            run_id=env.get("GITHUB_RUN_ID", ""),
            runner_temp=env.get("RUNNER_TEMP", ""),
            pull_request_number=pull_request_number(event),
        )


def load_event(event_path: Optional[str]) -> Dict[str, Any]:
    """Load the webhook payload that triggered the workflow."""
    if not event_path:
        return {}
    path = Path(event_path)
    if not path.exists():
        LOGGER.debug(f"Event file {event_path} does not exist")
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        LOGGER.warning(f"Failed to read event payload {event_path}: {e}")
        return {}
    return data if isinstance(data, dict) else {}


def pull_request_number(event: Dict[str, Any]) -> Optional[int]:
    """Return the pull request number of a pull_request event, if any."""
    pull_request = event.get("pull_request")
    if not isinstance(pull_request, dict):
        return None
    number = pull_request.get("number")
    return number if isinstance(number, int) else None

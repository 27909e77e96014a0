"""Typed action inputs."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, List

from endorscan.core.models import ProvisioningRequest

DEFAULT_API = "https://api.endorlabs.com"

VALID_OUTPUT_TYPES = ("table", "json", "yaml", "summary")
VALID_LOG_LEVELS = ("debug", "info", "warn", "error")


@dataclass
class ActionInputs:
    """Inputs of the scan step.

    Names match the action's input names, so ``INPUT_API_KEY`` populates
    ``api_key``.
    """

    api: str = DEFAULT_API
    api_key: str = ""
    api_secret: str = ""
    gcp_service_account: str = ""
    enable_github_action_token: bool = True
    namespace: str = ""

    endorctl_version: str = ""
    endorctl_checksum: str = ""
    download_retries: int = 0

    log_verbose: bool = False
    log_level: str = "info"
    scan_summary_output_type: str = "table"

    ci_run: bool = True
    ci_run_tags: str = ""
    run_stats: bool = True
    additional_args: str = ""
    scan_path: str = "."
    sarif_file: str = ""

    export_scan_result_artifact: bool = True
    enable_pr_comments: bool = False
    github_token: str = ""

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @property
    def has_api_key_auth(self) -> bool:
        return bool(self.api_key and self.api_secret)

    def provisioning_request(self) -> ProvisioningRequest:
        """Build the endorctl provisioning request from these inputs."""
        return ProvisioningRequest(
            api=self.api or DEFAULT_API,
            version=self.endorctl_version,
            checksum=self.endorctl_checksum,
        )

    def to_dict(self, redact: bool = True) -> Dict[str, Any]:
        """Convert to dictionary, hiding secrets unless ``redact`` is False."""
        secrets = {"api_key", "api_secret", "gcp_service_account", "github_token"}
        result: Dict[str, Any] = {}
        for name in self.field_names():
            value = getattr(self, name)
            if redact and name in secrets and value:
                value = "***"
            result[name] = value
        return result

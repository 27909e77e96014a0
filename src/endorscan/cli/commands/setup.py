"""Setup command implementation."""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path
from typing import Optional

from endorscan.bootstrap.errors import ProvisioningError
from endorscan.bootstrap.provision import provision_endorctl
from endorscan.cli.commands import Command
from endorscan.cli.exit_codes import EXIT_BOOTSTRAP_FAILURE, EXIT_SUCCESS
from endorscan.config.models import ActionInputs
from endorscan.core.logging import get_logger
from endorscan.core.models import InstalledBinary
from endorscan.github import toolkit

LOGGER = get_logger(__name__)


class SetupCommand(Command):
    """Provisions endorctl and publishes it to later steps."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "setup"

    def execute(self, args: Namespace, inputs: ActionInputs | None = None) -> int:
        """Execute the setup command.

        Args:
            args: Parsed command-line arguments.
            inputs: Loaded action inputs.

        Returns:
            EXIT_SUCCESS, or EXIT_BOOTSTRAP_FAILURE if provisioning failed.
        """
        installed = self.provision(
            inputs or ActionInputs(),
            bin_dir=getattr(args, "bin_dir", Path(".")),
            strict_checksum=not getattr(args, "lenient_checksum", False),
        )
        return EXIT_SUCCESS if installed is not None else EXIT_BOOTSTRAP_FAILURE

    @staticmethod
    def provision(
        inputs: ActionInputs,
        bin_dir: Path = Path("."),
        strict_checksum: bool = True,
    ) -> Optional[InstalledBinary]:
        """Provision endorctl, add it to PATH and set step outputs.

        Returns:
            The installed binary, or None after reporting the failure.
        """
        try:
            installed = provision_endorctl(
                inputs.provisioning_request(),
                bin_dir=bin_dir,
                retries=inputs.download_retries,
                strict_checksum=strict_checksum,
            )
        except ProvisioningError as e:
            toolkit.error(str(e))
            return None

        toolkit.add_path(installed.path_entry.resolve())
        toolkit.set_output("endorctl-path", str(installed.path.resolve()))
        toolkit.set_output("endorctl-version", installed.version)
        LOGGER.info("Endorctl downloaded and added to the path")
        return installed

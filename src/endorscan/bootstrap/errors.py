"""Errors raised while provisioning the endorctl binary.

Every failure aborts the provisioning run. Callers catch
``ProvisioningError`` to report any of them uniformly.
"""

from __future__ import annotations


class ProvisioningError(Exception):
    """Base class for endorctl provisioning failures."""

    pass


class UnsupportedPlatformError(ProvisioningError):
    """The runner environment is outside the supported platform matrix."""

    pass


class UnsupportedOSError(UnsupportedPlatformError):
    """Reported runner OS is empty or not supported."""

    pass


class UnsupportedArchError(UnsupportedPlatformError):
    """Reported runner architecture is empty or not supported."""

    pass


class UnsupportedCombinationError(UnsupportedPlatformError):
    """OS and architecture are supported individually but not together."""

    pass


class MetadataFetchError(ProvisioningError):
    """The version metadata endpoint could not be reached."""

    pass


class MetadataParseError(ProvisioningError):
    """The version metadata response is malformed."""

    def __init__(self, message: str, body: str = "") -> None:
        super().__init__(message)
        self.body = body


class UnrecognizedPlatformKeyError(ProvisioningError):
    """The metadata response carries no checksum for the resolved platform."""

    def __init__(self, message: str, key: str = "") -> None:
        super().__init__(message)
        self.key = key


class DownloadError(ProvisioningError):
    """The endorctl binary could not be downloaded."""

    pass


class ChecksumMismatchError(ProvisioningError):
    """The downloaded binary does not match the expected checksum."""

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(
            "The checksum of the downloaded binary does not match the expected value! "
            f"(expected {expected or '<empty>'}, got {actual})"
        )
        self.expected = expected
        self.actual = actual


class InstallError(ProvisioningError):
    """The verified binary could not be made executable or moved into place."""

    pass

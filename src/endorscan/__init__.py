"""endorscan - provisions endorctl and runs Endor Labs scans in CI."""

__version__ = "0.1.0"

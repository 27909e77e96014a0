"""Tests for logging setup."""

from __future__ import annotations

import logging

import pytest

from endorscan.core.logging import configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging flag precedence."""

    @pytest.mark.parametrize(
        "flags, level",
        [
            ({}, logging.WARNING),
            ({"verbose": True}, logging.INFO),
            ({"debug": True, "verbose": True}, logging.DEBUG),
            ({"quiet": True, "debug": True}, logging.ERROR),
        ],
    )
    def test_levels(self, flags, level) -> None:
        configure_logging(**flags)
        assert logging.getLogger().level == level

    def test_reconfigure_replaces_handlers(self) -> None:
        configure_logging(verbose=True)
        configure_logging(debug=True)
        assert logging.getLogger().level == logging.DEBUG
        assert len(logging.getLogger().handlers) == 1


class TestGetLogger:
    """Tests for get_logger."""

    def test_named(self) -> None:
        assert get_logger("endorscan.bootstrap").name == "endorscan.bootstrap"

    def test_default_name(self) -> None:
        assert get_logger().name == "endorscan"

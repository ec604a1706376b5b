"""Tests for environment-driven settings."""

import logging
import os
from unittest.mock import patch

import pytest

from record_synth.config import Settings, configure_logging, get_settings


def test_defaults() -> None:
    with patch.dict(os.environ, {}, clear=True):
        assert get_settings() == Settings(log_level="WARNING", indent=4)


def test_reads_environment() -> None:
    with patch.dict(os.environ, {"RECORD_SYNTH_LOG_LEVEL": "debug", "RECORD_SYNTH_INDENT": "2"}):
        assert get_settings() == Settings(log_level="DEBUG", indent=2)


@pytest.mark.parametrize("value", ["two", "0"])
def test_invalid_indent(value: str) -> None:
    with patch.dict(os.environ, {"RECORD_SYNTH_INDENT": value}), pytest.raises(ValueError, match="RECORD_SYNTH_INDENT"):
        get_settings()


def test_configure_logging_sets_package_level() -> None:
    logger = logging.getLogger("record_synth")
    try:
        configure_logging("info")
        assert logger.level == logging.INFO
    finally:
        logger.setLevel(logging.NOTSET)


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("loud")

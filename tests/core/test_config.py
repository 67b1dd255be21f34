"""Unit tests for src/core/config.py"""

import logging
from unittest.mock import patch

from src.core import config


def test_configure_logging_sets_arcade_level() -> None:
    with patch("src.core.config.logging.basicConfig") as basic_config:
        config.configure_logging("DEBUG")
    basic_config.assert_called_once_with(level="DEBUG", format=config.LOG_FORMAT)
    assert logging.getLogger("arcade").level == logging.DEBUG
    logging.getLogger("arcade").setLevel(logging.NOTSET)


def test_defaults() -> None:
    assert config.DATABASE_URL
    assert isinstance(config.DB_ECHO, bool)
    assert config.LOG_LEVEL == config.LOG_LEVEL.upper()

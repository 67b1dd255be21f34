"""
Application settings, read once from the environment.

Game-specific tuning (grid sizes, time limits, base points) lives next to each engine, as it is part of the rules.
"""

import logging
import os

DATABASE_URL = os.environ.get("ARCADE_DATABASE_URL", "sqlite:///./arcade.db")
DB_ECHO = os.environ.get("ARCADE_DB_ECHO", "false").lower() in {"1", "true", "yes"}
LOG_LEVEL = os.environ.get("ARCADE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Route the `arcade.*` loggers to stderr."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("arcade").setLevel(level)

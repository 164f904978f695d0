"""Logging setup."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger and apply ``level`` on every call."""
    # No-op once the root logger has handlers
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
    # The driver is chatty at INFO
    logging.getLogger("neo4j").setLevel(logging.WARNING)

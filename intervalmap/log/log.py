"""
Logger setup for intervalmap.

The library never configures handlers of its own; applications opt in
through the standard ``logging`` configuration.
"""

from logging import NullHandler, getLogger

LOGGER_NAME = "intervalmap"

logger = getLogger(LOGGER_NAME)
logger.addHandler(NullHandler())

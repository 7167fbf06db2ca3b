"""
Log module exports for intervalmap
"""

from typing import Any

import intervalmap.log.log
from intervalmap.log.log import LOGGER_NAME, logger


def l(level: int, msg: str, *args: Any, **kwargs: Any) -> None:
    """
    Logging wrapper for intervalmap.
    """
    logger.log(level, msg, *args, **kwargs)

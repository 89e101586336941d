# Standard library imports
import logging
import sys
from typing import Optional

# Local application imports
from .config import get_settings


LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
HANDLER_NAME = "user_service"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger once for the whole application.

    Args:
        level: Log level name; defaults to the LOG_LEVEL setting
    """
    level_name = (level or get_settings().log_level).upper()
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))

    # The app factory can run more than once (tests, reload)
    if any(handler.get_name() == HANDLER_NAME for handler in root_logger.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

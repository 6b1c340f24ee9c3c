"""Root logger setup shared by every Lambda entry point."""

import logging

from core.config import get_config


def configure_logging() -> None:
    """Apply LOG_LEVEL to the root logger.

    The Lambda runtime installs its own handler on the root logger, so only
    the level is set here. Locally a basic stderr handler is added.
    """
    level = get_config().log_level.upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s %(message)s")
    root.setLevel(logging.getLevelNamesMapping().get(level, logging.INFO))

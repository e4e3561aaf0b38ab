import logging
import sys
import json
from colorlog import ColoredFormatter

from errtm import constants as CONSTANTS


def setup_logger(debug_mode=False):
    logger = logging.getLogger(CONSTANTS.LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    if not logger.handlers:
        # Create console handler
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ColoredFormatter(CONSTANTS.LOG_FORMAT, log_colors=CONSTANTS.LOG_COLORS))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    return logger


# Logger defaults to INFO unless reconfigured later.
DEBUG_MODE = False
logger = setup_logger(debug_mode=DEBUG_MODE)


def configure_logger_from_file(config_path):
    """
    Switch the library logger to DEBUG when the JSON file at config_path
    contains ``"mode": "DEBUG"``.

    An unreadable file only produces a warning; the current settings are kept.
    """
    global DEBUG_MODE
    try:
        with open(config_path, encoding="utf-8") as f:
            config = json.load(f)
        DEBUG_MODE = str(config.get("mode", "")).upper() == CONSTANTS.DEBUG_MODE_VALUE
        setup_logger(debug_mode=DEBUG_MODE)
        if DEBUG_MODE:
            logger.debug("Debug mode is active.")
    except (OSError, ValueError, AttributeError) as e:
        logger.warning(f"Failed to configure logger from file: {e}. Using default settings.")
    return DEBUG_MODE

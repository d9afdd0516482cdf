"""Logging configuration for the Tic-Tac-Toe game area."""

import logging
import sys

PACKAGE_PREFIX = 'tictactoe_sim.'


def setup_logging(level: str = "INFO", format_style: str = "simple") -> None:
    """
    Set up logging configuration for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: Format style - "simple", "detailed", or "json"
    """
    # Unknown level names fall back to INFO
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    formats = {
        "simple": "%(name)s - %(levelname)s - %(message)s",
        "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
        "json": '{"time": "%(asctime)s", "logger": "%(name)s", "level": "%(levelname)s", "message": "%(message)s"}'
    }

    log_format = formats.get(format_style, formats["simple"])

    # Configure root logger
    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Logger name (typically __name__ from the calling module)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def get_game_logger(module_name: str) -> logging.Logger:
    """
    Get a logger with a shortened name for game modules.

    Args:
        module_name: Full module name (e.g., 'tictactoe_sim.engine.game_area')

    Returns:
        Logger with shortened name (e.g., 'engine.game_area')
    """
    if module_name.startswith(PACKAGE_PREFIX):
        short_name = module_name[len(PACKAGE_PREFIX):]
    else:
        short_name = module_name

    return logging.getLogger(short_name)

"""Centralized logging setup for the recipe file tools.

Configures the root logger to write to the console only.
"""
import logging
from typing import Union


def _is_console_handler(handler: logging.Handler) -> bool:
    # FileHandler is a StreamHandler too
    return isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger with a single console handler.

    An existing console handler is reused and moved to the new level.

    Args:
        level: Log level for the root logger and the console handler
    """
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handlers = [h for h in root_logger.handlers if _is_console_handler(h)]
    for handler in console_handlers:
        handler.setLevel(level)

    # Calling twice must not duplicate output
    if not console_handlers:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        console.setLevel(level)
        root_logger.addHandler(console)

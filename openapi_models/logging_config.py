"""Logging setup shared by the CLI and the code generation modules.

Modules obtain loggers through :func:`get_logger`; only the CLI calls
:func:`configure_logging`, so library users keep control of handlers.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "openapi_models"
DEFAULT_LEVEL = logging.WARNING


def get_logger(name: str) -> logging.Logger:
    """Return a logger placed under the package logger hierarchy."""
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int = DEFAULT_LEVEL) -> logging.Logger:
    """Attach a rich handler writing to stderr.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates.

    Args:
        level: Logging level for the package logger.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "techstore"


def configure_logging(debug: bool = False) -> logging.Logger:
    """
    Attach a RichHandler to the package logger.

    Module loggers (``logging.getLogger(__name__)``) propagate up to it,
    so this only needs to run once, at CLI start-up.
    """
    logger = logging.getLogger(LOGGER_NAME)
    log_level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(log_level)

    if not logger.handlers:
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        console_handler.setFormatter(logging.Formatter("[%(name)s]  %(message)s"))
        logger.addHandler(console_handler)

    for handler in logger.handlers:
        handler.setLevel(log_level)

    logger.debug("Logging configured (level=%s)", logging.getLevelName(log_level))
    return logger

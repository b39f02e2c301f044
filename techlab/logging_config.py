"""
Logging setup: stdlib logging rendered by rich on stderr, so it never mixes
with the command output printed on stdout.
"""
import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "techlab"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    debug = level == "DEBUG"
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=debug,
        show_path=debug,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    logger = logging.getLogger(LOGGER_NAME)
    # setup may run more than once per process (shell, tests)
    for old in list(logger.handlers):
        if isinstance(old, RichHandler):
            logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger

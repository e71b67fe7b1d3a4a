"""
Logging configuration for the todo CLI.

Only the ``todo`` package logger is configured, so the host process (and
pytest's log capture) keeps control of the root logger.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import click

LOGGER_NAME = "todo"


class ClickEchoHandler(logging.Handler):
    """Write records to stderr through click, resolving the stream per record."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure the todo logger with:
    - Console handler on stderr at ``level``
    - Optional file handler with full debug output

    Call this once, before the first command is dispatched.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Drop handlers from a previous setup_logging() call.
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    console = ClickEchoHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(console)

    if log_file is not None:
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(fh)

    return logger

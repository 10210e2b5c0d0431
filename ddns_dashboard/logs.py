"""
Design (logs.py)
- Purpose: Configure the package logger and bridge log records into the in-app Logs panel.
- Inputs: Log level; a sink callable that accepts one formatted line.
- Outputs: Configured logging.Logger / LogPanelHandler.
- Side effects: Adds handlers to the "ddns_dashboard" logger.
"""

import logging
from typing import Callable

from .config import LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL

PACKAGE_LOGGER = "ddns_dashboard"


def make_formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)


def configure_logging(level: int = LOG_LEVEL) -> logging.Logger:
    """
    Purpose: Install a console handler on the package logger (once).
    Outputs: The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not any(getattr(h, "_ddns_console", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(make_formatter())
        handler._ddns_console = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger


class LogPanelHandler(logging.Handler):
    """
    Forwards each formatted record (with a trailing newline) to sink.
    The UI passes a sink that schedules the append on the Tk main loop.
    """

    def __init__(self, sink: Callable[[str], None], level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.sink = sink
        self.setFormatter(make_formatter())

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
            self.sink(line + "\n")
        except Exception:
            self.handleError(record)


def attach_panel_handler(sink: Callable[[str], None], level: int = LOG_LEVEL) -> LogPanelHandler:
    handler = LogPanelHandler(sink, level)
    logging.getLogger(PACKAGE_LOGGER).addHandler(handler)
    return handler

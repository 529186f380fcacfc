"""Logger adapter — implements LoggerPort on top of stdlib ``logging``."""

from __future__ import annotations

import logging
import logging.handlers
import queue

from user_settings.domain.models.enums import LogLevel
from user_settings.domain.ports.logger_port import LoggerPort

DEFAULT_LOGGER_NAME = "user_settings"


class StdLoggerAdapter(LoggerPort):
    """Forward port calls to a :class:`logging.Logger`.

    The caught error, if any, is attached as ``exc_info`` so handlers can
    render the traceback.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)

    def log(
        self,
        level: LogLevel,
        template: str,
        *args: object,
        exc: BaseException | None = None,
    ) -> None:
        if exc is not None:
            self._logger.log(level.stdlib_level, template + ": %s", *args, exc, exc_info=exc)
        else:
            self._logger.log(level.stdlib_level, template, *args)

    @property
    def logger(self) -> logging.Logger:
        return self._logger


def start_queue_logging(
    logger: logging.Logger | None = None,
    level: int = logging.WARNING,
) -> logging.handlers.QueueListener:
    """Make *logger* fire-and-forget.

    The logger's current handlers are moved behind a background
    :class:`~logging.handlers.QueueListener`; the logger itself only enqueues
    records. Call ``listener.stop()`` to flush and detach.
    """
    target = logger or logging.getLogger(DEFAULT_LOGGER_NAME)
    handlers = list(target.handlers) or [logging.StreamHandler()]
    for handler in target.handlers[:]:
        target.removeHandler(handler)

    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    target.addHandler(logging.handlers.QueueHandler(records))
    target.setLevel(level)

    listener = logging.handlers.QueueListener(records, *handlers, respect_handler_level=True)
    listener.start()
    return listener

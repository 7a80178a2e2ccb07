from __future__ import annotations

import logging
import sys
import threading
from types import TracebackType

from display_full_error.display import DisplayFullError

LOGGER_NAME = "display_full_error"


def _resolve_logger(logger: logging.Logger | None) -> logging.Logger:
    return logger if logger is not None else logging.getLogger(LOGGER_NAME)


def log_exception_chain(
    exc: BaseException,
    message: str = "Unhandled error",
    *,
    logger: logging.Logger | None = None,
    level: int = logging.ERROR,
) -> None:
    """Log ``message`` followed by the full chain of ``exc``, with its traceback."""
    _resolve_logger(logger).log(
        level,
        "%s: %s",
        message,
        DisplayFullError(exc),
        exc_info=(type(exc), exc, exc.__traceback__),
    )


def install_exception_logging(logger: logging.Logger | None = None) -> None:
    target = _resolve_logger(logger)

    def _log_uncaught_exception(
        exc_type: type[BaseException],
        exc_value: BaseException,
        exc_traceback: TracebackType | None,
    ) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            return
        target.critical(
            "Uncaught exception: %s",
            DisplayFullError(exc_value),
            exc_info=(exc_type, exc_value, exc_traceback),
        )

    def _log_thread_exception(args: threading.ExceptHookArgs) -> None:
        if args.exc_value is None:
            return
        target.critical(
            "Uncaught thread exception in %s: %s",
            args.thread.name if args.thread is not None else "unknown-thread",
            DisplayFullError(args.exc_value),
            exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
        )

    sys.excepthook = _log_uncaught_exception
    threading.excepthook = _log_thread_exception
    target.info("Exception logging installed on %s", target.name)

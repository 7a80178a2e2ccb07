from display_full_error.chain_types import ErrorLike, ExceptionLink, TextSink, as_error_like
from display_full_error.constants import MESSAGE_LIMIT, OVERFLOW_MARKER, SEPARATOR
from display_full_error.display import (
    DisplayFullError,
    DisplayFullErrorMixin,
    display_full,
    to_string_full,
)
from display_full_error.error_utils import (
    exception_chain,
    format_exception_with_traceback,
    root_cause_summary,
)
from display_full_error.formatter import write_chain
from display_full_error.hooks import install_exception_logging, log_exception_chain

__all__ = [
    "MESSAGE_LIMIT",
    "OVERFLOW_MARKER",
    "SEPARATOR",
    "DisplayFullError",
    "DisplayFullErrorMixin",
    "ErrorLike",
    "ExceptionLink",
    "TextSink",
    "as_error_like",
    "display_full",
    "exception_chain",
    "format_exception_with_traceback",
    "install_exception_logging",
    "log_exception_chain",
    "root_cause_summary",
    "to_string_full",
    "write_chain",
]

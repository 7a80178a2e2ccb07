from __future__ import annotations

import io
from dataclasses import dataclass

from display_full_error.chain_types import ErrorLike, TextSink
from display_full_error.constants import MESSAGE_LIMIT
from display_full_error.formatter import write_chain


@dataclass(frozen=True)
class DisplayFullError:
    """Formatting wrapper rendering an error together with all of its causes."""

    error: ErrorLike | BaseException

    def write_to(self, sink: TextSink) -> None:
        write_chain(self.error, sink, MESSAGE_LIMIT)

    def __str__(self) -> str:
        buffer = io.StringIO()
        self.write_to(buffer)
        return buffer.getvalue()

    def __format__(self, format_spec: str) -> str:
        """Apply ``format_spec`` to the whole joined line, not only the root message."""
        return format(str(self), format_spec)


def display_full(error: ErrorLike | BaseException) -> DisplayFullError:
    return DisplayFullError(error)


def to_string_full(error: ErrorLike | BaseException) -> str:
    return str(display_full(error))


class DisplayFullErrorMixin:
    """Adds ``display_full()`` and ``to_string_full()`` to an error class."""

    def display_full(self) -> DisplayFullError:
        return DisplayFullError(self)  # type: ignore[arg-type]

    def to_string_full(self) -> str:
        return str(self.display_full())

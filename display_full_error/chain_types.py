from __future__ import annotations

from typing import Protocol

from display_full_error.constants import STR_FAILED


class ErrorLike(Protocol):
    def text(self) -> str: ...

    def cause(self) -> ErrorLike | None: ...


class TextSink(Protocol):
    def write(self, text: str, /) -> object: ...


def next_exception(exc: BaseException) -> BaseException | None:
    """Return the exception Python reports as the cause of ``exc``, if any."""
    if exc.__cause__ is not None:
        return exc.__cause__
    if not exc.__suppress_context__:
        return exc.__context__
    return None


class ExceptionLink:
    __slots__ = ("exception",)

    def __init__(self, exception: BaseException) -> None:
        self.exception = exception

    def __repr__(self) -> str:
        return f"ExceptionLink({self.exception!r})"

    def text(self) -> str:
        try:
            return str(self.exception)
        except Exception:
            return STR_FAILED

    def cause(self) -> ErrorLike | None:
        previous = next_exception(self.exception)
        if previous is None:
            return None
        return as_error_like(previous)


def _has_chain_methods(value: object) -> bool:
    return callable(getattr(value, "text", None)) and callable(getattr(value, "cause", None))


def as_error_like(value: object) -> ErrorLike:
    if _has_chain_methods(value):
        return value  # type: ignore[return-value]
    if isinstance(value, BaseException):
        return ExceptionLink(value)
    raise TypeError(f"Expected an exception or an error-like value, got {type(value).__name__}.")

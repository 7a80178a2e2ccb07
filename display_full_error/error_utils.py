from __future__ import annotations

import traceback

from display_full_error.chain_types import ExceptionLink, next_exception
from display_full_error.constants import MESSAGE_LIMIT, NO_MESSAGE
from display_full_error.display import to_string_full


def exception_chain(exc: BaseException, max_links: int = MESSAGE_LIMIT) -> list[BaseException]:
    chain: list[BaseException] = []
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and len(chain) < max_links:
        current_id = id(current)
        if current_id in seen:
            break
        seen.add(current_id)
        chain.append(current)
        current = next_exception(current)
    return chain


def root_cause_summary(exc: BaseException) -> str:
    """Describe the innermost exception as ``"<TypeName>: <message>"``.

    Unlike the single-line chain, this is meant for status text where the
    message alone may be empty or ambiguous, so the type name is included
    and a blank message is shown as ``<no message>``.
    """
    chain = exception_chain(exc)
    root = chain[-1] if chain else exc
    message = ExceptionLink(root).text().strip() or NO_MESSAGE
    return f"{type(root).__name__}: {message}"


def format_exception_with_traceback(exc: BaseException) -> str:
    chain_text = to_string_full(exc)
    traceback_text = "".join(
        traceback.format_exception(type(exc), exc, exc.__traceback__)
    ).rstrip()
    if not traceback_text:
        return chain_text
    return f"Exception chain: {chain_text}\nTraceback:\n{traceback_text}"

from __future__ import annotations

from display_full_error.chain_types import ErrorLike, TextSink, as_error_like
from display_full_error.constants import MESSAGE_LIMIT, OVERFLOW_MARKER, SEPARATOR


def write_chain(
    root: ErrorLike | BaseException,
    sink: TextSink,
    max_links: int = MESSAGE_LIMIT,
) -> None:
    """Write ``root`` and its causes to ``sink`` on a single line.

    Messages are separated with ``": "``. At most ``max_links`` messages are
    written; if the chain continues past that, ``": ..."`` is written and the
    walk stops, so cyclic chains terminate too. Exceptions raised by
    ``sink.write`` propagate unchanged.
    """
    if max_links < 1:
        raise ValueError(f"max_links must be at least 1, got {max_links}.")

    current: ErrorLike = as_error_like(root)
    count = 0
    while True:
        if count:
            sink.write(SEPARATOR)
        sink.write(current.text())
        count += 1
        previous = current.cause()
        if previous is None:
            return
        # Links past the limit are never read, only reported as present.
        if count >= max_links:
            sink.write(SEPARATOR + OVERFLOW_MARKER)
            return
        current = as_error_like(previous)

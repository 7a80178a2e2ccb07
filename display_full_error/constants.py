from __future__ import annotations

# Output format is stable: changing any of these is a breaking change.
MESSAGE_LIMIT = 1024
SEPARATOR = ": "
OVERFLOW_MARKER = "..."
NO_MESSAGE = "<no message>"
STR_FAILED = "<exception str() failed>"

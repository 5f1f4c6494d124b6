"""Result codes of publication operations and their console messages."""

from __future__ import annotations

import enum


class AppResult(enum.IntEnum):
    """Outcome of an application operation."""

    OK = 0
    MISSING_FILE = 1
    FILE_BUSY = 2
    WRITE_FILE_BUSY = 10


_MESSAGES = {
    AppResult.MISSING_FILE: "Input file is missing.",
    AppResult.FILE_BUSY: "Input file is busy.",
}


def error_message(result):
    """Return the console message for a result, or None if it has none."""
    try:
        return _MESSAGES.get(AppResult(result))
    except ValueError:
        return None


def report_error(result):
    """Print the message for a failed result to stdout and return it."""
    message = error_message(result)
    if message is not None:
        print(message, end="")
    return message


class PublicationError(Exception):
    """Raised when an operation ends with a result other than OK."""

    def __init__(self, result, message=None):
        self.result = AppResult(result)
        if message is None:
            message = error_message(self.result) or f"operation failed: {self.result.name}"
        super().__init__(message)
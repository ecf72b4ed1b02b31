from __future__ import annotations


class RequestValidationFailure(Exception):
    """A required request field is missing or blank. Rendered as HTTP 400."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedCompletionError(ValueError):
    """The completion provider answered 2xx with a payload we cannot read."""

"""Errors raised by endpoint calls.

Transport failures (requests.ConnectionError, requests.Timeout) are not
wrapped and reach the caller as raised by requests.
"""

from __future__ import annotations

from http import HTTPStatus


def describe_status(code: int) -> str:
    """Render a code as ``'404 Not Found'``, or just the number if unknown."""
    try:
        return f"{code} {HTTPStatus(code).phrase}"
    except ValueError:
        return str(code)


class StatusAssertionError(AssertionError):
    """Raised when a response status differs from the expected one."""

    def __init__(self, expected: int, actual: int, body: str = "", method: str = "", url: str = "") -> None:
        self.expected = expected
        self.actual = actual
        self.body = body
        self.method = method
        self.url = url
        request = " ".join(part for part in (method, url) if part)
        target = f" for {request}" if request else ""
        message = (
            f"Expected status {describe_status(expected)} "
            f"but got {describe_status(actual)}{target}"
        )
        if body:
            message += f"\nResponse body: {body}"
        super().__init__(message)


class DeserializationError(ValueError):
    """Raised when a response body does not match the target record shape."""

    def __init__(self, record_type: type, body: str, reason: str) -> None:
        self.record_type = record_type
        self.body = body
        super().__init__(f"Cannot read {record_type.__name__} from response body: {reason}")

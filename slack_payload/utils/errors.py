"""Error handling utilities."""

from typing import Any, Optional


class SlackPayloadError(Exception):
    """Base exception for the Slack payload builder."""
    pass


class ValidationError(SlackPayloadError, ValueError):
    """A builder input violates a payload invariant."""

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


class RequestBodyError(SlackPayloadError):
    """A preview request body has the wrong shape."""
    pass


def format_pydantic_errors(errors: list[dict[str, Any]]) -> str:
    """Render pydantic error dicts as a single line, e.g. `color: bad token`."""
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)

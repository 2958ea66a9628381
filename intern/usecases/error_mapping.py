"""Translate data-source errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from intern.domain.ports import UseCaseError

DEFAULT_ERROR_MESSAGE = "An error occurred"


def map_load_error(
    exc: Exception,
    *,
    default_code: str = "LOAD_FAILED",
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map data-source exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised by the port.
        default_code: Code used when the exception has no dedicated mapping.
        default_message: Message used instead of the generic fallback text.

    Returns:
        UseCaseError: ``exc`` itself when it already is one, otherwise a new error.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, TimeoutError):
        return UseCaseError("REQUEST_TIMEOUT", "Request timed out. Try again.")
    if isinstance(exc, ConnectionError):
        return UseCaseError("CONNECTION_FAILED", "Connection failed. Check your network.")
    if isinstance(exc, (KeyError, ValueError, TypeError)):
        return UseCaseError("INVALID_DATA", _compose_error_message("Received invalid data", str(exc)))

    return UseCaseError(default_code, default_message or DEFAULT_ERROR_MESSAGE)


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip().strip("'\"")
    if not hint_text:
        return base
    return f"{base}: {hint_text}"


__all__ = ["DEFAULT_ERROR_MESSAGE", "map_load_error"]

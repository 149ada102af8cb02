"""Translate collaborator errors into user-facing UseCaseError instances."""

from __future__ import annotations


from typing import Optional

from medialink.domain.ports import UseCaseError


def map_service_error(
    exc: Exception,
    *,
    default_code: str = "SERVICE_FAILED",
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map exceptions raised by a ``ServicePort`` to stable error codes.

    Args:
        exc: Exception raised while talking to the service.
        default_code: Code used when no specific mapping applies.
        default_message: Message used when ``exc`` carries no text.

    Returns:
        UseCaseError: Error suitable for rendering in the output area.
    """
    if isinstance(exc, UseCaseError):
        return exc
    # TimeoutError is an OSError subclass, so it must be checked first.
    if isinstance(exc, TimeoutError):
        return UseCaseError("SERVICE_TIMEOUT", "Service timed out. Check connection.")
    if isinstance(exc, (ConnectionError, OSError)):
        detail = str(exc).strip()
        return UseCaseError(
            "SERVICE_UNAVAILABLE",
            _compose_error_message("Service unavailable", detail),
        )

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


def format_error(err: UseCaseError) -> str:
    """Render an error as a single output-area line."""
    return f"Error [{err.code}]: {err.message}\n"


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = ["map_service_error", "format_error"]

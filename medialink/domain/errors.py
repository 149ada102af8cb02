"""Domain-level error types for the media catalog.

These errors stay inside the catalog adapter and use cases; the dispatcher
only ever sees :class:`medialink.domain.ports.UseCaseError`.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for media catalog failures."""


class NamingError(CatalogError):
    """A media or group name is already taken or does not exist."""


class CatalogFormatError(CatalogError):
    """A catalog file line cannot be turned into a media entry."""

    def __init__(self, message: str, *, line_no: int | None = None) -> None:
        super().__init__(message)
        self.line_no = line_no


__all__ = ["CatalogError", "NamingError", "CatalogFormatError"]

from __future__ import annotations
from typing import Dict, Protocol


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class ServicePort(Protocol):
    """Synchronous request/response exchange with the multimedia service.

    Connection parameters are bound when the adapter is constructed. ``send``
    blocks until the reply arrives and may raise on transport failures.
    """

    def send(self, request_line: str) -> str: ...


class OutputSurface(Protocol):
    """Append-only text sink rendered by the presentation layer."""

    def append(self, text: str) -> None: ...


class InputSource(Protocol):
    """Single-line text input owned by the presentation layer."""

    def get_text(self) -> str: ...
    def set_text(self, text: str) -> None: ...


class StoragePort(Protocol):
    """Persistence for user preferences."""

    def load_user_prefs(self) -> Dict: ...

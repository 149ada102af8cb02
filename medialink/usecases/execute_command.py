"""Command executor shared by both windows.

Runs a resolved command against the output surface, choosing the branch from
``Command.kind``: append a fixed literal, exchange a request with the service,
or terminate the process.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Optional

from ..domain.commands import Command, CommandKind
from ..domain.ports import InputSource, OutputSurface, UseCaseError
from ..domain.protocol import decode_response
from .exchange_request import ExchangeRequest


def _exit_process() -> None:
    sys.exit(0)


@dataclass
class ExecuteCommand:
    """Use-case callable executing exactly one command.

    Attributes:
        exchange: Remote exchange use case; ``None`` for windows without a
            service (remote commands then fail with ``NO_SERVICE``).
        terminate: Hook ending the process. The default exits with status 0.
    """
    exchange: Optional[ExchangeRequest] = None
    terminate: Callable[[], None] = _exit_process

    def __call__(
        self,
        command: Command,
        input_source: Optional[InputSource],
        surface: OutputSurface,
    ) -> None:
        """Execute ``command``.

        Side Effects:
            Appends to ``surface``; for remote commands also clears
            ``input_source`` after a successful exchange; for terminate
            commands ends the process.

        Raises:
            UseCaseError: If a remote exchange fails. The surface and the
                input field are left untouched in that case.
        """
        if command.kind is CommandKind.LOCAL_APPEND:
            surface.append(command.literal or "")
            return

        if command.kind is CommandKind.REMOTE_EXCHANGE:
            if self.exchange is None:
                raise UseCaseError("NO_SERVICE", f"No service configured for {command.name!r}.")
            argument = input_source.get_text() if input_source is not None else ""
            response = self.exchange(command.name, argument)
            surface.append(decode_response(response))
            if input_source is not None:
                input_source.set_text("")
            return

        if command.kind is CommandKind.TERMINATE:
            self.terminate()
            return

        raise ValueError(f"Unsupported command kind: {command.kind!r}")

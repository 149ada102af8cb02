"""Event dispatch glue between views and the command executor.

Views forward every control activation to :meth:`CommandDispatcher.handle`.
The dispatcher resolves the trigger, runs at most one command, and renders
service failures into the output surface so the main loop keeps running.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..domain.commands import Command, CommandKind
from ..domain.ports import InputSource, OutputSurface, UseCaseError
from ..domain.registry import CommandRegistry
from ..usecases.error_mapping import format_error
from ..usecases.execute_command import ExecuteCommand


class CommandDispatcher:
    """Resolve UI events and execute the matching command."""

    def __init__(
        self,
        registry: CommandRegistry,
        execute: ExecuteCommand,
        surface: OutputSurface,
        input_source: Optional[InputSource] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.registry = registry
        self.execute = execute
        self.surface = surface
        self.input_source = input_source
        self._terminated = False

    @property
    def terminated(self) -> bool:
        return self._terminated

    def handle(self, event: Any) -> Optional[Command]:
        """Dispatch one UI event.

        Returns:
            The command that ran, or ``None`` when the trigger is unknown or
            the dispatcher already terminated.
        """
        if self._terminated:
            self._log.debug("Ignoring event after exit: %r", event)
            return None

        command = self.registry.resolve(event)
        if command is None:
            self._log.debug("No command bound to %r", event)
            return None

        self._log.debug("Dispatching %s", command.name)
        if command.kind is CommandKind.TERMINATE:
            # Set before executing: the terminate hook does not return normally.
            self._terminated = True
        try:
            self.execute(command, self.input_source, self.surface)
        except UseCaseError as err:
            self._log.warning("%s failed: [%s] %s", command.name, err.code, err.message)
            self.surface.append(format_error(err))
        return command


__all__ = ["CommandDispatcher"]

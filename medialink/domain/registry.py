"""Static trigger-to-command table used to resolve UI events.

Views build one registry per window after creating their controls. The table
is frozen at construction; resolution is a dictionary lookup on the identity
of the firing control.
"""

from __future__ import annotations


from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .commands import Command

Bindings = Union[Mapping[Any, Command], Iterable[Tuple[Any, Command]]]

_MISSING = object()


class CommandRegistry:
    """Many-to-one mapping from trigger identity to command."""

    def __init__(self, bindings: Bindings) -> None:
        """Build the table once.

        Args:
            bindings: ``{trigger: command}`` mapping or ``(trigger, command)``
                pairs. Triggers are compared by identity, never by equality.

        Raises:
            ValueError: If a trigger is bound more than once.
        """
        pairs = bindings.items() if isinstance(bindings, Mapping) else bindings
        self._by_identity: Dict[int, Command] = {}
        # Holding the triggers keeps their ids from being reused.
        self._triggers: List[Any] = []
        for trigger, command in pairs:
            key = id(trigger)
            if key in self._by_identity:
                raise ValueError(f"Trigger {trigger!r} is already bound.")
            self._by_identity[key] = command
            self._triggers.append(trigger)

    def __len__(self) -> int:
        return len(self._by_identity)

    def commands(self) -> Tuple[Command, ...]:
        """Return the distinct commands in binding order."""
        seen: Dict[Command, None] = {}
        for trigger in self._triggers:
            seen.setdefault(self._by_identity[id(trigger)], None)
        return tuple(seen)

    def triggers_for(self, command: Command) -> Tuple[Any, ...]:
        """Return every trigger bound to ``command``."""
        return tuple(t for t in self._triggers if self._by_identity[id(t)] == command)

    def lookup(self, trigger: Any) -> Optional[Command]:
        """Return the command bound to ``trigger`` or ``None``."""
        return self._by_identity.get(id(trigger))

    def resolve(self, event: Any) -> Optional[Command]:
        """Resolve a UI event to its command.

        The origin is read from ``event.source`` (``TriggerEvent``), then
        ``event.widget`` (raw Tk events); any other object is treated as the
        trigger itself. Unknown origins yield ``None``.
        """
        origin = getattr(event, "source", _MISSING)
        if origin is _MISSING:
            origin = getattr(event, "widget", _MISSING)
        if origin is _MISSING:
            origin = event
        return self.lookup(origin)


__all__ = ["CommandRegistry"]

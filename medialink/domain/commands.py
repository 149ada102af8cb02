"""Command and trigger types shared by both windows.

A command is a named unit of behavior with one of three execution kinds. A
trigger is the identity of the UI control that fired; several triggers may
stand for the same command (a button and its menu twin).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple


class CommandKind(str, Enum):
    """How the executor runs a command."""

    LOCAL_APPEND = "local_append"
    REMOTE_EXCHANGE = "remote_exchange"
    TERMINATE = "terminate"


@dataclass(frozen=True)
class Command:
    """Immutable command definition.

    Attributes:
        name: Protocol/command identifier (``search``, ``append-A``...).
        kind: Execution kind selecting the executor branch.
        label: Caption shown on the controls bound to this command.
        literal: Text appended by ``LOCAL_APPEND`` commands.
    """

    name: str
    kind: CommandKind
    label: str = ""
    literal: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Command name must not be empty.")
        if self.kind is CommandKind.LOCAL_APPEND and self.literal is None:
            raise ValueError(f"Local-append command {self.name!r} needs a literal.")

    @property
    def caption(self) -> str:
        return self.label or self.name


class MenuEntryTrigger:
    """Identity handle for one Tk menu entry.

    Tk menu entries are addressed by index, not by widget, so the view creates
    one handle per entry and passes it back whenever the entry fires.
    """

    __slots__ = ("label",)

    def __init__(self, label: str) -> None:
        self.label = label

    def __repr__(self) -> str:
        return f"MenuEntryTrigger({self.label!r})"


@dataclass(frozen=True, eq=False)
class TriggerEvent:
    """UI-originated dispatch request carrying only the firing control."""

    source: Any


# ---- Client window (multimedia service) ----
SEARCH = Command("search", CommandKind.REMOTE_EXCHANGE, label="Search")
PLAY = Command("play", CommandKind.REMOTE_EXCHANGE, label="Play")
CLIENT_EXIT = Command("exit", CommandKind.TERMINATE, label="Exit")

CLIENT_COMMANDS: Tuple[Command, ...] = (SEARCH, PLAY, CLIENT_EXIT)

# ---- Demo window (local text area) ----
APPEND_A = Command(
    "append-A",
    CommandKind.LOCAL_APPEND,
    label="Button1",
    literal="The first button appending..\n",
)
APPEND_B = Command(
    "append-B",
    CommandKind.LOCAL_APPEND,
    label="Button2",
    literal="The second button appending..\n",
)
DEMO_EXIT = Command("exit", CommandKind.TERMINATE, label="Exit")

DEMO_COMMANDS: Tuple[Command, ...] = (APPEND_A, APPEND_B, DEMO_EXIT)


__all__ = [
    "Command",
    "CommandKind",
    "MenuEntryTrigger",
    "TriggerEvent",
    "SEARCH",
    "PLAY",
    "CLIENT_EXIT",
    "CLIENT_COMMANDS",
    "APPEND_A",
    "APPEND_B",
    "DEMO_EXIT",
    "DEMO_COMMANDS",
]

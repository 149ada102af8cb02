"""Domain package exports for commands, protocol helpers, and media entities."""

from .commands import (
    CLIENT_COMMANDS,
    DEMO_COMMANDS,
    Command,
    CommandKind,
    MenuEntryTrigger,
    TriggerEvent,
)
from .media import Film, Group, Media, Photo, Video
from .protocol import decode_response, encode_request, parse_request
from .registry import CommandRegistry

__all__ = [
    "CLIENT_COMMANDS",
    "DEMO_COMMANDS",
    "Command",
    "CommandKind",
    "CommandRegistry",
    "MenuEntryTrigger",
    "TriggerEvent",
    "Film",
    "Group",
    "Media",
    "Photo",
    "Video",
    "decode_response",
    "encode_request",
    "parse_request",
]

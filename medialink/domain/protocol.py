"""Single-line text protocol spoken with the multimedia service.

Requests are ``"<command> <argument>"`` with one space and no escaping. The
reply is an already formatted text block; the client only adds a line
terminator before rendering it.
"""

from __future__ import annotations

from typing import Tuple

SEPARATOR = " "
LINE_TERMINATOR = "\n"


def encode_request(command_name: str, argument: str) -> str:
    """Compose a request line; ``argument`` is passed through verbatim."""
    return f"{command_name}{SEPARATOR}{argument}"


def decode_response(response_text: str) -> str:
    """Turn a service reply into the fragment appended to the output."""
    return f"{response_text}{LINE_TERMINATOR}"


def parse_request(request_line: str) -> Tuple[str, str]:
    """Split a request line the way the service does.

    The first two whitespace-separated tokens are the action and the item
    name; anything after the name is ignored. Missing tokens come back empty.
    """
    tokens = request_line.split()
    action = tokens[0] if tokens else ""
    name = tokens[1] if len(tokens) > 1 else ""
    return action, name


__all__ = [
    "SEPARATOR",
    "LINE_TERMINATOR",
    "encode_request",
    "decode_response",
    "parse_request",
]

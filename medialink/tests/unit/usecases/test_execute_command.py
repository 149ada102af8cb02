from __future__ import annotations

from typing import List

import pytest

from medialink.domain.commands import APPEND_A, APPEND_B, CLIENT_EXIT, PLAY, SEARCH
from medialink.domain.ports import UseCaseError
from medialink.usecases.exchange_request import ExchangeRequest
from medialink.usecases.execute_command import ExecuteCommand
from medialink.viewmodels.console_vm import ConsoleVM


class _StubService:
    def __init__(self, reply: str = "3 results found", exc: Exception | None = None) -> None:
        self.reply = reply
        self.exc = exc
        self.received: List[str] = []

    def send(self, request_line: str) -> str:
        self.received.append(request_line)
        if self.exc is not None:
            raise self.exc
        return self.reply


def test_local_append_repeats_the_same_literal() -> None:
    console = ConsoleVM()
    uc = ExecuteCommand()

    uc(APPEND_A, None, console)
    uc(APPEND_B, None, console)
    uc(APPEND_A, None, console)

    assert console.fragments == [
        "The first button appending..\n",
        "The second button appending..\n",
        "The first button appending..\n",
    ]


def test_search_scenario_appends_reply_and_clears_input() -> None:
    service = _StubService()
    console = ConsoleVM(input_text="Beethoven")
    uc = ExecuteCommand(exchange=ExchangeRequest(service))

    uc(SEARCH, console, console)

    assert service.received == ["search Beethoven"]
    assert console.fragments == ["3 results found\n"]
    assert console.get_text() == ""


def test_play_with_empty_input_is_sent_verbatim() -> None:
    service = _StubService(reply="")
    console = ConsoleVM()
    uc = ExecuteCommand(exchange=ExchangeRequest(service))

    uc(PLAY, console, console)

    assert service.received == ["play "]
    assert console.fragments == ["\n"]


def test_failed_exchange_leaves_surface_and_input_untouched() -> None:
    service = _StubService(exc=ConnectionResetError("lost"))
    console = ConsoleVM(input_text="ToyStory")
    uc = ExecuteCommand(exchange=ExchangeRequest(service))

    with pytest.raises(UseCaseError) as info:
        uc(SEARCH, console, console)

    assert info.value.code == "SERVICE_UNAVAILABLE"
    assert console.fragments == []
    assert console.get_text() == "ToyStory"


def test_remote_command_without_service_fails() -> None:
    with pytest.raises(UseCaseError) as info:
        ExecuteCommand()(SEARCH, ConsoleVM(), ConsoleVM())

    assert info.value.code == "NO_SERVICE"


def test_terminate_calls_hook_without_touching_surface() -> None:
    calls: List[str] = []
    console = ConsoleVM()
    uc = ExecuteCommand(terminate=lambda: calls.append("exit"))

    uc(CLIENT_EXIT, console, console)

    assert calls == ["exit"]
    assert console.fragments == []


def test_default_terminate_exits_with_status_zero() -> None:
    with pytest.raises(SystemExit) as info:
        ExecuteCommand()(CLIENT_EXIT, None, ConsoleVM())

    assert info.value.code == 0

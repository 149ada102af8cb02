from __future__ import annotations

from typing import List

import pytest

from medialink.domain.ports import UseCaseError
from medialink.usecases.exchange_request import ExchangeRequest


class _RecordingService:
    def __init__(self, reply: str = "3 results found") -> None:
        self.reply = reply
        self.received: List[str] = []

    def send(self, request_line: str) -> str:
        self.received.append(request_line)
        return self.reply


class _FailingService:
    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def send(self, request_line: str) -> str:
        raise self.exc


def test_exchange_sends_encoded_line_and_returns_raw_reply() -> None:
    service = _RecordingService()
    uc = ExchangeRequest(service)

    assert uc("search", "Beethoven") == "3 results found"
    assert service.received == ["search Beethoven"]


def test_exchange_keeps_argument_untrimmed() -> None:
    service = _RecordingService(reply="")
    uc = ExchangeRequest(service)

    uc("play", " Moonlight Sonata ")
    uc("play", "")

    assert service.received == ["play  Moonlight Sonata ", "play "]


@pytest.mark.parametrize(
    ("exc", "code"),
    [
        (ConnectionRefusedError("refused"), "SERVICE_UNAVAILABLE"),
        (TimeoutError(), "SERVICE_TIMEOUT"),
        (RuntimeError("boom"), "SERVICE_FAILED"),
    ],
)
def test_exchange_maps_service_failures(exc: Exception, code: str) -> None:
    uc = ExchangeRequest(_FailingService(exc))

    with pytest.raises(UseCaseError) as info:
        uc("search", "x")

    assert info.value.code == code
    assert info.value.__cause__ is exc

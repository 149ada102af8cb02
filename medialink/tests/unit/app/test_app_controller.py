from __future__ import annotations

from typing import List

from medialink.adapters.media_catalog_mock import MediaCatalogMock
from medialink.app.controller import AppController
from medialink.viewmodels.settings_vm import SettingsVM


class _ClosableService:
    def __init__(self) -> None:
        self.closed = 0

    def send(self, request_line: str) -> str:
        return request_line.upper()

    def close(self) -> None:
        self.closed += 1


def test_controller_ensure_ready_builds_seeded_catalog() -> None:
    controller = AppController(SettingsVM())

    assert controller.ensure_ready() is True
    assert isinstance(controller.service, MediaCatalogMock)
    assert "test-photo" in controller.service.media_names()
    assert controller.uc_exchange is not None
    assert controller.uc_execute is not None
    assert controller.uc_execute.exchange is controller.uc_exchange


def test_controller_respects_catalog_settings(tmp_path) -> None:
    path = tmp_path / "multimedias.txt"
    path.write_text("Video clip /tmp/clip.mp4 4\n", encoding="utf-8")
    settings = SettingsVM()
    settings.seed_demo_catalog = False
    settings.catalog_file = str(path)

    controller = AppController(settings)
    controller.ensure_ready()

    assert controller.service.media_names() == ["clip"]


def test_controller_uses_injected_service_and_terminate_hook() -> None:
    service = _ClosableService()
    calls: List[str] = []
    controller = AppController(SettingsVM(), service=service, terminate=lambda: calls.append("x"))

    controller.ensure_ready()

    assert controller.service is service
    assert controller.uc_exchange("search", "a") == "SEARCH A"
    controller.uc_execute.terminate()
    assert calls == ["x"]


def test_shutdown_closes_service_and_resets() -> None:
    service = _ClosableService()
    controller = AppController(SettingsVM(), service=service)
    controller.ensure_ready()

    controller.shutdown()

    assert service.closed == 1
    assert controller.uc_execute is None
    assert controller.service is service


def test_controller_survives_catalog_file_repeating_seeded_name(tmp_path) -> None:
    path = tmp_path / "multimedias.txt"
    path.write_text("Photo test-photo /p.jpg 10 10\n", encoding="utf-8")
    settings = SettingsVM()
    settings.catalog_file = str(path)

    controller = AppController(settings)

    assert controller.ensure_ready() is True
    assert controller.service.media_names() == ["ToyStory", "test-photo", "test-video"]

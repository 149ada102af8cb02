from __future__ import annotations

import json
import logging
from typing import List

import pytest

pytest.importorskip("tkinter")

from medialink.adapters.storage_local import StorageLocal
from medialink.app.demo_app import DemoApp
from medialink.app.dispatcher import CommandDispatcher
from medialink.app.main import App
from medialink.app.views.client_window import MediaClientView
from medialink.app.views.demo_window import DemoWindowView
from medialink.domain.commands import (
    APPEND_A,
    APPEND_B,
    CLIENT_COMMANDS,
    DEMO_COMMANDS,
    DEMO_EXIT,
    MenuEntryTrigger,
    TriggerEvent,
)
from medialink.domain.registry import CommandRegistry
from medialink.usecases.execute_command import ExecuteCommand
from medialink.viewmodels.console_vm import ConsoleVM
from medialink.viewmodels.settings_vm import SettingsVM


class _ClientWin:
    def __init__(self) -> None:
        self.output: List[str] = []
        self.inputs: List[str] = []
        self.destroyed = False

    def append_output(self, text: str) -> None:
        self.output.append(text)

    def set_input_text(self, text: str) -> None:
        self.inputs.append(text)

    def destroy(self) -> None:
        self.destroyed = True


class _DemoWin:
    def __init__(self) -> None:
        self.text: List[str] = []
        self.destroyed = False

    def append_text(self, text: str) -> None:
        self.text.append(text)

    def destroy(self) -> None:
        self.destroyed = True


class _Controller:
    def __init__(self) -> None:
        self.shutdowns = 0

    def shutdown(self) -> None:
        self.shutdowns += 1


def _client_app_for_tests() -> App:
    app = App.__new__(App)
    app._log = logging.getLogger("test.app")
    app.win = _ClientWin()
    app.console_vm = ConsoleVM(
        on_output_appended=app._render_output,
        on_input_changed=app._render_input,
    )
    return app


def test_console_updates_are_rendered_in_client_window() -> None:
    app = _client_app_for_tests()

    app.console_vm.append("Name: x\n")
    app.console_vm.set_text("")

    assert app.win.output == ["Name: x\n"]
    assert app.win.inputs == [""]


def test_client_shutdown_closes_service_destroys_window_and_exits() -> None:
    app = _client_app_for_tests()
    app.controller = _Controller()

    with pytest.raises(SystemExit) as info:
        app._shutdown()

    assert info.value.code == 0
    assert app.controller.shutdowns == 1
    assert app.win.destroyed is True


def test_user_prefs_are_applied(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("MEDIALINK_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MEDIALINK_DEBUG", raising=False)
    monkeypatch.delenv("MEDIALINK_DEBUG_LOGGING", raising=False)
    (tmp_path / "user_prefs.json").write_text(
        json.dumps({"client_title": "Media Client", "client_geometry": "800x600"}),
        encoding="utf-8",
    )
    app = _client_app_for_tests()
    app.settings_vm = SettingsVM()
    app._storage = StorageLocal(root_dir=str(tmp_path))

    app._load_user_settings()

    assert app.settings_vm.client_title == "Media Client"
    assert app.settings_vm.client_geometry == "800x600"


def test_broken_user_prefs_keep_defaults(tmp_path) -> None:
    (tmp_path / "user_prefs.json").write_text("{", encoding="utf-8")
    app = _client_app_for_tests()
    app.settings_vm = SettingsVM()
    app._storage = StorageLocal(root_dir=str(tmp_path))

    app._load_user_settings()

    assert app.settings_vm.client_title == "MainWindow"


def test_demo_button_and_menu_item_append_same_line() -> None:
    app = DemoApp.__new__(DemoApp)
    app._log = logging.getLogger("test.demo")
    app.win = _DemoWin()
    app.console_vm = ConsoleVM(on_output_appended=app._render_output)
    button1, item1 = object(), MenuEntryTrigger("Button1")
    button2, item3 = object(), MenuEntryTrigger("Button3")
    app.dispatcher = CommandDispatcher(
        CommandRegistry(
            [(button1, APPEND_A), (item1, APPEND_A), (button2, APPEND_B), (item3, DEMO_EXIT)]
        ),
        ExecuteCommand(terminate=app._shutdown),
        surface=app.console_vm,
    )

    app._on_trigger(TriggerEvent(button1))
    app._on_trigger(TriggerEvent(item1))
    app._on_trigger(TriggerEvent(button2))

    assert app.win.text == [
        "The first button appending..\n",
        "The first button appending..\n",
        "The second button appending..\n",
    ]

    with pytest.raises(SystemExit):
        app._on_trigger(TriggerEvent(item3))
    assert app.win.destroyed is True

    app._on_trigger(TriggerEvent(button1))
    assert len(app.win.text) == 3


def test_window_button_captions_match_command_table() -> None:
    assert tuple(c.caption for c in CLIENT_COMMANDS) == MediaClientView.BUTTON_LABELS
    assert tuple(c.caption for c in DEMO_COMMANDS) == DemoWindowView.BUTTON_LABELS
    assert len(DemoWindowView.MENU_LABELS) == len(DEMO_COMMANDS)

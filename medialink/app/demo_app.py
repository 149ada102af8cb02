"""Composition root for the local demo window.

The demo has no service: its buttons and their ``Buttons`` menu twins append
canned lines to the text area, and Exit/Button3 end the process.
"""

from __future__ import annotations

import logging
import os
import sys

from .dispatcher import CommandDispatcher
from .views.demo_window import DemoWindowView
from ..adapters.storage_local import StorageLocal
from ..domain.commands import DEMO_COMMANDS, TriggerEvent
from ..domain.registry import CommandRegistry
from ..usecases.execute_command import ExecuteCommand
from ..utils import logging as logging_utils
from ..viewmodels.console_vm import ConsoleVM
from ..viewmodels.settings_vm import SettingsVM

logging_utils.configure_root()


class DemoApp:
    """Bootstrap: wire the demo view to local-append commands."""

    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)

        self.settings_vm = SettingsVM()
        storage = StorageLocal(root_dir=os.environ.get("MEDIALINK_STORAGE_ROOT") or ".")
        try:
            self.settings_vm.apply_dict(storage.load_user_prefs())
        except (OSError, ValueError) as exc:
            self._log.warning("Could not load user prefs: %s", exc)
        logging_utils.apply_gui_preferences(
            self.settings_vm.debug_logging, log_traffic=self.settings_vm.log_traffic
        )

        self.console_vm = ConsoleVM(on_output_appended=self._render_output)
        self.win = DemoWindowView(
            title=self.settings_vm.demo_title,
            button_labels=[command.caption for command in DEMO_COMMANDS],
            on_trigger=self._on_trigger,
            on_close=self._shutdown,
        )

        buttons, items = self.win.buttons, self.win.menu_items
        # Menu entries Button1..Button3 twin the buttons in order.
        bindings = []
        for menu_label, command in zip(DemoWindowView.MENU_LABELS, DEMO_COMMANDS):
            bindings.append((buttons[command.caption], command))
            bindings.append((items[menu_label], command))
        self.registry = CommandRegistry(bindings)
        self.dispatcher = CommandDispatcher(
            self.registry,
            ExecuteCommand(terminate=self._shutdown),
            surface=self.console_vm,
        )

    def _on_trigger(self, event: TriggerEvent) -> None:
        self.dispatcher.handle(event)

    def _render_output(self, text: str) -> None:
        self.win.append_text(text)

    def _shutdown(self) -> None:
        self._log.info("Exit requested")
        self.win.destroy()
        sys.exit(0)


def main() -> None:
    app = DemoApp()
    app.win.mainloop()


if __name__ == "__main__":
    main()

# medialink/app/main.py
from __future__ import annotations
import logging
import os
import sys
from typing import Optional

# ---- Views (UI-only) ----
from .views.client_window import MediaClientView

# ---- ViewModels ----
from ..viewmodels.console_vm import ConsoleVM
from ..viewmodels.settings_vm import SettingsVM

# ---- UseCases & Adapter ----
from .controller import AppController
from .dispatcher import CommandDispatcher
from ..adapters.storage_local import StorageLocal
from ..domain.commands import CLIENT_COMMANDS, TriggerEvent
from ..domain.ports import ServicePort
from ..domain.registry import CommandRegistry
from ..utils import logging as logging_utils

logging_utils.configure_root()


class App:
    """Bootstrap: wire the client view, console VM, and request dispatch."""

    def __init__(self, service: Optional[ServicePort] = None) -> None:
        self._log = logging.getLogger(__name__)

        # ---- Settings ----
        self.settings_vm = SettingsVM()
        self._storage_root = os.environ.get("MEDIALINK_STORAGE_ROOT") or "."
        self._storage = StorageLocal(root_dir=self._storage_root)
        self._load_user_settings()

        # ---- ViewModels ----
        self.console_vm = ConsoleVM(
            on_output_appended=self._render_output,
            on_input_changed=self._render_input,
        )

        # ---- Main window ----
        self.win = MediaClientView(
            title=self.settings_vm.client_title,
            geometry=self.settings_vm.client_geometry,
            button_labels=[command.caption for command in CLIENT_COMMANDS],
            on_trigger=self._on_trigger,
            on_input_changed=self.console_vm.sync_input,
            on_close=self._shutdown,
        )

        # ---- Service & UseCases ----
        self.controller = AppController(
            self.settings_vm, service=service, terminate=self._shutdown
        )
        self.controller.ensure_ready()

        # ---- Trigger table ----
        buttons = self.win.buttons
        self.registry = CommandRegistry(
            [(buttons[command.caption], command) for command in CLIENT_COMMANDS]
        )
        self.dispatcher = CommandDispatcher(
            self.registry,
            self.controller.uc_execute,
            surface=self.console_vm,
            input_source=self.console_vm,
        )

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------
    def _load_user_settings(self) -> None:
        try:
            self.settings_vm.apply_dict(self._storage.load_user_prefs())
        except (OSError, ValueError) as exc:
            self._log.warning("Could not load user prefs from %s: %s", self._storage.prefs_path, exc)
        level = logging_utils.apply_gui_preferences(
            self.settings_vm.debug_logging, log_traffic=self.settings_vm.log_traffic
        )
        self._log.debug("Log level set to %s", logging.getLevelName(level))

    # ------------------------------------------------------------------
    # View <-> VM wiring
    # ------------------------------------------------------------------
    def _on_trigger(self, event: TriggerEvent) -> None:
        self.dispatcher.handle(event)

    def _render_output(self, text: str) -> None:
        self.win.append_output(text)

    def _render_input(self, text: str) -> None:
        self.win.set_input_text(text)

    # ------------------------------------------------------------------
    # Exit path
    # ------------------------------------------------------------------
    def _shutdown(self) -> None:
        """Close the service, tear down the window, and exit with status 0."""
        self._log.info("Exit requested")
        try:
            self.controller.shutdown()
        finally:
            self.win.destroy()
        sys.exit(0)


def main() -> None:
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()

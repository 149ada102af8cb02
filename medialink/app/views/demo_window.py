"""
DemoWindowView
--------------
Tkinter window demonstrating duplicated triggers: every button has a twin
entry in the ``Buttons`` menu and both forward the same ``TriggerEvent`` path.
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Optional, Sequence

from ...domain.commands import MenuEntryTrigger, TriggerEvent
from .view_utils import safe_call


class DemoWindowView(tk.Tk):
    """Top-level demo window (menu bar, toolbar, scrolled text, buttons)."""

    OnTrigger = Optional[Callable[[TriggerEvent], None]]
    OnVoid = Optional[Callable[[], None]]

    BUTTON_LABELS = ("Button1", "Button2", "Exit")
    MENU_LABELS = ("Button1", "Button2", "Button3")

    def __init__(
        self,
        *,
        title: str = "MainWindow",
        button_labels: Sequence[str] = BUTTON_LABELS,
        on_trigger: OnTrigger = None,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__()
        self.title(title)

        self._on_trigger = on_trigger
        self._button_labels = tuple(button_labels)
        self._on_close = on_close
        self.buttons: Dict[str, ttk.Button] = {}
        self.menu_items: Dict[str, MenuEntryTrigger] = {}

        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_menu()
        self._build_toolbar(self)
        self._build_text_area(self)
        self._build_buttons(self)

        self.protocol("WM_DELETE_WINDOW", self._handle_close)

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def _build_menu(self) -> None:
        menubar = tk.Menu(self)
        menu = tk.Menu(menubar, tearoff=False)
        for label in self.MENU_LABELS:
            trigger = MenuEntryTrigger(label)
            menu.add_command(label=label, command=lambda t=trigger: self._fire(t))
            self.menu_items[label] = trigger
        menubar.add_cascade(label="Buttons", menu=menu)
        self.configure(menu=menubar)

    def _build_toolbar(self, parent: tk.Widget) -> None:
        self.toolbar = ttk.Frame(parent)
        self.toolbar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 4))

    def _build_text_area(self, parent: tk.Widget) -> None:
        frame = ttk.Frame(parent)
        frame.grid(row=1, column=0, sticky="nsew", padx=8, pady=4)
        frame.rowconfigure(0, weight=1)
        frame.columnconfigure(0, weight=1)

        self.text = tk.Text(frame, width=10, height=10)
        vsb = ttk.Scrollbar(frame, orient="vertical", command=self.text.yview)
        self.text.configure(yscrollcommand=vsb.set)
        self.text.grid(row=0, column=0, sticky="nsew")
        vsb.grid(row=0, column=1, sticky="ns")

    def _build_buttons(self, parent: tk.Widget) -> None:
        frame = ttk.Frame(parent)
        frame.grid(row=2, column=0, sticky="ew", padx=8, pady=(4, 8))

        ttk.Label(frame, text="Use the buttons to control the text area!").pack(
            side=tk.LEFT, padx=(0, 12)
        )
        for label in self._button_labels:
            button = ttk.Button(frame, text=label)
            button.configure(command=lambda b=button: self._fire(b))
            button.pack(side=tk.LEFT, padx=4)
            self.buttons[label] = button

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def append_text(self, text: str) -> None:
        self.text.insert("end", text)
        self.text.see("end")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _fire(self, source: object) -> None:
        safe_call(self._on_trigger, TriggerEvent(source))

    def _handle_close(self) -> None:
        if self._on_close is None:
            self.destroy()
            return
        self._on_close()

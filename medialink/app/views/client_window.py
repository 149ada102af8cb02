"""
MediaClientView
---------------
Tkinter window for the multimedia client. This file contains **only View
code**: no protocol, no service calls. Control activations are forwarded as
``TriggerEvent`` objects through the ``on_trigger`` callback.

Layout:
  * North: input field with its label
  * Center: read-only, word-wrapped output area
  * South: hint label and the Search / Play / Exit buttons
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Optional, Sequence

from ...domain.commands import TriggerEvent
from .view_utils import safe_call


class MediaClientView(tk.Tk):
    """Top-level client window.

    ``buttons`` maps each button caption to its widget so the composition
    layer can bind the widgets to commands.
    """

    OnTrigger = Optional[Callable[[TriggerEvent], None]]
    OnText = Optional[Callable[[str], None]]
    OnVoid = Optional[Callable[[], None]]

    BUTTON_LABELS = ("Search", "Play", "Exit")

    def __init__(
        self,
        *,
        title: str = "MainWindow",
        geometry: str = "1000x800",
        button_labels: Sequence[str] = BUTTON_LABELS,
        on_trigger: OnTrigger = None,
        on_input_changed: OnText = None,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__()

        self.title(title)
        self.geometry(geometry)

        self._on_trigger = on_trigger
        self._button_labels = tuple(button_labels)
        self._on_input_changed = on_input_changed
        self._on_close = on_close
        self.buttons: Dict[str, ttk.Button] = {}

        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_input(self)
        self._build_output(self)
        self._build_buttons(self)

        self.protocol("WM_DELETE_WINDOW", self._handle_close)

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def _build_input(self, parent: tk.Widget) -> None:
        frame = ttk.Frame(parent)
        frame.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 4))

        self.input_var = tk.StringVar(value="")
        self._suppress_input_trace = False
        self.input_var.trace_add("write", self._handle_input_write)

        self.entry = ttk.Entry(frame, textvariable=self.input_var, width=16)
        self.entry.pack(side=tk.LEFT, padx=(0, 6))
        ttk.Label(frame, text="Enter a multimedia name").pack(side=tk.LEFT)

    def _build_output(self, parent: tk.Widget) -> None:
        frame = ttk.Frame(parent)
        frame.grid(row=1, column=0, sticky="nsew", padx=8, pady=4)
        frame.rowconfigure(0, weight=1)
        frame.columnconfigure(0, weight=1)

        self.output = tk.Text(frame, width=50, height=50, wrap="word", state="disabled")
        self.output.grid(row=0, column=0, sticky="nsew")

    def _build_buttons(self, parent: tk.Widget) -> None:
        frame = ttk.Frame(parent)
        frame.grid(row=2, column=0, sticky="ew", padx=8, pady=(4, 8))

        ttk.Label(frame, text="Use the buttons to select action to perform!").pack(
            side=tk.LEFT, padx=(0, 12)
        )
        for label in self._button_labels:
            button = ttk.Button(frame, text=label)
            button.configure(command=lambda b=button: self._fire(b))
            button.pack(side=tk.LEFT, padx=4)
            self.buttons[label] = button

    # ------------------------------------------------------------------
    # Public API (called by VMs/presenters)
    # ------------------------------------------------------------------
    def append_output(self, text: str) -> None:
        """Append text to the output area and keep the end visible."""
        self.output.configure(state="normal")
        self.output.insert("end", text)
        self.output.configure(state="disabled")
        self.output.see("end")

    def set_input_text(self, text: str) -> None:
        """Replace the input field text without reporting it back."""
        self._suppress_input_trace = True
        try:
            self.input_var.set(text)
        finally:
            self._suppress_input_trace = False

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _fire(self, source: object) -> None:
        safe_call(self._on_trigger, TriggerEvent(source))

    def _handle_input_write(self, *_args) -> None:
        if self._suppress_input_trace:
            return
        safe_call(self._on_input_changed, self.input_var.get())

    def _handle_close(self) -> None:
        if self._on_close is None:
            self.destroy()
            return
        self._on_close()

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional


@dataclass
class ConsoleVM:
    """Output area and input field state for one window.

    Implements both the ``OutputSurface`` and ``InputSource`` ports. Views
    subscribe through the callbacks and never mutate the state directly.
    """

    on_output_appended: Optional[Callable[[str], None]] = None
    on_input_changed: Optional[Callable[[str], None]] = None

    fragments: List[str] = field(default_factory=list)
    input_text: str = ""

    # ---- OutputSurface ----
    def append(self, text: str) -> None:
        self.fragments.append(text)
        if self.on_output_appended:
            self.on_output_appended(text)

    @property
    def output_text(self) -> str:
        return "".join(self.fragments)

    # ---- InputSource ----
    def get_text(self) -> str:
        return self.input_text

    def set_text(self, text: str) -> None:
        self.input_text = text
        if self.on_input_changed:
            self.on_input_changed(text)

    def sync_input(self, text: str) -> None:
        """Record text typed by the user without echoing it back to the view."""
        self.input_text = text

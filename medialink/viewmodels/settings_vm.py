from __future__ import annotations

import re
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

from ..utils.logging import env_requests_debug

_GEOMETRY_RE = re.compile(r"^\d+x\d+$")


@dataclass
class SettingsConfig:
    """Typed runtime settings loaded from user prefs."""

    client_title: str = "MainWindow"
    demo_title: str = "MainWindow"
    client_geometry: str = "1000x800"
    seed_demo_catalog: bool = True
    catalog_file: str = ""
    log_traffic: bool = True


def _default_debug_logging() -> bool:
    return env_requests_debug()


class SettingsVM:
    """Keeps window settings and validation, no I/O here."""

    def __init__(self, *, config: Optional[SettingsConfig] = None) -> None:
        self.config = config or SettingsConfig()
        self.debug_logging: bool = _default_debug_logging()

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def client_title(self) -> str:
        return self.config.client_title

    @client_title.setter
    def client_title(self, value: str) -> None:
        self.config = replace(self.config, client_title=self._coerce_text(value, "MainWindow"))

    @property
    def demo_title(self) -> str:
        return self.config.demo_title

    @demo_title.setter
    def demo_title(self, value: str) -> None:
        self.config = replace(self.config, demo_title=self._coerce_text(value, "MainWindow"))

    @property
    def client_geometry(self) -> str:
        return self.config.client_geometry

    @client_geometry.setter
    def client_geometry(self, value: str) -> None:
        text = str(value or "").strip()
        if not _GEOMETRY_RE.match(text):
            raise ValueError(f"client_geometry must look like '1000x800', got {value!r}")
        self.config = replace(self.config, client_geometry=text)

    @property
    def seed_demo_catalog(self) -> bool:
        return self.config.seed_demo_catalog

    @seed_demo_catalog.setter
    def seed_demo_catalog(self, value: Any) -> None:
        self.config = replace(self.config, seed_demo_catalog=self._coerce_bool(value))

    @property
    def catalog_file(self) -> str:
        return self.config.catalog_file

    @catalog_file.setter
    def catalog_file(self, value: Any) -> None:
        self.config = replace(self.config, catalog_file=str(value or "").strip())

    @property
    def log_traffic(self) -> bool:
        return self.config.log_traffic

    @log_traffic.setter
    def log_traffic(self, value: Any) -> None:
        self.config = replace(self.config, log_traffic=self._coerce_bool(value))

    # ------------------------------------------------------------------
    def apply_dict(self, prefs: Mapping[str, Any]) -> None:
        """Apply persisted prefs; unknown keys are ignored."""
        if not isinstance(prefs, Mapping):
            return
        for key in (
            "client_title",
            "demo_title",
            "client_geometry",
            "seed_demo_catalog",
            "catalog_file",
            "log_traffic",
        ):
            if key in prefs:
                setattr(self, key, prefs[key])
        if "debug_logging" in prefs:
            self.debug_logging = self._coerce_bool(prefs["debug_logging"])

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self.config)
        data["debug_logging"] = bool(self.debug_logging)
        return data

    # ------------------------------------------------------------------
    @staticmethod
    def _coerce_text(value: Any, fallback: str) -> str:
        text = str(value if value is not None else "").strip()
        return text or fallback

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

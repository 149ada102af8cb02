"""Logging setup for the client and demo windows.

Two knobs are exposed:

* the root level, which the ``debug_logging`` pref toggles between INFO and
  DEBUG;
* the request/response traffic, i.e. the ``Response: ...`` lines of the
  exchange use case and the search/play lines of the offline catalog. The
  ``log_traffic`` pref turns it off by raising those loggers to WARNING, so
  failures still show up.

Environment variables win over the prefs:
  - MEDIALINK_LOG_LEVEL: root level, by name (``debug``) or number (``10``)
  - MEDIALINK_DEBUG_LOGGING / MEDIALINK_DEBUG: truthy -> DEBUG
  - MEDIALINK_LOG_TRAFFIC: truthy/falsy -> traffic on/off
"""

from __future__ import annotations

import logging
import os
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
_LEVEL_VAR = "MEDIALINK_LOG_LEVEL"
_DEBUG_VARS = ("MEDIALINK_DEBUG_LOGGING", "MEDIALINK_DEBUG")
_TRAFFIC_VAR = "MEDIALINK_LOG_TRAFFIC"
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

TRAFFIC_LOGGERS = (
    "medialink.usecases.exchange_request",
    "medialink.adapters.media_catalog_mock",
)


def _parse_level(value: Optional[str], fallback: int) -> int:
    text = (value or "").strip()
    if text.isdigit():
        return int(text)
    candidate = logging.getLevelName(text.upper()) if text else None
    return candidate if isinstance(candidate, int) else fallback


def _env_level() -> Optional[int]:
    explicit = os.getenv(_LEVEL_VAR)
    if explicit:
        return _parse_level(explicit, logging.INFO)
    for var in _DEBUG_VARS:
        if (os.getenv(var) or "").strip().lower() in _TRUTHY:
            return logging.DEBUG
    return None


def _env_traffic() -> Optional[bool]:
    value = (os.getenv(_TRAFFIC_VAR) or "").strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return None


def configure_root(default_level: int | str = logging.INFO) -> int:
    """Install the compact console format once and set the root level.

    Returns:
        The effective root level.
    """
    if isinstance(default_level, str):
        fallback = _parse_level(default_level, logging.INFO)
    else:
        fallback = int(default_level)
    env_level = _env_level()
    effective = fallback if env_level is None else env_level

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_FORMAT, datefmt=_DATEFMT)
    root.setLevel(effective)
    return effective


def set_traffic_logging(enabled: bool) -> bool:
    """Show or hide request/response traffic; MEDIALINK_LOG_TRAFFIC wins.

    Returns:
        Whether traffic is logged after the update.
    """
    env_enabled = _env_traffic()
    if env_enabled is not None:
        enabled = env_enabled
    # NOTSET lets the traffic loggers follow the root level again.
    level = logging.NOTSET if enabled else logging.WARNING
    for name in TRAFFIC_LOGGERS:
        logging.getLogger(name).setLevel(level)
    return enabled


def apply_gui_preferences(debug_enabled: bool, *, log_traffic: bool = True) -> int:
    """Apply the ``debug_logging`` and ``log_traffic`` prefs.

    Returns:
        The effective root level.
    """
    env_level = _env_level()
    if env_level is not None:
        level = env_level
    else:
        level = logging.DEBUG if debug_enabled else logging.INFO
    logging.getLogger().setLevel(level)
    set_traffic_logging(log_traffic)
    return level


def env_requests_debug() -> bool:
    """Return True if environment variables force DEBUG logging."""
    env_level = _env_level()
    return env_level is not None and env_level <= logging.DEBUG

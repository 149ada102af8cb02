from __future__ import annotations

import logging
from typing import Any, Callable, Optional

_log = logging.getLogger(__name__)


def safe_call(
    fn: Optional[Callable[..., Any]],
    *args: Any,
    on_error: Optional[Callable[[Exception], None]] = None,
) -> None:
    if fn is None:
        return
    try:
        fn(*args)
    except Exception as exc:
        if on_error:
            on_error(exc)
        else:
            _log.exception("Callback failed: %s", exc)


__all__ = ["safe_call"]

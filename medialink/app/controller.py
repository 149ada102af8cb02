"""Adapter and use-case wiring for the media client runtime.

This module owns lazy construction of the service adapter and the use-case
objects that depend on values in :class:`medialink.viewmodels.settings_vm.SettingsVM`.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..adapters.media_catalog_mock import MediaCatalogMock
from ..domain.ports import ServicePort
from ..usecases.exchange_request import ExchangeRequest
from ..usecases.execute_command import ExecuteCommand
from ..viewmodels.settings_vm import SettingsVM


class AppController:
    """Create and cache the service adapter and use cases from settings state.

    Call chain:
        ``medialink.app.main.App`` creates one instance, calls
        ``ensure_ready`` during start-up and ``shutdown`` from the exit path.
    """

    def __init__(
        self,
        settings_vm: SettingsVM,
        *,
        service: Optional[ServicePort] = None,
        terminate: Optional[Callable[[], None]] = None,
    ) -> None:
        """Initialize controller with settings-backed lazy dependencies.

        Args:
            settings_vm: Settings used to build the default offline service.
            service: Externally constructed service adapter. When given, it
                is used as-is and settings do not influence it.
            terminate: Hook handed to :class:`ExecuteCommand` for exit
                commands; ``None`` keeps the executor default.
        """
        self._log = logging.getLogger(__name__)
        self.settings_vm = settings_vm
        self._injected_service = service
        self._terminate = terminate
        self._service: Optional[ServicePort] = service
        self.uc_exchange: Optional[ExchangeRequest] = None
        self.uc_execute: Optional[ExecuteCommand] = None

    @property
    def service(self) -> Optional[ServicePort]:
        """Return the service adapter used for request exchanges."""
        return self._service

    def reset(self) -> None:
        """Drop cached use cases and any service built from settings."""
        self._service = self._injected_service
        self.uc_exchange = None
        self.uc_execute = None

    def ensure_ready(self) -> bool:
        """Ensure the service and use cases exist.

        Returns:
            ``True`` once the executor is available.
        """
        if self.uc_execute is not None:
            return True

        if self._service is None:
            self._service = self._build_default_service()

        self.uc_exchange = ExchangeRequest(self._service)
        if self._terminate is not None:
            self.uc_execute = ExecuteCommand(exchange=self.uc_exchange, terminate=self._terminate)
        else:
            self.uc_execute = ExecuteCommand(exchange=self.uc_exchange)
        return True

    def shutdown(self) -> None:
        """Close the service adapter if it supports closing, then reset."""
        service = self._service
        close = getattr(service, "close", None)
        if callable(close):
            self._log.debug("Closing service %s", type(service).__name__)
            close()
        self.reset()

    def _build_default_service(self) -> ServicePort:
        settings = self.settings_vm
        catalog = MediaCatalogMock.seeded() if settings.seed_demo_catalog else MediaCatalogMock()
        if settings.catalog_file:
            catalog = MediaCatalogMock.from_file(settings.catalog_file, base=catalog)
        self._log.info(
            "Using offline media catalog (%d items)", len(catalog.media_names())
        )
        return catalog

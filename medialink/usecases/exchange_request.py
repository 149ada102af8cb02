"""Use case for one synchronous request/response round trip.

The exchange blocks the caller (the Tk main loop) until the service replies;
there is no timeout or cancellation at this layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.ports import ServicePort
from ..domain.protocol import encode_request
from .error_mapping import map_service_error

_log = logging.getLogger(__name__)


@dataclass
class ExchangeRequest:
    """Use-case callable that encodes a command and returns the raw reply.

    Attributes:
        service: Collaborator performing the actual transport.
    """
    service: ServicePort

    def __call__(self, command_name: str, argument: str) -> str:
        """Send ``"<command_name> <argument>"`` and return the reply text.

        Args:
            command_name: Protocol command (``search`` / ``play``).
            argument: Verbatim input text, possibly empty.

        Returns:
            The service reply, undecoded.

        Raises:
            UseCaseError: If the service call fails.
        """
        request_line = encode_request(command_name, argument)
        _log.debug("Request: %r", request_line)
        try:
            response = self.service.send(request_line)
        except Exception as exc:
            raise map_service_error(exc) from exc
        _log.info("Response: %s", response)
        return response

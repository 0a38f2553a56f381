"""
Terminal endpoints.

The terminal route drives PayStack POS devices: pushing invoices or
transactions to a device, checking whether it is online, and managing the
devices registered on the integration.
"""

from typing import Any, List, Optional

from paystack_api.endpoints.base import BaseEndpoint, build_query
from paystack_api.models.response import PayStackResponse
from paystack_api.models.terminal import (
    TerminalData,
    TerminalEventRequest,
    TerminalEventResult,
    TerminalEventStatus,
    TerminalPresence,
    UpdateTerminalRequest,
)


class TerminalEndpoints(BaseEndpoint):
    """Operations on ``/terminal``."""

    resource_path = "/terminal"

    def send_event(self, terminal_id: str, request: TerminalEventRequest) -> PayStackResponse[TerminalEventResult]:
        """
        Send an event from the integration to a terminal.

        Args:
            terminal_id: ID of the terminal the event should reach
            request: Finalized event request
        """
        return self._post(self._url(terminal_id, "event"), TerminalEventResult, request)

    def fetch_event_status(self, terminal_id: str, event_id: str) -> PayStackResponse[TerminalEventStatus]:
        """Check whether an event was delivered to the terminal."""
        return self._get(self._url(terminal_id, "event", event_id), TerminalEventStatus)

    def fetch_terminal_status(self, terminal_id: str) -> PayStackResponse[TerminalPresence]:
        """Check whether a terminal is online and available."""
        return self._get(self._url(terminal_id, "presence"), TerminalPresence)

    def list_terminals(self, per_page: Optional[int] = None) -> PayStackResponse[List[TerminalData]]:
        return self._get(self._url(), List[TerminalData], build_query(perPage=per_page))

    def fetch_terminal(self, terminal_id: str) -> PayStackResponse[TerminalData]:
        return self._get(self._url(terminal_id), TerminalData)

    def update_terminal(self, terminal_id: str, request: UpdateTerminalRequest) -> PayStackResponse[Any]:
        return self._put(self._url(terminal_id), Any, request)

    def commission_terminal(self, serial_number: str) -> PayStackResponse[Any]:
        """Activate a debug device by its serial number."""
        return self._post(self._url("commission_device"), Any, body={"serial_number": serial_number})

    def decommission_terminal(self, serial_number: str) -> PayStackResponse[Any]:
        """Unassign a debug device from the integration."""
        return self._post(self._url("decommission_device"), Any, body={"serial_number": serial_number})

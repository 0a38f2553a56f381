"""
Terminal models for in-person payments on PayStack POS devices.
"""

from typing import Optional

from pydantic import Field

from paystack_api.models.base import PayStackModel, PayStackRequest, RequestBuilder
from paystack_api.models.enums import Domain, TerminalAction, TerminalEventType, tolerant


class TerminalEventData(PayStackRequest):
    """Object the terminal event refers to."""

    id: str = Field(..., min_length=1, description="Invoice or transaction ID")
    reference: Optional[str] = Field(None, description="Offline reference for invoices")


class TerminalEventDataBuilder(RequestBuilder):
    request_model = TerminalEventData

    def id(self, id: str) -> "TerminalEventDataBuilder":
        return self._set("id", id)

    def reference(self, reference: str) -> "TerminalEventDataBuilder":
        return self._set("reference", reference)


class TerminalEventRequest(PayStackRequest):
    """Body of ``POST /terminal/{terminal_id}/event``."""

    event_type: TerminalEventType = Field(..., alias="type")
    action: TerminalAction
    data: TerminalEventData


class TerminalEventRequestBuilder(RequestBuilder):
    request_model = TerminalEventRequest

    def event_type(self, event_type: TerminalEventType) -> "TerminalEventRequestBuilder":
        return self._set("event_type", event_type)

    def action(self, action: TerminalAction) -> "TerminalEventRequestBuilder":
        return self._set("action", action)

    def data(self, data: TerminalEventData) -> "TerminalEventRequestBuilder":
        return self._set("data", data)


class UpdateTerminalRequest(PayStackRequest):
    """Body of ``PUT /terminal/{terminal_id}``."""

    name: Optional[str] = None
    address: Optional[str] = None


class UpdateTerminalRequestBuilder(RequestBuilder):
    request_model = UpdateTerminalRequest

    def name(self, name: str) -> "UpdateTerminalRequestBuilder":
        return self._set("name", name)

    def address(self, address: str) -> "UpdateTerminalRequestBuilder":
        return self._set("address", address)


class TerminalEventResult(PayStackModel):
    """Identifier of an event pushed to a terminal."""

    id: str


class TerminalEventStatus(PayStackModel):
    delivered: bool


class TerminalPresence(PayStackModel):
    online: bool
    available: bool


class TerminalData(PayStackModel):
    """A terminal registered on the integration."""

    id: Optional[int] = None
    serial_number: Optional[str] = None
    device_make: Optional[str] = None
    terminal_id: str
    integration: Optional[int] = None
    domain: Optional[tolerant(Domain)] = None
    name: Optional[str] = None
    address: Optional[str] = None
    status: Optional[str] = None

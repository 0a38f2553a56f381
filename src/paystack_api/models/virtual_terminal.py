"""
Virtual terminal models.

A virtual terminal lets a merchant accept in-person payments without a POS
device; payment notifications go to the configured destinations.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from paystack_api.models.base import PayStackModel, PayStackRequest, RequestBuilder
from paystack_api.models.enums import Currency, Domain, tolerant


class Destination(PayStackRequest):
    """WhatsApp number that receives payment notifications."""

    target: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)


class DestinationBuilder(RequestBuilder):
    request_model = Destination

    def target(self, target: str) -> "DestinationBuilder":
        return self._set("target", target)

    def name(self, name: str) -> "DestinationBuilder":
        return self._set("name", name)


class CustomField(PayStackRequest):
    """Extra field shown on the virtual terminal checkout."""

    display_name: str = Field(..., min_length=1)
    variable_name: str = Field(..., min_length=1)


class CustomFieldBuilder(RequestBuilder):
    request_model = CustomField

    def display_name(self, display_name: str) -> "CustomFieldBuilder":
        return self._set("display_name", display_name)

    def variable_name(self, variable_name: str) -> "CustomFieldBuilder":
        return self._set("variable_name", variable_name)


class VirtualTerminalRequest(PayStackRequest):
    """Body of ``POST /virtual_terminal``."""

    name: str = Field(..., min_length=1)
    destinations: List[Destination] = Field(..., min_length=1)
    metadata: Optional[Dict[str, Any]] = None
    currency: Optional[List[Currency]] = None
    custom_fields: Optional[List[CustomField]] = None


class VirtualTerminalRequestBuilder(RequestBuilder):
    request_model = VirtualTerminalRequest

    def name(self, name: str) -> "VirtualTerminalRequestBuilder":
        return self._set("name", name)

    def destinations(self, destinations: List[Destination]) -> "VirtualTerminalRequestBuilder":
        return self._set("destinations", None if destinations is None else list(destinations))

    def metadata(self, metadata: Dict[str, Any]) -> "VirtualTerminalRequestBuilder":
        return self._set("metadata", metadata)

    def currency(self, currency: List[Currency]) -> "VirtualTerminalRequestBuilder":
        return self._set("currency", None if currency is None else list(currency))

    def custom_fields(self, custom_fields: List[CustomField]) -> "VirtualTerminalRequestBuilder":
        return self._set("custom_fields", None if custom_fields is None else list(custom_fields))


class DestinationData(PayStackModel):
    target: Optional[str] = None
    destination_type: Optional[str] = Field(None, alias="type")
    name: Optional[str] = None
    created_at: Optional[str] = None


class VirtualTerminalData(PayStackModel):
    """A virtual terminal as returned by the virtual terminal routes."""

    id: Optional[int] = None
    name: str
    code: str
    integration: Optional[int] = None
    domain: Optional[tolerant(Domain)] = None
    payment_methods: Optional[List[str]] = Field(None, alias="paymentMethods")
    active: Optional[bool] = None
    metadata: Optional[Any] = None
    destinations: Optional[List[DestinationData]] = None
    currency: Optional[Any] = None
    created_at: Optional[str] = Field(None, alias="createdAt")

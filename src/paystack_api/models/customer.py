"""
Customer models.
"""

from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from paystack_api.models.base import PayStackRequest, RequestBuilder
from paystack_api.models.enums import RiskAction


class CreateCustomerRequest(PayStackRequest):
    """Body of ``POST /customer``."""

    email: str = Field(..., min_length=3, description="Customer email address")
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        if "@" not in v:
            raise ValueError("email must contain '@'")
        return v


class CreateCustomerRequestBuilder(RequestBuilder):
    request_model = CreateCustomerRequest

    def email(self, email: str) -> "CreateCustomerRequestBuilder":
        return self._set("email", email)

    def first_name(self, first_name: str) -> "CreateCustomerRequestBuilder":
        return self._set("first_name", first_name)

    def last_name(self, last_name: str) -> "CreateCustomerRequestBuilder":
        return self._set("last_name", last_name)

    def phone(self, phone: str) -> "CreateCustomerRequestBuilder":
        return self._set("phone", phone)

    def metadata(self, metadata: Dict[str, Any]) -> "CreateCustomerRequestBuilder":
        return self._set("metadata", metadata)


class UpdateCustomerRequest(PayStackRequest):
    """Body of ``PUT /customer/{code}``."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class UpdateCustomerRequestBuilder(RequestBuilder):
    request_model = UpdateCustomerRequest

    def first_name(self, first_name: str) -> "UpdateCustomerRequestBuilder":
        return self._set("first_name", first_name)

    def last_name(self, last_name: str) -> "UpdateCustomerRequestBuilder":
        return self._set("last_name", last_name)

    def phone(self, phone: str) -> "UpdateCustomerRequestBuilder":
        return self._set("phone", phone)

    def metadata(self, metadata: Dict[str, Any]) -> "UpdateCustomerRequestBuilder":
        return self._set("metadata", metadata)


class RiskActionRequest(PayStackRequest):
    """Body of ``POST /customer/set_risk_action``."""

    customer: str = Field(..., min_length=1, description="Customer code or email")
    risk_action: Optional[RiskAction] = None


class RiskActionRequestBuilder(RequestBuilder):
    request_model = RiskActionRequest

    def customer(self, customer: str) -> "RiskActionRequestBuilder":
        return self._set("customer", customer)

    def risk_action(self, risk_action: RiskAction) -> "RiskActionRequestBuilder":
        return self._set("risk_action", risk_action)

"""
Subaccount models.
"""

from decimal import Decimal
from typing import Any, Dict, Optional, Union

from pydantic import Field

from paystack_api.models.base import JsonDecimal, PayStackModel, PayStackRequest, RequestBuilder
from paystack_api.models.enums import Domain, tolerant


class SubaccountRequest(PayStackRequest):
    """Body of ``POST /subaccount``."""

    business_name: str = Field(..., min_length=1)
    settlement_bank: str = Field(..., min_length=1, description="Bank code of the settlement account")
    account_number: str = Field(..., min_length=1)
    percentage_charge: JsonDecimal = Field(..., ge=0, le=100, description="Main account's share of each payment")
    description: str
    primary_contact_email: Optional[str] = None
    primary_contact_name: Optional[str] = None
    primary_contact_phone: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class SubaccountRequestBuilder(RequestBuilder):
    request_model = SubaccountRequest

    def business_name(self, business_name: str) -> "SubaccountRequestBuilder":
        return self._set("business_name", business_name)

    def settlement_bank(self, settlement_bank: str) -> "SubaccountRequestBuilder":
        return self._set("settlement_bank", settlement_bank)

    def account_number(self, account_number: str) -> "SubaccountRequestBuilder":
        return self._set("account_number", account_number)

    def percentage_charge(self, percentage_charge: Union[Decimal, int, str]) -> "SubaccountRequestBuilder":
        return self._set("percentage_charge", percentage_charge)

    def description(self, description: str) -> "SubaccountRequestBuilder":
        return self._set("description", description)

    def primary_contact_email(self, email: str) -> "SubaccountRequestBuilder":
        return self._set("primary_contact_email", email)

    def primary_contact_name(self, name: str) -> "SubaccountRequestBuilder":
        return self._set("primary_contact_name", name)

    def primary_contact_phone(self, phone: str) -> "SubaccountRequestBuilder":
        return self._set("primary_contact_phone", phone)

    def metadata(self, metadata: Dict[str, Any]) -> "SubaccountRequestBuilder":
        return self._set("metadata", metadata)


class UpdateSubaccountRequest(PayStackRequest):
    """Body of ``PUT /subaccount/{id_or_code}``. Every field is optional."""

    business_name: Optional[str] = None
    settlement_bank: Optional[str] = None
    account_number: Optional[str] = None
    active: Optional[bool] = None
    percentage_charge: Optional[JsonDecimal] = Field(None, ge=0, le=100)
    description: Optional[str] = None
    primary_contact_email: Optional[str] = None
    primary_contact_name: Optional[str] = None
    primary_contact_phone: Optional[str] = None
    settlement_schedule: Optional[str] = Field(None, description="auto, weekly, monthly or manual")
    metadata: Optional[Dict[str, Any]] = None


class UpdateSubaccountRequestBuilder(RequestBuilder):
    request_model = UpdateSubaccountRequest

    def business_name(self, business_name: str) -> "UpdateSubaccountRequestBuilder":
        return self._set("business_name", business_name)

    def settlement_bank(self, settlement_bank: str) -> "UpdateSubaccountRequestBuilder":
        return self._set("settlement_bank", settlement_bank)

    def account_number(self, account_number: str) -> "UpdateSubaccountRequestBuilder":
        return self._set("account_number", account_number)

    def active(self, active: bool) -> "UpdateSubaccountRequestBuilder":
        return self._set("active", active)

    def percentage_charge(self, percentage_charge: Union[Decimal, int, str]) -> "UpdateSubaccountRequestBuilder":
        return self._set("percentage_charge", percentage_charge)

    def description(self, description: str) -> "UpdateSubaccountRequestBuilder":
        return self._set("description", description)

    def primary_contact_email(self, email: str) -> "UpdateSubaccountRequestBuilder":
        return self._set("primary_contact_email", email)

    def primary_contact_name(self, name: str) -> "UpdateSubaccountRequestBuilder":
        return self._set("primary_contact_name", name)

    def primary_contact_phone(self, phone: str) -> "UpdateSubaccountRequestBuilder":
        return self._set("primary_contact_phone", phone)

    def settlement_schedule(self, settlement_schedule: str) -> "UpdateSubaccountRequestBuilder":
        return self._set("settlement_schedule", settlement_schedule)

    def metadata(self, metadata: Dict[str, Any]) -> "UpdateSubaccountRequestBuilder":
        return self._set("metadata", metadata)


class SubaccountData(PayStackModel):
    """A subaccount as returned by the subaccount and split routes."""

    id: Optional[int] = None
    subaccount_code: str
    business_name: str
    integration: Optional[int] = None
    domain: Optional[tolerant(Domain)] = None
    description: Optional[str] = None
    primary_contact_name: Optional[str] = None
    primary_contact_email: Optional[str] = None
    primary_contact_phone: Optional[str] = None
    metadata: Optional[Any] = None
    percentage_charge: Optional[Decimal] = None
    is_verified: Optional[bool] = None
    settlement_bank: Optional[str] = None
    account_number: Optional[str] = None
    settlement_schedule: Optional[str] = None
    active: Optional[bool] = None
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")

"""
Dedicated virtual account models.

Dedicated virtual accounts are bank account numbers assigned to a single
customer; transfers into them are credited as that customer's payments.
"""

from typing import Any, Optional

from pydantic import Field

from paystack_api.models.base import PayStackModel, PayStackRequest, RequestBuilder
from paystack_api.models.common import CustomerData
from paystack_api.models.enums import Currency, tolerant


class DedicatedVirtualAccountRequest(PayStackRequest):
    """Body of ``POST /dedicated_account``."""

    customer: str = Field(..., min_length=1, description="Customer ID or code")
    preferred_bank: Optional[str] = Field(None, description="Bank slug, e.g. wema-bank")
    subaccount: Optional[str] = None
    split_code: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None


class DedicatedVirtualAccountRequestBuilder(RequestBuilder):
    request_model = DedicatedVirtualAccountRequest

    def customer(self, customer: str) -> "DedicatedVirtualAccountRequestBuilder":
        return self._set("customer", customer)

    def preferred_bank(self, preferred_bank: str) -> "DedicatedVirtualAccountRequestBuilder":
        return self._set("preferred_bank", preferred_bank)

    def subaccount(self, subaccount: str) -> "DedicatedVirtualAccountRequestBuilder":
        return self._set("subaccount", subaccount)

    def split_code(self, split_code: str) -> "DedicatedVirtualAccountRequestBuilder":
        return self._set("split_code", split_code)

    def first_name(self, first_name: str) -> "DedicatedVirtualAccountRequestBuilder":
        return self._set("first_name", first_name)

    def last_name(self, last_name: str) -> "DedicatedVirtualAccountRequestBuilder":
        return self._set("last_name", last_name)

    def phone(self, phone: str) -> "DedicatedVirtualAccountRequestBuilder":
        return self._set("phone", phone)


class BankData(PayStackModel):
    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None


class AccountAssignment(PayStackModel):
    integration: Optional[int] = None
    assignee_id: Optional[int] = None
    assignee_type: Optional[str] = None
    expired: Optional[bool] = None
    account_type: Optional[str] = None
    assigned_at: Optional[str] = None


class DedicatedVirtualAccountData(PayStackModel):
    """A dedicated virtual account as returned by the dedicated account routes."""

    id: Optional[int] = None
    account_name: Optional[str] = None
    account_number: str
    assigned: Optional[bool] = None
    currency: Optional[tolerant(Currency)] = None
    metadata: Optional[Any] = None
    active: Optional[bool] = None
    bank: Optional[BankData] = None
    assignment: Optional[AccountAssignment] = None
    customer: Optional[CustomerData] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

"""
PayStack transaction models.

This module defines the request values and builders for initializing,
charging and partially debiting transactions, and the response shapes
returned by the transaction routes.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import Field, field_validator

from paystack_api.models.base import PayStackModel, PayStackRequest, RequestBuilder, check_amount
from paystack_api.models.common import Authorization, CustomerData
from paystack_api.models.enums import BearerType, Channel, Currency, TransactionStatus, tolerant


class TransactionRequest(PayStackRequest):
    """Body of ``POST /transaction/initialize``."""

    amount: str = Field(..., description="Amount in the currency subunit (kobo, pesewas, cents)")
    email: str = Field(..., min_length=3, description="Customer email address")
    currency: Optional[Currency] = Field(None, description="Transaction currency")
    reference: Optional[str] = Field(None, description="Unique transaction reference")
    callback_url: Optional[str] = Field(None, description="URL to redirect to after payment")
    plan: Optional[str] = Field(None, description="Plan code for subscriptions")
    invoice_limit: Optional[int] = Field(None, ge=1, description="Number of times to charge on the plan")
    metadata: Optional[Dict[str, Any]] = Field(None, description="Additional metadata")
    channels: Optional[List[Channel]] = Field(None, description="Channels to offer the customer")
    split_code: Optional[str] = Field(None, description="Transaction split code")
    subaccount: Optional[str] = Field(None, description="Subaccount code that owns the payment")
    transaction_charge: Optional[int] = Field(None, ge=0, description="Flat fee overriding the split")
    bearer: Optional[BearerType] = Field(None, description="Who bears the PayStack charges")

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v):
        return check_amount(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        if "@" not in v:
            raise ValueError("email must contain '@'")
        return v


class TransactionRequestBuilder(RequestBuilder):
    """Builder for :class:`TransactionRequest`."""

    request_model = TransactionRequest

    def amount(self, amount: Union[str, int]) -> "TransactionRequestBuilder":
        return self._set("amount", None if amount is None else str(amount))

    def email(self, email: str) -> "TransactionRequestBuilder":
        return self._set("email", email)

    def currency(self, currency: Currency) -> "TransactionRequestBuilder":
        return self._set("currency", currency)

    def reference(self, reference: str) -> "TransactionRequestBuilder":
        return self._set("reference", reference)

    def callback_url(self, callback_url: str) -> "TransactionRequestBuilder":
        return self._set("callback_url", callback_url)

    def plan(self, plan: str) -> "TransactionRequestBuilder":
        return self._set("plan", plan)

    def invoice_limit(self, invoice_limit: int) -> "TransactionRequestBuilder":
        return self._set("invoice_limit", invoice_limit)

    def metadata(self, metadata: Dict[str, Any]) -> "TransactionRequestBuilder":
        return self._set("metadata", metadata)

    def channels(self, channels: List[Channel]) -> "TransactionRequestBuilder":
        return self._set("channels", None if channels is None else list(channels))

    def split_code(self, split_code: str) -> "TransactionRequestBuilder":
        return self._set("split_code", split_code)

    def subaccount(self, subaccount: str) -> "TransactionRequestBuilder":
        return self._set("subaccount", subaccount)

    def transaction_charge(self, transaction_charge: int) -> "TransactionRequestBuilder":
        return self._set("transaction_charge", transaction_charge)

    def bearer(self, bearer: BearerType) -> "TransactionRequestBuilder":
        return self._set("bearer", bearer)


class ChargeRequest(PayStackRequest):
    """Body of ``POST /transaction/charge_authorization``."""

    email: str = Field(..., min_length=3, description="Customer email address")
    amount: str = Field(..., description="Amount in the currency subunit")
    authorization_code: str = Field(..., min_length=1, description="Reusable authorization code")
    reference: Optional[str] = None
    currency: Optional[Currency] = None
    metadata: Optional[Dict[str, Any]] = None
    channels: Optional[List[Channel]] = None
    subaccount: Optional[str] = None
    transaction_charge: Optional[int] = Field(None, ge=0)
    bearer: Optional[BearerType] = None
    queue: Optional[bool] = Field(None, description="Queue the charge when running bulk charges")

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v):
        return check_amount(v)


class ChargeRequestBuilder(RequestBuilder):
    """Builder for :class:`ChargeRequest`."""

    request_model = ChargeRequest

    def email(self, email: str) -> "ChargeRequestBuilder":
        return self._set("email", email)

    def amount(self, amount: Union[str, int]) -> "ChargeRequestBuilder":
        return self._set("amount", None if amount is None else str(amount))

    def authorization_code(self, authorization_code: str) -> "ChargeRequestBuilder":
        return self._set("authorization_code", authorization_code)

    def reference(self, reference: str) -> "ChargeRequestBuilder":
        return self._set("reference", reference)

    def currency(self, currency: Currency) -> "ChargeRequestBuilder":
        return self._set("currency", currency)

    def metadata(self, metadata: Dict[str, Any]) -> "ChargeRequestBuilder":
        return self._set("metadata", metadata)

    def channels(self, channels: List[Channel]) -> "ChargeRequestBuilder":
        return self._set("channels", None if channels is None else list(channels))

    def subaccount(self, subaccount: str) -> "ChargeRequestBuilder":
        return self._set("subaccount", subaccount)

    def transaction_charge(self, transaction_charge: int) -> "ChargeRequestBuilder":
        return self._set("transaction_charge", transaction_charge)

    def bearer(self, bearer: BearerType) -> "ChargeRequestBuilder":
        return self._set("bearer", bearer)

    def queue(self, queue: bool) -> "ChargeRequestBuilder":
        return self._set("queue", queue)


class PartialDebitRequest(PayStackRequest):
    """Body of ``POST /transaction/partial_debit``."""

    authorization_code: str = Field(..., min_length=1)
    currency: Currency
    amount: str
    email: str = Field(..., min_length=3)
    reference: Optional[str] = None
    at_least: Optional[str] = Field(None, description="Minimum amount to charge")

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v):
        return check_amount(v)

    @field_validator("at_least")
    @classmethod
    def validate_at_least(cls, v):
        if v is None:
            return v
        return check_amount(v)


class PartialDebitRequestBuilder(RequestBuilder):
    """Builder for :class:`PartialDebitRequest`."""

    request_model = PartialDebitRequest

    def authorization_code(self, authorization_code: str) -> "PartialDebitRequestBuilder":
        return self._set("authorization_code", authorization_code)

    def currency(self, currency: Currency) -> "PartialDebitRequestBuilder":
        return self._set("currency", currency)

    def amount(self, amount: Union[str, int]) -> "PartialDebitRequestBuilder":
        return self._set("amount", None if amount is None else str(amount))

    def email(self, email: str) -> "PartialDebitRequestBuilder":
        return self._set("email", email)

    def reference(self, reference: str) -> "PartialDebitRequestBuilder":
        return self._set("reference", reference)

    def at_least(self, at_least: Union[str, int]) -> "PartialDebitRequestBuilder":
        return self._set("at_least", None if at_least is None else str(at_least))


class TransactionInitData(PayStackModel):
    """Data returned when a transaction is initialized."""

    authorization_url: str = Field(..., description="URL to redirect the customer to")
    access_code: str = Field(..., description="Access code for the checkout")
    reference: str = Field(..., description="Transaction reference")


class TransactionData(PayStackModel):
    """A transaction as returned by verify, fetch, list and charge routes."""

    id: Optional[int] = None
    status: Optional[tolerant(TransactionStatus)] = None
    reference: Optional[str] = None
    amount: Optional[int] = Field(None, description="Amount in the currency subunit")
    requested_amount: Optional[int] = None
    message: Optional[str] = None
    gateway_response: Optional[str] = None
    paid_at: Optional[str] = None
    created_at: Optional[str] = Field(None, alias="createdAt")
    channel: Optional[tolerant(Channel)] = None
    currency: Optional[tolerant(Currency)] = None
    ip_address: Optional[str] = None
    metadata: Optional[Any] = None
    fees: Optional[int] = None
    plan: Optional[Any] = None
    customer: Optional[CustomerData] = None
    authorization: Optional[Authorization] = None


class TimelineEvent(PayStackModel):
    """One entry in a transaction timeline history."""

    action_type: Optional[str] = Field(None, alias="type")
    message: Optional[str] = None
    time: Optional[int] = None


class TransactionTimelineData(PayStackModel):
    """Steps the customer went through while paying."""

    time_spent: Optional[int] = None
    attempts: Optional[int] = None
    authentication: Optional[str] = None
    errors: Optional[int] = None
    success: Optional[bool] = None
    mobile: Optional[bool] = None
    input: Optional[List[Any]] = None
    channel: Optional[str] = None
    history: Optional[List[TimelineEvent]] = None


class CurrencyVolume(PayStackModel):
    """Amount grouped by currency."""

    currency: tolerant(Currency)
    amount: int


class TransactionTotalsData(PayStackModel):
    """Totals received on the integration."""

    total_transactions: Optional[int] = None
    unique_customers: Optional[int] = None
    total_volume: Optional[int] = None
    total_volume_by_currency: Optional[List[CurrencyVolume]] = None
    pending_transfers: Optional[int] = None
    pending_transfers_by_currency: Optional[List[CurrencyVolume]] = None


class ExportTransactionData(PayStackModel):
    """Location of an exported transactions file."""

    path: str
    expires_at: Optional[str] = Field(None, alias="expiresAt")

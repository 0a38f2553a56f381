"""
Plan models for recurring billing.
"""

from typing import List, Optional, Union

from pydantic import Field, field_validator

from paystack_api.models.base import PayStackModel, PayStackRequest, RequestBuilder, check_amount
from paystack_api.models.enums import Currency, Domain, Interval, tolerant


class PlanRequest(PayStackRequest):
    """Body of ``POST /plan``."""

    name: str = Field(..., min_length=1)
    amount: str = Field(..., description="Amount in the currency subunit")
    interval: Interval
    description: Optional[str] = None
    send_invoices: Optional[bool] = None
    send_sms: Optional[bool] = None
    currency: Optional[Currency] = None
    invoice_limit: Optional[int] = Field(None, ge=0)

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v):
        return check_amount(v)


class PlanRequestBuilder(RequestBuilder):
    request_model = PlanRequest

    def name(self, name: str) -> "PlanRequestBuilder":
        return self._set("name", name)

    def amount(self, amount: Union[str, int]) -> "PlanRequestBuilder":
        return self._set("amount", None if amount is None else str(amount))

    def interval(self, interval: Interval) -> "PlanRequestBuilder":
        return self._set("interval", interval)

    def description(self, description: str) -> "PlanRequestBuilder":
        return self._set("description", description)

    def send_invoices(self, send_invoices: bool) -> "PlanRequestBuilder":
        return self._set("send_invoices", send_invoices)

    def send_sms(self, send_sms: bool) -> "PlanRequestBuilder":
        return self._set("send_sms", send_sms)

    def currency(self, currency: Currency) -> "PlanRequestBuilder":
        return self._set("currency", currency)

    def invoice_limit(self, invoice_limit: int) -> "PlanRequestBuilder":
        return self._set("invoice_limit", invoice_limit)


class UpdatePlanRequest(PayStackRequest):
    """Body of ``PUT /plan/{id_or_code}``."""

    name: Optional[str] = None
    amount: Optional[str] = None
    interval: Optional[Interval] = None
    description: Optional[str] = None
    send_invoices: Optional[bool] = None
    send_sms: Optional[bool] = None
    currency: Optional[Currency] = None
    invoice_limit: Optional[int] = Field(None, ge=0)
    update_existing_subscriptions: Optional[bool] = None

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v):
        if v is None:
            return v
        return check_amount(v)


class UpdatePlanRequestBuilder(RequestBuilder):
    request_model = UpdatePlanRequest

    def name(self, name: str) -> "UpdatePlanRequestBuilder":
        return self._set("name", name)

    def amount(self, amount: Union[str, int]) -> "UpdatePlanRequestBuilder":
        return self._set("amount", None if amount is None else str(amount))

    def interval(self, interval: Interval) -> "UpdatePlanRequestBuilder":
        return self._set("interval", interval)

    def description(self, description: str) -> "UpdatePlanRequestBuilder":
        return self._set("description", description)

    def send_invoices(self, send_invoices: bool) -> "UpdatePlanRequestBuilder":
        return self._set("send_invoices", send_invoices)

    def send_sms(self, send_sms: bool) -> "UpdatePlanRequestBuilder":
        return self._set("send_sms", send_sms)

    def currency(self, currency: Currency) -> "UpdatePlanRequestBuilder":
        return self._set("currency", currency)

    def invoice_limit(self, invoice_limit: int) -> "UpdatePlanRequestBuilder":
        return self._set("invoice_limit", invoice_limit)

    def update_existing_subscriptions(self, update: bool) -> "UpdatePlanRequestBuilder":
        return self._set("update_existing_subscriptions", update)


class PlanData(PayStackModel):
    """A plan as returned by the plan routes."""

    id: Optional[int] = None
    plan_code: Optional[str] = None
    name: str
    description: Optional[str] = None
    amount: int
    interval: tolerant(Interval)
    currency: Optional[tolerant(Currency)] = None
    integration: Optional[int] = None
    domain: Optional[tolerant(Domain)] = None
    send_invoices: Optional[bool] = None
    send_sms: Optional[bool] = None
    hosted_page: Optional[bool] = None
    hosted_page_url: Optional[str] = None
    hosted_page_summary: Optional[str] = None
    invoice_limit: Optional[int] = None
    is_deleted: Optional[bool] = None
    is_archived: Optional[bool] = None
    subscriptions: Optional[List[dict]] = None
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")

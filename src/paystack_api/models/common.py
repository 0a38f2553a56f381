"""
Response shapes embedded in several resources.
"""

from typing import Any, Optional

from pydantic import Field

from paystack_api.models.base import PayStackModel
from paystack_api.models.enums import Domain, RiskAction, tolerant


class Authorization(PayStackModel):
    """Card or bank authorization attached to a transaction."""

    authorization_code: Optional[str] = None
    bin: Optional[str] = None
    last4: Optional[str] = None
    exp_month: Optional[str] = None
    exp_year: Optional[str] = None
    channel: Optional[str] = None
    card_type: Optional[str] = None
    bank: Optional[str] = None
    country_code: Optional[str] = None
    brand: Optional[str] = None
    reusable: Optional[bool] = None
    signature: Optional[str] = None
    account_name: Optional[str] = None


class CustomerData(PayStackModel):
    """A customer record as returned by the customer and transaction routes."""

    id: Optional[int] = None
    customer_code: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    metadata: Optional[Any] = None
    risk_action: Optional[tolerant(RiskAction)] = None
    international_format_phone: Optional[str] = None
    integration: Optional[int] = None
    domain: Optional[tolerant(Domain)] = None
    identified: Optional[bool] = None
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")

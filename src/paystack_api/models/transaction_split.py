"""
Transaction split models.

A split shares the settlement of a transaction between the main account and
one or more subaccounts, either by percentage or by flat amounts.
"""

from decimal import Decimal
from typing import List, Optional, Union

from pydantic import Field

from paystack_api.models.base import JsonDecimal, PayStackModel, PayStackRequest, RequestBuilder
from paystack_api.models.enums import BearerType, Currency, Domain, SplitType, tolerant
from paystack_api.models.subaccount import SubaccountData


class SubaccountShare(PayStackRequest):
    """A subaccount and its share of a split."""

    subaccount: str = Field(..., min_length=1, description="Subaccount code")
    share: JsonDecimal = Field(..., ge=0, description="Percentage or flat amount, per the split type")


class SubaccountShareBuilder(RequestBuilder):
    request_model = SubaccountShare

    def subaccount(self, subaccount: str) -> "SubaccountShareBuilder":
        return self._set("subaccount", subaccount)

    def share(self, share: Union[Decimal, int, str]) -> "SubaccountShareBuilder":
        return self._set("share", share)


class RemoveSubaccountRequest(PayStackRequest):
    """Body of ``POST /split/{id}/subaccount/remove``."""

    subaccount: str = Field(..., min_length=1)


class RemoveSubaccountRequestBuilder(RequestBuilder):
    request_model = RemoveSubaccountRequest

    def subaccount(self, subaccount: str) -> "RemoveSubaccountRequestBuilder":
        return self._set("subaccount", subaccount)


class TransactionSplitRequest(PayStackRequest):
    """Body of ``POST /split``."""

    name: str = Field(..., min_length=1)
    split_type: SplitType = Field(..., alias="type")
    currency: Currency
    subaccounts: List[SubaccountShare] = Field(..., min_length=1)
    bearer_type: BearerType
    bearer_subaccount: str


class TransactionSplitRequestBuilder(RequestBuilder):
    request_model = TransactionSplitRequest

    def name(self, name: str) -> "TransactionSplitRequestBuilder":
        return self._set("name", name)

    def split_type(self, split_type: SplitType) -> "TransactionSplitRequestBuilder":
        return self._set("split_type", split_type)

    def currency(self, currency: Currency) -> "TransactionSplitRequestBuilder":
        return self._set("currency", currency)

    def subaccounts(self, subaccounts: List[SubaccountShare]) -> "TransactionSplitRequestBuilder":
        return self._set("subaccounts", None if subaccounts is None else list(subaccounts))

    def bearer_type(self, bearer_type: BearerType) -> "TransactionSplitRequestBuilder":
        return self._set("bearer_type", bearer_type)

    def bearer_subaccount(self, bearer_subaccount: str) -> "TransactionSplitRequestBuilder":
        return self._set("bearer_subaccount", bearer_subaccount)


class UpdateTransactionSplitRequest(PayStackRequest):
    """Body of ``PUT /split/{id}``."""

    name: str = Field(..., min_length=1)
    active: bool
    bearer_type: Optional[BearerType] = None
    bearer_subaccount: Optional[str] = None


class UpdateTransactionSplitRequestBuilder(RequestBuilder):
    request_model = UpdateTransactionSplitRequest

    def name(self, name: str) -> "UpdateTransactionSplitRequestBuilder":
        return self._set("name", name)

    def active(self, active: bool) -> "UpdateTransactionSplitRequestBuilder":
        return self._set("active", active)

    def bearer_type(self, bearer_type: BearerType) -> "UpdateTransactionSplitRequestBuilder":
        return self._set("bearer_type", bearer_type)

    def bearer_subaccount(self, bearer_subaccount: str) -> "UpdateTransactionSplitRequestBuilder":
        return self._set("bearer_subaccount", bearer_subaccount)


class SplitSubaccount(PayStackModel):
    """A subaccount entry inside a split."""

    subaccount: SubaccountData
    share: Decimal


class TransactionSplitData(PayStackModel):
    """A transaction split as returned by the split routes."""

    id: int
    name: str
    split_type: tolerant(SplitType) = Field(..., alias="type")
    currency: tolerant(Currency)
    split_code: str
    integration: Optional[int] = None
    domain: Optional[tolerant(Domain)] = None
    active: Optional[bool] = None
    bearer_type: Optional[tolerant(BearerType)] = None
    bearer_subaccount: Optional[int] = None
    is_dynamic: Optional[bool] = None
    subaccounts: Optional[List[SplitSubaccount]] = None
    total_subaccounts: Optional[int] = None
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")

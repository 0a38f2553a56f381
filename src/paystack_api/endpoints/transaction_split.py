"""
Transaction split endpoints.

The split route lets a merchant share the settlement of a transaction
between their payout account and one or more subaccounts.
"""

from typing import Any, List, Optional

from paystack_api.endpoints.base import BaseEndpoint, build_query
from paystack_api.models.response import PayStackResponse
from paystack_api.models.transaction_split import (
    RemoveSubaccountRequest,
    SubaccountShare,
    TransactionSplitData,
    TransactionSplitRequest,
    UpdateTransactionSplitRequest,
)


class TransactionSplitEndpoints(BaseEndpoint):
    """Operations on ``/split``."""

    resource_path = "/split"

    def create_transaction_split(self, request: TransactionSplitRequest) -> PayStackResponse[TransactionSplitData]:
        """Create a split payment on the integration."""
        return self._post(self._url(), TransactionSplitData, request)

    def list_transaction_splits(
        self,
        name: Optional[str] = None,
        active: Optional[bool] = None,
    ) -> PayStackResponse[List[TransactionSplitData]]:
        """
        List the transaction splits available on the integration.

        Args:
            name: Only splits with this name
            active: Only active (True) or inactive (False) splits
        """
        return self._get(self._url(), List[TransactionSplitData], build_query(name=name, active=active))

    def fetch_transaction_split(self, split_id: str) -> PayStackResponse[TransactionSplitData]:
        return self._get(self._url(split_id), TransactionSplitData)

    def update_transaction_split(
        self,
        split_id: str,
        request: UpdateTransactionSplitRequest,
    ) -> PayStackResponse[TransactionSplitData]:
        """Update the name, status or bearer of a split."""
        return self._put(self._url(split_id), TransactionSplitData, request)

    def add_or_update_subaccount_split(
        self,
        split_id: str,
        share: SubaccountShare,
    ) -> PayStackResponse[TransactionSplitData]:
        """Add a subaccount to a split, or change the share of one already in it."""
        return self._post(self._url(split_id, "subaccount", "add"), TransactionSplitData, share)

    def remove_subaccount_from_transaction_split(
        self,
        split_id: str,
        request: RemoveSubaccountRequest,
    ) -> PayStackResponse[Any]:
        return self._post(self._url(split_id, "subaccount", "remove"), Any, request)

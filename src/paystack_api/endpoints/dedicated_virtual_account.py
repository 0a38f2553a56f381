"""
Dedicated virtual account endpoints.

Lets Nigerian and Ghanaian merchants manage account numbers dedicated to
individual customers.
"""

from typing import List, Optional

from paystack_api.endpoints.base import BaseEndpoint, build_query
from paystack_api.models.dedicated_virtual_account import (
    DedicatedVirtualAccountData,
    DedicatedVirtualAccountRequest,
)
from paystack_api.models.enums import Currency
from paystack_api.models.response import PayStackResponse


class DedicatedVirtualAccountEndpoints(BaseEndpoint):
    """Operations on ``/dedicated_account``."""

    resource_path = "/dedicated_account"

    def create_dedicated_virtual_account(
        self,
        request: DedicatedVirtualAccountRequest,
    ) -> PayStackResponse[DedicatedVirtualAccountData]:
        """Create a dedicated virtual account for an existing customer."""
        return self._post(self._url(), DedicatedVirtualAccountData, request)

    def list_dedicated_virtual_accounts(
        self,
        active: Optional[bool] = None,
        currency: Optional[Currency] = None,
    ) -> PayStackResponse[List[DedicatedVirtualAccountData]]:
        return self._get(
            self._url(),
            List[DedicatedVirtualAccountData],
            build_query(active=active, currency=currency),
        )

    def fetch_dedicated_virtual_account(self, account_id: int) -> PayStackResponse[DedicatedVirtualAccountData]:
        return self._get(self._url(account_id), DedicatedVirtualAccountData)

    def deactivate_dedicated_virtual_account(self, account_id: int) -> PayStackResponse[DedicatedVirtualAccountData]:
        return self._delete(self._url(account_id), DedicatedVirtualAccountData)

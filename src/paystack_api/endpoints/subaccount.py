"""
Subaccount endpoints.

Subaccounts are the settlement accounts a payment can be split with.
"""

from typing import List, Optional, Union

from paystack_api.endpoints.base import BaseEndpoint, build_query
from paystack_api.models.response import PayStackResponse
from paystack_api.models.subaccount import SubaccountData, SubaccountRequest, UpdateSubaccountRequest


class SubaccountEndpoints(BaseEndpoint):
    """Operations on ``/subaccount``."""

    resource_path = "/subaccount"

    def create_subaccount(self, request: SubaccountRequest) -> PayStackResponse[SubaccountData]:
        """Create a subaccount on the integration."""
        return self._post(self._url(), SubaccountData, request)

    def list_subaccounts(
        self,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
    ) -> PayStackResponse[List[SubaccountData]]:
        return self._get(self._url(), List[SubaccountData], build_query(perPage=per_page, page=page))

    def fetch_subaccount(self, id_or_code: Union[int, str]) -> PayStackResponse[SubaccountData]:
        """Get a subaccount by its ID or subaccount code."""
        return self._get(self._url(id_or_code), SubaccountData)

    def update_subaccount(
        self,
        id_or_code: Union[int, str],
        request: UpdateSubaccountRequest,
    ) -> PayStackResponse[SubaccountData]:
        return self._put(self._url(id_or_code), SubaccountData, request)

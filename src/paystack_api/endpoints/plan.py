"""
Plan endpoints for recurring billing.
"""

from typing import Any, List, Optional, Union

from paystack_api.endpoints.base import BaseEndpoint, build_query
from paystack_api.models.enums import Interval, PlanStatus
from paystack_api.models.plan import PlanData, PlanRequest, UpdatePlanRequest
from paystack_api.models.response import PayStackResponse


class PlanEndpoints(BaseEndpoint):
    """Operations on ``/plan``."""

    resource_path = "/plan"

    DEFAULT_PER_PAGE = 50
    DEFAULT_PAGE = 1

    def create_plan(self, request: PlanRequest) -> PayStackResponse[PlanData]:
        """Create a plan on the integration."""
        return self._post(self._url(), PlanData, request)

    def list_plans(
        self,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
        status: Optional[PlanStatus] = None,
        interval: Optional[Interval] = None,
        amount: Optional[int] = None,
    ) -> PayStackResponse[List[PlanData]]:
        """
        List plans available on the integration.

        Args:
            per_page: Records per page, 50 when omitted
            page: Page to retrieve, 1 when omitted
            status: Only plans with this status
            interval: Only plans with this interval
            amount: Only plans with this amount, in the currency subunit
        """
        query = build_query(
            perPage=self.DEFAULT_PER_PAGE if per_page is None else per_page,
            page=self.DEFAULT_PAGE if page is None else page,
            status=status,
            interval=interval,
            amount=amount,
        )
        return self._get(self._url(), List[PlanData], query)

    def fetch_plan(self, id_or_code: Union[int, str]) -> PayStackResponse[PlanData]:
        return self._get(self._url(id_or_code), PlanData)

    def update_plan(self, id_or_code: Union[int, str], request: UpdatePlanRequest) -> PayStackResponse[Any]:
        return self._put(self._url(id_or_code), Any, request)

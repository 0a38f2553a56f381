"""
Customer endpoints.
"""

from typing import List, Optional

from aws_lambda_powertools import Logger

from paystack_api.endpoints.base import BaseEndpoint, build_query
from paystack_api.models.common import CustomerData
from paystack_api.models.customer import CreateCustomerRequest, RiskActionRequest, UpdateCustomerRequest
from paystack_api.models.response import PayStackResponse
from paystack_api.utils import mask_email


logger = Logger(child=True)


class CustomerEndpoints(BaseEndpoint):
    """Operations on ``/customer``."""

    resource_path = "/customer"

    def create_customer(self, request: CreateCustomerRequest) -> PayStackResponse[CustomerData]:
        """
        Create a customer on the integration.

        Args:
            request: Finalized customer request; only ``email`` is required
        """
        logger.info("Creating customer", extra={"email": mask_email(request.email)})
        return self._post(self._url(), CustomerData, request)

    def list_customers(
        self,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
    ) -> PayStackResponse[List[CustomerData]]:
        return self._get(self._url(), List[CustomerData], build_query(perPage=per_page, page=page))

    def fetch_customer(self, email_or_code: str) -> PayStackResponse[CustomerData]:
        """Get a customer by email address or customer code."""
        return self._get(self._url(email_or_code), CustomerData)

    def update_customer(self, customer_code: str, request: UpdateCustomerRequest) -> PayStackResponse[CustomerData]:
        return self._put(self._url(customer_code), CustomerData, request)

    def set_risk_action(self, request: RiskActionRequest) -> PayStackResponse[CustomerData]:
        """Whitelist or blacklist a customer."""
        return self._post(self._url("set_risk_action"), CustomerData, request)

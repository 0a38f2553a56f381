"""
Apple Pay endpoints.

Registers the top-level domains or subdomains an Apple Pay checkout is
served from.
"""

from typing import Any

from paystack_api.endpoints.base import BaseEndpoint
from paystack_api.models.apple_pay import ApplePayDomains
from paystack_api.models.response import PayStackResponse


class ApplePayEndpoints(BaseEndpoint):
    """Operations on ``/apple-pay/domain``."""

    resource_path = "/apple-pay/domain"

    def register_domain(self, domain_name: str) -> PayStackResponse[Any]:
        return self._post(self._url(), Any, body={"domainName": domain_name})

    def list_domains(self) -> PayStackResponse[ApplePayDomains]:
        return self._get(self._url(), ApplePayDomains)

    def unregister_domain(self, domain_name: str) -> PayStackResponse[Any]:
        return self._delete(self._url(), Any, body={"domainName": domain_name})

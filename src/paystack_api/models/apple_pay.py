"""
Apple Pay domain registration models.
"""

from typing import List, Optional

from pydantic import Field

from paystack_api.models.base import PayStackModel


class ApplePayDomains(PayStackModel):
    """Domains registered for Apple Pay on the integration."""

    domain_names: Optional[List[str]] = Field(None, alias="domainNames")

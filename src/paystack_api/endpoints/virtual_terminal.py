"""
Virtual terminal endpoints.
"""

from typing import Any, List, Optional

from paystack_api.endpoints.base import BaseEndpoint, build_query
from paystack_api.models.response import PayStackResponse
from paystack_api.models.virtual_terminal import VirtualTerminalData, VirtualTerminalRequest


class VirtualTerminalEndpoints(BaseEndpoint):
    """Operations on ``/virtual_terminal``."""

    resource_path = "/virtual_terminal"

    def create_virtual_terminal(self, request: VirtualTerminalRequest) -> PayStackResponse[VirtualTerminalData]:
        """Create a virtual terminal on the integration."""
        return self._post(self._url(), VirtualTerminalData, request)

    def list_virtual_terminals(
        self,
        status: Optional[str] = None,
        per_page: Optional[int] = None,
    ) -> PayStackResponse[List[VirtualTerminalData]]:
        return self._get(self._url(), List[VirtualTerminalData], build_query(status=status, perPage=per_page))

    def fetch_virtual_terminal(self, code: str) -> PayStackResponse[VirtualTerminalData]:
        return self._get(self._url(code), VirtualTerminalData)

    def deactivate_virtual_terminal(self, code: str) -> PayStackResponse[Any]:
        return self._put(self._url(code, "deactivate"), Any)

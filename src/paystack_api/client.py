"""
PayStack API Client.

``PayStackClient`` is the single entry point: it owns the API key, base URL
and transport, and exposes one endpoint module per PayStack resource.
"""

from typing import Optional

from aws_lambda_powertools import Logger

from paystack_api.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, PayStackConfig
from paystack_api.endpoints import (
    ApplePayEndpoints,
    CustomerEndpoints,
    DedicatedVirtualAccountEndpoints,
    PlanEndpoints,
    SubaccountEndpoints,
    TerminalEndpoints,
    TransactionEndpoints,
    TransactionSplitEndpoints,
    VirtualTerminalEndpoints,
)
from paystack_api.transport import HttpClient, UrllibHttpClient
from paystack_api.utils import mask_secret


logger = Logger(child=True)


class PayStackClient:
    """
    Client for the PayStack HTTP API.

    Construction never touches the network. Calls are synchronous; one client
    may be shared between threads since it holds no per-call state.

    Example:
        with PayStackClient("sk_test_xxx") as client:
            request = (
                TransactionRequestBuilder()
                .amount("10000")
                .email("customer@example.com")
                .build()
            )
            response = client.transaction.initialize_transaction(request)
            print(response.data.authorization_url)

    Attributes:
        transaction: ``/transaction`` operations
        transaction_split: ``/split`` operations
        subaccount: ``/subaccount`` operations
        customer: ``/customer`` operations
        plan: ``/plan`` operations
        terminal: ``/terminal`` operations
        virtual_terminal: ``/virtual_terminal`` operations
        dedicated_virtual_account: ``/dedicated_account`` operations
        apple_pay: ``/apple-pay/domain`` operations
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        http: Optional[HttpClient] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        """
        Initialize PayStack client.

        Args:
            api_key: PayStack secret key
            base_url: PayStack API base URL
            http: Transport to use; defaults to ``UrllibHttpClient``
            timeout: Request timeout in seconds for the default transport

        Raises:
            ValueError: If ``api_key`` is empty or only whitespace
        """
        if not api_key or not api_key.strip():
            raise ValueError("PayStack API key must not be empty")

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.http = http if http is not None else UrllibHttpClient(timeout=timeout)

        self.transaction = TransactionEndpoints(api_key, self.base_url, self.http)
        self.transaction_split = TransactionSplitEndpoints(api_key, self.base_url, self.http)
        self.subaccount = SubaccountEndpoints(api_key, self.base_url, self.http)
        self.customer = CustomerEndpoints(api_key, self.base_url, self.http)
        self.plan = PlanEndpoints(api_key, self.base_url, self.http)
        self.terminal = TerminalEndpoints(api_key, self.base_url, self.http)
        self.virtual_terminal = VirtualTerminalEndpoints(api_key, self.base_url, self.http)
        self.dedicated_virtual_account = DedicatedVirtualAccountEndpoints(api_key, self.base_url, self.http)
        self.apple_pay = ApplePayEndpoints(api_key, self.base_url, self.http)

        logger.debug(
            "PayStack client created",
            extra={"base_url": self.base_url, "api_key": mask_secret(api_key)},
        )

    @classmethod
    def from_config(cls, config: PayStackConfig, http: Optional[HttpClient] = None) -> "PayStackClient":
        """Create a client from a ``PayStackConfig``."""
        return cls(
            config.api_key,
            base_url=config.base_url,
            http=http,
            timeout=config.timeout_seconds,
        )

    def close(self) -> None:
        """Release resources held by the transport."""
        self.http.close()

    def __enter__(self) -> "PayStackClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"PayStackClient(base_url={self.base_url!r}, api_key={mask_secret(self.api_key)!r})"

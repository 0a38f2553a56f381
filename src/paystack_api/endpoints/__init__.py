"""PayStack endpoint modules, one per API resource."""

from paystack_api.endpoints.apple_pay import ApplePayEndpoints
from paystack_api.endpoints.base import BaseEndpoint
from paystack_api.endpoints.customer import CustomerEndpoints
from paystack_api.endpoints.dedicated_virtual_account import DedicatedVirtualAccountEndpoints
from paystack_api.endpoints.plan import PlanEndpoints
from paystack_api.endpoints.subaccount import SubaccountEndpoints
from paystack_api.endpoints.terminal import TerminalEndpoints
from paystack_api.endpoints.transaction import TransactionEndpoints
from paystack_api.endpoints.transaction_split import TransactionSplitEndpoints
from paystack_api.endpoints.virtual_terminal import VirtualTerminalEndpoints

__all__ = [
    "ApplePayEndpoints",
    "BaseEndpoint",
    "CustomerEndpoints",
    "DedicatedVirtualAccountEndpoints",
    "PlanEndpoints",
    "SubaccountEndpoints",
    "TerminalEndpoints",
    "TransactionEndpoints",
    "TransactionSplitEndpoints",
    "VirtualTerminalEndpoints",
]

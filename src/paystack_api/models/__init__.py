# Request values, builders and response models

from paystack_api.models.apple_pay import ApplePayDomains
from paystack_api.models.base import PayStackModel, PayStackRequest, RequestBuilder
from paystack_api.models.common import Authorization, CustomerData
from paystack_api.models.customer import (
    CreateCustomerRequest,
    CreateCustomerRequestBuilder,
    RiskActionRequest,
    RiskActionRequestBuilder,
    UpdateCustomerRequest,
    UpdateCustomerRequestBuilder,
)
from paystack_api.models.dedicated_virtual_account import (
    AccountAssignment,
    BankData,
    DedicatedVirtualAccountData,
    DedicatedVirtualAccountRequest,
    DedicatedVirtualAccountRequestBuilder,
)
from paystack_api.models.enums import (
    BearerType,
    Channel,
    Currency,
    Domain,
    Interval,
    PlanStatus,
    RiskAction,
    SplitType,
    TerminalAction,
    TerminalEventType,
    TransactionStatus,
)
from paystack_api.models.plan import (
    PlanData,
    PlanRequest,
    PlanRequestBuilder,
    UpdatePlanRequest,
    UpdatePlanRequestBuilder,
)
from paystack_api.models.response import Meta, PayStackResponse
from paystack_api.models.subaccount import (
    SubaccountData,
    SubaccountRequest,
    SubaccountRequestBuilder,
    UpdateSubaccountRequest,
    UpdateSubaccountRequestBuilder,
)
from paystack_api.models.terminal import (
    TerminalData,
    TerminalEventData,
    TerminalEventDataBuilder,
    TerminalEventRequest,
    TerminalEventRequestBuilder,
    TerminalEventResult,
    TerminalEventStatus,
    TerminalPresence,
    UpdateTerminalRequest,
    UpdateTerminalRequestBuilder,
)
from paystack_api.models.transaction import (
    ChargeRequest,
    ChargeRequestBuilder,
    CurrencyVolume,
    ExportTransactionData,
    PartialDebitRequest,
    PartialDebitRequestBuilder,
    TimelineEvent,
    TransactionData,
    TransactionInitData,
    TransactionRequest,
    TransactionRequestBuilder,
    TransactionTimelineData,
    TransactionTotalsData,
)
from paystack_api.models.transaction_split import (
    RemoveSubaccountRequest,
    RemoveSubaccountRequestBuilder,
    SplitSubaccount,
    SubaccountShare,
    SubaccountShareBuilder,
    TransactionSplitData,
    TransactionSplitRequest,
    TransactionSplitRequestBuilder,
    UpdateTransactionSplitRequest,
    UpdateTransactionSplitRequestBuilder,
)
from paystack_api.models.virtual_terminal import (
    CustomField,
    CustomFieldBuilder,
    Destination,
    DestinationBuilder,
    DestinationData,
    VirtualTerminalData,
    VirtualTerminalRequest,
    VirtualTerminalRequestBuilder,
)

"""
Enumerated values used by the PayStack API.

Each enum is a closed set whose member values are the exact strings the API
sends and accepts. Request models reject anything outside the set; response
models use :func:`tolerant` so new values added by PayStack do not break
deserialization.
"""

from enum import Enum
from typing import Annotated, Type, Union

from pydantic import Field


class Currency(str, Enum):
    """Currencies supported by PayStack."""
    NGN = "NGN"
    GHS = "GHS"
    USD = "USD"
    ZAR = "ZAR"
    KES = "KES"
    XOF = "XOF"


class Channel(str, Enum):
    """Payment channels a customer can pay through."""
    CARD = "card"
    BANK = "bank"
    USSD = "ussd"
    QR = "qr"
    MOBILE_MONEY = "mobile_money"
    BANK_TRANSFER = "bank_transfer"
    APPLE_PAY = "apple_pay"


class TransactionStatus(str, Enum):
    """PayStack transaction status enumeration."""
    SUCCESS = "success"
    ABANDONED = "abandoned"
    FAILED = "failed"
    PENDING = "pending"
    REVERSED = "reversed"
    ONGOING = "ongoing"
    PROCESSING = "processing"
    QUEUED = "queued"


class BearerType(str, Enum):
    """Who bears the PayStack charges on a split transaction."""
    SUBACCOUNT = "subaccount"
    ACCOUNT = "account"
    ALL_PROPORTIONAL = "all-proportional"
    ALL = "all"


class SplitType(str, Enum):
    """How a transaction split shares are expressed."""
    PERCENTAGE = "percentage"
    FLAT = "flat"


class Interval(str, Enum):
    """Billing interval of a plan."""
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    BIANNUALLY = "biannually"
    ANNUALLY = "annually"


class PlanStatus(str, Enum):
    """Plan status filter values."""
    ACTIVE = "active"
    ARCHIVED = "archived"
    DELETED = "deleted"


class Domain(str, Enum):
    """Integration domain a resource was created on."""
    TEST = "test"
    LIVE = "live"


class RiskAction(str, Enum):
    """Whitelist/blacklist state of a customer."""
    DEFAULT = "default"
    ALLOW = "allow"
    DENY = "deny"


class TerminalEventType(str, Enum):
    """Kind of object an event pushed to a terminal refers to."""
    INVOICE = "invoice"
    TRANSACTION = "transaction"


class TerminalAction(str, Enum):
    """Action the terminal should perform for an event."""
    PROCESS = "process"
    VIEW = "view"
    PRINT = "print"


def tolerant(enum_cls: Type[Enum]):
    """Response field type that decodes to ``enum_cls`` or keeps the raw string."""
    return Annotated[Union[enum_cls, str], Field(union_mode="left_to_right")]

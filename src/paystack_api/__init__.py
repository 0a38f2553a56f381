"""
Typed client for the PayStack payments API.

Build requests with the builders in ``paystack_api.models``, then send them
through the endpoint modules on ``PayStackClient``.
"""

from paystack_api.client import PayStackClient
from paystack_api.config import DEFAULT_BASE_URL, PayStackConfig
from paystack_api.errors import (
    PayStackAPIError,
    PayStackAuthenticationError,
    PayStackDeserializationError,
    PayStackError,
    PayStackNotFoundError,
    PayStackRateLimitError,
    PayStackTransportError,
    PayStackValidationError,
)
from paystack_api.transport import HttpClient, HttpResponse, InMemoryHttpClient, UrllibHttpClient
from paystack_api.webhook import PayStackWebhookEvent, parse_webhook_event, validate_webhook_signature

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_BASE_URL",
    "HttpClient",
    "HttpResponse",
    "InMemoryHttpClient",
    "PayStackAPIError",
    "PayStackAuthenticationError",
    "PayStackClient",
    "PayStackConfig",
    "PayStackDeserializationError",
    "PayStackError",
    "PayStackNotFoundError",
    "PayStackRateLimitError",
    "PayStackTransportError",
    "PayStackValidationError",
    "PayStackWebhookEvent",
    "UrllibHttpClient",
    "parse_webhook_event",
    "validate_webhook_signature",
]

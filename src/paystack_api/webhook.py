"""
PayStack webhook helpers.

PayStack signs every webhook body with HMAC SHA-512 using the integration's
secret key and sends the hex digest in the ``x-paystack-signature`` header.
Verify the signature against the raw body before trusting the payload.
"""

import hashlib
import hmac
import json
from datetime import datetime
from typing import Any, Dict, Optional

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from paystack_api.errors import PayStackValidationError


logger = Logger(child=True)

SIGNATURE_HEADER = "x-paystack-signature"


class PayStackWebhookEvent(BaseModel):
    """PayStack webhook event payload."""
    model_config = ConfigDict(
        str_strip_whitespace=True,
        extra="ignore",
    )

    event: str = Field(..., min_length=1, description="Event type (e.g., charge.success)")
    data: Dict[str, Any] = Field(default_factory=dict, description="Event data payload")

    @property
    def reference(self) -> Optional[str]:
        """Get transaction reference."""
        return self.data.get("reference")

    @property
    def status(self) -> Optional[str]:
        """Get transaction status."""
        return self.data.get("status")

    @property
    def amount(self) -> Optional[int]:
        """Get amount in the currency's subunit."""
        return self.data.get("amount")

    @property
    def customer_email(self) -> Optional[str]:
        customer = self.data.get("customer") or {}
        return customer.get("email")

    @property
    def paid_at(self) -> Optional[datetime]:
        """Get payment timestamp."""
        paid_at_str = self.data.get("paid_at")
        if paid_at_str:
            try:
                return datetime.fromisoformat(paid_at_str.replace("Z", "+00:00"))
            except (ValueError, AttributeError):
                pass
        return None

    def is_successful_payment(self) -> bool:
        """Check if this is a successful payment event."""
        return self.event == "charge.success" and self.status == "success"

    def is_failed_payment(self) -> bool:
        """Check if this is a failed payment event."""
        return self.event in ("charge.failed", "transfer.failed")


def validate_webhook_signature(payload: bytes, signature: str, secret_key: str) -> bool:
    """
    Validate a PayStack webhook signature.

    Args:
        payload: Raw webhook request body as bytes
        signature: Signature from the x-paystack-signature header
        secret_key: PayStack secret key for signature verification

    Returns:
        True if signature is valid, False otherwise
    """
    if not payload or not signature or not secret_key:
        return False

    try:
        expected_signature = hmac.new(
            secret_key.encode("utf-8"),
            payload,
            hashlib.sha512,
        ).hexdigest()

        valid = hmac.compare_digest(expected_signature.lower(), signature.lower())
    except (TypeError, ValueError):
        return False

    if not valid:
        logger.warning("Webhook signature mismatch")
    return valid


def parse_webhook_event(payload: bytes) -> PayStackWebhookEvent:
    """
    Parse a webhook event from raw payload.

    Raises:
        PayStackValidationError: If payload is not JSON or has no event type
    """
    try:
        data = json.loads(payload.decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PayStackValidationError(f"Invalid webhook payload: {e}", field="payload") from e

    if not isinstance(data, dict):
        raise PayStackValidationError("Invalid webhook payload: expected a JSON object", field="payload")

    try:
        return PayStackWebhookEvent.model_validate(data)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or None
        raise PayStackValidationError(f"Invalid webhook payload: {error['msg']}", field=field) from e

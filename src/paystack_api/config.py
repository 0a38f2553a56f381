"""
PayStack client configuration.

Settings can be passed directly or loaded from the environment with
``PayStackConfig.from_environment()``.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict

from paystack_api.utils import mask_secret


DEFAULT_BASE_URL = "https://api.paystack.co"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass
class PayStackConfig:
    """Connection settings for a PayStack integration."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL

    # Timeout settings
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_environment(cls) -> "PayStackConfig":
        """
        Create configuration from environment variables.

        Reads ``PAYSTACK_API_KEY`` (required), ``PAYSTACK_BASE_URL`` and
        ``PAYSTACK_TIMEOUT_SECONDS``.

        Raises:
            ValueError: If ``PAYSTACK_API_KEY`` is unset or blank, or the
                timeout is not a number.
        """
        api_key = os.environ.get("PAYSTACK_API_KEY", "")
        if not api_key.strip():
            raise ValueError("PAYSTACK_API_KEY environment variable is required")

        return cls(
            api_key=api_key,
            base_url=os.environ.get("PAYSTACK_BASE_URL", DEFAULT_BASE_URL),
            timeout_seconds=float(os.environ.get("PAYSTACK_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary, with the key masked."""
        return {
            "api_key": mask_secret(self.api_key),
            "base_url": self.base_url,
            "timeout_seconds": self.timeout_seconds,
        }

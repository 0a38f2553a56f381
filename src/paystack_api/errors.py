"""
Exception hierarchy for the PayStack client.

Four kinds of failure reach callers, each with its own class:

* ``PayStackValidationError`` - a request could not be built locally.
* ``PayStackTransportError`` - the HTTP call itself failed (DNS, refused, timeout).
* ``PayStackAPIError`` - PayStack answered with a non-2xx status.
* ``PayStackDeserializationError`` - the reply did not match the expected model.
"""

import json
from typing import Optional


class PayStackError(Exception):
    """Base exception for PayStack errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code


class PayStackValidationError(PayStackError):
    """A request value failed local validation and was never sent."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, error_code="VALIDATION_ERROR")
        self.field = field


class PayStackTransportError(PayStackError):
    """Network-level failure talking to the PayStack API."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message, error_code="NETWORK_ERROR")
        self.url = url


class PayStackAPIError(PayStackError):
    """
    PayStack responded with a non-success HTTP status.

    ``message`` is the ``message`` field of the error body when there is one,
    ``body`` is the raw response text.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        api_status: Optional[bool] = None,
        error_code: str = "API_ERROR",
    ):
        super().__init__(message, error_code=error_code, status_code=status_code)
        self.body = body
        self.api_status = api_status


class PayStackAuthenticationError(PayStackAPIError):
    """Exception for authentication failures."""

    def __init__(self, message: str, status_code: int = 401, body: str = "", api_status: Optional[bool] = None):
        super().__init__(message, status_code, body, api_status, error_code="AUTHENTICATION_ERROR")


class PayStackNotFoundError(PayStackAPIError):
    """The requested resource does not exist."""

    def __init__(self, message: str, status_code: int = 404, body: str = "", api_status: Optional[bool] = None):
        super().__init__(message, status_code, body, api_status, error_code="NOT_FOUND")


class PayStackRateLimitError(PayStackAPIError):
    """Exception for rate limit errors."""

    def __init__(self, message: str, status_code: int = 429, body: str = "", api_status: Optional[bool] = None):
        super().__init__(message, status_code, body, api_status, error_code="RATE_LIMIT_ERROR")


class PayStackDeserializationError(PayStackError):
    """The response body could not be parsed into the expected model."""

    def __init__(self, message: str, path: Optional[str] = None, body: str = ""):
        super().__init__(message, error_code="DESERIALIZATION_ERROR")
        self.path = path
        self.body = body


def api_error_from_response(status_code: int, body: str) -> PayStackAPIError:
    """
    Build the matching ``PayStackAPIError`` for a non-success response.

    Args:
        status_code: HTTP status returned by PayStack
        body: Raw response body

    Returns:
        The most specific API error subclass for the status code
    """
    api_status = None
    try:
        error_data = json.loads(body)
    except (json.JSONDecodeError, TypeError):
        error_data = None

    if isinstance(error_data, dict):
        error_message = str(error_data.get("message") or body or f"HTTP {status_code}")
        if isinstance(error_data.get("status"), bool):
            api_status = error_data["status"]
    else:
        error_message = body or f"HTTP {status_code}"

    if status_code == 401:
        return PayStackAuthenticationError(error_message, body=body, api_status=api_status)
    if status_code == 404:
        return PayStackNotFoundError(error_message, body=body, api_status=api_status)
    if status_code == 429:
        return PayStackRateLimitError(error_message, body=body, api_status=api_status)
    return PayStackAPIError(error_message, status_code, body=body, api_status=api_status)

"""
HTTP transports for the PayStack client.

Endpoint modules never talk to an HTTP library directly; they call an
``HttpClient``. A transport returns the raw status code and body for every
response it receives, including 4xx and 5xx ones, and raises
``PayStackTransportError`` only when no response was received at all.
"""

import http.client
import json
import urllib.error
import urllib.parse
import urllib.request
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from aws_lambda_powertools import Logger

from paystack_api.errors import PayStackTransportError


logger = Logger(child=True)

Query = Sequence[Tuple[str, str]]


def _decode(raw: bytes) -> str:
    # Undecodable bytes surface later as a deserialization error on the body
    return raw.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class HttpResponse:
    """Raw HTTP response handed back to the endpoint layer."""
    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class HttpClient(ABC):
    """
    Capability interface for performing HTTP calls against PayStack.

    Implementations must be safe to share between threads; the client keeps a
    single instance for all endpoint modules.
    """

    @abstractmethod
    def get(self, url: str, api_key: str, query: Optional[Query] = None) -> HttpResponse:
        """Send a GET request."""

    @abstractmethod
    def post(self, url: str, api_key: str, body: Optional[Dict[str, Any]] = None) -> HttpResponse:
        """Send a POST request with a JSON body."""

    @abstractmethod
    def put(self, url: str, api_key: str, body: Optional[Dict[str, Any]] = None) -> HttpResponse:
        """Send a PUT request with a JSON body."""

    @abstractmethod
    def delete(self, url: str, api_key: str, body: Optional[Dict[str, Any]] = None) -> HttpResponse:
        """Send a DELETE request, optionally with a JSON body."""

    def close(self) -> None:
        """Release any pooled resources held by the transport."""


class UrllibHttpClient(HttpClient):
    """
    Default transport built on ``urllib.request``.

    Attributes:
        timeout: Socket timeout in seconds for each request
    """

    DEFAULT_TIMEOUT = 30

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self.timeout = timeout

    @staticmethod
    def _get_headers(api_key: str) -> Dict[str, str]:
        """Get HTTP headers for API requests."""
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _send(
        self,
        method: str,
        url: str,
        api_key: str,
        body: Optional[Dict[str, Any]] = None,
        query: Optional[Query] = None,
    ) -> HttpResponse:
        if query:
            url = f"{url}?{urllib.parse.urlencode(list(query))}"

        request = urllib.request.Request(
            url,
            data=json.dumps(body).encode("utf-8") if body is not None else None,
            headers=self._get_headers(api_key),
            method=method,
        )

        logger.debug("Making request", extra={"method": method, "url": url})

        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                return HttpResponse(
                    status_code=response.status,
                    body=_decode(response.read()),
                )

        except urllib.error.HTTPError as e:
            # Non-2xx responses are data for the endpoint layer, not transport failures
            error_body = _decode(e.read()) if e.fp else ""
            return HttpResponse(status_code=e.code, body=error_body)

        except http.client.HTTPException as e:
            logger.warning("Malformed HTTP response", extra={"method": method, "url": url, "error": repr(e)})
            raise PayStackTransportError(f"Malformed HTTP response: {e!r}", url=url) from e

        except urllib.error.URLError as e:
            logger.warning("Network error", extra={"method": method, "url": url, "error": str(e.reason)})
            raise PayStackTransportError(f"Network error: {e.reason}", url=url) from e

        except TimeoutError as e:
            logger.warning("Request timed out", extra={"method": method, "url": url, "timeout": self.timeout})
            raise PayStackTransportError(f"Request timed out after {self.timeout}s", url=url) from e

        except OSError as e:
            logger.warning("Connection error", extra={"method": method, "url": url, "error": str(e)})
            raise PayStackTransportError(f"Connection error: {e}", url=url) from e

    def get(self, url: str, api_key: str, query: Optional[Query] = None) -> HttpResponse:
        return self._send("GET", url, api_key, query=query)

    def post(self, url: str, api_key: str, body: Optional[Dict[str, Any]] = None) -> HttpResponse:
        return self._send("POST", url, api_key, body=body if body is not None else {})

    def put(self, url: str, api_key: str, body: Optional[Dict[str, Any]] = None) -> HttpResponse:
        return self._send("PUT", url, api_key, body=body if body is not None else {})

    def delete(self, url: str, api_key: str, body: Optional[Dict[str, Any]] = None) -> HttpResponse:
        return self._send("DELETE", url, api_key, body=body)


@dataclass(frozen=True)
class RecordedRequest:
    """A call captured by :class:`InMemoryHttpClient`."""
    method: str
    url: str
    api_key: str
    body: Optional[Dict[str, Any]] = None
    query: Optional[List[Tuple[str, str]]] = None


class InMemoryHttpClient(HttpClient):
    """
    Transport that replays queued responses and records every call.

    Example:
        http = InMemoryHttpClient()
        http.queue_json({"status": True, "message": "ok", "data": {...}})
        client = PayStackClient("sk_test_xxx", http=http)
        client.transaction.verify_transaction("ref-1")
        assert http.requests[0].url.endswith("/transaction/verify/ref-1")
    """

    def __init__(self, responses: Optional[Iterable[Union[HttpResponse, Exception]]] = None):
        self.requests: List[RecordedRequest] = []
        self._responses: Deque[Union[HttpResponse, Exception]] = deque(responses or [])

    def queue(self, status_code: int = 200, body: str = "") -> "InMemoryHttpClient":
        self._responses.append(HttpResponse(status_code=status_code, body=body))
        return self

    def queue_json(self, payload: Any, status_code: int = 200) -> "InMemoryHttpClient":
        return self.queue(status_code=status_code, body=json.dumps(payload))

    def queue_error(self, error: Exception) -> "InMemoryHttpClient":
        """Make the next call raise ``error`` instead of returning a response."""
        self._responses.append(error)
        return self

    @property
    def last_request(self) -> RecordedRequest:
        return self.requests[-1]

    def _send(
        self,
        method: str,
        url: str,
        api_key: str,
        body: Optional[Dict[str, Any]] = None,
        query: Optional[Query] = None,
    ) -> HttpResponse:
        self.requests.append(RecordedRequest(
            method=method,
            url=url,
            api_key=api_key,
            body=body,
            query=list(query) if query else None,
        ))

        if not self._responses:
            raise LookupError(f"No response queued for {method} {url}")

        response = self._responses.popleft()
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, url: str, api_key: str, query: Optional[Query] = None) -> HttpResponse:
        return self._send("GET", url, api_key, query=query)

    def post(self, url: str, api_key: str, body: Optional[Dict[str, Any]] = None) -> HttpResponse:
        return self._send("POST", url, api_key, body=body)

    def put(self, url: str, api_key: str, body: Optional[Dict[str, Any]] = None) -> HttpResponse:
        return self._send("PUT", url, api_key, body=body)

    def delete(self, url: str, api_key: str, body: Optional[Dict[str, Any]] = None) -> HttpResponse:
        return self._send("DELETE", url, api_key, body=body)

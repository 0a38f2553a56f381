"""
Shared call path for PayStack endpoint modules.

Every endpoint operation goes through ``BaseEndpoint._send``: one HTTP call
through the transport, a status check, then deserialization into
``PayStackResponse[T]``. Nothing is retried or cached.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from paystack_api.errors import PayStackDeserializationError, api_error_from_response
from paystack_api.models.base import PayStackRequest
from paystack_api.models.response import PayStackResponse
from paystack_api.transport import HttpClient, HttpResponse


logger = Logger(child=True)


def build_query(**params: Any) -> List[Tuple[str, str]]:
    """Turn keyword arguments into query pairs, dropping ``None`` values."""
    query = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, Enum):
            value = value.value
        query.append((key, str(value)))
    return query


def parse_response(body: str, response_type: Any) -> PayStackResponse:
    """
    Deserialize a raw body into ``PayStackResponse[response_type]``.

    Raises:
        PayStackDeserializationError: If the body is not JSON or does not match
            the model; ``path`` holds the dotted location of the first problem.
    """
    try:
        return PayStackResponse[response_type].model_validate_json(body)
    except ValidationError as e:
        error = e.errors()[0]
        path = ".".join(str(part) for part in error["loc"])
        raise PayStackDeserializationError(
            f"Response parsing error at '{path or '<root>'}': {error['msg']}",
            path=path or None,
            body=body,
        ) from e


class BaseEndpoint:
    """
    Base class for one PayStack API resource.

    Attributes:
        resource_path: Path of the resource under the API base URL
        base_url: Fully qualified URL of the resource
    """

    resource_path = ""

    def __init__(self, api_key: str, base_url: str, http: HttpClient):
        self._api_key = api_key
        self._http = http
        self.base_url = f"{base_url.rstrip('/')}{self.resource_path}"

    def _url(self, *segments: Any) -> str:
        """Join path segments onto the resource URL, escaping each one."""
        if not segments:
            return self.base_url
        escaped = [quote(str(segment), safe="") for segment in segments]
        return "/".join([self.base_url, *escaped])

    def _send(
        self,
        method: str,
        url: str,
        response_type: Any,
        body: Optional[Dict[str, Any]] = None,
        query: Optional[List[Tuple[str, str]]] = None,
    ) -> PayStackResponse:
        if method == "GET":
            response = self._http.get(url, self._api_key, query)
        elif method == "POST":
            response = self._http.post(url, self._api_key, body)
        elif method == "PUT":
            response = self._http.put(url, self._api_key, body)
        elif method == "DELETE":
            response = self._http.delete(url, self._api_key, body)
        else:
            raise ValueError(f"Unsupported HTTP method: {method}")

        return self._handle_response(method, url, response, response_type)

    def _handle_response(
        self,
        method: str,
        url: str,
        response: HttpResponse,
        response_type: Any,
    ) -> PayStackResponse:
        if not response.ok:
            error = api_error_from_response(response.status_code, response.body)
            logger.error(
                "PayStack API error",
                extra={
                    "method": method,
                    "url": url,
                    "status_code": response.status_code,
                    "error_code": error.error_code,
                    "error": error.message,
                },
            )
            raise error

        try:
            parsed = parse_response(response.body, response_type)
        except PayStackDeserializationError as e:
            logger.error(
                "Unable to parse PayStack response",
                extra={"method": method, "url": url, "path": e.path},
            )
            raise

        logger.debug(
            "PayStack request completed",
            extra={"method": method, "url": url, "status_code": response.status_code},
        )
        return parsed

    def _get(self, url: str, response_type: Any, query: Optional[List[Tuple[str, str]]] = None) -> PayStackResponse:
        return self._send("GET", url, response_type, query=query)

    def _post(self, url: str, response_type: Any, request: Optional[PayStackRequest] = None,
              body: Optional[Dict[str, Any]] = None) -> PayStackResponse:
        if request is not None:
            body = request.to_payload()
        return self._send("POST", url, response_type, body=body)

    def _put(self, url: str, response_type: Any, request: Optional[PayStackRequest] = None,
             body: Optional[Dict[str, Any]] = None) -> PayStackResponse:
        if request is not None:
            body = request.to_payload()
        return self._send("PUT", url, response_type, body=body)

    def _delete(self, url: str, response_type: Any, body: Optional[Dict[str, Any]] = None) -> PayStackResponse:
        return self._send("DELETE", url, response_type, body=body)

"""
Unit tests for the HTTP transports.
"""

import io
import json
import urllib.error
from http.client import IncompleteRead, RemoteDisconnected
from unittest.mock import MagicMock, Mock, patch

import pytest

from paystack_api.client import PayStackClient
from paystack_api.errors import (
    PayStackAPIError,
    PayStackAuthenticationError,
    PayStackDeserializationError,
    PayStackTransportError,
)
from paystack_api.transport import HttpResponse, InMemoryHttpClient, UrllibHttpClient

from conftest import BASE_URL, TEST_API_KEY


def mock_urlopen_response(payload, status=200):
    mock_response = MagicMock()
    mock_response.status = status
    mock_response.read.return_value = json.dumps(payload).encode("utf-8")
    mock_response.__enter__ = Mock(return_value=mock_response)
    mock_response.__exit__ = Mock(return_value=False)
    return mock_response


def http_error(status_code, payload):
    return urllib.error.HTTPError(
        url=f"{BASE_URL}/transaction/verify/ref",
        code=status_code,
        msg="error",
        hdrs={},
        fp=io.BytesIO(json.dumps(payload).encode("utf-8")),
    )


class TestUrllibHttpClient:
    """Test the default urllib transport."""

    @pytest.fixture
    def transport(self):
        return UrllibHttpClient(timeout=15)

    @patch('urllib.request.urlopen')
    def test_get_sends_bearer_auth_and_query(self, mock_urlopen, transport):
        mock_urlopen.return_value = mock_urlopen_response({"status": True, "message": "ok", "data": []})

        response = transport.get(f"{BASE_URL}/transaction", TEST_API_KEY, [("perPage", "10"), ("status", "success")])

        assert response.status_code == 200
        assert response.ok
        assert json.loads(response.body)["status"] is True

        request = mock_urlopen.call_args[0][0]
        assert request.get_method() == "GET"
        assert request.full_url == f"{BASE_URL}/transaction?perPage=10&status=success"
        assert request.get_header("Authorization") == f"Bearer {TEST_API_KEY}"
        assert request.data is None
        assert mock_urlopen.call_args[1]["timeout"] == 15

    @patch('urllib.request.urlopen')
    def test_post_sends_json_body(self, mock_urlopen, transport):
        mock_urlopen.return_value = mock_urlopen_response({"status": True, "message": "ok"})

        transport.post(f"{BASE_URL}/customer", TEST_API_KEY, {"email": "a@b.com"})

        request = mock_urlopen.call_args[0][0]
        assert request.get_method() == "POST"
        assert json.loads(request.data.decode("utf-8")) == {"email": "a@b.com"}
        assert request.get_header("Content-type") == "application/json"

    @patch('urllib.request.urlopen')
    def test_put_without_body_sends_empty_object(self, mock_urlopen, transport):
        mock_urlopen.return_value = mock_urlopen_response({"status": True, "message": "ok"})

        transport.put(f"{BASE_URL}/virtual_terminal/VT_1/deactivate", TEST_API_KEY)

        request = mock_urlopen.call_args[0][0]
        assert request.get_method() == "PUT"
        assert request.data == b"{}"

    @patch('urllib.request.urlopen')
    def test_delete_method(self, mock_urlopen, transport):
        mock_urlopen.return_value = mock_urlopen_response({"status": True, "message": "ok"})

        transport.delete(f"{BASE_URL}/dedicated_account/1", TEST_API_KEY)

        assert mock_urlopen.call_args[0][0].get_method() == "DELETE"

    @patch('urllib.request.urlopen')
    def test_http_error_returned_as_response(self, mock_urlopen, transport):
        mock_urlopen.side_effect = http_error(401, {"status": False, "message": "Invalid key"})

        response = transport.get(f"{BASE_URL}/transaction/verify/ref", TEST_API_KEY)

        assert response.status_code == 401
        assert not response.ok
        assert json.loads(response.body)["message"] == "Invalid key"

    @patch('urllib.request.urlopen')
    def test_timeout_raises_transport_error(self, mock_urlopen, transport):
        mock_urlopen.side_effect = TimeoutError("timed out")

        with pytest.raises(PayStackTransportError) as exc_info:
            transport.get(f"{BASE_URL}/transaction", TEST_API_KEY)

        assert exc_info.value.error_code == "NETWORK_ERROR"
        assert exc_info.value.url == f"{BASE_URL}/transaction"

    @patch('urllib.request.urlopen')
    def test_url_error_raises_transport_error(self, mock_urlopen, transport):
        mock_urlopen.side_effect = urllib.error.URLError("Name or service not known")

        with pytest.raises(PayStackTransportError) as exc_info:
            transport.get(f"{BASE_URL}/transaction", TEST_API_KEY)

        assert "Name or service not known" in exc_info.value.message

    @patch('urllib.request.urlopen')
    def test_connection_reset_raises_transport_error(self, mock_urlopen, transport):
        mock_urlopen.side_effect = ConnectionResetError("reset by peer")

        with pytest.raises(PayStackTransportError):
            transport.post(f"{BASE_URL}/customer", TEST_API_KEY, {})

    @patch('urllib.request.urlopen')
    def test_non_utf8_body_is_replaced_not_raised(self, mock_urlopen, transport):
        mock_response = mock_urlopen_response({})
        mock_response.read.return_value = b"\xff\xfe not utf8"
        mock_urlopen.return_value = mock_response

        response = transport.get(f"{BASE_URL}/transaction", TEST_API_KEY)

        assert response.status_code == 200
        assert response.body.endswith(" not utf8")
        assert "�" in response.body

    @patch('urllib.request.urlopen')
    def test_non_utf8_error_body_is_replaced_not_raised(self, mock_urlopen, transport):
        mock_urlopen.side_effect = urllib.error.HTTPError(
            url=f"{BASE_URL}/transaction",
            code=502,
            msg="Bad Gateway",
            hdrs={},
            fp=io.BytesIO(b"\xff\xfe gateway"),
        )

        response = transport.get(f"{BASE_URL}/transaction", TEST_API_KEY)

        assert response.status_code == 502
        assert response.body.endswith(" gateway")

    @patch('urllib.request.urlopen')
    def test_incomplete_read_raises_transport_error(self, mock_urlopen, transport):
        mock_response = mock_urlopen_response({})
        mock_response.read.side_effect = IncompleteRead(b"partial")
        mock_urlopen.return_value = mock_response

        with pytest.raises(PayStackTransportError) as exc_info:
            transport.get(f"{BASE_URL}/transaction", TEST_API_KEY)

        assert exc_info.value.url == f"{BASE_URL}/transaction"

    @patch('urllib.request.urlopen')
    def test_remote_disconnect_raises_transport_error(self, mock_urlopen, transport):
        mock_urlopen.side_effect = RemoteDisconnected("Remote end closed connection without response")

        with pytest.raises(PayStackTransportError):
            transport.get(f"{BASE_URL}/transaction", TEST_API_KEY)


class TestClientOverUrllib:
    """End-to-end through the client with urlopen patched."""

    @patch('urllib.request.urlopen')
    def test_invalid_key(self, mock_urlopen):
        mock_urlopen.side_effect = http_error(401, {"status": False, "message": "Invalid key"})
        client = PayStackClient("sk_test_wrong")

        with pytest.raises(PayStackAPIError) as exc_info:
            client.transaction.verify_transaction("ref")

        assert isinstance(exc_info.value, PayStackAuthenticationError)
        assert exc_info.value.message == "Invalid key"

    @patch('urllib.request.urlopen')
    def test_timeout_is_not_api_error(self, mock_urlopen):
        mock_urlopen.side_effect = TimeoutError("timed out")
        client = PayStackClient(TEST_API_KEY, timeout=1)

        with pytest.raises(PayStackTransportError) as exc_info:
            client.transaction.total_transactions()

        assert not isinstance(exc_info.value, PayStackAPIError)
        assert mock_urlopen.call_count == 1

    @patch('urllib.request.urlopen')
    def test_non_utf8_success_body_is_deserialization_error(self, mock_urlopen):
        mock_response = mock_urlopen_response({})
        mock_response.read.return_value = b"\xff\xfe not utf8"
        mock_urlopen.return_value = mock_response
        client = PayStackClient(TEST_API_KEY)

        with pytest.raises(PayStackDeserializationError):
            client.transaction.verify_transaction("ref")

    @patch('urllib.request.urlopen')
    def test_verify_success(self, mock_urlopen, transaction_payload):
        mock_urlopen.return_value = mock_urlopen_response({
            "status": True,
            "message": "Verification successful",
            "data": transaction_payload,
        })
        client = PayStackClient(TEST_API_KEY)

        response = client.transaction.verify_transaction("re4lyvq3s3")

        assert response.data.amount == 40333
        assert mock_urlopen.call_args[0][0].full_url == f"{BASE_URL}/transaction/verify/re4lyvq3s3"


class TestInMemoryHttpClient:
    """Test the recording transport."""

    def test_records_requests_in_order(self):
        http = InMemoryHttpClient().queue(200, "{}").queue(201, "{}")

        http.get("https://x/a", "key", [("q", "1")])
        http.post("https://x/b", "key", {"k": "v"})

        assert [r.method for r in http.requests] == ["GET", "POST"]
        assert http.requests[0].query == [("q", "1")]
        assert http.last_request.body == {"k": "v"}

    def test_replays_responses(self):
        http = InMemoryHttpClient([HttpResponse(404, "missing")])

        response = http.delete("https://x/a", "key")

        assert response == HttpResponse(404, "missing")

    def test_queued_error_is_raised(self):
        http = InMemoryHttpClient().queue_error(PayStackTransportError("down"))

        with pytest.raises(PayStackTransportError):
            http.put("https://x/a", "key")

    def test_empty_queue(self):
        with pytest.raises(LookupError):
            InMemoryHttpClient().get("https://x/a", "key")

"""
Tests for the Paystack HTTP client.

httpx is patched at the Client level; responses are real httpx.Response objects.
"""

from unittest.mock import patch

import httpx
import pytest

from apps.billing.paystack_client import PaystackClient, PaystackError


@pytest.fixture
def client() -> PaystackClient:
    return PaystackClient(secret_key="sk_test_123", base_url="https://api.paystack.test/", timeout=5.0)


class TestPaystackClient:
    def test_initialize_transaction(self, client: PaystackClient) -> None:
        body = {
            "status": True,
            "message": "Authorization URL created",
            "data": {
                "authorization_url": "https://checkout.paystack.com/abc",
                "access_code": "abc",
                "reference": "ref_1",
            },
        }
        with patch.object(httpx.Client, "request", return_value=httpx.Response(200, json=body)) as mock_request:
            data = client.initialize_transaction(
                email="boss@acme.test",
                amount=5000,
                callback_url="https://app.test/payment/callback",
                metadata={"organization_id": "organization-a"},
            )

        assert data["reference"] == "ref_1"
        mock_request.assert_called_once_with(
            "POST",
            "/transaction/initialize",
            json={
                "email": "boss@acme.test",
                "amount": 5000,
                "callback_url": "https://app.test/payment/callback",
                "metadata": {"organization_id": "organization-a"},
            },
        )

    def test_verify_transaction_path(self, client: PaystackClient) -> None:
        body = {"status": True, "data": {"status": "success"}}
        with patch.object(httpx.Client, "request", return_value=httpx.Response(200, json=body)) as mock_request:
            assert client.verify_transaction("ref_1") == {"status": "success"}

        mock_request.assert_called_once_with("GET", "/transaction/verify/ref_1", json=None)

    def test_create_subscription(self, client: PaystackClient) -> None:
        body = {"status": True, "data": {"subscription_code": "SUB_1"}}
        with patch.object(httpx.Client, "request", return_value=httpx.Response(200, json=body)) as mock_request:
            data = client.create_subscription(
                customer="CUS_1", plan="PLN_1", authorization="AUTH_1", start_date="2025-02-01T00:00:00+00:00"
            )

        assert data == {"subscription_code": "SUB_1"}
        assert mock_request.call_args.kwargs["json"]["start_date"] == "2025-02-01T00:00:00+00:00"

    def test_status_false_raises(self, client: PaystackClient) -> None:
        body = {"status": False, "message": "Invalid key"}
        with patch.object(httpx.Client, "request", return_value=httpx.Response(200, json=body)):
            with pytest.raises(PaystackError) as exc_info:
                client.verify_transaction("ref_1")

        assert exc_info.value.message == "Invalid key"

    def test_http_error_status_raises(self, client: PaystackClient) -> None:
        body = {"status": False, "message": "Transaction reference not found"}
        with patch.object(httpx.Client, "request", return_value=httpx.Response(404, json=body)):
            with pytest.raises(PaystackError) as exc_info:
                client.verify_transaction("missing")

        assert exc_info.value.status_code == 404

    def test_non_json_body_raises(self, client: PaystackClient) -> None:
        with patch.object(httpx.Client, "request", return_value=httpx.Response(502, text="Bad Gateway")):
            with pytest.raises(PaystackError) as exc_info:
                client.verify_transaction("ref_1")

        assert exc_info.value.status_code == 502

    def test_timeout_raises(self, client: PaystackClient) -> None:
        with patch.object(httpx.Client, "request", side_effect=httpx.TimeoutException("Timeout")):
            with pytest.raises(PaystackError, match="timed out"):
                client.verify_transaction("ref_1")

    def test_connect_error_raises(self, client: PaystackClient) -> None:
        with patch.object(httpx.Client, "request", side_effect=httpx.ConnectError("Connection refused")):
            with pytest.raises(PaystackError):
                client.verify_transaction("ref_1")

"""
Paystack REST client.

Thin wrapper over httpx for the three calls billing needs. Every failure
(transport, non-2xx, or a ``status: false`` body) raises PaystackError.
"""

from functools import lru_cache
from typing import Any

import httpx
from django.conf import settings


class PaystackError(Exception):
    """Raised when a Paystack call fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class PaystackClient:
    """Paystack API client authenticated with the secret key."""

    def __init__(self, secret_key: str, base_url: str, timeout: float = 30.0) -> None:
        self.secret_key = secret_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _request(self, method: str, path: str, payload: dict[str, Any] | None = None) -> dict[str, Any]:
        headers = {
            "Authorization": f"Bearer {self.secret_key}",
            "Content-Type": "application/json",
        }
        try:
            with httpx.Client(base_url=self.base_url, timeout=self.timeout, headers=headers) as client:
                response = client.request(method, path, json=payload)
        except httpx.TimeoutException as e:
            raise PaystackError(f"Request timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise PaystackError(str(e)) from e

        try:
            body = response.json()
        except ValueError as e:
            raise PaystackError(f"Invalid response (HTTP {response.status_code})", response.status_code) from e

        if not response.is_success or not body.get("status"):
            raise PaystackError(
                body.get("message") or f"HTTP {response.status_code}",
                response.status_code,
            )
        return body.get("data") or {}

    def initialize_transaction(
        self,
        email: str,
        amount: int,
        callback_url: str,
        metadata: dict[str, Any],
    ) -> dict[str, Any]:
        """
        Start a charge on a hosted checkout page.

        Returns ``{authorization_url, access_code, reference}``.
        """
        return self._request(
            "POST",
            "/transaction/initialize",
            {
                "email": email,
                "amount": amount,
                "callback_url": callback_url,
                "metadata": metadata,
            },
        )

    def verify_transaction(self, reference: str) -> dict[str, Any]:
        """Fetch the outcome of a transaction, including card authorization and metadata."""
        return self._request("GET", f"/transaction/verify/{reference}")

    def create_subscription(
        self,
        customer: str,
        plan: str,
        authorization: str,
        start_date: str,
    ) -> dict[str, Any]:
        """Subscribe a customer to a plan using a saved card authorization."""
        return self._request(
            "POST",
            "/subscription",
            {
                "customer": customer,
                "plan": plan,
                "authorization": authorization,
                "start_date": start_date,
            },
        )


@lru_cache(maxsize=1)
def get_paystack_client() -> PaystackClient:
    """
    Get configured Paystack client (singleton).
    """
    return PaystackClient(
        secret_key=settings.PAYSTACK_SECRET_KEY,
        base_url=settings.PAYSTACK_BASE_URL,
        timeout=settings.PAYSTACK_TIMEOUT_SECONDS,
    )

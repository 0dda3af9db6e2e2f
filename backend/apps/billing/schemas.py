"""
Billing API schemas - request/response types for billing endpoints.
"""

from datetime import datetime

from ninja import Schema
from pydantic import EmailStr


class InitializePaymentRequest(Schema):
    """Request to start the card-verification charge."""

    email: EmailStr | None = None  # Defaults to the caller's email


class InitializePaymentResponse(Schema):
    """Paystack checkout page to send the user to."""

    authorization_url: str
    reference: str


class VerifyPaymentRequest(Schema):
    """Reference Paystack appended to the callback URL."""

    reference: str


class SubscriptionResponse(Schema):
    """Current plan and subscription state."""

    plan: str
    subscription_status: str  # 'none', 'trialing', 'active', 'cancelled'
    trial_ends_at: datetime | None
    subscription_code: str


class VerifyPaymentResponse(Schema):
    message: str
    subscription: SubscriptionResponse

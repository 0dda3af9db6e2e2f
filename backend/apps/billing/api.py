"""
Billing API endpoints.

Handles the Paystack card-verification charge and the trial subscription
that follows it.
"""

from ninja import Router

from apps.billing.schemas import (
    InitializePaymentRequest,
    InitializePaymentResponse,
    SubscriptionResponse,
    VerifyPaymentRequest,
    VerifyPaymentResponse,
)
from apps.billing.services import (
    get_subscription,
    initialize_subscription_payment,
    verify_and_subscribe,
)
from apps.core.auth import request_context
from apps.core.gate import Surface, require_surface
from apps.core.results import unwrap
from apps.core.schemas import ErrorResponse, RedirectResponse
from apps.core.types import AuthenticatedHttpRequest

router = Router(tags=["billing"])

ERRORS = {
    303: RedirectResponse,
    400: ErrorResponse,
    401: ErrorResponse,
    403: ErrorResponse,
    404: ErrorResponse,
    500: ErrorResponse,
}


@router.post(
    "/initialize",
    response={200: InitializePaymentResponse, **ERRORS},
    operation_id="initializeSubscriptionPayment",
    summary="Start card verification",
)
@require_surface(Surface.ORG_ADMIN)
def initialize_payment(request: AuthenticatedHttpRequest, payload: InitializePaymentRequest) -> dict:
    """
    Start a small refundable charge that saves the card for the subscription.

    Admin only. Returns the Paystack checkout URL to redirect the user to.
    """
    return unwrap(initialize_subscription_payment(request_context(request), str(payload.email or "")))


@router.post(
    "/verify",
    response={200: VerifyPaymentResponse, **ERRORS},
    operation_id="verifyAndSubscribe",
    summary="Verify payment and start trial",
)
@require_surface(Surface.ORG_ADMIN)
def verify_payment(request: AuthenticatedHttpRequest, payload: VerifyPaymentRequest) -> VerifyPaymentResponse:
    """
    Called from the payment callback page with Paystack's reference.

    The subscription is charged once the free trial ends.
    """
    result = verify_and_subscribe(request_context(request), payload.reference)
    subscription = unwrap(result)
    return VerifyPaymentResponse(message=result.message, subscription=subscription)


@router.get(
    "/subscription",
    response={200: SubscriptionResponse, **ERRORS},
    operation_id="getSubscription",
    summary="Get subscription status",
)
@require_surface(Surface.ORG_MEMBER)
def subscription(request: AuthenticatedHttpRequest) -> dict:
    return unwrap(get_subscription(request_context(request)))

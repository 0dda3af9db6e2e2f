"""
Billing services - Paystack card verification and trial subscriptions.

All Paystack calls are isolated here for testability.
External calls must NOT be inside database transactions.
"""

import json
from datetime import datetime, timedelta
from typing import Any

from django.conf import settings
from django.db import DatabaseError
from django.utils import timezone

from apps.billing.paystack_client import PaystackError, get_paystack_client
from apps.core.auth import RequestContext
from apps.core.gate import ORG_ADMIN
from apps.core.logging import get_logger
from apps.core.results import Err, ErrorKind, Ok
from apps.organizations.models import Organization

logger = get_logger(__name__)

PAYMENT_FAILED_MESSAGE = "Could not verify your payment. Please try again."
RECORD_FAILED_MESSAGE = "Your subscription was created but could not be saved. Please contact support."


def _require_org_admin(ctx: RequestContext) -> Err | None:
    if not ctx.org_id:
        return Err("No organization found.", ErrorKind.UNAUTHORIZED)
    if ctx.org_role != ORG_ADMIN and not ctx.is_super_admin:
        return Err("Admin access required.", ErrorKind.UNAUTHORIZED)
    return None


def initialize_subscription_payment(ctx: RequestContext, email: str = "") -> Ok[dict] | Err:
    """
    Start the small card-verification charge.

    The organization id travels in Paystack metadata so verification can
    find the organization again. Returns ``{authorization_url, reference}``.
    """
    denied = _require_org_admin(ctx)
    if denied:
        return denied

    email = (email or ctx.email).strip()
    if not email:
        return Err("An email address is required.", ErrorKind.INVALID)

    try:
        data = get_paystack_client().initialize_transaction(
            email=email,
            amount=settings.PAYSTACK_VERIFICATION_AMOUNT,
            callback_url=settings.PAYSTACK_CALLBACK_URL,
            metadata={"organization_id": ctx.org_id},
        )
    except PaystackError as e:
        logger.warning(
            "paystack_initialize_failed",
            error_message=e.message,
            status_code=e.status_code,
            **{"organization.id": ctx.org_id},
        )
        return Err("Could not start the payment. Please try again.")

    logger.info("paystack_transaction_initialized", reference=data.get("reference"), **{"organization.id": ctx.org_id})
    return Ok({"authorization_url": data["authorization_url"], "reference": data["reference"]})


def _metadata(transaction: dict[str, Any]) -> dict[str, Any]:
    # Paystack returns metadata either as an object or as the JSON string it was sent as
    metadata = transaction.get("metadata") or {}
    if isinstance(metadata, str):
        try:
            metadata = json.loads(metadata)
        except ValueError:
            return {}
    return metadata if isinstance(metadata, dict) else {}


def verify_and_subscribe(
    ctx: RequestContext,
    reference: str,
    now: datetime | None = None,
) -> Ok[dict] | Err:
    """
    Verify the card charge and start a subscription after the free trial.

    Reads the reusable card authorization and the organization id from the
    verified transaction, creates a Paystack subscription starting
    ``TRIAL_DAYS`` from now, then marks the organization as trialing on
    the pro plan.

    Calling this twice with the same reference creates two subscriptions.
    """
    denied = _require_org_admin(ctx)
    if denied:
        return denied
    if not reference:
        return Err("Payment reference is required.", ErrorKind.INVALID)

    client = get_paystack_client()
    try:
        transaction = client.verify_transaction(reference)
    except PaystackError as e:
        logger.warning("paystack_verify_failed", reference=reference, error_message=e.message)
        return Err(PAYMENT_FAILED_MESSAGE)

    if transaction.get("status") != "success":
        return Err("Payment was not successful.", ErrorKind.INVALID)

    authorization = transaction.get("authorization") or {}
    authorization_code = authorization.get("authorization_code")
    if not authorization_code or not authorization.get("reusable", False):
        return Err("This card cannot be used for a subscription.", ErrorKind.INVALID)

    org_id = _metadata(transaction).get("organization_id")
    if not org_id:
        return Err("Payment is not linked to an organization.", ErrorKind.INVALID)
    if org_id != ctx.org_id:
        logger.warning("paystack_org_mismatch", reference=reference, **{"organization.id": ctx.org_id})
        return Err("Payment belongs to a different organization.", ErrorKind.UNAUTHORIZED)

    try:
        org = Organization.objects.filter(stytch_org_id=org_id).first()
    except DatabaseError:
        logger.exception("subscription_org_lookup_failed", reference=reference, **{"organization.id": org_id})
        return Err(PAYMENT_FAILED_MESSAGE)
    if org is None:
        return Err("Organization not found.", ErrorKind.NOT_FOUND)

    customer_code = (transaction.get("customer") or {}).get("customer_code", "")
    trial_ends_at = (now or timezone.now()) + timedelta(days=settings.TRIAL_DAYS)

    try:
        subscription = client.create_subscription(
            customer=customer_code,
            plan=settings.PAYSTACK_PLAN_CODE,
            authorization=authorization_code,
            start_date=trial_ends_at.isoformat(),
        )
    except PaystackError as e:
        logger.warning("paystack_subscription_failed", reference=reference, error_message=e.message)
        return Err(PAYMENT_FAILED_MESSAGE)

    org.plan = Organization.Plan.PRO
    org.subscription_status = Organization.SubscriptionStatus.TRIALING
    org.trial_ends_at = trial_ends_at
    org.paystack_customer_code = customer_code
    org.paystack_subscription_code = subscription.get("subscription_code", "")
    try:
        org.save(
            update_fields=[
                "plan",
                "subscription_status",
                "trial_ends_at",
                "paystack_customer_code",
                "paystack_subscription_code",
                "updated_at",
            ]
        )
    except DatabaseError:
        logger.exception(
            "subscription_record_failed",
            reference=reference,
            customer_code=customer_code,
            subscription_code=org.paystack_subscription_code,
            **{"organization.id": org_id},
        )
        return Err(RECORD_FAILED_MESSAGE)

    logger.info(
        "subscription_started",
        reference=reference,
        subscription_code=org.paystack_subscription_code,
        trial_ends_at=trial_ends_at.isoformat(),
        **{"organization.id": org_id},
    )
    return Ok(serialize_subscription(org), message="Subscription active. Your free trial has started.")


def serialize_subscription(org: Organization) -> dict:
    return {
        "plan": org.plan,
        "subscription_status": org.subscription_status,
        "trial_ends_at": org.trial_ends_at,
        "subscription_code": org.paystack_subscription_code,
    }


def get_subscription(ctx: RequestContext) -> Ok[dict] | Err:
    """Current plan and subscription state of the caller's organization."""
    if not ctx.org_id:
        return Err("No organization found.", ErrorKind.UNAUTHORIZED)
    try:
        org = Organization.objects.filter(stytch_org_id=ctx.org_id).first()
    except DatabaseError:
        logger.exception("subscription_load_failed", **{"organization.id": ctx.org_id})
        return Err("Could not load the subscription.")
    if org is None:
        return Err("Organization not found.", ErrorKind.NOT_FOUND)
    return Ok(serialize_subscription(org))

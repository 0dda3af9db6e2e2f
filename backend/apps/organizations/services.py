"""
Organization services - provisioning by super-admins and dashboard stats.
"""

import re

from django.conf import settings
from django.db import DatabaseError, transaction
from stytch.core.response_base import StytchError

from apps.accounts.constants import OrgRoles, StytchRoles
from apps.accounts.models import Invitation
from apps.accounts.stytch_client import get_stytch_client
from apps.core.auth import RequestContext
from apps.core.logging import get_logger
from apps.core.results import Err, ErrorKind, Ok
from apps.fleet.models import Driver, Vehicle
from apps.inspections.models import InspectionReport
from apps.organizations.models import Organization

logger = get_logger(__name__)

UNAUTHORIZED_MESSAGE = "Unauthorized action."
UNEXPECTED_MESSAGE = "An unexpected error occurred."
CREATED_MESSAGE = "Organization created successfully."


def slugify(text: str) -> str:
    """
    URL-safe slug: lowercase, spaces to hyphens, non-word characters dropped,
    repeated hyphens collapsed.

    "Acme Haulage Ltd." -> "acme-haulage-ltd"
    """
    slug = str(text).lower().strip()
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"[^\w-]+", "", slug, flags=re.ASCII)
    return re.sub(r"--+", "-", slug)


def serialize_organization(org: Organization) -> dict:
    return {
        "id": org.stytch_org_id,
        "name": org.name,
        "slug": org.slug,
        "plan": org.plan,
        "subscription_status": org.subscription_status,
        "created_by": org.created_by,
        "created_at": org.created_at,
    }


def _delete_identity_org(client, stytch_org_id: str) -> None:
    """Undo the identity-provider organization after a later step failed."""
    try:
        client.organizations.delete(organization_id=stytch_org_id)
        logger.info("organization_provisioning_rolled_back", stytch_org_id=stytch_org_id)
    except StytchError as e:
        logger.error(
            "organization_provisioning_rollback_failed",
            stytch_org_id=stytch_org_id,
            error_type=e.details.error_type,
        )


def create_organization_and_invite(ctx: RequestContext, org_name: str, email: str) -> Ok[dict] | Err:
    """
    Provision a new tenant and invite its first admin.

    Steps:
        1. Create the organization in Stytch
        2. Add the requesting super-admin as an admin member
        3. Send the invitee a magic-link invitation as organization admin
        4. Mirror the organization locally (plan "free") and record the invitation

    If a step after (1) fails, the Stytch organization is deleted again.
    Failures are logged and reported with a generic message.
    """
    if not ctx.user_id or not ctx.is_super_admin:
        return Err(UNAUTHORIZED_MESSAGE, ErrorKind.UNAUTHORIZED)

    org_name = (org_name or "").strip()
    email = (email or "").strip().lower()
    if not org_name or not email:
        return Err("Organization name and email are required.", ErrorKind.INVALID)

    slug = slugify(org_name)
    if not slug:
        return Err("Organization name is invalid.", ErrorKind.INVALID)

    # Not atomic with the create below; concurrent calls with the same name can race
    if Organization.objects.filter(slug=slug).exists():
        return Err(f'An organization named "{org_name}" already exists.', ErrorKind.CONFLICT)

    client = get_stytch_client()
    try:
        created = client.organizations.create(organization_name=org_name, organization_slug=slug)
    except StytchError as e:
        logger.warning(
            "organization_create_failed",
            slug=slug,
            error_type=e.details.error_type,
            error_message=e.details.error_message,
        )
        return Err(UNEXPECTED_MESSAGE)

    stytch_org_id = created.organization.organization_id
    try:
        inviter = client.organizations.members.create(
            organization_id=stytch_org_id,
            email_address=ctx.email,
            roles=[StytchRoles.ADMIN],
        )
        client.magic_links.email.invite(
            organization_id=stytch_org_id,
            email_address=email,
            invite_redirect_url=settings.INVITE_REDIRECT_URL,
            invited_by_member_id=inviter.member.member_id,
            roles=[StytchRoles.ADMIN],
        )
        with transaction.atomic():
            org = Organization.objects.create(
                stytch_org_id=stytch_org_id,
                name=org_name,
                slug=slug,
                plan=Organization.Plan.FREE,
                created_by=ctx.email,
            )
            Invitation.objects.create(
                email=email,
                role=OrgRoles.ADMIN,
                organization=org,
                invited_by=ctx.email,
            )
    except StytchError as e:
        logger.warning(
            "organization_provisioning_failed",
            stytch_org_id=stytch_org_id,
            error_type=e.details.error_type,
            error_message=e.details.error_message,
        )
        _delete_identity_org(client, stytch_org_id)
        return Err(UNEXPECTED_MESSAGE)
    except DatabaseError:
        logger.exception("organization_mirror_failed", stytch_org_id=stytch_org_id)
        _delete_identity_org(client, stytch_org_id)
        return Err(UNEXPECTED_MESSAGE)

    logger.info(
        "organization_provisioned",
        slug=slug,
        invitee=email,
        **{"organization.id": stytch_org_id, "usr.id": ctx.user_id},
    )
    return Ok(serialize_organization(org), message=CREATED_MESSAGE)


def list_organizations(ctx: RequestContext) -> Ok[list[dict]] | Err:
    """Every organization, newest first. Super-admin only."""
    if not ctx.is_super_admin:
        return Err("You are not authorized to perform this action.", ErrorKind.UNAUTHORIZED)
    try:
        return Ok([serialize_organization(org) for org in Organization.objects.order_by("-created_at")])
    except DatabaseError:
        logger.exception("organization_list_failed")
        return Err("Could not load organizations.")


def get_dashboard_stats(ctx: RequestContext) -> Ok[dict[str, int]] | Err:
    """
    Headline counts for the dashboard.

    Super-admins see organizations and reports across all tenants; everyone
    else sees the reports, vehicles and drivers of their organization.
    """
    try:
        if ctx.is_super_admin:
            return Ok(
                {
                    "organizations": Organization.objects.count(),
                    "reports": InspectionReport.objects.count(),
                }
            )
        if not ctx.org_id:
            return Err("Organization not found.", ErrorKind.UNAUTHORIZED)
        return Ok(
            {
                "reports": InspectionReport.objects.filter(organization_id=ctx.org_id).count(),
                "vehicles": Vehicle.objects.filter(organization_id=ctx.org_id).count(),
                "drivers": Driver.objects.filter(organization_id=ctx.org_id).count(),
            }
        )
    except DatabaseError:
        logger.exception("dashboard_stats_failed", **{"organization.id": ctx.org_id})
        return Err("Could not load dashboard statistics.")

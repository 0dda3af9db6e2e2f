"""
Auth services - business logic for identity sync.

Handles sync between Stytch and local User/Member/Organization models,
the super-admin claim and invitation redemption.
"""

from typing import Any

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone

from apps.accounts.constants import SUPER_ADMIN_METADATA_ROLE, OrgRoles, StytchRoles
from apps.accounts.models import Invitation, Member, User
from apps.core.logging import get_logger
from apps.organizations.models import Organization

logger = get_logger(__name__)


def resolve_super_admin(email: str, trusted_metadata: dict[str, Any] | None = None) -> bool:
    """
    Decide the global super-admin claim for an identity.

    True when Stytch trusted metadata carries ``role: super_admin`` or the
    email is listed in ``SUPER_ADMIN_EMAILS``.
    """
    if trusted_metadata and trusted_metadata.get("role") == SUPER_ADMIN_METADATA_ROLE:
        return True
    return email.lower() in settings.SUPER_ADMIN_EMAILS


def get_or_create_user_from_stytch(
    email: str,
    name: str = "",
    is_super_admin: bool | None = None,
) -> User:
    """
    Get or create a User from Stytch data.

    Email is the cross-org identifier in Stytch B2B. Name and the
    super-admin flag are only overwritten when supplied.

    Uses select_for_update for explicit row locking under concurrent requests.
    """
    try:
        user = User.objects.select_for_update().get(email=email)
    except User.DoesNotExist:
        try:
            return User.objects.create(
                email=email,
                name=name,
                is_super_admin=bool(is_super_admin),
            )
        except IntegrityError:
            # Concurrent insert won the race, fetch the winner
            return User.objects.get(email=email)

    update_fields = []
    if name and user.name != name:
        user.name = name
        update_fields.append("name")
    if is_super_admin is not None and user.is_super_admin != is_super_admin:
        user.is_super_admin = is_super_admin
        update_fields.append("is_super_admin")
    if update_fields:
        user.save(update_fields=[*update_fields, "updated_at"])
    return user


def get_or_create_organization_from_stytch(
    stytch_org_id: str,
    name: str,
    slug: str,
) -> Organization:
    """
    Get or create an Organization from Stytch data.

    Uses select_for_update for explicit row locking under concurrent requests.
    """
    try:
        org = Organization.objects.select_for_update().get(stytch_org_id=stytch_org_id)
        org.name = name
        org.slug = slug
        org.save(update_fields=["name", "slug", "updated_at"])
        return org
    except Organization.DoesNotExist:
        try:
            return Organization.objects.create(
                stytch_org_id=stytch_org_id,
                name=name,
                slug=slug,
            )
        except IntegrityError:
            # Concurrent insert won the race, fetch the winner
            return Organization.objects.get(stytch_org_id=stytch_org_id)


def get_or_create_member_from_stytch(
    user: User,
    organization: Organization,
    stytch_member_id: str,
    role: str = OrgRoles.MEMBER,
) -> Member:
    """
    Get or create a Member linking User to Organization.

    Uses select_for_update for explicit row locking under concurrent requests.
    """
    try:
        member = Member.objects.select_for_update().get(stytch_member_id=stytch_member_id)
        member.user = user
        member.organization = organization
        member.role = role
        member.save(update_fields=["user", "organization", "role", "updated_at"])
        return member
    except Member.DoesNotExist:
        try:
            return Member.objects.create(
                stytch_member_id=stytch_member_id,
                user=user,
                organization=organization,
                role=role,
            )
        except IntegrityError:
            # Concurrent insert won the race, fetch the winner
            return Member.objects.get(stytch_member_id=stytch_member_id)


def claim_invitations(member: Member) -> int:
    """
    Redeem pending invitations for the member's email in its organization.

    The member takes the invited role and records who invited them.
    Returns the number of invitations claimed.
    """
    pending = list(
        Invitation.objects.select_for_update().filter(
            organization=member.organization,
            email__iexact=member.user.email,
            claimed=False,
        )
    )
    if not pending:
        return 0

    now = timezone.now()
    for invitation in pending:
        invitation.claimed = True
        invitation.claimed_at = now
        invitation.save(update_fields=["claimed", "claimed_at"])

    invitation = pending[0]
    member.role = invitation.role
    member.created_by = invitation.invited_by
    member.save(update_fields=["role", "created_by", "updated_at"])

    logger.info(
        "invitation_claimed",
        member_id=member.stytch_member_id,
        count=len(pending),
        **{"organization.id": member.organization.stytch_org_id},
    )
    return len(pending)


def _role_ids(stytch_member: Any) -> list[str]:
    # member.roles is a list of role objects or dicts with a role_id field,
    # e.g. [{"role_id": "stytch_admin", "sources": [...]}]
    role_ids = []
    for role in getattr(stytch_member, "roles", None) or []:
        if isinstance(role, str):
            role_ids.append(role)
        elif isinstance(role, dict):
            role_ids.append(role.get("role_id"))
        else:
            role_ids.append(getattr(role, "role_id", None))
    return [r for r in role_ids if r]


def sync_session_to_local(
    stytch_member: Any,  # Stytch Member object from SDK
    stytch_organization: Any,  # Stytch Organization object from SDK
) -> tuple[User, Member, Organization]:
    """
    Sync Stytch session data to local models.

    Called after successful authentication to ensure local
    User, Member, and Organization records exist, mirror the super-admin
    claim and redeem pending invitations.

    This function is idempotent and concurrency-safe:
    - Uses transaction.atomic() for all-or-nothing semantics
    - Uses select_for_update() for explicit row locking
    - Falls back to IntegrityError handling for race conditions

    Returns:
        Tuple of (user, member, organization)
    """
    with transaction.atomic():
        org = get_or_create_organization_from_stytch(
            stytch_org_id=stytch_organization.organization_id,
            name=stytch_organization.organization_name,
            slug=stytch_organization.organization_slug,
        )

        email = stytch_member.email_address
        user = get_or_create_user_from_stytch(
            email=email,
            name=stytch_member.name or "",
            is_super_admin=resolve_super_admin(
                email, getattr(stytch_member, "trusted_metadata", None)
            ),
        )

        role = OrgRoles.ADMIN if StytchRoles.ADMIN in _role_ids(stytch_member) else OrgRoles.MEMBER
        member = get_or_create_member_from_stytch(
            user=user,
            organization=org,
            stytch_member_id=stytch_member.member_id,
            role=role,
        )
        claim_invitations(member)

    return user, member, org


def sync_discovery_identity(email: str) -> User:
    """
    Mirror an identity that has signed in but not yet picked an organization.
    """
    with transaction.atomic():
        return get_or_create_user_from_stytch(
            email=email,
            is_super_admin=True if resolve_super_admin(email) else None,
        )


def list_membership_org_ids(user_id: str) -> list[str]:
    """
    Organization ids the user belongs to, oldest membership first.
    """
    return list(
        Member.objects.filter(user_id=user_id)
        .order_by("created_at", "id")
        .values_list("organization_id", flat=True)
    )

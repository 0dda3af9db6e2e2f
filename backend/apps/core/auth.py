"""
Authentication context for request lifecycle.

Provides a typed container for authentication state that middleware
populates, and the explicit claims object that services consume.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from django.http import HttpRequest

if TYPE_CHECKING:
    from apps.accounts.models import Member, User
    from apps.organizations.models import Organization


@dataclass(frozen=True)
class RequestContext:
    """
    Claims resolved for one request, passed explicitly into every service call.

    Attributes:
        user_id: Local user id, or None when nobody is signed in
        org_id: Identity-provider organization id of the active organization
        org_role: Organization role (org:admin or org:member)
        is_super_admin: Global super-admin flag, independent of any organization
        email: Signed-in user's email address
        failed: True if a token was presented but rejected
        membership_org_ids: Organizations Stytch reports the identity belongs
            to, populated only for sessions without an active organization
    """

    user_id: str | None = None
    org_id: str | None = None
    org_role: str | None = None
    is_super_admin: bool = False
    email: str = ""
    failed: bool = False
    membership_org_ids: tuple[str, ...] = ()

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None


@dataclass
class AuthContext:
    """
    Authentication context attached to requests by StytchAuthMiddleware.

    Attributes:
        user: The authenticated User, or None if not authenticated
        member: The Member record linking user to organization, or None
        organization: The Organization the user is acting within, or None
        failed: True if auth was attempted but failed (vs just not present)
        membership_org_ids: Stytch organization ids discovered for an
            intermediate session, oldest membership first
    """

    user: "User | None" = None
    member: "Member | None" = None
    organization: "Organization | None" = None
    failed: bool = False
    membership_org_ids: list[str] = field(default_factory=list)

    @property
    def is_authenticated(self) -> bool:
        """Check if the request carries a signed-in user (with or without an org)."""
        return self.user is not None

    @property
    def has_organization(self) -> bool:
        return self.member is not None and self.organization is not None

    def to_request_context(self) -> RequestContext:
        """Flatten the resolved models into plain claims."""
        if self.user is None:
            return RequestContext(failed=self.failed)

        has_org = self.has_organization
        return RequestContext(
            user_id=str(self.user.pk),
            org_id=self.organization.stytch_org_id if has_org else None,  # type: ignore[union-attr]
            org_role=self.member.role if has_org else None,  # type: ignore[union-attr]
            is_super_admin=self.user.is_super_admin,
            email=self.user.email,
            membership_org_ids=tuple(self.membership_org_ids),
        )


def request_context(request: HttpRequest) -> RequestContext:
    """Get the claims for a request populated by StytchAuthMiddleware."""
    auth = getattr(request, "auth", None)
    if not isinstance(auth, AuthContext):
        return RequestContext()
    return auth.to_request_context()

"""
Auth API endpoints.

Sign-in itself happens against Stytch from the frontend; this router only
reports who the backend thinks the caller is.
"""

from ninja import Router

from apps.accounts.schemas import MemberInfo, MeResponse, OrganizationInfo, UserInfo
from apps.accounts.services import list_membership_org_ids
from apps.core.auth import request_context
from apps.core.gate import Surface, landing_for, require_surface
from apps.core.schemas import ErrorResponse, RedirectResponse
from apps.core.types import AuthenticatedHttpRequest

router = Router(tags=["auth"])


@router.get(
    "/me",
    response={200: MeResponse, 303: RedirectResponse, 401: ErrorResponse},
    operation_id="getCurrentUser",
    summary="Get current user info",
)
@require_surface(Surface.AUTHENTICATED)
def get_current_user(request: AuthenticatedHttpRequest) -> MeResponse:
    """
    Get the signed-in user, plus member and organization when one is active.
    """
    auth = request.auth
    user = auth.user
    member = auth.member
    org = auth.organization

    return MeResponse(
        user=UserInfo(
            id=user.id,
            email=user.email,
            name=user.name,
            is_super_admin=user.is_super_admin,
        ),
        member=MemberInfo(
            id=member.id,
            stytch_member_id=member.stytch_member_id,
            role=member.role,
            is_admin=member.is_admin,
        )
        if member is not None
        else None,
        organization=OrganizationInfo(
            id=org.stytch_org_id,
            name=org.name,
            slug=org.slug,
            plan=org.plan,
        )
        if org is not None
        else None,
        membership_org_ids=list_membership_org_ids(str(user.id)),
        landing_url=landing_for(request_context(request)),
    )

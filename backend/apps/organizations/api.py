"""
Organization API endpoints: super-admin provisioning and dashboard stats.
"""

from ninja import Router

from apps.core.auth import request_context
from apps.core.gate import Surface, require_surface
from apps.core.results import unwrap
from apps.core.schemas import ErrorResponse, RedirectResponse
from apps.core.types import AuthenticatedHttpRequest
from apps.organizations.schemas import (
    CreateOrganizationRequest,
    CreateOrganizationResponse,
    DashboardStats,
    OrganizationSchema,
)
from apps.organizations.services import (
    create_organization_and_invite,
    get_dashboard_stats,
    list_organizations,
)

router = Router(tags=["super-admin"])
dashboard_router = Router(tags=["dashboard"])

ERRORS = {
    303: RedirectResponse,
    400: ErrorResponse,
    401: ErrorResponse,
    403: ErrorResponse,
    409: ErrorResponse,
    500: ErrorResponse,
}


@router.get(
    "/organizations",
    response={200: list[OrganizationSchema], **ERRORS},
    operation_id="listOrganizations",
    summary="List all organizations",
)
@require_surface(Surface.SUPER_ADMIN)
def get_organizations(request: AuthenticatedHttpRequest) -> list[dict]:
    return unwrap(list_organizations(request_context(request)))


@router.post(
    "/organizations",
    response={201: CreateOrganizationResponse, **ERRORS},
    operation_id="createOrganizationAndInvite",
    summary="Provision an organization and invite its admin",
)
@require_surface(Surface.SUPER_ADMIN)
def create_organization(
    request: AuthenticatedHttpRequest, payload: CreateOrganizationRequest
) -> tuple[int, CreateOrganizationResponse]:
    """
    Creates the organization in Stytch, invites ``email`` as its admin and
    mirrors it locally. Returns 409 if the derived slug is taken.
    """
    result = create_organization_and_invite(
        request_context(request), payload.name, str(payload.email or "")
    )
    organization = unwrap(result)
    return 201, CreateOrganizationResponse(message=result.message, organization=organization)


@dashboard_router.get(
    "/stats",
    response={200: DashboardStats, **ERRORS},
    operation_id="getDashboardStats",
    summary="Dashboard counts",
)
@require_surface(Surface.AUTHENTICATED)
def dashboard_stats(request: AuthenticatedHttpRequest) -> dict:
    return unwrap(get_dashboard_stats(request_context(request)))

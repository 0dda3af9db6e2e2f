"""
Django Ninja API configuration.
"""

from django.http import HttpRequest, HttpResponse
from ninja import NinjaAPI

from apps.accounts.api import router as auth_router
from apps.billing.api import router as billing_router
from apps.checklists.api import router as checklist_router
from apps.core.gate import AuthorizationRedirect
from apps.fleet.api import router as fleet_router
from apps.inspections.api import router as reports_router
from apps.organizations.api import dashboard_router
from apps.organizations.api import router as super_admin_router

api = NinjaAPI(
    title="Fleetcheck API",
    version="1.0.0",
    description="Multi-tenant vehicle inspection API with Stytch authentication and Paystack billing.",
    openapi_extra={
        "info": {
            "contact": {"name": "API Support"},
        },
        "tags": [
            {"name": "auth", "description": "Current user and organization"},
            {"name": "checklist", "description": "Per-organization inspection checklist"},
            {"name": "fleet", "description": "Drivers and vehicles"},
            {"name": "reports", "description": "Inspection reports and CSV export"},
            {"name": "super-admin", "description": "Organization provisioning"},
            {"name": "dashboard", "description": "Dashboard counts"},
            {"name": "billing", "description": "Paystack subscription"},
            {"name": "health", "description": "Service health and readiness checks"},
        ],
        "components": {
            "securitySchemes": {
                "bearerAuth": {
                    "type": "http",
                    "scheme": "bearer",
                    "bearerFormat": "JWT",
                    "description": "Stytch session JWT. Include as: Authorization: Bearer <session_jwt>",
                }
            }
        },
        # Every operation expects a session token unless it opts out
        "security": [{"bearerAuth": []}],
    },
)

# Register routers
api.add_router("/auth", auth_router)
api.add_router("/checklist", checklist_router)
api.add_router("/fleet", fleet_router)
api.add_router("/reports", reports_router)
api.add_router("/super-admin", super_admin_router)
api.add_router("/dashboard", dashboard_router)
api.add_router("/billing", billing_router)


@api.exception_handler(AuthorizationRedirect)
def authorization_redirect(request: HttpRequest, exc: AuthorizationRedirect) -> HttpResponse:
    """Gate redirects become 303 See Other with the destination in body and header."""
    response = api.create_response(request, {"redirect_to": exc.destination}, status=303)
    response["Location"] = exc.destination
    return response


@api.get(
    "/health",
    tags=["health"],
    operation_id="healthCheck",
    summary="Health check",
    openapi_extra={"security": []},
)
def health_check(request: HttpRequest) -> dict:
    """Health check endpoint for load balancer."""
    return {"status": "ok"}

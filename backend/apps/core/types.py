"""
Custom type definitions for the application.

These types help mypy understand custom attributes added by middleware.
"""

from typing import TYPE_CHECKING

from django.http import HttpRequest

if TYPE_CHECKING:
    from apps.accounts.models import Member, User
    from apps.core.auth import AuthContext
    from apps.organizations.models import Organization


class AuthenticatedHttpRequest(HttpRequest):
    """
    HttpRequest with authentication context added by StytchAuthMiddleware.

    Use this type for gated endpoints.
    """

    auth: "AuthContext"
    auth_user: "User | None"
    auth_member: "Member | None"
    auth_organization: "Organization | None"
    auth_failed: bool

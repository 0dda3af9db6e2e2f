"""
Shared pytest fixtures for all tests.

This module provides common fixtures used across multiple test modules.
Individual test modules can override these fixtures if needed.

Factories
---------
Import factories directly from their modules:

    from tests.accounts.factories import UserFactory, OrganizationFactory, MemberFactory
    from tests.fleet.factories import DriverFactory, VehicleFactory
    from tests.inspections.factories import InspectionReportFactory

Example usage:

    @pytest.mark.django_db
    def test_something():
        user = UserFactory.create(email="test@example.com")
        org = OrganizationFactory.create()
        member = MemberFactory.create(user=user, organization=org, role=OrgRoles.ADMIN)
"""

from collections.abc import Callable
from typing import Any, cast

import pytest
from django.test import Client, RequestFactory
from django.test.client import WSGIRequest  # type: ignore[attr-defined]

from apps.accounts.constants import OrgRoles
from apps.core.auth import AuthContext, RequestContext
from apps.core.types import AuthenticatedHttpRequest


def make_request_with_auth(request: "WSGIRequest", auth: AuthContext) -> AuthenticatedHttpRequest:
    """
    Set auth on a request and return it typed as AuthenticatedHttpRequest.

    Use this helper to set request.auth while satisfying mypy.
    Returns AuthenticatedHttpRequest for compatibility with API endpoints.

    Example:
        request = request_factory.get("/api/v1/endpoint")
        request = make_request_with_auth(request, AuthContext(user=user, member=member))
    """
    request.auth = auth  # type: ignore[attr-defined]
    return cast(AuthenticatedHttpRequest, request)


def context_for(member: Any) -> RequestContext:
    """Claims for a member acting inside their organization."""
    return AuthContext(
        user=member.user,
        member=member,
        organization=member.organization,
    ).to_request_context()


@pytest.fixture
def request_factory() -> RequestFactory:
    """
    Django request factory for unit testing views.

    Use this when you need to test view functions directly without going through
    the full HTTP stack. Useful for testing Django Ninja endpoints.
    """
    return RequestFactory()


@pytest.fixture
def api_client() -> Client:
    """
    Django test client for full HTTP request/response cycle tests.

    Use this when you need to test the complete HTTP flow including middleware,
    routing, and response handling.

    Example:
        def test_api_returns_200(api_client):
            response = api_client.get("/api/v1/health")
            assert response.status_code == 200
    """
    return Client()


@pytest.fixture
def authenticated_request(
    request_factory: RequestFactory,
) -> Callable[..., AuthenticatedHttpRequest]:
    """
    Factory fixture for creating authenticated requests.

    Returns a function that creates a request with auth attributes set.
    Useful for testing gated endpoints by calling them directly.

    Example:
        def test_authenticated_endpoint(authenticated_request, admin_member):
            request = authenticated_request(admin_member, method="post", path="/api/v1/something")
            result = my_endpoint(request)
    """
    from tests.accounts.factories import MemberFactory

    def _make_request(
        member: Any = None,
        method: str = "get",
        path: str = "/",
        data: dict | None = None,
        content_type: str = "application/json",
    ) -> AuthenticatedHttpRequest:
        if member is None:
            member = MemberFactory.create()

        method_func = getattr(request_factory, method.lower())
        kwargs: dict[str, Any] = {}
        if data is not None:
            kwargs["data"] = data
            kwargs["content_type"] = content_type

        request = method_func(path, **kwargs)
        return make_request_with_auth(
            request,
            AuthContext(
                user=member.user,
                member=member,
                organization=member.organization,
            ),
        )

    return _make_request


@pytest.fixture
def admin_member(db):
    """
    Create a member with the organization admin role.

    Example:
        def test_admin_only_action(admin_member):
            assert admin_member.role == OrgRoles.ADMIN
    """
    from tests.accounts.factories import MemberFactory

    return MemberFactory.create(role=OrgRoles.ADMIN)


@pytest.fixture
def member(db):
    """
    Create a regular organization member.

    Example:
        def test_member_action(member):
            assert member.role == OrgRoles.MEMBER
    """
    from tests.accounts.factories import MemberFactory

    return MemberFactory.create(role=OrgRoles.MEMBER)


@pytest.fixture
def super_admin(db):
    """A super-admin user with no active organization."""
    from tests.accounts.factories import UserFactory

    return UserFactory.create(is_super_admin=True, email="root@fleetcheck.test")


@pytest.fixture
def super_admin_ctx(super_admin) -> RequestContext:
    return AuthContext(user=super_admin).to_request_context()

"""
Tests for the current-identity endpoint.
"""

import pytest
from ninja.errors import HttpError

from apps.accounts.api import get_current_user
from apps.accounts.constants import OrgRoles
from apps.core.auth import AuthContext
from apps.core.gate import AuthorizationRedirect
from tests.accounts.factories import MemberFactory, UserFactory
from tests.conftest import make_request_with_auth


@pytest.mark.django_db
class TestGetCurrentUser:
    def test_member_inside_org(self, authenticated_request) -> None:
        member = MemberFactory.create(role=OrgRoles.ADMIN)

        result = get_current_user(authenticated_request(member))

        assert result.user.email == member.user.email
        assert result.member.is_admin is True
        assert result.organization.id == member.organization.stytch_org_id
        assert result.membership_org_ids == [member.organization.stytch_org_id]
        assert result.landing_url == "/"

    def test_super_admin_without_org(self, request_factory, super_admin) -> None:
        request = make_request_with_auth(request_factory.get("/api/v1/auth/me"), AuthContext(user=super_admin))

        result = get_current_user(request)

        assert result.user.is_super_admin is True
        assert result.member is None
        assert result.organization is None
        assert result.landing_url == "/super-admin"

    def test_orgless_user_is_sent_to_wait_list(self, request_factory) -> None:
        user = UserFactory.create()
        request = make_request_with_auth(request_factory.get("/api/v1/auth/me"), AuthContext(user=user))

        with pytest.raises(AuthorizationRedirect) as exc_info:
            get_current_user(request)
        assert exc_info.value.destination == "/wait-list"

    def test_failed_token_is_401(self, request_factory) -> None:
        request = make_request_with_auth(request_factory.get("/api/v1/auth/me"), AuthContext(failed=True))

        with pytest.raises(HttpError) as exc_info:
            get_current_user(request)
        assert exc_info.value.status_code == 401

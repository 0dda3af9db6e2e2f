"""
Core middleware.

StytchAuthMiddleware resolves the caller's identity from Stytch session
tokens; RequestLoggingMiddleware binds request context to structlog.
"""

import time
import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse
from stytch.core.response_base import StytchError

from apps.accounts.models import Member, User
from apps.core.auth import AuthContext
from apps.core.logging import bind_contextvars, clear_contextvars, get_logger
from apps.organizations.models import Organization

logger = get_logger(__name__)

PUBLIC_PATHS = ("/api/v1/health", "/admin/")
INTERMEDIATE_SESSION_HEADER = "HTTP_X_INTERMEDIATE_SESSION_TOKEN"


class StytchAuthMiddleware:
    """
    Authenticate requests against Stytch and attach an AuthContext.

    - ``Authorization: Bearer <session_jwt>``: member session inside an
      organization. Unknown members are synced just-in-time.
    - ``X-Intermediate-Session-Token``: signed-in identity with no active
      organization yet; resolves the local User and the organizations Stytch
      discovered for it.

    Invalid tokens never raise. They leave an empty context with
    ``failed=True`` for the authorization gate to reject.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        self._set_auth(request, AuthContext())

        if request.path.startswith(PUBLIC_PATHS):
            return self.get_response(request)

        auth_header = request.META.get("HTTP_AUTHORIZATION", "")
        intermediate_token = request.META.get(INTERMEDIATE_SESSION_HEADER, "")
        if auth_header.startswith("Bearer "):
            self._authenticate_jwt(request, auth_header.removeprefix("Bearer ").strip())
        elif intermediate_token:
            self._authenticate_intermediate(request, intermediate_token)

        return self.get_response(request)

    def _authenticate_jwt(self, request: HttpRequest, token: str) -> None:
        from apps.accounts.services import sync_session_to_local
        from apps.accounts.stytch_client import get_stytch_client

        client = get_stytch_client()
        try:
            response = client.sessions.authenticate_jwt(session_jwt=token)
        except StytchError as e:
            logger.info("jwt_authentication_failed", error_type=e.details.error_type)
            self._set_auth(request, AuthContext(failed=True))
            return

        member_id = response.member_session.member_id
        member = (
            Member.objects.select_related("user", "organization")
            .filter(stytch_member_id=member_id)
            .first()
        )
        if member is not None:
            self._set_auth(
                request,
                AuthContext(user=member.user, member=member, organization=member.organization),
            )
            return

        # First request for this member: pull full session data and mirror it
        try:
            full = client.sessions.authenticate(session_jwt=token)
        except StytchError as e:
            logger.warning("jit_sync_failed", member_id=member_id, error_type=e.details.error_type)
            self._set_auth(request, AuthContext(failed=True))
            return

        user, member, org = sync_session_to_local(full.member, full.organization)
        logger.info("member_synced", member_id=member_id, **{"organization.id": org.stytch_org_id})
        self._set_auth(request, AuthContext(user=user, member=member, organization=org))

    def _authenticate_intermediate(self, request: HttpRequest, token: str) -> None:
        from apps.accounts.services import sync_discovery_identity
        from apps.accounts.stytch_client import get_stytch_client

        client = get_stytch_client()
        try:
            response = client.discovery.organizations.list(intermediate_session_token=token)
        except StytchError as e:
            logger.info("intermediate_session_failed", error_type=e.details.error_type)
            self._set_auth(request, AuthContext(failed=True))
            return

        user = sync_discovery_identity(response.email_address)
        org_ids = [
            discovered.organization.organization_id
            for discovered in response.discovered_organizations or []
            if discovered.organization is not None
        ]
        self._set_auth(request, AuthContext(user=user, membership_org_ids=org_ids))

    @staticmethod
    def _set_auth(request: HttpRequest, auth: AuthContext) -> None:
        request.auth = auth  # type: ignore[attr-defined]
        request.auth_user: User | None = auth.user  # type: ignore[attr-defined]
        request.auth_member: Member | None = auth.member  # type: ignore[attr-defined]
        request.auth_organization: Organization | None = auth.organization  # type: ignore[attr-defined]
        request.auth_failed = auth.failed  # type: ignore[attr-defined]


class RequestLoggingMiddleware:
    """
    Bind trace/user/organization ids to structlog and log each request.

    Must run after StytchAuthMiddleware so the auth context is available.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        clear_contextvars()
        trace_id = request.META.get("HTTP_X_REQUEST_ID") or uuid.uuid4().hex
        context: dict[str, str] = {"trace_id": trace_id}

        auth = getattr(request, "auth", None)
        if isinstance(auth, AuthContext) and auth.user is not None:
            context["usr.id"] = str(auth.user.pk)
            context["usr.email"] = auth.user.email
            if auth.organization is not None:
                context["organization.id"] = auth.organization.stytch_org_id
        bind_contextvars(**context)

        start = time.perf_counter()
        try:
            response = self.get_response(request)
            logger.info(
                "request_finished",
                duration_ms=(time.perf_counter() - start) * 1000,
                **{
                    "http.method": request.method,
                    "http.url_details.path": request.path,
                    "http.status_code": response.status_code,
                },
            )
            response["X-Request-ID"] = trace_id
            return response
        finally:
            clear_contextvars()

"""
Authorization gate.

A pure decision over claims already resolved by the identity provider:
every protected surface either proceeds, sends the caller somewhere else
(sign-in, wait-list, organization activation, their landing page), or
rejects a presented-but-invalid token. Missing claims are never errors.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from functools import wraps
from typing import Any
from urllib.parse import urlencode

from django.conf import settings
from django.http import HttpRequest
from ninja.errors import HttpError

from apps.accounts.constants import OrgRoles
from apps.core.auth import RequestContext, request_context
from apps.core.logging import get_logger

logger = get_logger(__name__)

ORG_ADMIN = OrgRoles.ADMIN
ORG_MEMBER = OrgRoles.MEMBER

MembershipLookup = Callable[[str], list[str]]


class Surface(StrEnum):
    """Kinds of protected surface, from least to most restricted."""

    AUTHENTICATED = "authenticated"
    ORG_MEMBER = "org_member"
    ORG_ADMIN = "org_admin"
    SUPER_ADMIN = "super_admin"


class Outcome(StrEnum):
    ALLOW = "allow"
    REDIRECT = "redirect"
    REJECT = "reject"


@dataclass(frozen=True)
class Decision:
    outcome: Outcome
    destination: str | None = None

    @classmethod
    def allow(cls) -> "Decision":
        return cls(Outcome.ALLOW)

    @classmethod
    def redirect(cls, destination: str) -> "Decision":
        return cls(Outcome.REDIRECT, destination)

    @classmethod
    def reject(cls) -> "Decision":
        return cls(Outcome.REJECT)

    @property
    def allowed(self) -> bool:
        return self.outcome == Outcome.ALLOW


class AuthorizationRedirect(Exception):
    """Raised by gated endpoints; rendered by the API as 303 See Other."""

    def __init__(self, destination: str) -> None:
        super().__init__(destination)
        self.destination = destination


def landing_for(ctx: RequestContext) -> str:
    """Default authenticated landing page for the caller."""
    if ctx.is_super_admin:
        return settings.SUPER_ADMIN_URL
    return settings.HOME_URL


def activate_org_url(org_id: str) -> str:
    return f"{settings.ACTIVATE_ORG_URL}?{urlencode({'orgId': org_id})}"


def authorize(
    ctx: RequestContext,
    surface: Surface,
    memberships: MembershipLookup,
) -> Decision:
    """
    Decide whether the caller may use a surface.

    Args:
        ctx: Resolved claims for the request
        surface: The surface being accessed
        memberships: Lookup of organization ids the user belongs to, only
            consulted when the caller has no active organization

    Returns:
        Decision to allow, redirect (with destination) or reject
    """
    if ctx.failed:
        return Decision.reject()
    if ctx.user_id is None:
        return Decision.redirect(settings.SIGN_IN_URL)

    if surface == Surface.SUPER_ADMIN:
        if ctx.is_super_admin:
            return Decision.allow()
        return Decision.redirect(landing_for(ctx))

    if ctx.is_super_admin and surface == Surface.AUTHENTICATED:
        return Decision.allow()

    if ctx.org_id is None:
        org_ids = memberships(ctx.user_id)
        if not org_ids:
            return Decision.redirect(settings.WAIT_LIST_URL)
        return Decision.redirect(activate_org_url(org_ids[0]))

    if ctx.is_super_admin or surface == Surface.AUTHENTICATED:
        return Decision.allow()

    if surface == Surface.ORG_ADMIN and ctx.org_role == ORG_ADMIN:
        return Decision.allow()
    if surface == Surface.ORG_MEMBER and ctx.org_role in (ORG_ADMIN, ORG_MEMBER):
        return Decision.allow()

    return Decision.redirect(settings.HOME_URL)


def _membership_lookup(user_id: str) -> list[str]:
    from apps.accounts.services import list_membership_org_ids

    return list_membership_org_ids(user_id)


def memberships_for(ctx: RequestContext) -> MembershipLookup:
    """
    Membership source for a request.

    Organizations discovered by Stytch win; the local mirror only knows
    members that have already opened a session inside the organization.
    """
    if ctx.membership_org_ids:
        discovered = list(ctx.membership_org_ids)
        return lambda user_id: discovered
    return _membership_lookup


def require_surface(surface: Surface) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Gate a django-ninja endpoint behind the authorization rules.

    Usage:
        @router.get("/checklist")
        @require_surface(Surface.ORG_MEMBER)
        def get_checklist(request): ...

    Redirects raise AuthorizationRedirect; rejected tokens raise HttpError 401.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> Any:
            ctx = request_context(request)
            decision = authorize(ctx, surface, memberships_for(ctx))
            if decision.outcome == Outcome.REJECT:
                raise HttpError(401, "Not authenticated")
            if decision.outcome == Outcome.REDIRECT:
                logger.info(
                    "authorization_redirect",
                    surface=str(surface),
                    destination=decision.destination,
                    **{"usr.id": ctx.user_id},
                )
                raise AuthorizationRedirect(decision.destination or settings.SIGN_IN_URL)
            return func(request, *args, **kwargs)

        return wrapper

    return decorator

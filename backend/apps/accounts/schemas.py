"""
Auth schemas - request/response models for the current identity.
"""

from pydantic import BaseModel, Field


class UserInfo(BaseModel):
    """User info for API responses."""

    id: int = Field(..., description="Local database user ID")
    email: str = Field(..., description="User's email address")
    name: str = Field(..., description="User's display name")
    is_super_admin: bool = Field(..., description="Global super-admin claim")


class MemberInfo(BaseModel):
    """Member info for API responses."""

    id: int = Field(..., description="Local database member ID")
    stytch_member_id: str = Field(..., description="Stytch member ID")
    role: str = Field(..., description="Organization role: org:admin or org:member")
    is_admin: bool = Field(..., description="Whether the member has admin privileges")


class OrganizationInfo(BaseModel):
    """Organization info for API responses."""

    id: str = Field(..., description="Stytch organization ID")
    name: str = Field(..., description="Organization display name")
    slug: str = Field(..., description="URL-safe organization identifier")
    plan: str = Field(..., description="Current plan: free or pro")


class MeResponse(BaseModel):
    """Response for the current identity endpoint."""

    user: UserInfo = Field(..., description="Cross-org user identity")
    member: MemberInfo | None = Field(None, description="Membership in the active organization")
    organization: OrganizationInfo | None = Field(None, description="Active organization, if any")
    membership_org_ids: list[str] = Field(
        default_factory=list,
        description="Every organization the user belongs to, oldest first",
    )
    landing_url: str = Field(..., description="Default page for this user after sign-in")

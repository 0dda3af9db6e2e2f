"""
Pydantic schemas for organization API endpoints.
"""

from datetime import datetime

from ninja import Schema
from pydantic import EmailStr, Field


class OrganizationSchema(Schema):
    id: str = Field(description="Stytch organization ID")
    name: str
    slug: str
    plan: str
    subscription_status: str
    created_by: str
    created_at: datetime


class CreateOrganizationRequest(Schema):
    """Provision an organization and invite its first admin."""

    name: str = Field(default="", max_length=255, description="Display name; the slug is derived from it")
    email: EmailStr | None = Field(default=None, description="Invitee who becomes the organization admin")


class CreateOrganizationResponse(Schema):
    message: str
    organization: OrganizationSchema


class DashboardStats(Schema):
    """Counts shown on the dashboard; which ones are set depends on the caller."""

    organizations: int | None = None
    reports: int
    vehicles: int | None = None
    drivers: int | None = None

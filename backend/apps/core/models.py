"""
Core models - shared base classes.
"""

from django.db import models


class TimestampedModel(models.Model):
    """
    Abstract base model with created_at/updated_at timestamps.
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class TenantScopedModel(models.Model):
    """
    Abstract base model for all organization-scoped records.

    The foreign key targets ``Organization.stytch_org_id`` (column ``org_id``)
    so queries are keyed by the same organization id the session carries:

        Driver.objects.filter(organization_id=ctx.org_id)

    Usage:
        class Driver(TenantScopedModel):
            name = models.CharField(max_length=255)
    """

    organization = models.ForeignKey(
        "organizations.Organization",
        on_delete=models.CASCADE,
        to_field="stytch_org_id",
        db_column="org_id",
        related_name="%(class)s_set",
    )

    class Meta:
        abstract = True

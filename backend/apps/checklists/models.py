"""
Checklists models - one inspection checklist document per organization.
"""

from django.db import models

from apps.core.models import TimestampedModel


class Checklist(TimestampedModel):
    """
    An organization's ordered list of inspection categories.

    ``categories`` holds ``[{id, name, icon, items: [{id, name, description}]}]``
    and is overwritten whole on every save.
    """

    organization = models.OneToOneField(
        "organizations.Organization",
        on_delete=models.CASCADE,
        to_field="stytch_org_id",
        db_column="org_id",
        related_name="checklist",
    )
    categories = models.JSONField(default=list, blank=True)

    def __str__(self) -> str:
        return f"Checklist for {self.organization_id}"

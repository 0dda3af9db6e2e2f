"""
Inspections models - submitted inspection reports.
"""

import uuid

from django.db import models

from apps.core.models import TenantScopedModel


class InspectionReport(TenantScopedModel):
    """
    One completed checklist submission. Never updated after creation.

    ``items`` is a snapshot of the checklist at submission time, so later
    checklist edits do not change historical reports. Each entry holds
    ``id, name, description, category_id, category_name, status, notes``.
    """

    class Verdict(models.TextChoices):
        PASS = "PASS", "Pass"
        FAIL = "FAIL", "Fail"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    vehicle_registration = models.CharField(max_length=50)
    driver_name = models.CharField(max_length=255)
    current_odometer = models.BigIntegerField(null=True, blank=True)
    inspected_by = models.CharField(max_length=255, blank=True)
    final_verdict = models.CharField(max_length=4, choices=Verdict.choices)
    items = models.JSONField(default=list)
    submitted_by = models.CharField(max_length=255, help_text="Local id of the submitting user")
    submitted_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ["-submitted_at"]
        indexes = [models.Index(fields=["organization", "-submitted_at"], name="inspections_org_submitted_idx")]

    def __str__(self) -> str:
        return f"{self.vehicle_registration} {self.final_verdict} ({self.submitted_at:%Y-%m-%d})"

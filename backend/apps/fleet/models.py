"""
Fleet models - an organization's drivers and vehicles.
"""

import uuid

from django.db import models

from apps.core.models import TenantScopedModel


class Driver(TenantScopedModel):
    """A driver on the roster; ``name`` is stored title-cased."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ["name"]
        indexes = [models.Index(fields=["organization", "name"], name="fleet_driver_org_name_idx")]

    def __str__(self) -> str:
        return self.name


class Vehicle(TenantScopedModel):
    """A vehicle on the roster; ``registration`` is stored upper-cased without separators."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    registration = models.CharField(max_length=50)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ["registration"]
        indexes = [models.Index(fields=["organization", "registration"], name="fleet_vehicle_org_reg_idx")]

    def __str__(self) -> str:
        return self.registration

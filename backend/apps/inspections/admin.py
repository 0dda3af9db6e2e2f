"""Admin configuration for inspections app."""

from django.contrib import admin

from apps.inspections.models import InspectionReport


@admin.register(InspectionReport)
class InspectionReportAdmin(admin.ModelAdmin):
    """Read-only admin for InspectionReport; reports are never edited."""

    list_display = [
        "vehicle_registration",
        "driver_name",
        "final_verdict",
        "item_count",
        "organization",
        "submitted_at",
    ]
    list_filter = ["final_verdict", "organization"]
    search_fields = ["vehicle_registration", "driver_name", "inspected_by"]
    ordering = ["-submitted_at"]

    def has_change_permission(self, request, obj=None) -> bool:
        return False

    @admin.display(description="Items")
    def item_count(self, obj: InspectionReport) -> int:
        return len(obj.items or [])

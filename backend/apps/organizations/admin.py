"""Admin configuration for organizations app."""

from django.contrib import admin

from apps.organizations.models import Organization


@admin.register(Organization)
class OrganizationAdmin(admin.ModelAdmin):
    """Admin for Organization model."""

    list_display = ["name", "slug", "plan", "subscription_status", "trial_ends_at", "created_at"]
    list_filter = ["plan", "subscription_status"]
    search_fields = ["name", "slug", "stytch_org_id", "created_by"]
    readonly_fields = ["stytch_org_id", "created_at", "updated_at"]
    ordering = ["-created_at"]

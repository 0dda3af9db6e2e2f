"""
Organizations models - multi-tenancy foundation.
"""

from django.db import models

from apps.core.models import TimestampedModel


class Organization(TimestampedModel):
    """
    Local replica of a Stytch Organization plus its plan and subscription.

    Stytch is the source of truth for org/member data. Every tenant-scoped
    table references ``stytch_org_id``.
    """

    class Plan(models.TextChoices):
        FREE = "free", "Free"
        PRO = "pro", "Pro"

    class SubscriptionStatus(models.TextChoices):
        NONE = "none", "None"
        TRIALING = "trialing", "Trialing"
        ACTIVE = "active", "Active"
        CANCELLED = "cancelled", "Cancelled"

    stytch_org_id = models.CharField(
        max_length=255,
        unique=True,
        db_index=True,
        help_text="Stytch organization_id, e.g. 'organization-xxx'",
    )

    name = models.CharField(max_length=255)
    slug = models.SlugField(
        max_length=255,
        unique=True,
        help_text="URL-safe identifier, e.g. 'acme-haulage'",
    )
    plan = models.CharField(max_length=20, choices=Plan.choices, default=Plan.FREE)
    created_by = models.CharField(
        max_length=255,
        blank=True,
        help_text="Email of the super-admin who provisioned the organization",
    )

    # Paystack subscription (populated after billing verification)
    subscription_status = models.CharField(
        max_length=20,
        choices=SubscriptionStatus.choices,
        default=SubscriptionStatus.NONE,
    )
    trial_ends_at = models.DateTimeField(null=True, blank=True)
    paystack_customer_code = models.CharField(
        max_length=255,
        blank=True,
        help_text="Paystack customer code, e.g. 'CUS_xxx'",
    )
    paystack_subscription_code = models.CharField(
        max_length=255,
        blank=True,
        help_text="Paystack subscription code, e.g. 'SUB_xxx'",
    )

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.name

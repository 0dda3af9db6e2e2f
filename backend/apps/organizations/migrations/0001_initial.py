from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Organization",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "stytch_org_id",
                    models.CharField(
                        db_index=True,
                        help_text="Stytch organization_id, e.g. 'organization-xxx'",
                        max_length=255,
                        unique=True,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                (
                    "slug",
                    models.SlugField(
                        help_text="URL-safe identifier, e.g. 'acme-haulage'",
                        max_length=255,
                        unique=True,
                    ),
                ),
                (
                    "plan",
                    models.CharField(
                        choices=[("free", "Free"), ("pro", "Pro")],
                        default="free",
                        max_length=20,
                    ),
                ),
                (
                    "created_by",
                    models.CharField(
                        blank=True,
                        help_text="Email of the super-admin who provisioned the organization",
                        max_length=255,
                    ),
                ),
                (
                    "subscription_status",
                    models.CharField(
                        choices=[
                            ("none", "None"),
                            ("trialing", "Trialing"),
                            ("active", "Active"),
                            ("cancelled", "Cancelled"),
                        ],
                        default="none",
                        max_length=20,
                    ),
                ),
                ("trial_ends_at", models.DateTimeField(blank=True, null=True)),
                (
                    "paystack_customer_code",
                    models.CharField(blank=True, help_text="Paystack customer code, e.g. 'CUS_xxx'", max_length=255),
                ),
                (
                    "paystack_subscription_code",
                    models.CharField(
                        blank=True, help_text="Paystack subscription code, e.g. 'SUB_xxx'", max_length=255
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]

import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("organizations", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="InspectionReport",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("vehicle_registration", models.CharField(max_length=50)),
                ("driver_name", models.CharField(max_length=255)),
                ("current_odometer", models.BigIntegerField(blank=True, null=True)),
                ("inspected_by", models.CharField(blank=True, max_length=255)),
                (
                    "final_verdict",
                    models.CharField(choices=[("PASS", "Pass"), ("FAIL", "Fail")], max_length=4),
                ),
                ("items", models.JSONField(default=list)),
                (
                    "submitted_by",
                    models.CharField(help_text="Local id of the submitting user", max_length=255),
                ),
                ("submitted_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                (
                    "organization",
                    models.ForeignKey(
                        db_column="org_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="inspectionreport_set",
                        to="organizations.organization",
                        to_field="stytch_org_id",
                    ),
                ),
            ],
            options={
                "ordering": ["-submitted_at"],
                "indexes": [
                    models.Index(
                        fields=["organization", "-submitted_at"], name="inspections_org_submitted_idx"
                    )
                ],
            },
        ),
    ]

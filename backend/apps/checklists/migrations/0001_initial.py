import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("organizations", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Checklist",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("categories", models.JSONField(blank=True, default=list)),
                (
                    "organization",
                    models.OneToOneField(
                        db_column="org_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="checklist",
                        to="organizations.organization",
                        to_field="stytch_org_id",
                    ),
                ),
            ],
        ),
    ]

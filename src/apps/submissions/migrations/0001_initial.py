"""Initial migration for submissions app - SubmissionRecord model."""

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="SubmissionRecord",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("namespace", models.CharField(db_index=True, max_length=100)),
                ("key", models.CharField(max_length=100)),
                ("value", models.TextField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "submission record",
                "verbose_name_plural": "submission records",
                "ordering": ["-created_at"],
                "constraints": [
                    models.UniqueConstraint(fields=("namespace", "key"), name="unique_submission_key"),
                ],
            },
        ),
    ]

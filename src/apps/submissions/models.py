"""Submissions app models."""

from typing import ClassVar

from django.db import models


class SubmissionRecord(models.Model):
    """One serialized submission, keyed by (namespace, key).

    The row is an opaque blob to the database; the submission service owns
    the JSON shape stored in ``value``.
    """

    namespace = models.CharField(max_length=100, db_index=True)
    key = models.CharField(max_length=100)
    value = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering: ClassVar[list[str]] = ["-created_at"]
        verbose_name = "submission record"
        verbose_name_plural = "submission records"
        constraints: ClassVar[list] = [
            models.UniqueConstraint(fields=["namespace", "key"], name="unique_submission_key"),
        ]

    def __str__(self) -> str:
        return f"{self.namespace}/{self.key}"

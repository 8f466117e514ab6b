"""Submissions app admin configuration."""

from django.contrib import admin

from .models import SubmissionRecord


@admin.register(SubmissionRecord)
class SubmissionRecordAdmin(admin.ModelAdmin):
    """Read-only view of stored submission blobs."""

    list_display = ("key", "namespace", "created_at", "updated_at")
    list_filter = ("namespace", "created_at")
    search_fields = ("key", "value")
    readonly_fields = ("namespace", "key", "value", "created_at", "updated_at")
    ordering = ("-created_at",)

    def has_add_permission(self, request) -> bool:
        return False

    def has_change_permission(self, request, obj=None) -> bool:
        return False

    def has_delete_permission(self, request, obj=None) -> bool:
        return False

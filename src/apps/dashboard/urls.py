"""Dashboard app URL configuration."""

from django.urls import path

from . import views

app_name = "dashboard"

urlpatterns = [
    path("", views.SubmissionDashboardView.as_view(), name="index"),
    path("export/", views.SubmissionExportView.as_view(), name="export"),
    path("<str:submission_id>/update/", views.SubmissionUpdateView.as_view(), name="update"),
]

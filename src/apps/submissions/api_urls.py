"""API URL configuration for contact submission endpoints."""

from django.urls import path

from . import api_views

app_name = "submissions_api"

urlpatterns = [
    path("contact", api_views.ContactAPIView.as_view(), name="contact"),
    path("contact/<str:submission_id>", api_views.SubmissionDetailAPIView.as_view(), name="detail"),
]

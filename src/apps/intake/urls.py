"""Intake app URL configuration."""

from django.urls import path

from . import views

app_name = "intake"

urlpatterns = [
    path("", views.IntakeFormView.as_view(), name="form"),
]

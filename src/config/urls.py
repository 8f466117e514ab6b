"""
URL configuration for the project intake application.
"""

from django.conf import settings
from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", RedirectView.as_view(pattern_name="intake:form", permanent=False)),
    path("api/", include("apps.submissions.api_urls")),
    path("contact/", include("apps.intake.urls")),
    path("dashboard/", include("apps.dashboard.urls")),
]

if settings.DEBUG and "debug_toolbar" in settings.INSTALLED_APPS:
    import debug_toolbar

    urlpatterns = [
        path("__debug__/", include(debug_toolbar.urls)),
        *urlpatterns,
    ]

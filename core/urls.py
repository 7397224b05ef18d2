"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path
from django.views.generic import RedirectView

from core import views

app_name = "core"

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="core:records", permanent=False), name="home"),
    path("api/records/", views.records_api, name="records"),
    path("api/records/<int:record_id>/projection/", views.record_projection_api, name="record_projection"),
]

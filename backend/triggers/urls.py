from __future__ import annotations

from django.urls import path

from . import views

urlpatterns = [
    path("handlers/", views.TriggerHandlersView.as_view(), name="trigger-handlers"),
    path(
        "handlers/<str:name>/",
        views.TriggerHandlerDetailView.as_view(),
        name="trigger-handler-detail",
    ),
]

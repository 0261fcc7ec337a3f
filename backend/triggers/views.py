from __future__ import annotations

from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from config.domain_exceptions import NotFoundError

from .registry import TriggerRegistration, evaluate_registration_enabled, get_registration, get_registrations
from .stats import get_trigger_stats


def _serialize_registration(registration: TriggerRegistration) -> dict:
    enabled, reason = evaluate_registration_enabled(registration)
    handler_class = registration.handler_class
    return {
        "name": registration.name,
        "model": registration.model_label,
        "handler": f"{handler_class.__module__}.{handler_class.__qualname__}",
        "description": registration.description,
        "enabled": enabled,
        "disabled_reason": reason,
        "stats": get_trigger_stats().handler_stats(registration.name),
    }


class TriggerHandlersView(APIView):
    """GET /api/triggers/handlers/ - Registered trigger handlers + stats (admin-only)."""

    permission_classes = [IsAuthenticated, IsAdminUser]

    def get(self, request):
        model = request.query_params.get("model")
        registrations = get_registrations()
        handlers = [
            _serialize_registration(registrations[name])
            for name in sorted(registrations)
            if not model or registrations[name].model_label == model.lower()
        ]
        stats = get_trigger_stats().as_dict()
        stats.pop("by_handler", None)
        return Response({"data": {"handlers": handlers, "totals": stats}})


class TriggerHandlerDetailView(APIView):
    """GET /api/triggers/handlers/<name>/ - One registered handler (admin-only)."""

    permission_classes = [IsAuthenticated, IsAdminUser]

    def get(self, request, name: str):
        registration = get_registration(name)
        if registration is None:
            raise NotFoundError(f"Trigger handler not found: {name}")
        return Response({"data": _serialize_registration(registration)})

"""Django app configuration for trigger dispatch."""

from __future__ import annotations

from django.apps import AppConfig
from django.utils.module_loading import autodiscover_modules


class TriggersConfig(AppConfig):
    """Django app configuration for record-lifecycle triggers."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "triggers"
    verbose_name = "Record Triggers"

    def ready(self) -> None:
        """Connect model signal receivers and load handler modules."""
        # Receivers connect on import; dispatch_uid keeps this idempotent.
        from . import receivers  # noqa: F401

        # Apps register handlers from their own `trigger_handlers.py`.
        autodiscover_modules("trigger_handlers")

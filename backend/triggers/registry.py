"""Handler registration and discovery for trigger dispatch."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from django.db import models

from .config import is_handler_disabled
from .handlers import TriggerHandler

logger = logging.getLogger(__name__)

_registrations: dict[str, "TriggerRegistration"] = {}

EnabledWhenPredicate = Callable[[], bool]


def model_label(model: type[models.Model] | str) -> str:
    """Return the lowercase ``app_label.model_name`` label for a model or label string."""
    if isinstance(model, str):
        return model.lower()
    return model._meta.label_lower


@dataclass
class TriggerRegistration:
    """A handler class bound to a model."""

    name: str
    model_label: str
    handler_class: type[TriggerHandler]
    enabled: bool = True
    description: str | None = None
    enabled_when: EnabledWhenPredicate | None = None

    def is_disabled(self) -> bool:
        enabled, _reason = evaluate_registration_enabled(self)
        return not enabled

    def build(self) -> TriggerHandler:
        """Create a fresh handler instance with disablement injected."""
        return self.handler_class(disabled=self.is_disabled)


def register(
    model: type[models.Model] | str,
    name: str | None = None,
    enabled: bool = True,
    description: str | None = None,
    enabled_when: EnabledWhenPredicate | None = None,
) -> Callable[[type[TriggerHandler]], type[TriggerHandler]]:
    """Class decorator binding a handler to a model.

    Usage:
        @register(Ticket)
        class TicketHandler(TriggerHandler):
            def before_insert(self, new_records):
                ...
    """

    def decorator(handler_class: type[TriggerHandler]) -> type[TriggerHandler]:
        resolved_name = name or handler_class.handler_name()
        if resolved_name in _registrations:
            raise ValueError(f"Duplicate trigger handler registration for {resolved_name!r}")

        resolved_description = description
        if not resolved_description:
            doc = getattr(handler_class, "__doc__", None)
            if isinstance(doc, str):
                for line in doc.strip().splitlines():
                    line = line.strip()
                    if line:
                        resolved_description = line[:500]
                        break

        label = model_label(model)
        _registrations[resolved_name] = TriggerRegistration(
            name=resolved_name,
            model_label=label,
            handler_class=handler_class,
            enabled=enabled,
            description=resolved_description,
            enabled_when=enabled_when,
        )
        logger.debug("Registered trigger handler %s for %s", resolved_name, label)
        return handler_class

    return decorator


def get_registrations() -> dict[str, TriggerRegistration]:
    """Return a copy of all registrations."""
    return _registrations.copy()


def get_registration(name: str) -> TriggerRegistration | None:
    """Return a specific registration by name, or None if not found."""
    return _registrations.get(name)


def get_registrations_for_model(model: type[models.Model] | str) -> list[TriggerRegistration]:
    """Return registrations for a model in registration order."""
    label = model_label(model)
    return [reg for reg in _registrations.values() if reg.model_label == label]


def evaluate_registration_enabled(registration: TriggerRegistration) -> tuple[bool, str | None]:
    """
    Return (enabled, reason).

    Reasons are intended for status output:
    - None: enabled
    - "disabled": registered with enabled=False
    - "configured_off": switched off via settings.TRIGGERS
    - "gated": disabled by enabled_when predicate
    - "gating_error": enabled_when raised
    """
    if not bool(registration.enabled):
        return False, "disabled"

    if is_handler_disabled(registration.name):
        return False, "configured_off"

    if registration.enabled_when is None:
        return True, None

    try:
        return (True, None) if bool(registration.enabled_when()) else (False, "gated")
    except Exception:
        return False, "gating_error"

"""
Trigger entry point.

Turns a notification for a model into one dispatcher call per registered
handler. Handlers are built fresh for each call and dropped afterwards.
"""

from __future__ import annotations

import logging
from typing import Iterable

from django.db import models
from django.utils import timezone

from . import dispatcher
from .context import InvocationContext
from .registry import get_registrations_for_model
from .signals import post_undelete
from .stats import get_trigger_stats

logger = logging.getLogger(__name__)


def dispatch_to_registered(model: type[models.Model] | str, context: InvocationContext) -> list[str]:
    """
    Dispatch a context to every handler registered for the model.

    Args:
        model: Model class (or ``app_label.model_name`` label) the records belong to
        context: The notification to dispatch

    Returns:
        Names of the handlers whose operation was invoked

    Raises:
        Whatever a handler raised, unmodified. Handlers after the failing one
        are not run, so the caller's transaction can roll back cleanly.
    """
    registrations = get_registrations_for_model(model)
    if not registrations:
        return []

    stats = get_trigger_stats()
    event = context.event_name
    invoked: list[str] = []

    for registration in registrations:
        handler = registration.build()
        try:
            method_name = dispatcher.run(handler, context)
        except Exception as exc:
            stats.record_failure(registration.name, event, exc)
            logger.warning(
                "Trigger handler %s failed on %s: %s",
                registration.name,
                event,
                exc,
            )
            raise

        if method_name is None:
            stats.record_skip(registration.name, event)
            logger.debug("Trigger handler %s skipped %s", registration.name, event)
            continue

        stats.record_dispatch(registration.name, event, timezone.now())
        logger.debug(
            "Trigger handler %s ran %s for %d new / %d old records",
            registration.name,
            method_name,
            len(context.new_records),
            len(context.old_records),
        )
        invoked.append(registration.name)

    return invoked


def undelete(model: type[models.Model], instances: Iterable[models.Model], using: str = "default") -> None:
    """
    Announce that previously deleted records were restored.

    Call this after the application's own restore logic has been persisted.
    """
    instances = list(instances)
    if not instances:
        return
    post_undelete.send(sender=model, instances=instances, using=using)

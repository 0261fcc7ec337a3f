"""
Django model signal receivers feeding the trigger entry point.

Each receiver converts one Django notification into an InvocationContext.
Django signals are per instance, so record sequences hold a single record
(undelete may carry several).
"""

from __future__ import annotations

from django.db.models.signals import post_delete, post_save, pre_delete, pre_save
from django.dispatch import receiver

from .context import InvocationContext
from .entrypoint import dispatch_to_registered
from .registry import get_registrations_for_model
from .signals import post_undelete


# Snapshot of the stored row, captured in pre_save and consumed in post_save.
_OLD_RECORD_ATTR = "_trigger_old_record"


def _has_handlers(sender) -> bool:
    return bool(get_registrations_for_model(sender))


def _load_stored(sender, instance, using):
    if instance.pk is None:
        return None
    return sender._default_manager.using(using).filter(pk=instance.pk).first()


@receiver(pre_save, dispatch_uid="triggers.pre_save")
def on_pre_save(sender, *, instance, raw: bool = False, using=None, **kwargs) -> None:
    """Dispatch BEFORE INSERT / BEFORE UPDATE."""
    if raw or not _has_handlers(sender):
        return

    # An unsaved instance with an explicit pk still updates an existing row.
    old = _load_stored(sender, instance, using)
    setattr(instance, _OLD_RECORD_ATTR, old)

    if old is None:
        context = InvocationContext.before_insert([instance])
    else:
        context = InvocationContext.before_update([old], [instance])
    dispatch_to_registered(sender, context)


@receiver(post_save, dispatch_uid="triggers.post_save")
def on_post_save(sender, *, instance, created: bool, raw: bool = False, **kwargs) -> None:
    """Dispatch AFTER INSERT / AFTER UPDATE."""
    if raw or not _has_handlers(sender):
        return

    old = instance.__dict__.pop(_OLD_RECORD_ATTR, None)
    if created or old is None:
        context = InvocationContext.after_insert([instance])
    else:
        context = InvocationContext.after_update([old], [instance])
    dispatch_to_registered(sender, context)


@receiver(pre_delete, dispatch_uid="triggers.pre_delete")
def on_pre_delete(sender, *, instance, **kwargs) -> None:
    """Dispatch BEFORE DELETE."""
    if not _has_handlers(sender):
        return
    dispatch_to_registered(sender, InvocationContext.before_delete([instance]))


@receiver(post_delete, dispatch_uid="triggers.post_delete")
def on_post_delete(sender, *, instance, **kwargs) -> None:
    """Dispatch AFTER DELETE."""
    if not _has_handlers(sender):
        return
    dispatch_to_registered(sender, InvocationContext.after_delete([instance]))


@receiver(post_undelete, dispatch_uid="triggers.post_undelete")
def on_post_undelete(sender, *, instances, **kwargs) -> None:
    """Dispatch UNDELETE."""
    if not _has_handlers(sender):
        return
    dispatch_to_registered(sender, InvocationContext.after_undelete(instances))

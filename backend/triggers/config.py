"""Trigger configuration dataclass and settings normalization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TriggerConfig:
    """Configuration for trigger dispatch, read from ``settings.TRIGGERS``."""

    enabled: bool = True
    disabled_handlers: frozenset[str] = field(default_factory=frozenset)


def normalize_trigger_config(raw: Any) -> TriggerConfig:
    """
    Normalize raw settings dict into a typed TriggerConfig.

    Args:
        raw: Raw settings value (dict or None)

    Returns:
        Validated TriggerConfig with defaults applied
    """
    if not isinstance(raw, dict):
        return TriggerConfig()

    enabled = raw.get("enabled", True)
    if not isinstance(enabled, bool):
        enabled = True

    disabled_handlers = raw.get("disabled_handlers", ())
    if isinstance(disabled_handlers, str):
        disabled_handlers = [disabled_handlers]
    if not isinstance(disabled_handlers, (list, tuple, set, frozenset)):
        disabled_handlers = ()

    return TriggerConfig(
        enabled=enabled,
        disabled_handlers=frozenset(
            name.strip() for name in disabled_handlers if isinstance(name, str) and name.strip()
        ),
    )


def get_trigger_config() -> TriggerConfig:
    """
    Load trigger configuration from Django settings.

    Read on every call so runtime overrides apply to the next invocation.
    """
    from django.conf import settings

    return normalize_trigger_config(getattr(settings, "TRIGGERS", None))


def is_handler_disabled(name: str) -> bool:
    """Return True if dispatch is switched off globally or for this handler."""
    config = get_trigger_config()
    if not config.enabled:
        return True
    return name in config.disabled_handlers

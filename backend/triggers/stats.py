"""Counters for trigger dispatch, kept by the entry point."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class HandlerStats:
    """Per-handler statistics."""

    dispatched: int = 0
    skipped: int = 0
    failed: int = 0
    last_event: str | None = None
    last_dispatch_at: datetime | None = None
    last_error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "dispatched": self.dispatched,
            "skipped": self.skipped,
            "failed": self.failed,
            "last_event": self.last_event,
            "last_dispatch_at": self.last_dispatch_at.isoformat() if self.last_dispatch_at else None,
            "last_error": self.last_error,
        }


@dataclass
class TriggerStats:
    """Global trigger dispatch statistics."""

    dispatched: int = 0
    skipped: int = 0
    failed: int = 0
    last_dispatch_at: datetime | None = None

    by_handler: dict[str, HandlerStats] = field(default_factory=dict)

    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def _handler_locked(self, name: str) -> HandlerStats:
        if name not in self.by_handler:
            self.by_handler[name] = HandlerStats()
        return self.by_handler[name]

    def record_dispatch(self, name: str, event: str, now: datetime) -> None:
        """Record a handler operation that ran to completion."""
        with self._lock:
            self.dispatched += 1
            self.last_dispatch_at = now
            handler_stats = self._handler_locked(name)
            handler_stats.dispatched += 1
            handler_stats.last_event = event
            handler_stats.last_dispatch_at = now

    def record_skip(self, name: str, event: str) -> None:
        """Record a dispatch that invoked nothing (disabled handler or unrouted event)."""
        with self._lock:
            self.skipped += 1
            handler_stats = self._handler_locked(name)
            handler_stats.skipped += 1
            handler_stats.last_event = event

    def record_failure(self, name: str, event: str, error: BaseException) -> None:
        """Record a handler operation that raised."""
        with self._lock:
            self.failed += 1
            handler_stats = self._handler_locked(name)
            handler_stats.failed += 1
            handler_stats.last_event = event
            handler_stats.last_error = str(error)[:500]

    def handler_stats(self, name: str) -> dict[str, Any]:
        """Return a serialized copy of one handler's stats."""
        with self._lock:
            handler_stats = self.by_handler.get(name)
            return handler_stats.as_dict() if handler_stats else HandlerStats().as_dict()

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        with self._lock:
            return {
                "dispatched": self.dispatched,
                "skipped": self.skipped,
                "failed": self.failed,
                "last_dispatch_at": self.last_dispatch_at.isoformat() if self.last_dispatch_at else None,
                "by_handler": {name: s.as_dict() for name, s in self.by_handler.items()},
            }


_stats = TriggerStats()


def get_trigger_stats() -> TriggerStats:
    return _stats


def reset_trigger_stats() -> None:
    """Replace the shared stats with a fresh instance."""
    global _stats
    _stats = TriggerStats()

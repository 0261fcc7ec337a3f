"""
Trigger handler contract and the no-op base adapter.

Business logic subclasses ``TriggerHandler`` and overrides only the
lifecycle operations it cares about.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, Sequence, runtime_checkable

Records = Sequence[Any]
DisabledPredicate = Callable[[], bool]


@runtime_checkable
class HandlerContract(Protocol):
    def before_insert(self, new_records: Records) -> None:
        """Called before new records are inserted."""

        ...

    def before_update(self, old_records: Records, new_records: Records) -> None:
        """Called before existing records are updated."""

        ...

    def before_delete(self, old_records: Records) -> None:
        """Called before records are deleted."""

        ...

    def after_insert(self, new_records: Records) -> None:
        """Called after new records were inserted."""

        ...

    def after_update(self, old_records: Records, new_records: Records) -> None:
        """Called after existing records were updated."""

        ...

    def after_delete(self, old_records: Records) -> None:
        """Called after records were deleted."""

        ...

    def after_undelete(self, new_records: Records) -> None:
        """Called after deleted records were restored."""

        ...

    def is_disabled(self) -> bool:
        """Return True to suppress every operation. Must be side-effect free."""

        ...


class TriggerHandler:
    """
    Base adapter implementing ``HandlerContract`` with no-op operations.

    Disablement is injected at construction, either as a bool or as a
    zero-argument predicate evaluated on each ``is_disabled()`` call:

        class TicketHandler(TriggerHandler):
            def before_insert(self, new_records):
                ...

        TicketHandler(disabled=lambda: not settings.TICKET_TRIGGERS_ENABLED)

    Instances are created per invocation and must not carry state across calls.
    """

    # Override in subclasses to use a stable name in config/logs.
    name: str = ""

    def __init__(self, *, disabled: bool | DisabledPredicate = False):
        self._disabled = disabled

    @classmethod
    def handler_name(cls) -> str:
        return cls.name or cls.__name__

    def is_disabled(self) -> bool:
        if callable(self._disabled):
            return bool(self._disabled())
        return bool(self._disabled)

    def before_insert(self, new_records: Records) -> None:
        pass

    def before_update(self, old_records: Records, new_records: Records) -> None:
        pass

    def before_delete(self, old_records: Records) -> None:
        pass

    def after_insert(self, new_records: Records) -> None:
        pass

    def after_update(self, old_records: Records, new_records: Records) -> None:
        pass

    def after_delete(self, old_records: Records) -> None:
        pass

    def after_undelete(self, new_records: Records) -> None:
        pass

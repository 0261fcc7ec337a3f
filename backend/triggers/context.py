"""Invocation context describing a single record-lifecycle notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from django.db import models


class Phase(models.TextChoices):
    BEFORE = "before", "Before"
    AFTER = "after", "After"


class Operation(models.TextChoices):
    INSERT = "insert", "Insert"
    UPDATE = "update", "Update"
    DELETE = "delete", "Delete"
    UNDELETE = "undelete", "Undelete"


# Undelete has no before phase; its phase is always None.
VALID_COMBINATIONS: frozenset[tuple[Phase | None, Operation]] = frozenset(
    {
        (Phase.BEFORE, Operation.INSERT),
        (Phase.BEFORE, Operation.UPDATE),
        (Phase.BEFORE, Operation.DELETE),
        (Phase.AFTER, Operation.INSERT),
        (Phase.AFTER, Operation.UPDATE),
        (Phase.AFTER, Operation.DELETE),
        (None, Operation.UNDELETE),
    }
)


def _freeze(records: Iterable[Any] | None) -> tuple[Any, ...]:
    if records is None:
        return ()
    return tuple(records)


@dataclass(frozen=True)
class InvocationContext:
    """
    Immutable snapshot of one lifecycle notification.

    Built once by the entry point and discarded after dispatch returns.
    Record sequences are frozen into tuples; the records themselves are
    whatever the platform hands over (model instances for the Django bridge).
    """

    phase: Phase | None
    operation: Operation
    new_records: tuple[Any, ...] = field(default=())
    old_records: tuple[Any, ...] = field(default=())

    def __post_init__(self) -> None:
        # Accept raw values ("before", "insert") from entry points.
        if self.phase is not None:
            object.__setattr__(self, "phase", Phase(self.phase))
        object.__setattr__(self, "operation", Operation(self.operation))
        object.__setattr__(self, "new_records", _freeze(self.new_records))
        object.__setattr__(self, "old_records", _freeze(self.old_records))

    @classmethod
    def before_insert(cls, new_records: Iterable[Any]) -> "InvocationContext":
        return cls(phase=Phase.BEFORE, operation=Operation.INSERT, new_records=new_records)

    @classmethod
    def before_update(cls, old_records: Iterable[Any], new_records: Iterable[Any]) -> "InvocationContext":
        return cls(
            phase=Phase.BEFORE,
            operation=Operation.UPDATE,
            new_records=new_records,
            old_records=old_records,
        )

    @classmethod
    def before_delete(cls, old_records: Iterable[Any]) -> "InvocationContext":
        return cls(phase=Phase.BEFORE, operation=Operation.DELETE, old_records=old_records)

    @classmethod
    def after_insert(cls, new_records: Iterable[Any]) -> "InvocationContext":
        return cls(phase=Phase.AFTER, operation=Operation.INSERT, new_records=new_records)

    @classmethod
    def after_update(cls, old_records: Iterable[Any], new_records: Iterable[Any]) -> "InvocationContext":
        return cls(
            phase=Phase.AFTER,
            operation=Operation.UPDATE,
            new_records=new_records,
            old_records=old_records,
        )

    @classmethod
    def after_delete(cls, old_records: Iterable[Any]) -> "InvocationContext":
        return cls(phase=Phase.AFTER, operation=Operation.DELETE, old_records=old_records)

    @classmethod
    def after_undelete(cls, new_records: Iterable[Any]) -> "InvocationContext":
        return cls(phase=None, operation=Operation.UNDELETE, new_records=new_records)

    @property
    def is_valid(self) -> bool:
        """True for the seven combinations the platform can produce."""
        return (self.phase, self.operation) in VALID_COMBINATIONS

    @property
    def event_name(self) -> str:
        """Return a name such as ``before_insert`` or ``after_undelete``."""
        if self.operation == Operation.UNDELETE and self.phase is None:
            return f"after_{self.operation.value}"
        phase = self.phase.value if self.phase is not None else "none"
        return f"{phase}_{self.operation.value}"

"""
Trigger dispatcher.

Routes one InvocationContext to exactly one handler operation. This module is
the only place that knows how (phase, operation) pairs map to handler methods.
"""

from __future__ import annotations

from dataclasses import dataclass

from .context import InvocationContext, Operation, Phase
from .handlers import HandlerContract


@dataclass(frozen=True)
class Route:
    """A routing table entry: handler method plus the record sequences it receives."""

    method_name: str
    takes_old: bool = False
    takes_new: bool = False

    def arguments(self, context: InvocationContext) -> tuple:
        args: list = []
        if self.takes_old:
            args.append(context.old_records)
        if self.takes_new:
            args.append(context.new_records)
        return tuple(args)


ROUTES: dict[tuple[Phase | None, Operation], Route] = {
    (Phase.BEFORE, Operation.INSERT): Route("before_insert", takes_new=True),
    (Phase.BEFORE, Operation.UPDATE): Route("before_update", takes_old=True, takes_new=True),
    (Phase.BEFORE, Operation.DELETE): Route("before_delete", takes_old=True),
    (Phase.AFTER, Operation.INSERT): Route("after_insert", takes_new=True),
    (Phase.AFTER, Operation.UPDATE): Route("after_update", takes_old=True, takes_new=True),
    (Phase.AFTER, Operation.DELETE): Route("after_delete", takes_old=True),
    (None, Operation.UNDELETE): Route("after_undelete", takes_new=True),
}


def resolve_route(context: InvocationContext) -> Route | None:
    """Return the route for the context, or None for a combination the platform never produces."""
    return ROUTES.get((context.phase, context.operation))


def run(handler: HandlerContract, context: InvocationContext) -> str | None:
    """
    Invoke the single handler operation matching the context.

    Args:
        handler: Handler instance, owned by the caller for this call only
        context: The notification being dispatched

    Returns:
        Name of the invoked method, or None when the handler is disabled or
        the combination has no route

    Errors raised by the handler propagate unmodified.
    """
    if handler.is_disabled():
        return None

    route = resolve_route(context)
    if route is None:
        return None

    method = getattr(handler, route.method_name)
    method(*route.arguments(context))
    return route.method_name


class TriggerDispatcher:
    """
    Object seam over ``run()`` for callers that hold a dispatcher reference.

    Holds no state; a single instance is safe to share and to re-enter.
    """

    def run(self, handler: HandlerContract, context: InvocationContext) -> str | None:
        return run(handler, context)


_dispatcher = TriggerDispatcher()


def get_dispatcher() -> TriggerDispatcher:
    """Get the shared dispatcher instance."""
    return _dispatcher

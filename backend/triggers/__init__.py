"""Record-lifecycle trigger dispatch.

Routes model insert/update/delete/undelete notifications, in their before
and after phases, to handler classes. Detection of the phase and operation
lives only in the dispatcher; handlers override just what they need.

Usage:
    from triggers import TriggerHandler, register

    @register("tickets.Ticket")
    class TicketHandler(TriggerHandler):
        def before_insert(self, new_records):
            ...

        def after_update(self, old_records, new_records):
            ...
"""

from .context import InvocationContext, Operation, Phase
from .dispatcher import ROUTES, Route, TriggerDispatcher, get_dispatcher, resolve_route, run
from .errors import HandlerExecutionError
from .handlers import HandlerContract, TriggerHandler
from .registry import TriggerRegistration, get_registration, get_registrations, register

__all__ = [
    # Context
    "InvocationContext",
    "Phase",
    "Operation",
    # Handlers
    "HandlerContract",
    "TriggerHandler",
    "HandlerExecutionError",
    # Dispatch
    "run",
    "resolve_route",
    "Route",
    "ROUTES",
    "TriggerDispatcher",
    "get_dispatcher",
    # Registration
    "register",
    "TriggerRegistration",
    "get_registrations",
    "get_registration",
]

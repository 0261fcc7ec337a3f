from __future__ import annotations

from config.domain_exceptions import ConflictError


class HandlerExecutionError(ConflictError):
    """
    Raised by handler business logic when an operation cannot proceed.

    The dispatcher never raises, wraps or catches this error; it reaches the
    entry point exactly as the handler raised it.
    """

    def __init__(self, message: str, *, handler_name: str | None = None, event_name: str | None = None):
        super().__init__(message)
        self.handler_name = handler_name
        self.event_name = event_name

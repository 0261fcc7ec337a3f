from __future__ import annotations


class DomainError(Exception):
    """
    Base class for predictable, caller-facing domain errors.
    """


class ValidationError(DomainError):
    pass


class NotFoundError(DomainError):
    pass


class ConflictError(DomainError):
    pass


class ConfigurationError(DomainError):
    """
    Missing/invalid server-side configuration required to perform an operation.
    """

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


def _error_response(
    *,
    error_status: str,
    message: str,
    http_status: int,
    handler: str | None = None,
    event: str | None = None,
) -> Response:
    body: dict[str, object] = {
        "error": {
            "status": error_status,
            "message": message,
        }
    }
    if handler:
        body["error"]["handler"] = handler  # type: ignore[index]
    if event:
        body["error"]["event"] = event  # type: ignore[index]
    return Response(body, status=http_status)


def _extract_message(data: Any) -> str:
    if isinstance(data, str) and data:
        return data
    if isinstance(data, Mapping):
        detail = data.get("detail")
        if isinstance(detail, str) and detail:
            return detail
    return "Request failed."


def _drf_error_status(exc: Exception, response: Response) -> str:
    if isinstance(exc, drf_exceptions.ValidationError):
        return "validation_error"
    if isinstance(exc, (drf_exceptions.NotAuthenticated, drf_exceptions.AuthenticationFailed)):
        return "unauthorized"
    if isinstance(exc, drf_exceptions.PermissionDenied):
        return "forbidden"
    if isinstance(exc, drf_exceptions.NotFound):
        return "not_found"
    if isinstance(exc, drf_exceptions.MethodNotAllowed):
        return "method_not_allowed"
    if response.status_code >= 500:
        return "server_error"
    return "bad_request"


def custom_exception_handler(exc: Exception, context):
    """
    Central exception->HTTP mapping for domain exceptions.

    Keep views thin: raise meaningful exceptions and let this layer
    translate them into consistent API responses.
    """

    response = drf_exception_handler(exc, context)
    if response is not None:
        return _error_response(
            error_status=_drf_error_status(exc, response),
            message=_extract_message(response.data),
            http_status=response.status_code,
        )

    # Local imports to avoid import-time side effects.
    from config import domain_exceptions as domain
    from triggers.errors import HandlerExecutionError

    if isinstance(exc, HandlerExecutionError):
        logger.warning("Trigger handler rejected request: %s", exc)
        return _error_response(
            error_status="conflict",
            message=str(exc),
            http_status=status.HTTP_409_CONFLICT,
            handler=exc.handler_name,
            event=exc.event_name,
        )

    if isinstance(exc, domain.ValidationError):
        return _error_response(
            error_status="validation_error",
            message=str(exc),
            http_status=status.HTTP_400_BAD_REQUEST,
        )
    if isinstance(exc, domain.ConfigurationError):
        return _error_response(
            error_status="configuration_error",
            message=str(exc),
            http_status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    if isinstance(exc, domain.NotFoundError):
        return _error_response(
            error_status="not_found",
            message=str(exc),
            http_status=status.HTTP_404_NOT_FOUND,
        )
    if isinstance(exc, domain.ConflictError):
        return _error_response(
            error_status="conflict",
            message=str(exc),
            http_status=status.HTTP_409_CONFLICT,
        )
    if isinstance(exc, domain.DomainError):
        return _error_response(
            error_status="bad_request",
            message=str(exc),
            http_status=status.HTTP_400_BAD_REQUEST,
        )

    logger.exception(
        "Unhandled exception in API view: %s",
        context.get("view").__class__.__name__ if context.get("view") else "unknown",
        exc_info=exc,
    )
    return None

"""DRF exception handler producing the uniform ``{code, message}`` body.

Domain errors are mapped to an HTTP status by category.  DRF's own
errors (unparseable JSON, unsupported Content-Type, wrong method, ...)
are reshaped into the same body so clients only ever parse one format.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.exceptions import (
    BusinessConflict,
    DomainError,
    EntityNotFound,
    InvalidRequest,
    MalformedPayload,
)

logger = structlog.get_logger(__name__)

# Checked in order; the first matching category wins.
DOMAIN_ERROR_STATUS = (
    (InvalidRequest, status.HTTP_400_BAD_REQUEST),
    (MalformedPayload, status.HTTP_400_BAD_REQUEST),
    (EntityNotFound, status.HTTP_404_NOT_FOUND),
    (BusinessConflict, status.HTTP_409_CONFLICT),
)

PARSE_ERROR_CODE = "INVALID_JSON"
PARSE_ERROR_MESSAGE = "Request body could not be parsed."


def error_body(code: str, message: str) -> Dict[str, str]:
    return {"code": code, "message": message}


def status_for(exc: DomainError) -> int:
    for category, http_status in DOMAIN_ERROR_STATUS:
        if isinstance(exc, category):
            return http_status
    return status.HTTP_400_BAD_REQUEST


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    if isinstance(exc, DomainError):
        http_status = status_for(exc)
        logger.info(
            "request.rejected",
            code=exc.code,
            status_code=http_status,
        )
        return Response(error_body(exc.code, exc.message), status=http_status)

    if isinstance(exc, Http404):
        exc = exceptions.NotFound(*exc.args)
    elif isinstance(exc, DjangoPermissionDenied):
        exc = exceptions.PermissionDenied(*exc.args)

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.ParseError):
        code, message = PARSE_ERROR_CODE, PARSE_ERROR_MESSAGE
    else:
        code = str(exc.default_code).upper()
        message = _flatten_detail(response.data)

    logger.info("request.rejected", code=code, status_code=response.status_code)
    response.data = error_body(code, message)
    return response


def _flatten_detail(detail: Any) -> str:
    """Collapse DRF's nested error details into a single message."""
    if isinstance(detail, dict):
        if "detail" in detail:
            return _flatten_detail(detail["detail"])
        for key, value in detail.items():
            return f"{key}: {_flatten_detail(value)}"
        return ""
    if isinstance(detail, list):
        return _flatten_detail(detail[0]) if detail else ""
    return str(detail)

import time
from typing import Any, Dict

import structlog
from django.apps import apps
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from modules.core.exceptions import error_body

logger = structlog.get_logger()


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}

    start = time.monotonic()
    order_count = apps.get_app_config("orders").order_service.count_orders()
    services["order_store"] = {
        "status": "up",
        "orders": order_count,
        "response_time_ms": round((time.monotonic() - start) * 1000, 2),
    }

    logger.info("health_check_completed", status="healthy", orders=order_count)

    return JsonResponse(
        {
            "status": "healthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200,
    )


def not_found(request: HttpRequest, exception: Exception) -> JsonResponse:
    """JSON replacement for Django's HTML 404 page (unrouted paths)."""
    return JsonResponse(
        error_body("NOT_FOUND", f"No route for {request.path}."),
        status=404,
    )


def server_error(request: HttpRequest) -> JsonResponse:
    logger.error("unhandled_server_error", path=request.path)
    return JsonResponse(
        error_body("INTERNAL_ERROR", "An unexpected error occurred."),
        status=500,
    )

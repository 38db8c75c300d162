"""Order API views.

Exposes the ``OrderService`` over HTTP using a DRF ViewSet.
Domain exceptions propagate to ``api_exception_handler``, which renders
them as ``{code, message}`` with the status of their category.
"""

from __future__ import annotations

from django.apps import apps
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.orders.dtos import CreateOrderDTO, ErrorOutputDTO, OrderOutputDTO
from modules.orders.exceptions import MalformedOrderPayload
from modules.orders.services import OrderService
from modules.orders.validators import validate_create_order

ORDER_ID_PARAMETER = OpenApiParameter(
    name="order_id",
    type=OpenApiTypes.STR,
    location=OpenApiParameter.PATH,
    description="Order identifier, e.g. ORD-000001.",
)


class OrderViewSet(ViewSet):
    """ViewSet for Order operations.

    The service is owned by the orders app config, so every request sees
    the same registry.
    """

    lookup_field = "order_id"
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service: OrderService = apps.get_app_config("orders").order_service

    @extend_schema(
        request=CreateOrderDTO,
        responses={
            201: OrderOutputDTO,
            400: ErrorOutputDTO,
            404: ErrorOutputDTO,
            409: ErrorOutputDTO,
            415: ErrorOutputDTO,
        },
    )
    def create(self, request: Request) -> Response:
        """POST /api/orders"""
        if request.stream is None:
            raise MalformedOrderPayload("Request body is missing.")

        dto = validate_create_order(request.data)
        order = self._service.create_order(dto)
        return Response(
            OrderOutputDTO.from_entity(order).to_wire(),
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        parameters=[ORDER_ID_PARAMETER],
        responses={200: OrderOutputDTO, 404: ErrorOutputDTO},
    )
    def retrieve(self, request: Request, order_id: str | None = None) -> Response:
        """GET /api/orders/{order_id}"""
        order = self._service.get_order(order_id or "")
        return Response(OrderOutputDTO.from_entity(order).to_wire())

    @extend_schema(
        request=None,
        parameters=[ORDER_ID_PARAMETER],
        responses={200: OrderOutputDTO, 404: ErrorOutputDTO, 409: ErrorOutputDTO},
    )
    @action(detail=True, methods=["patch"])
    def cancel(self, request: Request, order_id: str | None = None) -> Response:
        """PATCH /api/orders/{order_id}/cancel"""
        order = self._service.cancel_order(order_id or "")
        return Response(OrderOutputDTO.from_entity(order).to_wire())

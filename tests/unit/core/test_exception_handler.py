"""Unit tests for the ``{code, message}`` exception handler."""

from __future__ import annotations

import pytest
from django.http import Http404
from rest_framework import exceptions

from modules.core.exceptions import api_exception_handler, status_for
from modules.orders.exceptions import (
    CouponNotFound,
    InvalidOrderRequest,
    MalformedOrderPayload,
    OrderAlreadyCancelled,
    OrderNotFound,
    OutOfStock,
)

pytestmark = pytest.mark.unit


class TestDomainErrors:
    @pytest.mark.parametrize(
        "error, expected_status",
        [
            (InvalidOrderRequest("userId", "User ID is required."), 400),
            (MalformedOrderPayload(), 400),
            (OrderNotFound(), 404),
            (CouponNotFound(), 404),
            (OutOfStock(), 409),
            (OrderAlreadyCancelled(), 409),
        ],
    )
    def test_status_by_category(self, error, expected_status):
        assert status_for(error) == expected_status

    def test_body_has_code_and_message(self):
        response = api_exception_handler(OutOfStock(), {})
        assert response.status_code == 409
        assert response.data == {"code": "OUT_OF_STOCK", "message": "Insufficient stock."}

    def test_custom_message_kept(self):
        response = api_exception_handler(OrderNotFound("Order not found: ORD-1"), {})
        assert response.data == {
            "code": "ORDER_NOT_FOUND",
            "message": "Order not found: ORD-1",
        }

    def test_invalid_request_message_names_field(self):
        error = InvalidOrderRequest("items[0].quantity", "Quantity must be at least 1.")
        response = api_exception_handler(error, {})
        assert response.status_code == 400
        assert response.data["code"] == "INVALID_REQUEST"
        assert response.data["message"] == "items[0].quantity: Quantity must be at least 1."


class TestFrameworkErrors:
    def test_parse_error_is_invalid_json(self):
        response = api_exception_handler(exceptions.ParseError("JSON parse error"), {})
        assert response.status_code == 400
        assert response.data == {
            "code": "INVALID_JSON",
            "message": "Request body could not be parsed.",
        }

    def test_unsupported_media_type(self):
        response = api_exception_handler(exceptions.UnsupportedMediaType("text/plain"), {})
        assert response.status_code == 415
        assert response.data["code"] == "UNSUPPORTED_MEDIA_TYPE"
        assert "text/plain" in response.data["message"]

    def test_method_not_allowed(self):
        response = api_exception_handler(exceptions.MethodNotAllowed("DELETE"), {})
        assert response.status_code == 405
        assert response.data["code"] == "METHOD_NOT_ALLOWED"
        assert "DELETE" in response.data["message"]

    def test_django_404(self):
        response = api_exception_handler(Http404("gone"), {})
        assert response.status_code == 404
        assert response.data["code"] == "NOT_FOUND"

    def test_unknown_exception_not_handled(self):
        assert api_exception_handler(RuntimeError("boom"), {}) is None

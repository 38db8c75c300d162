"""Unit tests for order creation request validation.

Covers:
- A wrong JSON type anywhere wins; otherwise the first violated rule, in field order.
- Rule violations raise InvalidOrderRequest (INVALID_REQUEST).
- Wrong shapes and wrong JSON types raise MalformedOrderPayload (INVALID_JSON).
- Field paths are rendered as ``items[0].productId``.
"""

from __future__ import annotations

import pytest

from modules.orders.exceptions import InvalidOrderRequest, MalformedOrderPayload
from modules.orders.validators import format_field_path, validate_create_order

pytestmark = pytest.mark.unit


def _payload(**overrides):
    payload = {
        "userId": "user-1",
        "items": [{"productId": "P1", "quantity": 1}],
    }
    payload.update(overrides)
    return payload


class TestValidPayload:
    def test_returns_dto(self):
        dto = validate_create_order(_payload(couponId="SAVE10", pointAmountToUse=0))
        assert dto.user_id == "user-1"
        assert dto.coupon_id == "SAVE10"

    def test_unknown_fields_are_ignored(self):
        dto = validate_create_order(_payload(giftWrap=True))
        assert dto.user_id == "user-1"

    def test_null_optional_fields_are_accepted(self):
        dto = validate_create_order(
            _payload(deliveryAddress=None, couponId=None, pointAmountToUse=None)
        )
        assert dto.coupon_id is None


class TestRuleViolations:
    @pytest.mark.parametrize(
        "overrides, field, reason",
        [
            ({"userId": ""}, "userId", "User ID is required."),
            ({"userId": None}, "userId", "User ID is required."),
            ({"items": []}, "items", "Order must contain at least one item."),
            (
                {"items": [{"productId": " ", "quantity": 1}]},
                "items[0].productId",
                "Product ID is required.",
            ),
            (
                {"items": [{"productId": "P1", "quantity": 0}]},
                "items[0].quantity",
                "Quantity must be at least 1.",
            ),
            ({"pointAmountToUse": -10}, "pointAmountToUse", "Point amount must be zero or greater."),
        ],
    )
    def test_single_violation(self, overrides, field, reason):
        with pytest.raises(InvalidOrderRequest) as exc_info:
            validate_create_order(_payload(**overrides))
        assert exc_info.value.code == "INVALID_REQUEST"
        assert exc_info.value.field == field
        assert exc_info.value.reason == reason
        assert exc_info.value.message == f"{field}: {reason}"

    @pytest.mark.parametrize(
        "payload, field",
        [
            ({"items": [{"productId": "P1", "quantity": 1}]}, "userId"),
            ({"userId": "user-1"}, "items"),
            ({"userId": "user-1", "items": [{"quantity": 1}]}, "items[0].productId"),
            ({"userId": "user-1", "items": [{"productId": "P1"}]}, "items[0].quantity"),
        ],
    )
    def test_missing_field_reported_by_wire_name(self, payload, field):
        with pytest.raises(InvalidOrderRequest) as exc_info:
            validate_create_order(payload)
        assert exc_info.value.field == field
        assert exc_info.value.message.startswith(f"{field}: ")

    def test_snake_case_keys_are_ignored(self):
        with pytest.raises(InvalidOrderRequest) as exc_info:
            validate_create_order(
                {"user_id": "user-1", "items": [{"productId": "P1", "quantity": 1}]}
            )
        assert exc_info.value.field == "userId"

    def test_user_id_reported_before_items(self):
        with pytest.raises(InvalidOrderRequest) as exc_info:
            validate_create_order({"userId": "", "items": []})
        assert exc_info.value.field == "userId"

    def test_items_reported_before_points(self):
        with pytest.raises(InvalidOrderRequest) as exc_info:
            validate_create_order(_payload(items=[], pointAmountToUse=-1))
        assert exc_info.value.field == "items"

    def test_first_offending_item_is_reported(self):
        items = [
            {"productId": "P1", "quantity": 1},
            {"productId": "P2", "quantity": 0},
            {"productId": "", "quantity": 1},
        ]
        with pytest.raises(InvalidOrderRequest) as exc_info:
            validate_create_order(_payload(items=items))
        assert exc_info.value.field == "items[1].quantity"

    def test_product_id_reported_before_quantity(self):
        with pytest.raises(InvalidOrderRequest) as exc_info:
            validate_create_order(_payload(items=[{"productId": "", "quantity": 0}]))
        assert exc_info.value.field == "items[0].productId"


class TestMalformedPayloads:
    @pytest.mark.parametrize("payload", [[], "order", 42, None])
    def test_non_object_body(self, payload):
        with pytest.raises(MalformedOrderPayload) as exc_info:
            validate_create_order(payload)
        assert exc_info.value.code == "INVALID_JSON"
        assert exc_info.value.message == "Request body could not be parsed."

    def test_items_not_a_list(self):
        with pytest.raises(MalformedOrderPayload) as exc_info:
            validate_create_order(_payload(items="P1"))
        assert exc_info.value.message.startswith("items: ")

    def test_quantity_wrong_type(self):
        with pytest.raises(MalformedOrderPayload) as exc_info:
            validate_create_order(_payload(items=[{"productId": "P1", "quantity": "lots"}]))
        assert exc_info.value.message.startswith("items[0].quantity: ")

    def test_user_id_wrong_type(self):
        with pytest.raises(MalformedOrderPayload):
            validate_create_order(_payload(userId=123))

    @pytest.mark.parametrize("quantity", [True, "2", 1.5])
    def test_quantity_must_be_a_json_integer(self, quantity):
        with pytest.raises(MalformedOrderPayload):
            validate_create_order(_payload(items=[{"productId": "P1", "quantity": quantity}]))

    def test_points_must_be_a_json_integer(self):
        with pytest.raises(MalformedOrderPayload):
            validate_create_order(_payload(pointAmountToUse=False))

    @pytest.mark.parametrize(
        "payload, field",
        [
            ({"userId": "", "items": {}}, "items"),
            (
                {"userId": "user-1", "items": [{"productId": "", "quantity": "abc"}]},
                "items[0].quantity",
            ),
            (
                {
                    "userId": "",
                    "items": [{"productId": "P1", "quantity": 1}],
                    "pointAmountToUse": "lots",
                },
                "pointAmountToUse",
            ),
        ],
    )
    def test_wrong_shape_wins_over_earlier_rule_violation(self, payload, field):
        with pytest.raises(MalformedOrderPayload) as exc_info:
            validate_create_order(payload)
        assert exc_info.value.code == "INVALID_JSON"
        assert exc_info.value.message.startswith(f"{field}: ")


class TestFormatFieldPath:
    @pytest.mark.parametrize(
        "loc, expected",
        [
            ((), ""),
            (("userId",), "userId"),
            (("items", 0), "items[0]"),
            (("items", 2, "productId"), "items[2].productId"),
            (("user_id",), "userId"),
            (("items", 0, "product_id"), "items[0].productId"),
        ],
    )
    def test_format(self, loc, expected):
        assert format_field_path(loc) == expected

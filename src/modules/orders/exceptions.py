"""Order domain exceptions.

Raised by the validator and the Service Layer when a request is
malformed or a business rule is violated.  Each exception's base class
decides its HTTP status; ``code`` is rendered to the client verbatim.
"""

from __future__ import annotations

from shared.domain.exceptions import (
    BusinessConflict,
    EntityNotFound,
    InvalidRequest,
    MalformedPayload,
)


class InvalidOrderRequest(InvalidRequest):
    """A field of the order creation request violates a structural rule."""

    code = "INVALID_REQUEST"
    default_message = "Invalid request."

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


class MalformedOrderPayload(MalformedPayload):
    code = "INVALID_JSON"
    default_message = "Request body could not be parsed."


class OutOfStock(BusinessConflict):
    code = "OUT_OF_STOCK"
    default_message = "Insufficient stock."


class CouponAlreadyUsed(BusinessConflict):
    code = "COUPON_ALREADY_USED"
    default_message = "Coupon has already been used."


class CouponExpired(BusinessConflict):
    code = "COUPON_EXPIRED"
    default_message = "Coupon has expired."


class CouponNotFound(EntityNotFound):
    code = "COUPON_NOT_FOUND"
    default_message = "Coupon does not exist."


class PointsUnavailable(BusinessConflict):
    code = "POINTS_UNAVAILABLE"
    default_message = "Insufficient points."


class OrderNotFound(EntityNotFound):
    """The requested order was never created."""

    code = "ORDER_NOT_FOUND"
    default_message = "Order not found."


class OrderAlreadyCancelled(BusinessConflict):
    """Cancellation was requested for an order that is already cancelled."""

    code = "ORDER_ALREADY_CANCELLED"
    default_message = "Order is already cancelled."

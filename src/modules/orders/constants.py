"""Order domain constants.

Defines status choices and valid status transitions for the order
state machine, plus the reserved values understood by the sentinel
gateways.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    PENDING = "PENDING", "Pending"
    CANCELLED = "CANCELLED", "Cancelled"


VALID_TRANSITIONS: dict[str, set[str]] = {
    OrderStatus.PENDING: {OrderStatus.CANCELLED},
    OrderStatus.CANCELLED: set(),
}

TERMINAL_STATES: set[str] = {OrderStatus.CANCELLED}


class CouponStatus(models.TextChoices):
    VALID = "VALID", "Valid"
    USED = "USED", "Already used"
    EXPIRED = "EXPIRED", "Expired"
    NOT_FOUND = "NOT_FOUND", "Not found"


# Coupon identifiers that simulate a coupon backend outcome.
SENTINEL_COUPONS: dict[str, str] = {
    "USED": CouponStatus.USED,
    "EXPIRED": CouponStatus.EXPIRED,
    "INVALID": CouponStatus.NOT_FOUND,
}

DEFAULT_UNIT_PRICE = 10000
DEFAULT_OUT_OF_STOCK_QUANTITY = 999999
DEFAULT_UNAVAILABLE_POINT_AMOUNT = 999999
DEFAULT_ORDER_ID_PREFIX = "ORD"
DEFAULT_ORDER_ID_WIDTH = 6

"""Sentinel-driven gateway implementations.

Stand-ins for real backends: each outcome is decided purely from the
input value, so contract tests can trigger every business error
deterministically.

- quantity >= ``out_of_stock_quantity``  -> no stock
- coupon "USED" / "EXPIRED" / "INVALID"  -> used / expired / not found
- points >= ``unavailable_amount``       -> cannot redeem
"""

from __future__ import annotations

from modules.orders.constants import (
    DEFAULT_OUT_OF_STOCK_QUANTITY,
    DEFAULT_UNAVAILABLE_POINT_AMOUNT,
    SENTINEL_COUPONS,
    CouponStatus,
)
from modules.orders.gateways.interfaces import (
    ICouponGateway,
    IInventoryGateway,
    IPointsGateway,
)


class SentinelInventoryGateway(IInventoryGateway):
    def __init__(self, out_of_stock_quantity: int = DEFAULT_OUT_OF_STOCK_QUANTITY) -> None:
        self._out_of_stock_quantity = out_of_stock_quantity

    def has_stock(self, product_id: str, quantity: int) -> bool:
        return quantity < self._out_of_stock_quantity


class SentinelCouponGateway(ICouponGateway):
    """Any coupon id that is not a sentinel is a valid coupon."""

    def get_status(self, coupon_id: str) -> str:
        return SENTINEL_COUPONS.get(coupon_id, CouponStatus.VALID)


class SentinelPointsGateway(IPointsGateway):
    def __init__(self, unavailable_amount: int = DEFAULT_UNAVAILABLE_POINT_AMOUNT) -> None:
        self._unavailable_amount = unavailable_amount

    def can_redeem(self, user_id: str, amount: int) -> bool:
        return amount < self._unavailable_amount

"""Ordered business rules evaluated before an order is created.

Each rule inspects the creation DTO and returns the error it detected,
or ``None``.  ``OrderService`` runs the rules in list order and raises
the first error found; later rules are not evaluated.  The list order is
the precedence contract: stock, then coupon, then points.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from modules.orders.constants import CouponStatus
from modules.orders.dtos import CreateOrderDTO
from modules.orders.exceptions import (
    CouponAlreadyUsed,
    CouponExpired,
    CouponNotFound,
    OutOfStock,
    PointsUnavailable,
)
from modules.orders.gateways.interfaces import (
    ICouponGateway,
    IInventoryGateway,
    IPointsGateway,
)
from shared.domain.exceptions import DomainError

RuleCheck = Callable[[CreateOrderDTO], Optional[DomainError]]

COUPON_ERRORS: dict[str, type[DomainError]] = {
    CouponStatus.USED: CouponAlreadyUsed,
    CouponStatus.EXPIRED: CouponExpired,
    CouponStatus.NOT_FOUND: CouponNotFound,
}


@dataclass(frozen=True)
class OrderRule:
    name: str
    check: RuleCheck


def stock_rule(inventory: IInventoryGateway) -> OrderRule:
    def check(dto: CreateOrderDTO) -> Optional[DomainError]:
        for item in dto.items or []:
            if not inventory.has_stock(item.product_id, item.quantity):
                return OutOfStock()
        return None

    return OrderRule(name="stock", check=check)


def coupon_rule(coupons: ICouponGateway) -> OrderRule:
    def check(dto: CreateOrderDTO) -> Optional[DomainError]:
        if dto.coupon_id is None:
            return None
        error_class = COUPON_ERRORS.get(coupons.get_status(dto.coupon_id))
        return error_class() if error_class else None

    return OrderRule(name="coupon", check=check)


def points_rule(points: IPointsGateway) -> OrderRule:
    def check(dto: CreateOrderDTO) -> Optional[DomainError]:
        if dto.point_amount_to_use is None:
            return None
        if not points.can_redeem(dto.user_id, dto.point_amount_to_use):
            return PointsUnavailable()
        return None

    return OrderRule(name="points", check=check)


def build_creation_rules(
    inventory: IInventoryGateway,
    coupons: ICouponGateway,
    points: IPointsGateway,
) -> List[OrderRule]:
    return [
        stock_rule(inventory),
        coupon_rule(coupons),
        points_rule(points),
    ]

"""Contracts for the business capabilities consulted on order creation.

The Service Layer depends exclusively on these interfaces (DIP).  The
shipped implementations simulate outcomes from sentinel input values
(see ``sentinel.py``); a real inventory, coupon or points backend only
needs to satisfy the same contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IInventoryGateway(ABC):
    """Answers whether a product can be supplied in a given quantity."""

    @abstractmethod
    def has_stock(self, product_id: str, quantity: int) -> bool:
        """Return ``True`` if *quantity* units of *product_id* are available."""


class ICouponGateway(ABC):
    """Resolves the state of a coupon."""

    @abstractmethod
    def get_status(self, coupon_id: str) -> str:
        """Return a ``CouponStatus`` value for *coupon_id*."""


class IPointsGateway(ABC):
    """Answers whether a user may redeem an amount of points."""

    @abstractmethod
    def can_redeem(self, user_id: str, amount: int) -> bool:
        """Return ``True`` if *user_id* can spend *amount* points."""

"""Order and OrderItem domain models.

Orders live only in process memory, so they are plain frozen dataclasses
rather than ORM models.  A state change produces a new ``Order``; the
repository replaces the stored instance.

Invariants:
- ``total_amount`` is the sum of item subtotals, fixed at creation.
- ``status`` only moves along ``VALID_TRANSITIONS`` (PENDING -> CANCELLED).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Tuple

from modules.orders.constants import TERMINAL_STATES, VALID_TRANSITIONS, OrderStatus


@dataclass(frozen=True)
class OrderItem:
    """Line item with the unit price snapshotted at creation time."""

    product_id: str
    quantity: int
    price: int

    @property
    def subtotal(self) -> int:
        return self.price * self.quantity


@dataclass(frozen=True)
class Order:
    """Order aggregate root, identified by ``order_id`` (``ORD-000001``)."""

    order_id: str
    user_id: str
    items: Tuple[OrderItem, ...]
    total_amount: int
    status: str
    created_at: datetime

    @classmethod
    def place(
        cls,
        order_id: str,
        user_id: str,
        items: Tuple[OrderItem, ...],
        created_at: datetime,
    ) -> Order:
        """Build a new PENDING order, computing its total once."""
        return cls(
            order_id=order_id,
            user_id=user_id,
            items=items,
            total_amount=sum(item.subtotal for item in items),
            status=OrderStatus.PENDING,
            created_at=created_at,
        )

    # ------------------------------------------------------------------
    # State Machine helpers
    # ------------------------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        """Return ``True`` if the order is in a terminal state."""
        return self.status in TERMINAL_STATES

    def can_transition_to(self, new_status: str) -> bool:
        """Check whether transitioning to *new_status* is valid."""
        allowed = VALID_TRANSITIONS.get(self.status, set())
        return new_status in allowed

    def transition_to(self, new_status: str) -> Order:
        """Return a copy in *new_status*; every other field is kept.

        Raises:
            ValueError: the transition is not in ``VALID_TRANSITIONS``.
        """
        if not self.can_transition_to(new_status):
            raise ValueError(f"Cannot transition from {self.status} to {new_status}.")
        return replace(self, status=new_status)

    def __str__(self) -> str:
        return f"{self.order_id} ({self.status})"

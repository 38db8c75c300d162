"""Order repository interface.

Extends ``IRepository[Order]`` with identifier allocation and an
``atomic()`` scope.  The Service Layer depends exclusively on this
contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, ContextManager, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root.

    Orders are never deleted.  Any read-modify-write sequence must run
    inside ``atomic()`` so it cannot interleave with another one.
    """

    @abstractmethod
    def atomic(self) -> ContextManager[None]:
        """Serialize the enclosed operations against every other ``atomic()`` block."""

    @abstractmethod
    def next_order_id(self) -> str:
        """Allocate the next order identifier.

        Identifiers are strictly increasing and never reused.
        """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order by exact identifier."""

    @abstractmethod
    def save(self, entity: Order) -> Order:
        """Insert a new order or replace the stored one with the same id."""

"""In-memory implementation of the Order repository.

Satisfies ``IOrderRepository`` with a dict keyed by ``order_id`` and a
sequence counter, both guarded by one re-entrant lock.  State lives for
the lifetime of the repository instance; nothing is evicted.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

import structlog

from modules.orders.constants import DEFAULT_ORDER_ID_PREFIX, DEFAULT_ORDER_ID_WIDTH
from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderMemoryRepository(IOrderRepository):
    """Concrete Order repository backed by process memory."""

    def __init__(
        self,
        id_prefix: str = DEFAULT_ORDER_ID_PREFIX,
        id_width: int = DEFAULT_ORDER_ID_WIDTH,
    ) -> None:
        self._orders: Dict[str, Order] = {}
        self._sequence = 1
        self._id_prefix = id_prefix
        self._id_width = id_width
        self._lock = threading.RLock()

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with self._lock:
            yield

    def next_order_id(self) -> str:
        with self._lock:
            value = self._sequence
            self._sequence += 1
        return f"{self._id_prefix}-{value:0{self._id_width}d}"

    def get_by_id(self, id: str) -> Optional[Order]:
        with self._lock:
            return self._orders.get(id)

    def save(self, entity: Order) -> Order:
        with self._lock:
            self._orders[entity.order_id] = entity
        logger.info("order.saved", order_id=entity.order_id, status=str(entity.status))
        return entity

    def count(self) -> int:
        with self._lock:
            return len(self._orders)

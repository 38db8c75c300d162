"""Order service layer (Use Cases).

Orchestrates order creation, lookup and cancellation.  Business rules
are evaluated as an ordered list (see ``rules.py``) before the registry
is touched; every registry mutation runs inside ``repository.atomic()``.

Rules enforced:
- Creation rejected on the first failing rule: stock, coupon, points.
- Identifiers allocated once per successful creation, never reused.
- PENDING -> CANCELLED is the only transition; cancelling twice fails.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

import structlog
from django.conf import settings
from django.utils import timezone

from modules.orders.constants import (
    DEFAULT_ORDER_ID_PREFIX,
    DEFAULT_ORDER_ID_WIDTH,
    DEFAULT_OUT_OF_STOCK_QUANTITY,
    DEFAULT_UNAVAILABLE_POINT_AMOUNT,
    DEFAULT_UNIT_PRICE,
    OrderStatus,
)
from modules.orders.events import OrderCancelled, OrderCreated
from modules.orders.exceptions import OrderAlreadyCancelled, OrderNotFound
from modules.orders.gateways.sentinel import (
    SentinelCouponGateway,
    SentinelInventoryGateway,
    SentinelPointsGateway,
)
from modules.orders.models import Order, OrderItem
from modules.orders.repositories.memory_repository import OrderMemoryRepository
from modules.orders.rules import OrderRule, build_creation_rules

if TYPE_CHECKING:
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.repositories.interfaces import IOrderRepository
    from shared.domain.bus import IEventBus

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives the repository, the ordered creation rules and the event bus
    via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        rules: Sequence[OrderRule],
        event_bus: IEventBus,
        unit_price: int = DEFAULT_UNIT_PRICE,
    ) -> None:
        self._order_repo = order_repository
        self._rules = list(rules)
        self._event_bus = event_bus
        self._unit_price = unit_price

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Create a new PENDING order.

        Steps:
        1. Run the creation rules in order; raise the first error.
        2. Price every item at the unit price and compute the total.
        3. Allocate the identifier and store the order atomically.

        Raises:
            OutOfStock, CouponAlreadyUsed, CouponExpired, CouponNotFound,
            PointsUnavailable: a creation rule failed.
        """
        log = logger.bind(user_id=dto.user_id)
        log.info(
            "order.creation_started",
            item_count=len(dto.items or []),
            coupon_id=dto.coupon_id,
            point_amount=dto.point_amount_to_use,
            delivery_address=dto.delivery_address,
        )

        for rule in self._rules:
            error = rule.check(dto)
            if error is not None:
                log.warning("order.rule_rejected", rule=rule.name, code=error.code)
                raise error

        items = tuple(
            OrderItem(
                product_id=item.product_id,
                quantity=item.quantity,
                price=self._unit_price,
            )
            for item in dto.items or []
        )

        with self._order_repo.atomic():
            order = Order.place(
                order_id=self._order_repo.next_order_id(),
                user_id=dto.user_id,
                items=items,
                created_at=timezone.now(),
            )
            self._order_repo.save(order)

        log.info(
            "order.created",
            order_id=order.order_id,
            total_amount=order.total_amount,
        )
        self._event_bus.publish(
            OrderCreated(
                aggregate_id=order.order_id,
                user_id=order.user_id,
                total_amount=order.total_amount,
            )
        )
        return order

    def cancel_order(self, order_id: str) -> Order:
        """Cancel a PENDING order.

        The lookup, the status check and the replacement happen in one
        ``atomic()`` block, so of several concurrent cancellations exactly
        one succeeds.

        Raises:
            OrderNotFound: order does not exist.
            OrderAlreadyCancelled: order is already CANCELLED.
        """
        log = logger.bind(order_id=order_id)

        with self._order_repo.atomic():
            order = self._order_repo.get_by_id(order_id)
            if order is None:
                log.info("order.lookup_missed")
                raise OrderNotFound(f"Order not found: {order_id}")

            if not order.can_transition_to(OrderStatus.CANCELLED):
                log.warning("order.cancel_rejected", current_status=str(order.status))
                raise OrderAlreadyCancelled(f"Order is already cancelled: {order_id}")

            cancelled = order.transition_to(OrderStatus.CANCELLED)
            self._order_repo.save(cancelled)

        log.info("order.cancelled")
        self._event_bus.publish(OrderCancelled(aggregate_id=order_id))
        return cancelled

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: str) -> Order:
        """Retrieve a single order by ID.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            logger.info("order.lookup_missed", order_id=order_id)
            raise OrderNotFound(f"Order not found: {order_id}")
        return order

    def count_orders(self) -> int:
        return self._order_repo.count()


def build_order_service(event_bus: Optional[IEventBus] = None) -> OrderService:
    """Wire an ``OrderService`` with a fresh registry and sentinel gateways.

    Prices, thresholds and the id format come from the ``ORDERS_*``
    settings.
    """
    if event_bus is None:
        from shared.infrastructure.bus import event_bus as default_bus

        event_bus = default_bus

    repository = OrderMemoryRepository(
        id_prefix=getattr(settings, "ORDERS_ID_PREFIX", DEFAULT_ORDER_ID_PREFIX),
        id_width=getattr(settings, "ORDERS_ID_WIDTH", DEFAULT_ORDER_ID_WIDTH),
    )
    rules = build_creation_rules(
        inventory=SentinelInventoryGateway(
            getattr(
                settings, "ORDERS_OUT_OF_STOCK_QUANTITY", DEFAULT_OUT_OF_STOCK_QUANTITY
            )
        ),
        coupons=SentinelCouponGateway(),
        points=SentinelPointsGateway(
            getattr(
                settings,
                "ORDERS_UNAVAILABLE_POINT_AMOUNT",
                DEFAULT_UNAVAILABLE_POINT_AMOUNT,
            )
        ),
    )
    return OrderService(
        order_repository=repository,
        rules=rules,
        event_bus=event_bus,
        unit_price=getattr(settings, "ORDERS_UNIT_PRICE", DEFAULT_UNIT_PRICE),
    )

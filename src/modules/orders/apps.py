from django.apps import AppConfig


class OrdersConfig(AppConfig):
    """Owns the process-wide ``OrderService`` and its in-memory registry."""

    name = "modules.orders"
    label = "orders"

    def ready(self) -> None:
        from modules.orders.events import OrderCancelled, OrderCreated
        from modules.orders.handlers import (
            order_cancelled_handler,
            order_created_handler,
        )
        from modules.orders.services import build_order_service
        from shared.infrastructure.bus import event_bus

        event_bus.subscribe(OrderCreated, order_created_handler)
        event_bus.subscribe(OrderCancelled, order_cancelled_handler)

        self.order_service = build_order_service(event_bus)

"""Order business-capability gateways package."""

from modules.orders.gateways.interfaces import (
    ICouponGateway,
    IInventoryGateway,
    IPointsGateway,
)
from modules.orders.gateways.sentinel import (
    SentinelCouponGateway,
    SentinelInventoryGateway,
    SentinelPointsGateway,
)

__all__ = [
    "ICouponGateway",
    "IInventoryGateway",
    "IPointsGateway",
    "SentinelCouponGateway",
    "SentinelInventoryGateway",
    "SentinelPointsGateway",
]

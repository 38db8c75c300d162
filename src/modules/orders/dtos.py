"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``) and speak
camelCase on the wire through an alias generator.

- ``CreateOrderItemDTO``: input for a single order line item.
- ``CreateOrderDTO``: input for order creation (nested items).
- ``OrderItemOutputDTO``: output for a single line item.
- ``OrderOutputDTO``: output for a created, fetched or cancelled order.
- ``ErrorOutputDTO``: output for every failure.

Structural rules raise ``PydanticCustomError`` with type
``invalid_request`` so the validator can tell a rule violation apart
from a payload of the wrong shape.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

if TYPE_CHECKING:
    from modules.orders.models import Order

INVALID_REQUEST_ERROR = "invalid_request"

# Input accepts camelCase keys only; output DTOs are also built from Python names.
_INPUT_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel)
_OUTPUT_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


def _rule_violation(reason: str) -> PydanticCustomError:
    return PydanticCustomError(INVALID_REQUEST_ERROR, reason)


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateOrderItemDTO(BaseModel):
    """Immutable DTO for a single order item in a creation request.

    The client sends ``productId`` and ``quantity``; the unit price is
    resolved by the Service Layer.
    """

    model_config = _INPUT_CONFIG

    product_id: Optional[str] = Field(default=None, validate_default=True)
    quantity: Optional[StrictInt] = Field(default=None, validate_default=True)

    @field_validator("product_id")
    @classmethod
    def product_id_must_not_be_blank(cls, v: Optional[str]) -> str:
        if v is None or not v.strip():
            raise _rule_violation("Product ID is required.")
        return v

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: Optional[int]) -> int:
        if v is None or v < 1:
            raise _rule_violation("Quantity must be at least 1.")
        return v


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    Validates, in field order:
    - ``userId`` is present and not blank.
    - ``items`` contains at least one item (each item validated above).
    - ``pointAmountToUse`` is not negative.

    ``deliveryAddress`` and ``couponId`` are accepted as-is.
    """

    model_config = _INPUT_CONFIG

    user_id: Optional[str] = Field(default=None, validate_default=True)
    items: Optional[List[CreateOrderItemDTO]] = Field(default=None, validate_default=True)
    delivery_address: Optional[str] = None
    coupon_id: Optional[str] = None
    point_amount_to_use: Optional[StrictInt] = None

    @field_validator("user_id")
    @classmethod
    def user_id_must_not_be_blank(cls, v: Optional[str]) -> str:
        if v is None or not v.strip():
            raise _rule_violation("User ID is required.")
        return v

    @field_validator("items")
    @classmethod
    def items_must_not_be_empty(
        cls, v: Optional[List[CreateOrderItemDTO]]
    ) -> List[CreateOrderItemDTO]:
        if not v:
            raise _rule_violation("Order must contain at least one item.")
        return v

    @field_validator("point_amount_to_use")
    @classmethod
    def point_amount_must_not_be_negative(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise _rule_violation("Point amount must be zero or greater.")
        return v


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class OrderItemOutputDTO(BaseModel):
    """Immutable DTO for order item API responses."""

    model_config = _OUTPUT_CONFIG

    product_id: str
    quantity: int
    price: int


class OrderOutputDTO(BaseModel):
    """Immutable DTO for order API responses."""

    model_config = _OUTPUT_CONFIG

    order_id: str
    user_id: str
    items: List[OrderItemOutputDTO]
    total_amount: int
    status: str
    created_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> OrderOutputDTO:
        return cls(
            order_id=order.order_id,
            user_id=order.user_id,
            items=[
                OrderItemOutputDTO(
                    product_id=item.product_id,
                    quantity=item.quantity,
                    price=item.price,
                )
                for item in order.items
            ],
            total_amount=order.total_amount,
            status=str(order.status),
            created_at=order.created_at,
        )

    def to_wire(self) -> dict:
        """Serialize with camelCase keys and JSON-native values."""
        return self.model_dump(mode="json", by_alias=True)


class ErrorOutputDTO(BaseModel):
    """Error body shared by every failure response."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str

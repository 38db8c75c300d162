"""Structural validation of order creation requests.

Turns a decoded request body into a ``CreateOrderDTO`` or raises exactly
one error.  A payload of the wrong shape anywhere is malformed; otherwise
the first violated rule is reported in declared field order (``userId``,
``items``, ``items[i].productId``, ``items[i].quantity``,
``pointAmountToUse``):

- ``InvalidOrderRequest``: a structural rule was violated.
- ``MalformedOrderPayload``: the body is not an object or a field has the
  wrong JSON type.
"""

from __future__ import annotations

from typing import Any, Sequence, Union

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from modules.orders.dtos import INVALID_REQUEST_ERROR, CreateOrderDTO
from modules.orders.exceptions import InvalidOrderRequest, MalformedOrderPayload


def validate_create_order(payload: Any) -> CreateOrderDTO:
    """Validate *payload* and return the immutable creation DTO.

    Raises:
        InvalidOrderRequest: first violated structural rule.
        MalformedOrderPayload: payload has the wrong shape.
    """
    try:
        return CreateOrderDTO.model_validate(payload)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)

    # A body of the wrong shape is malformed even if a rule also fails.
    for error in errors:
        if error["type"] != INVALID_REQUEST_ERROR:
            field = format_field_path(error["loc"])
            if field:
                raise MalformedOrderPayload(f"{field}: {error['msg']}.")
            raise MalformedOrderPayload()

    first = errors[0]
    raise InvalidOrderRequest(format_field_path(first["loc"]), first["msg"])


def format_field_path(loc: Sequence[Union[str, int]]) -> str:
    """Render a Pydantic error location as ``items[0].productId``.

    Missing fields are reported under their Python name, so every name is
    mapped back to its camelCase wire name.
    """
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{to_camel(part)}"
        else:
            path = to_camel(str(part))
    return path

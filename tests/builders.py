"""Builders for orders at each stage of the workflow."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from order_placing.core.domain.model.order import (
    PricedOrder,
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
    ValidatedOrder,
)
from order_placing.core.domain.model.simple_types import product_code_value
from order_placing.core.domain.service.pricing import price_order
from order_placing.core.domain.service.validation import validate_order


def a_customer(**overrides: Any) -> UnvalidatedCustomerInfo:
    fields = {"first_name": "Felipe", "last_name": "Nipo", "email": "fpnipo@example.com"}
    fields.update(overrides)
    return UnvalidatedCustomerInfo(**fields)


def an_address(**overrides: Any) -> UnvalidatedAddress:
    fields = {
        "address_line1": "1 O'Connell Street",
        "address_line2": "North City",
        "city": "Dublin",
        "zip_code": "D01",
    }
    fields.update(overrides)
    return UnvalidatedAddress(**fields)


def a_line(**overrides: Any) -> UnvalidatedOrderLine:
    fields = {"order_line_id": "line-1", "product_code": "W1234", "quantity": "5"}
    fields.update(overrides)
    return UnvalidatedOrderLine(**fields)


def an_order(*lines: UnvalidatedOrderLine, **overrides: Any) -> UnvalidatedOrder:
    fields = {
        "order_id": "order-1",
        "customer_info": a_customer(),
        "shipping_address": an_address(),
        "billing_address": an_address(address_line1="9 Billing Road", zip_code="D02"),
        "order_lines": tuple(lines),
    }
    fields.update(overrides)
    return UnvalidatedOrder(**fields)


def a_validated_order(*lines: UnvalidatedOrderLine, **overrides: Any) -> ValidatedOrder:
    """Validate with collaborators that accept everything."""
    return validate_order(lambda _: True, lambda _: True, an_order(*lines, **overrides)).unwrap()


DEFAULT_PRICES = {"W1234": Decimal("10.00"), "G123": Decimal("2.25")}


def a_priced_order(*lines: UnvalidatedOrderLine, **overrides: Any) -> PricedOrder:
    validated = a_validated_order(*lines, **overrides)
    return price_order(
        lambda code: DEFAULT_PRICES[product_code_value(code)], validated
    ).unwrap()

from __future__ import annotations

from html import escape

from typing_extensions import assert_never

from order_placing.core.domain.model.order import HtmlString, PricedOrder
from order_placing.core.domain.model.simple_types import (
    KilogramQuantity,
    OrderQuantity,
    UnitQuantity,
    product_code_value,
)


def _quantity_label(quantity: OrderQuantity) -> str:
    if isinstance(quantity, KilogramQuantity):
        return f"{quantity.value} kg"
    if isinstance(quantity, UnitQuantity):
        return f"{quantity.value} unit(s)"
    assert_never(quantity)


def render_acknowledgment_letter(order: PricedOrder) -> HtmlString:
    customer = order.customer_info
    rows = "".join(
        "<tr><td>{}</td><td>{}</td><td>{}</td><td>{}</td></tr>".format(
            escape(ln.order_line_id.value),
            escape(product_code_value(ln.product_code)),
            escape(_quantity_label(ln.quantity)),
            ln.line_price,
        )
        for ln in order.order_lines
    )
    body = (
        f"<p>Dear {escape(customer.first_name.value)} {escape(customer.last_name.value)},</p>"
        f"<p>Thank you for order {escape(order.order_id.value)}.</p>"
        f"<table>{rows}</table>"
        f"<p>Amount to bill: {order.amount_to_bill}</p>"
    )
    return HtmlString(f"<html><body>{body}</body></html>")

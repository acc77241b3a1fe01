from __future__ import annotations

from decimal import Decimal
from typing import List

from returns.result import Failure, Result, Success

from order_placing.core.domain.model.errors import OrderError, PricingError
from order_placing.core.domain.model.order import (
    PricedOrder,
    PricedOrderLine,
    ValidatedOrder,
    ValidatedOrderLine,
)
from order_placing.core.domain.model.simple_types import (
    product_code_value,
    quantity_value,
)
from order_placing.core.ports.outbound.catalog import GetProductPrice


def to_priced_order_line(
    get_product_price: GetProductPrice, line: ValidatedOrderLine
) -> Result[PricedOrderLine, OrderError]:
    try:
        unit_price = get_product_price(line.product_code)
    except LookupError:
        code = product_code_value(line.product_code)
        return Failure(PricingError("no price for product code", code))

    return Success(
        PricedOrderLine(
            order_line_id=line.order_line_id,
            product_code=line.product_code,
            quantity=line.quantity,
            line_price=unit_price * Decimal(quantity_value(line.quantity)),
        )
    )


def price_order(
    get_product_price: GetProductPrice, order: ValidatedOrder
) -> Result[PricedOrder, OrderError]:
    """Price every line (one lookup per line, in order) and bill their sum."""
    lines: List[PricedOrderLine] = []
    for line in order.order_lines:
        result = to_priced_order_line(get_product_price, line)
        if isinstance(result, Failure):
            return result
        lines.append(result.unwrap())

    return Success(
        PricedOrder(
            order_id=order.order_id,
            customer_info=order.customer_info,
            shipping_address=order.shipping_address,
            billing_address=order.billing_address,
            order_lines=tuple(lines),
            amount_to_bill=sum((ln.line_price for ln in lines), Decimal(0)),
        )
    )

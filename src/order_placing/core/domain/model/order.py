from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Tuple, Union

from typing_extensions import assert_never

from order_placing.core.domain.model.simple_types import (
    Email,
    OrderId,
    OrderLineId,
    OrderQuantity,
    ProductCode,
    String50,
    ZipCode,
)

# ---- Unvalidated (raw input) -----------------------------------------------


@dataclass(frozen=True)
class UnvalidatedCustomerInfo:
    first_name: str
    last_name: str
    email: str


@dataclass(frozen=True)
class UnvalidatedAddress:
    address_line1: str
    address_line2: str
    city: str
    zip_code: str


@dataclass(frozen=True)
class UnvalidatedOrderLine:
    order_line_id: str
    product_code: str
    quantity: str


@dataclass(frozen=True)
class UnvalidatedOrder:
    order_id: str
    customer_info: UnvalidatedCustomerInfo
    shipping_address: UnvalidatedAddress
    billing_address: UnvalidatedAddress
    order_lines: Tuple[UnvalidatedOrderLine, ...]


# ---- Validated -------------------------------------------------------------


@dataclass(frozen=True)
class ValidatedCustomerInfo:
    first_name: String50
    last_name: String50
    email: Email


@dataclass(frozen=True)
class ValidatedAddress:
    address_line1: String50
    address_line2: String50
    city: String50
    zip_code: ZipCode


@dataclass(frozen=True)
class ValidatedOrderLine:
    order_line_id: OrderLineId
    product_code: ProductCode
    quantity: OrderQuantity


@dataclass(frozen=True)
class ValidatedOrder:
    order_id: OrderId
    customer_info: ValidatedCustomerInfo
    shipping_address: ValidatedAddress
    billing_address: ValidatedAddress
    order_lines: Tuple[ValidatedOrderLine, ...]


# ---- Priced ----------------------------------------------------------------


@dataclass(frozen=True)
class PricedOrderLine:
    order_line_id: OrderLineId
    product_code: ProductCode
    quantity: OrderQuantity
    line_price: Decimal


@dataclass(frozen=True)
class PricedOrder:
    order_id: OrderId
    customer_info: ValidatedCustomerInfo
    shipping_address: ValidatedAddress
    billing_address: ValidatedAddress
    order_lines: Tuple[PricedOrderLine, ...]
    amount_to_bill: Decimal


Order = Union[UnvalidatedOrder, ValidatedOrder, PricedOrder]


def order_reference(order: Order) -> str:
    """Raw order id of an order at any stage, for log lines."""
    if isinstance(order, UnvalidatedOrder):
        return order.order_id
    if isinstance(order, (ValidatedOrder, PricedOrder)):
        return order.order_id.value
    assert_never(order)


# ---- Acknowledgment --------------------------------------------------------


@dataclass(frozen=True)
class HtmlString:
    value: str


@dataclass(frozen=True)
class OrderAcknowledgment:
    email: Email
    letter: HtmlString


@dataclass(frozen=True)
class OrderAcknowledgmentSent:
    order_id: OrderId
    email: Email


class SendResult(Enum):
    SENT = "sent"
    NOT_SENT = "not_sent"

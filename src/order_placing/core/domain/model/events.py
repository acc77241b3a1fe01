from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from order_placing.core.domain.model.order import (
    OrderAcknowledgmentSent,
    PricedOrder,
    ValidatedAddress,
)
from order_placing.core.domain.model.simple_types import OrderId


@dataclass(frozen=True)
class OrderPlaced:
    order: PricedOrder


@dataclass(frozen=True)
class BillableOrderPlaced:
    order_id: OrderId
    billing_address: ValidatedAddress
    amount_to_bill: Decimal


@dataclass(frozen=True)
class AcknowledgmentSent:
    acknowledgment: OrderAcknowledgmentSent


PlaceOrderEvent = Union[OrderPlaced, BillableOrderPlaced, AcknowledgmentSent]

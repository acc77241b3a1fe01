from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from order_placing.core.domain.model.events import (
    AcknowledgmentSent,
    BillableOrderPlaced,
    OrderPlaced,
    PlaceOrderEvent,
)
from order_placing.core.domain.model.order import OrderAcknowledgmentSent, PricedOrder


def create_billing_event(order: PricedOrder) -> Optional[BillableOrderPlaced]:
    if order.amount_to_bill < Decimal(0):
        return None
    return BillableOrderPlaced(
        order_id=order.order_id,
        billing_address=order.billing_address,
        amount_to_bill=order.amount_to_bill,
    )


def create_events(
    order: PricedOrder, acknowledgment: Optional[OrderAcknowledgmentSent]
) -> List[PlaceOrderEvent]:
    """OrderPlaced, then BillableOrderPlaced, then AcknowledgmentSent.

    The last two are left out when there is nothing to bill or the
    acknowledgment was not sent.
    """
    events: List[PlaceOrderEvent] = [OrderPlaced(order)]

    billing = create_billing_event(order)
    if billing is not None:
        events.append(billing)

    if acknowledgment is not None:
        events.append(AcknowledgmentSent(acknowledgment))

    return events

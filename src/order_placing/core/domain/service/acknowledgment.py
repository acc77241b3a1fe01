from __future__ import annotations

from typing import Optional

from typing_extensions import assert_never

from order_placing.core.domain.model.order import (
    OrderAcknowledgment,
    OrderAcknowledgmentSent,
    PricedOrder,
    SendResult,
)
from order_placing.core.ports.outbound.acknowledgment import (
    CreateOrderAcknowledgmentLetter,
    SendOrderAcknowledgment,
)


def acknowledge_order(
    create_letter: CreateOrderAcknowledgmentLetter,
    send_acknowledgment: SendOrderAcknowledgment,
    order: PricedOrder,
) -> Optional[OrderAcknowledgmentSent]:
    acknowledgment = OrderAcknowledgment(
        email=order.customer_info.email,
        letter=create_letter(order),
    )
    outcome = send_acknowledgment(acknowledgment)
    if outcome is SendResult.SENT:
        return OrderAcknowledgmentSent(
            order_id=order.order_id, email=order.customer_info.email
        )
    if outcome is SendResult.NOT_SENT:
        return None
    assert_never(outcome)

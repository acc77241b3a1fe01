from __future__ import annotations

from returns.io import IOResult, IOSuccess
from typing_extensions import assert_never

from order_placing.core.domain.model.errors import OrderError
from order_placing.core.domain.model.events import (
    AcknowledgmentSent,
    BillableOrderPlaced,
    OrderPlaced,
    PlaceOrderEvent,
)


def describe_event(event: PlaceOrderEvent) -> str:
    if isinstance(event, OrderPlaced):
        return f"order_placed: {event.order.order_id.value}"
    if isinstance(event, BillableOrderPlaced):
        return f"billable_order_placed: {event.order_id.value} amount={event.amount_to_bill}"
    if isinstance(event, AcknowledgmentSent):
        ack = event.acknowledgment
        return f"acknowledgment_sent: {ack.order_id.value} to={ack.email.value}"
    assert_never(event)


def stdout_publish_event(event: PlaceOrderEvent) -> IOResult[None, OrderError]:
    print(f"[event] {describe_event(event)}")
    return IOSuccess(None)

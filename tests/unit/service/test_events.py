"""Unit tests for event assembly."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

from order_placing.core.domain.model.events import (
    AcknowledgmentSent,
    BillableOrderPlaced,
    OrderPlaced,
)
from order_placing.core.domain.model.order import OrderAcknowledgmentSent
from order_placing.core.domain.service.events import create_billing_event, create_events
from tests.builders import a_line, a_priced_order


def _sent(order) -> OrderAcknowledgmentSent:
    return OrderAcknowledgmentSent(order_id=order.order_id, email=order.customer_info.email)


def test_all_three_events_in_order():
    order = a_priced_order(a_line())
    events = create_events(order, _sent(order))

    assert [type(e) for e in events] == [OrderPlaced, BillableOrderPlaced, AcknowledgmentSent]
    assert events[0] == OrderPlaced(order)
    assert events[2] == AcknowledgmentSent(_sent(order))


def test_billing_event_carries_billing_address_and_amount():
    order = a_priced_order(a_line())
    billing = create_billing_event(order)
    assert billing == BillableOrderPlaced(
        order_id=order.order_id,
        billing_address=order.billing_address,
        amount_to_bill=Decimal("50.00"),
    )


def test_zero_amount_is_still_billable():
    order = a_priced_order()
    events = create_events(order, None)
    assert [type(e) for e in events] == [OrderPlaced, BillableOrderPlaced]


def test_negative_amount_suppresses_billing_event():
    order = replace(a_priced_order(a_line()), amount_to_bill=Decimal("-0.01"))
    events = create_events(order, _sent(order))
    assert [type(e) for e in events] == [OrderPlaced, AcknowledgmentSent]


def test_no_acknowledgment_event_without_sent_record():
    order = a_priced_order(a_line())
    events = create_events(order, None)
    assert not any(isinstance(e, AcknowledgmentSent) for e in events)
    assert isinstance(events[0], OrderPlaced)

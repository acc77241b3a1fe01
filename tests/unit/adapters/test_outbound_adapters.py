"""Unit tests for the in-memory and stdout adapters."""

from __future__ import annotations

from decimal import Decimal

import pytest
from returns.io import IOSuccess

from order_placing.adapters.outbound.html_letters import render_acknowledgment_letter
from order_placing.adapters.outbound.in_memory_catalog import InMemoryProductCatalog
from order_placing.adapters.outbound.known_addresses import KnownAddresses
from order_placing.adapters.outbound.stdout_acknowledgments import (
    StdoutAcknowledgmentSender,
)
from order_placing.adapters.outbound.stdout_events import (
    describe_event,
    stdout_publish_event,
)
from order_placing.core.domain.model.events import BillableOrderPlaced, OrderPlaced
from order_placing.core.domain.model.order import (
    HtmlString,
    OrderAcknowledgment,
    SendResult,
)
from order_placing.core.domain.model.simple_types import Email, Gizmo, Widget
from tests.builders import a_customer, a_line, a_priced_order, an_address


class TestInMemoryProductCatalog:
    """Tests for the dictionary-backed catalog."""

    @staticmethod
    def test_known_codes_exist() -> None:
        catalog = InMemoryProductCatalog(prices={"W1": Decimal("1.00")})
        assert catalog.product_code_exists("W1")
        assert not catalog.product_code_exists("G1")

    @staticmethod
    def test_price_by_code() -> None:
        catalog = InMemoryProductCatalog(prices={"W1": Decimal("1.50")})
        assert catalog.get_price(Widget("W1")) == Decimal("1.50")

    @staticmethod
    def test_unknown_price_raises_key_error() -> None:
        with pytest.raises(KeyError):
            InMemoryProductCatalog().get_price(Gizmo("G1"))


def test_known_addresses_match_on_zip_code():
    addresses = KnownAddresses(zip_codes=frozenset({"D01"}))
    assert addresses.address_exists(an_address(zip_code="D01"))
    assert not addresses.address_exists(an_address(zip_code="D99"))


def test_letter_lists_lines_and_total():
    order = a_priced_order(
        a_line(quantity="5"),
        a_line(order_line_id="line-2", product_code="G123", quantity="2"),
    )
    letter = render_acknowledgment_letter(order).value

    assert "order-1" in letter
    assert "5 unit(s)" in letter
    assert "2 kg" in letter
    assert "Amount to bill: 54.50" in letter


def test_letter_escapes_customer_input():
    order = a_priced_order(customer_info=a_customer(first_name="Ann & <Co>"))
    letter = render_acknowledgment_letter(order).value
    assert "Ann &amp; &lt;Co&gt;" in letter
    assert "<Co>" not in letter


def test_stdout_sender_reports_sent(capsys):
    ack = OrderAcknowledgment(Email("a@example.com"), HtmlString("<p>hi</p>"))
    assert StdoutAcknowledgmentSender().send(ack) is SendResult.SENT
    assert "[ack] to=a@example.com" in capsys.readouterr().out


def test_failing_stdout_sender_reports_not_sent(capsys):
    ack = OrderAcknowledgment(Email("a@example.com"), HtmlString("<p>hi</p>"))
    assert StdoutAcknowledgmentSender(fail=True).send(ack) is SendResult.NOT_SENT
    assert capsys.readouterr().out == ""


def test_publish_event_prints_description(capsys):
    order = a_priced_order(a_line())
    assert isinstance(stdout_publish_event(OrderPlaced(order)), IOSuccess)
    assert capsys.readouterr().out == "[event] order_placed: order-1\n"


def test_describe_billable_event():
    order = a_priced_order(a_line())
    event = BillableOrderPlaced(order.order_id, order.billing_address, order.amount_to_bill)
    assert describe_event(event) == "billable_order_placed: order-1 amount=50.00"

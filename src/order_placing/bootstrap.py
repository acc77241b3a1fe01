from __future__ import annotations

from decimal import Decimal

from order_placing.adapters.outbound.html_letters import render_acknowledgment_letter
from order_placing.adapters.outbound.in_memory_catalog import InMemoryProductCatalog
from order_placing.adapters.outbound.known_addresses import KnownAddresses
from order_placing.adapters.outbound.stdout_acknowledgments import (
    StdoutAcknowledgmentSender,
)
from order_placing.config import Settings
from order_placing.core.ports.inbound.place_order import PlaceOrderWorkflow
from order_placing.core.usecase.place_order import place_order


def build_workflow(settings: Settings | None = None) -> PlaceOrderWorkflow:
    settings = settings or Settings()
    catalog = InMemoryProductCatalog(
        prices={
            "W1234": Decimal("10.00"),
            "W5678": Decimal("4.50"),
            "G123": Decimal("2.25"),
            "G456": Decimal("7.80"),
        }
    )
    addresses = KnownAddresses(zip_codes=frozenset({"D01", "D02", "D04"}))
    sender = StdoutAcknowledgmentSender(fail=not settings.send_acknowledgments)

    # collaborators are plain callables, bound once here
    return place_order(
        check_product_code_exists=catalog.product_code_exists,
        check_address_exists=addresses.address_exists,
        get_product_price=catalog.get_price,
        create_letter=render_acknowledgment_letter,
        send_acknowledgment=sender.send,
    )

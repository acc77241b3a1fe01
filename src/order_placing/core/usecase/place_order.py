from __future__ import annotations

import logging
from functools import partial
from typing import Callable, List, TypeVar

from returns.pipeline import flow
from returns.pointfree import bind, map_
from returns.result import Failure, Result

from order_placing.core.domain.model.errors import OrderError
from order_placing.core.domain.model.events import PlaceOrderEvent
from order_placing.core.domain.model.order import (
    Order,
    PricedOrder,
    UnvalidatedOrder,
    order_reference,
)
from order_placing.core.domain.service.acknowledgment import acknowledge_order
from order_placing.core.domain.service.events import create_events
from order_placing.core.domain.service.pricing import price_order
from order_placing.core.domain.service.validation import validate_order
from order_placing.core.ports.inbound.place_order import PlaceOrderWorkflow
from order_placing.core.ports.outbound.acknowledgment import (
    CreateOrderAcknowledgmentLetter,
    SendOrderAcknowledgment,
)
from order_placing.core.ports.outbound.addresses import CheckAddressExists
from order_placing.core.ports.outbound.catalog import (
    CheckProductCodeExists,
    GetProductPrice,
)

logger = logging.getLogger(__name__)

_O = TypeVar("_O", bound=Order)


def _reached(stage: str) -> Callable[[_O], _O]:
    def trace(order: _O) -> _O:
        logger.debug("order %s %s", order_reference(order), stage)
        return order

    return trace


def place_order(
    check_product_code_exists: CheckProductCodeExists,
    check_address_exists: CheckAddressExists,
    get_product_price: GetProductPrice,
    create_letter: CreateOrderAcknowledgmentLetter,
    send_acknowledgment: SendOrderAcknowledgment,
) -> PlaceOrderWorkflow:
    """Bind the collaborators once and return the place-order workflow.

    The returned function validates, prices and acknowledges one order and
    returns its events. A validation or pricing failure stops the pipeline
    and no events are produced for that order.
    """
    validate = partial(validate_order, check_product_code_exists, check_address_exists)
    price = partial(price_order, get_product_price)
    acknowledge = partial(acknowledge_order, create_letter, send_acknowledgment)

    def acknowledge_and_create_events(order: PricedOrder) -> List[PlaceOrderEvent]:
        acknowledgment = acknowledge(order)
        if acknowledgment is None:
            logger.info("acknowledgment for order %s was not sent", order.order_id.value)
        return create_events(order, acknowledgment)

    def workflow(order: UnvalidatedOrder) -> Result[List[PlaceOrderEvent], OrderError]:
        reference = order_reference(order)
        logger.debug("placing order %s", reference)

        result: Result[List[PlaceOrderEvent], OrderError] = flow(
            order,
            validate,
            map_(_reached("validated")),
            bind(price),
            map_(_reached("priced")),
            map_(acknowledge_and_create_events),
        )

        if isinstance(result, Failure):
            err = result.failure()
            logger.warning(
                "order %s rejected (%s): %s", reference, type(err).__name__, err
            )
        else:
            logger.info(
                "order %s placed with %d events", reference, len(result.unwrap())
            )
        return result

    return workflow

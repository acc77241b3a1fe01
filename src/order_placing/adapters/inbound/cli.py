from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field
from pydantic import ValidationError as RequestValidationError
from returns.io import IOFailure
from returns.result import Success
from returns.unsafe import unsafe_perform_io

from order_placing.core.domain.model.errors import ValidationError
from order_placing.core.domain.model.order import (
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
)
from order_placing.core.ports.inbound.place_order import PlaceOrderWorkflow
from order_placing.core.ports.outbound.events import PublishEvent

# ---- Input DTOs ------------------------------------------------------------
# Only the shape is checked here; field rules belong to the workflow.


class CustomerInfoIn(BaseModel):
    first_name: str = Field(examples=["Felipe"])
    last_name: str = Field(examples=["Nipo"])
    email: str = Field(examples=["fpnipo@example.com"])


class AddressIn(BaseModel):
    address_line1: str = Field(examples=["1 O'Connell Street"])
    address_line2: str = Field(examples=["North City"])
    city: str = Field(examples=["Dublin"])
    zip_code: str = Field(examples=["D01"])


class OrderLineIn(BaseModel):
    order_line_id: str = Field(examples=["line-1"])
    product_code: str = Field(examples=["W1234"])
    quantity: Union[str, int] = Field(examples=["5"])


class PlaceOrderRequest(BaseModel):
    order_id: str = Field(examples=["order-1"])
    customer_info: CustomerInfoIn
    shipping_address: AddressIn
    billing_address: AddressIn
    order_lines: list[OrderLineIn] = Field(default_factory=list)


# ---- Mapping helpers -------------------------------------------------------


def _to_address(a: AddressIn) -> UnvalidatedAddress:
    return UnvalidatedAddress(
        address_line1=a.address_line1,
        address_line2=a.address_line2,
        city=a.city,
        zip_code=a.zip_code,
    )


def to_unvalidated_order(req: PlaceOrderRequest) -> UnvalidatedOrder:
    return UnvalidatedOrder(
        order_id=req.order_id,
        customer_info=UnvalidatedCustomerInfo(
            first_name=req.customer_info.first_name,
            last_name=req.customer_info.last_name,
            email=req.customer_info.email,
        ),
        shipping_address=_to_address(req.shipping_address),
        billing_address=_to_address(req.billing_address),
        order_lines=tuple(
            UnvalidatedOrderLine(
                order_line_id=ln.order_line_id,
                product_code=ln.product_code,
                quantity=str(ln.quantity),
            )
            for ln in req.order_lines
        ),
    )


def run_cli(workflow: PlaceOrderWorkflow, raw: str, publish_event: PublishEvent) -> int:
    """
    raw: JSON string.
    Example:
      {"order_id":"order-1",
       "customer_info":{"first_name":"Ann","last_name":"Lee","email":"ann@example.com"},
       "shipping_address":{"address_line1":"1 Main St","address_line2":"Unit 2",
                           "city":"Dublin","zip_code":"D01"},
       "billing_address":{...same shape...},
       "order_lines":[{"order_line_id":"l-1","product_code":"W1234","quantity":"5"}]}
    """
    try:
        req = PlaceOrderRequest.model_validate_json(raw)
    except RequestValidationError as e:
        print(f"invalid_input: {e.error_count()} error(s)")
        for detail in e.errors():
            location = ".".join(str(part) for part in detail["loc"])
            print(f"  {location}: {detail['msg']}")
        return 2

    result = workflow(to_unvalidated_order(req))

    if isinstance(result, Success):
        events = result.unwrap()
        for event in events:
            published = publish_event(event)
            if isinstance(published, IOFailure):
                print("[ng]", str(unsafe_perform_io(published.failure())))
                return 1
        print("[ok]", {"order_id": req.order_id, "events": len(events)})
        return 0

    err = result.failure()
    if isinstance(err, ValidationError):
        print("[ng]", f"{err.field} ({err.rule.value}): {err}")
    else:
        print("[ng]", str(err))
    return 1

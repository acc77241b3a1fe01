from __future__ import annotations

import re
from typing import List, Sequence, Tuple

from returns.result import Failure, Result, Success
from typing_extensions import assert_never

from order_placing.core.domain.model.errors import (
    AddressNotFound,
    OrderError,
    ProductCodeNotFound,
    Rule,
    ValidationError,
)
from order_placing.core.domain.model.order import (
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
    ValidatedAddress,
    ValidatedCustomerInfo,
    ValidatedOrder,
    ValidatedOrderLine,
)
from order_placing.core.domain.model.simple_types import (
    Email,
    Gizmo,
    KilogramQuantity,
    OrderId,
    OrderLineId,
    OrderQuantity,
    ProductCode,
    String50,
    UnitQuantity,
    Widget,
    ZipCode,
    create_product_code,
)
from order_placing.core.ports.outbound.addresses import CheckAddressExists
from order_placing.core.ports.outbound.catalog import CheckProductCodeExists


def to_customer_info(
    raw: UnvalidatedCustomerInfo,
) -> Result[ValidatedCustomerInfo, OrderError]:
    return Result.do(
        ValidatedCustomerInfo(first_name, last_name, email)
        for first_name in String50.create(raw.first_name, "customer_info.first_name")
        for last_name in String50.create(raw.last_name, "customer_info.last_name")
        for email in Email.create(raw.email, "customer_info.email")
    )


def to_address(
    check_address_exists: CheckAddressExists,
    raw: UnvalidatedAddress,
    field: str,
) -> Result[ValidatedAddress, OrderError]:
    """The existence check runs before any field of the address is looked at."""
    if not check_address_exists(raw):
        return Failure(AddressNotFound(f"{field} does not exist", field))

    return Result.do(
        ValidatedAddress(line1, line2, city, zip_code)
        for line1 in String50.create(raw.address_line1, f"{field}.address_line1")
        for line2 in String50.create(raw.address_line2, f"{field}.address_line2")
        for city in String50.create(raw.city, f"{field}.city")
        for zip_code in ZipCode.create(raw.zip_code, f"{field}.zip_code")
    )


def to_product_code(
    check_product_code_exists: CheckProductCodeExists,
    raw: str,
    field: str,
) -> Result[ProductCode, OrderError]:
    if not check_product_code_exists(raw):
        return Failure(ProductCodeNotFound("ProductCode must be valid", field, raw))
    return create_product_code(raw, field)


_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_quantity(raw: str, field: str) -> Result[int, ValidationError]:
    if isinstance(raw, str) and _INTEGER.fullmatch(raw.strip()):
        return Success(int(raw.strip()))
    return Failure(
        ValidationError(
            f"{field} must be an integer, got {raw!r}", field, Rule.NOT_AN_INTEGER
        )
    )


def to_order_quantity(
    product_code: ProductCode, raw: str, field: str
) -> Result[OrderQuantity, ValidationError]:
    """Widgets are counted in units, gizmos are weighed in kilograms."""

    def by_product(value: int) -> Result[OrderQuantity, ValidationError]:
        if isinstance(product_code, Widget):
            return UnitQuantity.create(value, field)
        if isinstance(product_code, Gizmo):
            return KilogramQuantity.create(value, field)
        assert_never(product_code)

    return _parse_quantity(raw, field).bind(by_product)


def to_validated_order_line(
    check_product_code_exists: CheckProductCodeExists,
    raw: UnvalidatedOrderLine,
    field: str,
) -> Result[ValidatedOrderLine, OrderError]:
    return Result.do(
        ValidatedOrderLine(order_line_id, product_code, quantity)
        for order_line_id in OrderLineId.create(
            raw.order_line_id, f"{field}.order_line_id"
        )
        for product_code in to_product_code(
            check_product_code_exists, raw.product_code, f"{field}.product_code"
        )
        for quantity in to_order_quantity(
            product_code, raw.quantity, f"{field}.quantity"
        )
    )


def to_validated_order_lines(
    check_product_code_exists: CheckProductCodeExists,
    raw_lines: Sequence[UnvalidatedOrderLine],
) -> Result[Tuple[ValidatedOrderLine, ...], OrderError]:
    lines: List[ValidatedOrderLine] = []
    for i, raw in enumerate(raw_lines):
        result = to_validated_order_line(
            check_product_code_exists, raw, f"order_lines[{i}]"
        )
        if isinstance(result, Failure):
            return result
        lines.append(result.unwrap())
    return Success(tuple(lines))


def validate_order(
    check_product_code_exists: CheckProductCodeExists,
    check_address_exists: CheckAddressExists,
    order: UnvalidatedOrder,
) -> Result[ValidatedOrder, OrderError]:
    """Validate fields in order id, customer, shipping, billing, lines order.

    The first broken rule is returned; later fields are not inspected and
    their collaborators are not called.
    """
    return Result.do(
        ValidatedOrder(order_id, customer_info, shipping, billing, lines)
        for order_id in OrderId.create(order.order_id)
        for customer_info in to_customer_info(order.customer_info)
        for shipping in to_address(
            check_address_exists, order.shipping_address, "shipping_address"
        )
        for billing in to_address(
            check_address_exists, order.billing_address, "billing_address"
        )
        for lines in to_validated_order_lines(
            check_product_code_exists, order.order_lines
        )
    )

"""Constrained values used by validated and priced orders.

Instances are only meant to be built through ``create`` (or
``create_product_code`` for the product code variants), which return a
``Result`` instead of raising. Once built, a value always satisfies its
rule and never changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from returns.result import Failure, Result, Success
from typing_extensions import assert_never

from order_placing.core.domain.model.errors import Rule, ValidationError

MAX_LENGTH = 50


def _bounded(raw: str | None, field: str, label: str) -> Result[str, ValidationError]:
    if not raw:
        return Failure(
            ValidationError(f"{label} must not be null or empty", field, Rule.MISSING)
        )
    if len(raw) > MAX_LENGTH:
        return Failure(
            ValidationError(
                f"{label} must not be more than {MAX_LENGTH} chars",
                field,
                Rule.TOO_LONG,
            )
        )
    return Success(raw)


def _non_negative(value: int, field: str, label: str) -> Result[int, ValidationError]:
    if value < 0:
        return Failure(
            ValidationError(f"{label} must not be negative", field, Rule.NEGATIVE)
        )
    return Success(value)


@dataclass(frozen=True)
class String50:
    value: str

    @staticmethod
    def create(raw: str | None, field: str) -> Result["String50", ValidationError]:
        return _bounded(raw, field, field).map(String50)


@dataclass(frozen=True)
class Email:
    value: str

    @staticmethod
    def create(raw: str | None, field: str = "email") -> Result["Email", ValidationError]:
        return _bounded(raw, field, "Email").map(Email)


@dataclass(frozen=True)
class ZipCode:
    value: str

    @staticmethod
    def create(
        raw: str | None, field: str = "zip_code"
    ) -> Result["ZipCode", ValidationError]:
        return _bounded(raw, field, "ZipCode").map(ZipCode)


@dataclass(frozen=True)
class OrderId:
    value: str

    @staticmethod
    def create(
        raw: str | None, field: str = "order_id"
    ) -> Result["OrderId", ValidationError]:
        return _bounded(raw, field, "OrderId").map(OrderId)


@dataclass(frozen=True)
class OrderLineId:
    value: str

    @staticmethod
    def create(
        raw: str | None, field: str = "order_line_id"
    ) -> Result["OrderLineId", ValidationError]:
        return _bounded(raw, field, "OrderLineId").map(OrderLineId)


# ---- Product codes ---------------------------------------------------------


@dataclass(frozen=True)
class Widget:
    code: str


@dataclass(frozen=True)
class Gizmo:
    code: str


ProductCode = Union[Widget, Gizmo]


def create_product_code(
    raw: str | None, field: str = "product_code"
) -> Result[ProductCode, ValidationError]:
    if not raw:
        return Failure(
            ValidationError(
                "ProductCode must not be null or empty", field, Rule.MISSING
            )
        )
    if raw[0] == "W":
        return Success(Widget(raw))
    if raw[0] == "G":
        return Success(Gizmo(raw))
    return Failure(
        ValidationError(
            f"Invalid ProductCode: {raw!r}", field, Rule.UNRECOGNIZED_TAG
        )
    )


def product_code_value(code: ProductCode) -> str:
    if isinstance(code, Widget):
        return code.code
    if isinstance(code, Gizmo):
        return code.code
    assert_never(code)


# ---- Quantities ------------------------------------------------------------


@dataclass(frozen=True)
class UnitQuantity:
    value: int

    @staticmethod
    def create(
        value: int, field: str = "quantity"
    ) -> Result["UnitQuantity", ValidationError]:
        return _non_negative(value, field, "UnitQuantity").map(UnitQuantity)


@dataclass(frozen=True)
class KilogramQuantity:
    value: int

    @staticmethod
    def create(
        value: int, field: str = "quantity"
    ) -> Result["KilogramQuantity", ValidationError]:
        return _non_negative(value, field, "KilogramQuantity").map(KilogramQuantity)


OrderQuantity = Union[UnitQuantity, KilogramQuantity]


def quantity_value(quantity: OrderQuantity) -> int:
    if isinstance(quantity, UnitQuantity):
        return quantity.value
    if isinstance(quantity, KilogramQuantity):
        return quantity.value
    assert_never(quantity)

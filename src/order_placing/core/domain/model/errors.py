from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Rule(str, Enum):
    MISSING = "missing"
    TOO_LONG = "too_long"
    NEGATIVE = "negative"
    NOT_AN_INTEGER = "not_an_integer"
    UNRECOGNIZED_TAG = "unrecognized_tag"


@dataclass(frozen=True)
class OrderError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationError(OrderError):
    """A single field broke one rule; ``field`` is a path like ``order_lines[0].quantity``."""

    field: str
    rule: Rule


@dataclass(frozen=True)
class AddressNotFound(OrderError):
    field: str


@dataclass(frozen=True)
class ProductCodeNotFound(OrderError):
    field: str
    code: str


@dataclass(frozen=True)
class PricingError(OrderError):
    product_code: str

    def __str__(self) -> str:
        return f"pricing_failed: {self.product_code} ({self.message})"

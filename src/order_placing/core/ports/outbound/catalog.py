from __future__ import annotations

from decimal import Decimal
from typing import Callable

from order_placing.core.domain.model.simple_types import ProductCode

CheckProductCodeExists = Callable[[str], bool]

# Raises LookupError when the catalog has no price for the code.
GetProductPrice = Callable[[ProductCode], Decimal]

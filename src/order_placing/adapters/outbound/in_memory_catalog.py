from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict

from order_placing.core.domain.model.simple_types import ProductCode, product_code_value


@dataclass
class InMemoryProductCatalog:
    prices: Dict[str, Decimal] = field(default_factory=dict)

    def product_code_exists(self, code: str) -> bool:
        return code in self.prices

    def get_price(self, code: ProductCode) -> Decimal:
        # KeyError surfaces as a pricing failure in the workflow
        return self.prices[product_code_value(code)]

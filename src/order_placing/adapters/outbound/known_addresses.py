from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet

from order_placing.core.domain.model.order import UnvalidatedAddress


@dataclass(frozen=True)
class KnownAddresses:
    """Treats an address as deliverable when its zip code is served."""

    zip_codes: FrozenSet[str] = field(default_factory=frozenset)

    def address_exists(self, address: UnvalidatedAddress) -> bool:
        return address.zip_code in self.zip_codes

from __future__ import annotations

from typing import Callable

from order_placing.core.domain.model.order import UnvalidatedAddress

CheckAddressExists = Callable[[UnvalidatedAddress], bool]

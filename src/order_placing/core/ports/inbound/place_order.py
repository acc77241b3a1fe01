from __future__ import annotations

from typing import Callable, List

from returns.result import Result

from order_placing.core.domain.model.errors import OrderError
from order_placing.core.domain.model.events import PlaceOrderEvent
from order_placing.core.domain.model.order import UnvalidatedOrder

PlaceOrderWorkflow = Callable[
    [UnvalidatedOrder], Result[List[PlaceOrderEvent], OrderError]
]

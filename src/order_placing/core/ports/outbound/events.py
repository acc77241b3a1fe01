from __future__ import annotations

from typing import Callable

from returns.io import IOResult

from order_placing.core.domain.model.errors import OrderError
from order_placing.core.domain.model.events import PlaceOrderEvent

PublishEvent = Callable[[PlaceOrderEvent], IOResult[None, OrderError]]

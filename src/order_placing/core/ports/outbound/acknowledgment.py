from __future__ import annotations

from typing import Callable

from order_placing.core.domain.model.order import (
    HtmlString,
    OrderAcknowledgment,
    PricedOrder,
    SendResult,
)

CreateOrderAcknowledgmentLetter = Callable[[PricedOrder], HtmlString]
SendOrderAcknowledgment = Callable[[OrderAcknowledgment], SendResult]

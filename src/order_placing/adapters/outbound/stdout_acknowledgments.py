from __future__ import annotations

from dataclasses import dataclass

from order_placing.core.domain.model.order import OrderAcknowledgment, SendResult


@dataclass
class StdoutAcknowledgmentSender:
    fail: bool = False

    def send(self, acknowledgment: OrderAcknowledgment) -> SendResult:
        if self.fail:
            return SendResult.NOT_SENT
        print(
            f"[ack] to={acknowledgment.email.value} "
            f"letter={len(acknowledgment.letter.value)} chars"
        )
        return SendResult.SENT

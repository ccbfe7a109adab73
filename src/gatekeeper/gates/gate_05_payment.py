"""GATE 5: Payment Amount

Последний gate в цепочке. Сверка приложенного платежа с
unit_price * count по политике PaymentPolicy:
- REJECT_ON_MISMATCH: attached == required
- REFUND_EXCESS: attached >= required, излишек к возврату

Owner-резерв (reserve_mint) оплаты не требует и этот gate не проходит.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain.sale_phase import PaymentPolicy
from src.core.errors import MSG_INCORRECT_PAYMENT, RejectionReason


@dataclass(frozen=True)
class Gate05Result:
    """Результат GATE 5."""

    entry_allowed: bool
    block_reason: Optional[RejectionReason]
    message: str

    attached: int
    required: int
    refund: int

    details: str


class Gate05Payment:
    """GATE 5: сумма платежа."""

    def __init__(self, policy: PaymentPolicy = PaymentPolicy.REJECT_ON_MISMATCH):
        self.policy = policy

    def evaluate(self, attached: int, required: int) -> Gate05Result:
        if attached == required:
            refund = 0
        elif self.policy == PaymentPolicy.REFUND_EXCESS and attached > required:
            refund = attached - required
        else:
            return Gate05Result(
                entry_allowed=False,
                block_reason=RejectionReason.INCORRECT_PAYMENT,
                message=MSG_INCORRECT_PAYMENT,
                attached=attached,
                required=required,
                refund=0,
                details=f"attached={attached} != required={required} ({self.policy.value})",
            )

        return Gate05Result(
            entry_allowed=True,
            block_reason=None,
            message="",
            attached=attached,
            required=required,
            refund=refund,
            details=f"PASS: required={required} refund={refund}",
        )

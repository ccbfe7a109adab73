"""GATE 4: Supply Capacity

issued_count + count <= total_supply, иначе SupplyExhausted.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.errors import MSG_TOTAL_SUPPLY_REACHED, RejectionReason


@dataclass(frozen=True)
class Gate04Result:
    """Результат GATE 4."""

    entry_allowed: bool
    block_reason: Optional[RejectionReason]
    message: str

    issued_count: int
    requested: int
    total_supply: int

    details: str


class Gate04SupplyCapacity:
    """GATE 4: ёмкость глобального supply."""

    def __init__(self, total_supply: int):
        self.total_supply = total_supply

    def evaluate(self, issued_count: int, count: int) -> Gate04Result:
        total = self.total_supply

        if issued_count + count > total:
            return Gate04Result(
                entry_allowed=False,
                block_reason=RejectionReason.SUPPLY_EXHAUSTED,
                message=MSG_TOTAL_SUPPLY_REACHED,
                issued_count=issued_count,
                requested=count,
                total_supply=total,
                details=f"issued={issued_count} + requested={count} > total_supply={total}",
            )

        return Gate04Result(
            entry_allowed=True,
            block_reason=None,
            message="",
            issued_count=issued_count,
            requested=count,
            total_supply=total,
            details=f"PASS: remaining={total - issued_count}",
        )

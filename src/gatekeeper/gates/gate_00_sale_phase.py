"""GATE 0: Sale Phase

- Первый gate в цепочке
- Блокирует запрос, если текущая фаза не совпадает с фазой, в которой
  операция разрешена:
  * presale_mint, reserve_mint → только PRESALE
  * mint, bulk_buy → только PUBLIC

reserve_mint в PUBLIC запрещён (резерв - привилегия только presale).
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain.sale_phase import SalePhase
from src.core.errors import (
    MSG_PRESALE_NOT_ACTIVE,
    MSG_SALE_NOT_STARTED,
    RejectionReason,
)


@dataclass(frozen=True)
class Gate00Result:
    """Результат GATE 0."""

    entry_allowed: bool
    block_reason: Optional[RejectionReason]
    message: str

    current_phase: SalePhase
    required_phase: SalePhase

    details: str


class Gate00SalePhase:
    """GATE 0: проверка фазы продажи (stateless)."""

    def evaluate(self, current_phase: SalePhase, required_phase: SalePhase) -> Gate00Result:
        """Оценка GATE 0.

        Args:
            current_phase: фаза на момент запроса (читается один раз)
            required_phase: фаза, в которой разрешена операция

        Returns:
            Gate00Result
        """
        if current_phase != required_phase:
            message = (
                MSG_PRESALE_NOT_ACTIVE
                if required_phase == SalePhase.PRESALE
                else MSG_SALE_NOT_STARTED
            )
            return Gate00Result(
                entry_allowed=False,
                block_reason=RejectionReason.SALE_NOT_ACTIVE,
                message=message,
                current_phase=current_phase,
                required_phase=required_phase,
                details=f"phase={current_phase.value}, required={required_phase.value}",
            )

        return Gate00Result(
            entry_allowed=True,
            block_reason=None,
            message="",
            current_phase=current_phase,
            required_phase=required_phase,
            details=f"PASS: phase={current_phase.value}",
        )

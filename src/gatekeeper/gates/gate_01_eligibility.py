"""GATE 1: Eligibility (owner authorization / presale whitelist)

Порядок проверок:
1. Owner-only операции (reserve_mint) → Unauthorized, если caller не owner
2. Presale операции → NotWhitelisted, если кошелёк вне whitelist

Gate не обращается к коллабораторам сам: контроллер передаёт уже
вычисленные флаги is_owner / is_whitelisted.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.errors import MSG_NOT_IN_PRESALE_LIST, MSG_NOT_OWNER, RejectionReason


@dataclass(frozen=True)
class Gate01Result:
    """Результат GATE 1."""

    entry_allowed: bool
    block_reason: Optional[RejectionReason]
    message: str

    wallet: str
    details: str


class Gate01Eligibility:
    """GATE 1: проверка прав и членства в whitelist (stateless)."""

    def evaluate(
        self,
        wallet: str,
        require_owner: bool = False,
        is_owner: bool = False,
        require_whitelist: bool = False,
        is_whitelisted: bool = False,
    ) -> Gate01Result:
        """Оценка GATE 1.

        Args:
            wallet: вызывающий / получатель
            require_owner: операция только для owner
            is_owner: результат OwnerAuthorization.is_owner(wallet)
            require_whitelist: операция только для whitelist
            is_whitelisted: членство wallet в whitelist
        """
        if require_owner and not is_owner:
            return Gate01Result(
                entry_allowed=False,
                block_reason=RejectionReason.UNAUTHORIZED,
                message=MSG_NOT_OWNER,
                wallet=wallet,
                details=f"{wallet} is not the owner",
            )

        if require_whitelist and not is_whitelisted:
            return Gate01Result(
                entry_allowed=False,
                block_reason=RejectionReason.NOT_WHITELISTED,
                message=MSG_NOT_IN_PRESALE_LIST,
                wallet=wallet,
                details=f"{wallet} not in presale list",
            )

        return Gate01Result(
            entry_allowed=True,
            block_reason=None,
            message="",
            wallet=wallet,
            details="PASS",
        )

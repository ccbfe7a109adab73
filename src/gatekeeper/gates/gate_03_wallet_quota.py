"""GATE 3: Wallet Quota

Проверка квоты по текущим счётчикам (мутация ledger - только на commit):
- PRESALE: presale_minted + count <= max_per_wallet_presale
           и total_minted + count <= max_per_wallet
- PUBLIC: total_minted + count <= max_per_wallet
- RESERVE: reserve_minted + count <= reserve_mint_limit
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.core.domain.collection_config import CollectionConfig
from src.core.errors import (
    MSG_MINT_LIMIT_EXCEEDED,
    MSG_PRESALE_LIMIT_EXCEEDED,
    RejectionReason,
)


class QuotaKind(str, Enum):
    """Какая квота применяется к запросу."""

    PRESALE = "PRESALE"
    PUBLIC = "PUBLIC"
    RESERVE = "RESERVE"


@dataclass(frozen=True)
class Gate03Result:
    """Результат GATE 3."""

    entry_allowed: bool
    block_reason: Optional[RejectionReason]
    message: str

    kind: QuotaKind
    requested: int
    headroom: int

    details: str


class Gate03WalletQuota:
    """GATE 3: per-wallet / owner-reserve квоты."""

    def __init__(self, config: CollectionConfig):
        self.config = config

    def evaluate(
        self,
        kind: QuotaKind,
        count: int,
        presale_minted: int = 0,
        total_minted: int = 0,
        reserve_minted: int = 0,
    ) -> Gate03Result:
        """Оценка GATE 3.

        Args:
            kind: тип квоты
            count: запрошенное количество
            presale_minted: presale счётчик кошелька
            total_minted: общий счётчик кошелька
            reserve_minted: кумулятивный owner-резерв
        """
        if kind == QuotaKind.PRESALE:
            presale_left = max(0, self.config.max_per_wallet_presale - presale_minted)
            if count > presale_left:
                return self._block(kind, count, presale_left, MSG_PRESALE_LIMIT_EXCEEDED)
            headroom = min(presale_left, max(0, self.config.max_per_wallet - total_minted))
        elif kind == QuotaKind.PUBLIC:
            headroom = max(0, self.config.max_per_wallet - total_minted)
        else:
            headroom = max(0, self.config.reserve_mint_limit - reserve_minted)

        if count > headroom:
            return self._block(kind, count, headroom, MSG_MINT_LIMIT_EXCEEDED)

        return Gate03Result(
            entry_allowed=True,
            block_reason=None,
            message="",
            kind=kind,
            requested=count,
            headroom=headroom,
            details=f"PASS: {kind.value} requested={count} headroom={headroom}",
        )

    def _block(self, kind: QuotaKind, count: int, headroom: int, message: str) -> Gate03Result:
        return Gate03Result(
            entry_allowed=False,
            block_reason=RejectionReason.QUOTA_EXCEEDED,
            message=message,
            kind=kind,
            requested=count,
            headroom=headroom,
            details=f"{kind.value} requested={count} > headroom={headroom}",
        )

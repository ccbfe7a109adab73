"""Quota Ledger - per-wallet счётчики выпуска и owner-резерв.

- presale_minted[w] <= max_per_wallet_presale
- total_minted[w] <= max_per_wallet
- reserve_minted <= reserve_mint_limit

Записи кошелька создаются лениво при первом выпуске; удаляет их только
restore() при откате неудавшегося commit.
record_* проверяют лимит ДО мутации: при ошибке состояние не меняется.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from src.core.domain.collection_config import CollectionConfig
from src.core.domain.token import WalletQuota
from src.core.errors import (
    MSG_MINT_LIMIT_EXCEEDED,
    MSG_PRESALE_LIMIT_EXCEEDED,
    QuotaExceeded,
)


@dataclass(frozen=True)
class LedgerSnapshot:
    """Состояние ledger для одного кошелька и резерва до commit."""

    wallet: str
    quota: Optional[WalletQuota]
    reserve_minted: int


class QuotaLedger:
    """Per-wallet квоты и кумулятивный owner-резерв."""

    def __init__(self, config: CollectionConfig):
        self.config = config
        self._wallets: Dict[str, WalletQuota] = {}
        self._reserve_minted = 0

    # -------------------------------------------------------------------------
    # Чтение
    # -------------------------------------------------------------------------

    def quota(self, wallet: str) -> WalletQuota:
        return self._wallets.get(wallet, WalletQuota())

    def presale_minted_count(self, wallet: str) -> int:
        return self.quota(wallet).presale_minted

    def total_minted_count(self, wallet: str) -> int:
        return self.quota(wallet).total_minted

    def reserve_minted_count(self) -> int:
        return self._reserve_minted

    def known_wallets(self) -> int:
        return len(self._wallets)

    # -------------------------------------------------------------------------
    # Headroom (без мутации)
    # -------------------------------------------------------------------------

    def presale_headroom(self, wallet: str) -> int:
        """Сколько ещё единиц кошелёк может выпустить в presale."""
        quota = self.quota(wallet)
        return max(
            0,
            min(
                self.config.max_per_wallet_presale - quota.presale_minted,
                self.config.max_per_wallet - quota.total_minted,
            ),
        )

    def total_headroom(self, wallet: str) -> int:
        return max(0, self.config.max_per_wallet - self.total_minted_count(wallet))

    def reserve_headroom(self) -> int:
        return max(0, self.config.reserve_mint_limit - self._reserve_minted)

    # -------------------------------------------------------------------------
    # Запись
    # -------------------------------------------------------------------------

    def record_presale_mint(self, wallet: str, count: int) -> WalletQuota:
        """Presale выпуск: presale и total счётчики += count.

        Raises:
            QuotaExceeded: presale или общий лимит кошелька был бы превышен
        """
        quota = self.quota(wallet)
        if quota.presale_minted + count > self.config.max_per_wallet_presale:
            raise QuotaExceeded(
                MSG_PRESALE_LIMIT_EXCEEDED,
                wallet=wallet,
                minted=quota.presale_minted,
                requested=count,
                limit=self.config.max_per_wallet_presale,
            )
        if quota.total_minted + count > self.config.max_per_wallet:
            raise QuotaExceeded(
                MSG_MINT_LIMIT_EXCEEDED,
                wallet=wallet,
                minted=quota.total_minted,
                requested=count,
                limit=self.config.max_per_wallet,
            )

        updated = WalletQuota(
            presale_minted=quota.presale_minted + count,
            total_minted=quota.total_minted + count,
        )
        self._wallets[wallet] = updated
        return updated

    def record_public_mint(self, wallet: str, count: int) -> WalletQuota:
        """Public выпуск: total счётчик += count.

        Raises:
            QuotaExceeded: общий лимит кошелька был бы превышен
        """
        quota = self.quota(wallet)
        if quota.total_minted + count > self.config.max_per_wallet:
            raise QuotaExceeded(
                MSG_MINT_LIMIT_EXCEEDED,
                wallet=wallet,
                minted=quota.total_minted,
                requested=count,
                limit=self.config.max_per_wallet,
            )

        updated = WalletQuota(
            presale_minted=quota.presale_minted,
            total_minted=quota.total_minted + count,
        )
        self._wallets[wallet] = updated
        return updated

    def record_reserve_mint(self, count: int) -> int:
        """Owner-резерв: кумулятивный счётчик += count.

        Raises:
            QuotaExceeded: лимит резерва был бы превышен
        """
        if self._reserve_minted + count > self.config.reserve_mint_limit:
            raise QuotaExceeded(
                MSG_MINT_LIMIT_EXCEEDED,
                minted=self._reserve_minted,
                requested=count,
                limit=self.config.reserve_mint_limit,
            )
        self._reserve_minted += count
        return self._reserve_minted

    # -------------------------------------------------------------------------
    # Откат
    # -------------------------------------------------------------------------

    def snapshot(self, wallet: str) -> LedgerSnapshot:
        return LedgerSnapshot(
            wallet=wallet,
            quota=self._wallets.get(wallet),
            reserve_minted=self._reserve_minted,
        )

    def restore(self, snapshot: LedgerSnapshot) -> None:
        """Возврат записи кошелька и счётчика резерва к snapshot."""
        if snapshot.quota is None:
            self._wallets.pop(snapshot.wallet, None)
        else:
            self._wallets[snapshot.wallet] = snapshot.quota
        self._reserve_minted = snapshot.reserve_minted

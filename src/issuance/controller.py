"""Issuance Controller - атомарный выпуск токенов по фазам.

Каждый запрос выполняется целиком под эксклюзивным lock:
1. Фаза читается один раз (PhaseClock)
2. Цепочка gates в фиксированном порядке:
   GATE 0 фаза → GATE 1 права/whitelist → GATE 2 bulk limit →
   GATE 3 квота → GATE 4 supply
3. GATE 5 платёж: сверка коллаборатором PaymentSettlement
4. Commit: ledger, supply, id, регистрация владения, события

Первый заблокировавший gate определяет ошибку. До commit состояние
не мутируется; сбой внутри commit откатывает все его изменения.
Отклонённый запрос не оставляет следов.
"""

import logging
import threading
import time
from typing import Any, Iterable, Iterator, List, Optional

from src.core.domain.collection_config import CollectionConfig
from src.core.domain.sale_phase import SalePhase
from src.core.domain.token import MintReceipt, TokenMinted
from src.core.errors import InvalidRequest, Unauthorized, error_for
from src.gatekeeper.gates.gate_00_sale_phase import Gate00SalePhase
from src.gatekeeper.gates.gate_01_eligibility import Gate01Eligibility
from src.gatekeeper.gates.gate_02_bulk_limit import Gate02BulkLimit
from src.gatekeeper.gates.gate_03_wallet_quota import Gate03WalletQuota, QuotaKind
from src.gatekeeper.gates.gate_04_supply_capacity import Gate04SupplyCapacity
from src.issuance.collaborators import (
    EntropySource,
    EventSink,
    ExactPaymentSettlement,
    HashEntropySource,
    InMemoryEventSink,
    InMemoryOwnershipRegistry,
    OwnerAuthorization,
    OwnershipRegistry,
    PaymentOutcome,
    PaymentSettlement,
)
from src.issuance.id_generator import TokenIdGenerator
from src.issuance.phase_clock import PhaseClock, TimeSource
from src.issuance.quota_ledger import QuotaLedger
from src.issuance.supply import SupplyState
from src.issuance.whitelist import WhitelistRegistry

logger = logging.getLogger(__name__)


class IssuanceController:
    """Контроллер выпуска: presale, public sale, bulk buy, owner-резерв.

    Все мутации разделяемого состояния (ledger, supply, генератор id)
    выполняются под self._lock.
    """

    def __init__(
        self,
        config: CollectionConfig,
        authorization: OwnerAuthorization,
        time_source: Optional[TimeSource] = None,
        entropy: Optional[EntropySource] = None,
        payment: Optional[PaymentSettlement] = None,
        registry: Optional[OwnershipRegistry] = None,
        event_sink: Optional[EventSink] = None,
    ):
        """
        Args:
            config: immutable конфигурация коллекции
            authorization: проверка привилегии owner
            time_source: источник времени (default: системное время)
            entropy: источник seed для пула уникальных id
                (default: hash от контекста конструирования)
            payment: сверка платежа (default: ExactPaymentSettlement по политике конфига)
            registry: реестр владения (default: in-memory)
            event_sink: приёмник событий TokenMinted (default: in-memory)
        """
        self.config = config
        self.authorization = authorization
        self.clock = PhaseClock(config, time_source)
        self.entropy = entropy or HashEntropySource(
            f"{config.name}:{config.symbol}:{time.time_ns()}".encode()
        )
        self.payment = payment or ExactPaymentSettlement(config.payment_policy)
        self.registry = registry if registry is not None else InMemoryOwnershipRegistry()
        self.event_sink = event_sink if event_sink is not None else InMemoryEventSink()

        self.whitelist = WhitelistRegistry()
        self.ledger = QuotaLedger(config)
        self.supply = SupplyState(config.total_supply)
        self.id_generator = TokenIdGenerator(
            config.total_supply, config.unique_pool_size, self.entropy.seed()
        )

        self._gate00 = Gate00SalePhase()
        self._gate01 = Gate01Eligibility()
        self._gate02 = Gate02BulkLimit()
        self._gate03 = Gate03WalletQuota(config)
        self._gate04 = Gate04SupplyCapacity(config.total_supply)

        self._lock = threading.RLock()

        logger.info(
            "issuance controller created: %s (%s) supply=%d uniques=%d",
            config.name,
            config.symbol,
            config.total_supply,
            self.id_generator.generated_uniques_count,
        )

    # =========================================================================
    # METADATA
    # =========================================================================

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def symbol(self) -> str:
        return self.config.symbol

    # =========================================================================
    # WHITELIST
    # =========================================================================

    def add_to_presale_list(self, caller: str, addresses: Iterable[str]) -> int:
        """Owner-only идемпотентное добавление в whitelist.

        Raises:
            Unauthorized: caller не owner
        """
        with self._lock:
            self._require_owner(caller)
            return self.whitelist.add(addresses)

    def remove_from_presale_list(self, caller: str, addresses: Iterable[str]) -> int:
        """Owner-only явный отзыв членства в whitelist."""
        with self._lock:
            self._require_owner(caller)
            return self.whitelist.remove(addresses)

    def is_whitelisted(self, address: str) -> bool:
        with self._lock:
            return self.whitelist.contains(address)

    # =========================================================================
    # ENTRY POINTS
    # =========================================================================

    def presale_mint(self, wallet: str, payment: int) -> MintReceipt:
        """Presale: 1 токен для кошелька из whitelist."""
        return self._issue(
            wallet=wallet,
            count=1,
            required_phase=SalePhase.PRESALE,
            quota_kind=QuotaKind.PRESALE,
            require_whitelist=True,
            payment=payment,
        )

    def mint(self, wallet: str, payment: int) -> MintReceipt:
        """Public: 1 токен, квота max_per_wallet."""
        return self._issue(
            wallet=wallet,
            count=1,
            required_phase=SalePhase.PUBLIC,
            quota_kind=QuotaKind.PUBLIC,
            payment=payment,
        )

    def bulk_buy(self, wallet: str, count: int, payment: int) -> MintReceipt:
        """Public: count токенов за один атомарный шаг (count <= bulk_buy_limit)."""
        return self._issue(
            wallet=wallet,
            count=count,
            required_phase=SalePhase.PUBLIC,
            quota_kind=QuotaKind.PUBLIC,
            bulk_limit=self.config.bulk_buy_limit,
            payment=payment,
        )

    def reserve_mint(self, caller: str, count: int) -> MintReceipt:
        """Owner-резерв: только в PRESALE, без оплаты, кумулятивный лимит."""
        return self._issue(
            wallet=caller,
            count=count,
            required_phase=SalePhase.PRESALE,
            quota_kind=QuotaKind.RESERVE,
            require_owner=True,
            payment=None,
        )

    # =========================================================================
    # QUERIES
    # =========================================================================

    def current_phase(self) -> SalePhase:
        return self.clock.phase()

    def presale_minted_count(self, wallet: str) -> int:
        with self._lock:
            return self.ledger.presale_minted_count(wallet)

    def total_minted_count(self, wallet: str) -> int:
        with self._lock:
            return self.ledger.total_minted_count(wallet)

    def reserve_minted_count(self) -> int:
        with self._lock:
            return self.ledger.reserve_minted_count()

    def issued_count(self) -> int:
        with self._lock:
            return self.supply.issued_count

    def remaining_supply(self) -> int:
        with self._lock:
            return self.supply.remaining

    def generated_uniques_count(self) -> int:
        return self.id_generator.generated_uniques_count

    def uniques_dealt_count(self) -> int:
        with self._lock:
            return self.id_generator.uniques_dealt_count

    def token_uri(self, token_id: int) -> str:
        """base_uri + token_id для уже выпущенного токена.

        Raises:
            InvalidRequest: токен не выпущен
        """
        with self._lock:
            if not self.id_generator.was_dealt(token_id):
                raise InvalidRequest(f"URI query for nonexistent token {token_id}")
        return f"{self.config.base_uri}{token_id}"

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _require_owner(self, caller: str) -> None:
        if not self.authorization.is_owner(caller):
            logger.debug("owner-only call rejected: caller=%s", caller)
            raise Unauthorized(caller=caller)

    def _gate_chain(
        self,
        phase: SalePhase,
        wallet: str,
        count: int,
        required_phase: SalePhase,
        quota_kind: QuotaKind,
        require_owner: bool,
        require_whitelist: bool,
        bulk_limit: Optional[int],
    ) -> Iterator[Any]:
        """GATE 0-4 по порядку; генератор останавливается на первом блоке."""
        yield self._gate00.evaluate(phase, required_phase)
        yield self._gate01.evaluate(
            wallet,
            require_owner=require_owner,
            is_owner=require_owner and self.authorization.is_owner(wallet),
            require_whitelist=require_whitelist,
            is_whitelisted=require_whitelist and self.whitelist.contains(wallet),
        )
        yield self._gate02.evaluate(count, bulk_limit)
        quota = self.ledger.quota(wallet)
        yield self._gate03.evaluate(
            quota_kind,
            count,
            presale_minted=quota.presale_minted,
            total_minted=quota.total_minted,
            reserve_minted=self.ledger.reserve_minted_count(),
        )
        yield self._gate04.evaluate(self.supply.issued_count, count)

    def _issue(
        self,
        wallet: str,
        count: int,
        required_phase: SalePhase,
        quota_kind: QuotaKind,
        require_owner: bool = False,
        require_whitelist: bool = False,
        bulk_limit: Optional[int] = None,
        payment: Optional[int] = None,
    ) -> MintReceipt:
        with self._lock:
            phase = self.clock.phase()

            # 1. Gates: первый заблокировавший gate определяет ошибку
            for result in self._gate_chain(
                phase,
                wallet,
                count,
                required_phase,
                quota_kind,
                require_owner,
                require_whitelist,
                bulk_limit,
            ):
                if not result.entry_allowed:
                    logger.debug(
                        "request rejected: wallet=%s count=%r reason=%s details=%s",
                        wallet,
                        count,
                        result.block_reason.value,
                        result.details,
                    )
                    raise error_for(result.block_reason, result.message, wallet=wallet)

            # 2. Платёж (GATE 5 внутри PaymentSettlement)
            if payment is not None:
                required = self.config.required_payment(count)
                outcome = self.payment.charge_exact(wallet, payment, required)
            else:
                outcome = PaymentOutcome(charged=0, refund=0)

            # 3. Commit с откатом
            token_ids = self._commit(wallet, count, quota_kind)

        logger.info(
            "issued %d token(s) to %s in %s: %s",
            count,
            wallet,
            phase.value,
            token_ids,
        )
        return MintReceipt(
            wallet=wallet,
            token_ids=tuple(token_ids),
            phase=phase,
            amount_charged=outcome.charged,
            refund=outcome.refund,
        )

    def _commit(self, wallet: str, count: int, quota_kind: QuotaKind) -> List[int]:
        """Ledger, supply, id, регистрация владения, события.

        При исключении на любом шаге ledger, supply, генератор id и
        уже сделанные регистрации возвращаются к состоянию до commit,
        исключение пробрасывается вызывающему.
        """
        ledger_snapshot = self.ledger.snapshot(wallet)
        issued_before = self.supply.issued_count
        generator_snapshot = self.id_generator.snapshot()
        registered: List[int] = []

        try:
            if quota_kind == QuotaKind.PRESALE:
                self.ledger.record_presale_mint(wallet, count)
            elif quota_kind == QuotaKind.PUBLIC:
                self.ledger.record_public_mint(wallet, count)
            else:
                self.ledger.record_reserve_mint(count)

            sequences = self.supply.allocate(count)
            token_ids = self.id_generator.next_ids(count)
            events = [
                TokenMinted(
                    token_id=token_id,
                    wallet=wallet,
                    is_unique=self.id_generator.is_unique(token_id),
                    sequence=sequence,
                )
                for sequence, token_id in zip(sequences, token_ids)
            ]

            for token_id in token_ids:
                self.registry.register_ownership(token_id, wallet)
                registered.append(token_id)
            for event in events:
                self.event_sink.emit(event)
        except Exception:
            logger.exception(
                "commit failed, rolling back: wallet=%s count=%d", wallet, count
            )
            for token_id in reversed(registered):
                self.registry.revoke_ownership(token_id)
            self.id_generator.restore(generator_snapshot)
            self.supply.release_to(issued_before)
            self.ledger.restore(ledger_snapshot)
            raise

        return token_ids

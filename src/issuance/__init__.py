"""Issuance - контроллер выпуска токенов и его составные части.

- Phase clock: фаза продажи по времени
- Whitelist registry: допуск к presale
- Quota ledger: per-wallet квоты и owner-резерв
- Supply state: глобальный счётчик выпуска
- Token id generator: уникальные id с seeded пулом
- Collaborators: платёж, реестр владения, owner, события, энтропия
"""

from .controller import IssuanceController
from .phase_clock import PhaseClock, current_phase
from .whitelist import WhitelistRegistry
from .quota_ledger import QuotaLedger
from .supply import SupplyState
from .id_generator import TokenIdGenerator
from .collaborators import (
    ExactPaymentSettlement,
    FixedEntropySource,
    HashEntropySource,
    InMemoryEventSink,
    InMemoryOwnershipRegistry,
    PaymentOutcome,
    SingleOwnerAuthorization,
)

__all__ = [
    "IssuanceController",
    "PhaseClock",
    "current_phase",
    "WhitelistRegistry",
    "QuotaLedger",
    "SupplyState",
    "TokenIdGenerator",
    "ExactPaymentSettlement",
    "FixedEntropySource",
    "HashEntropySource",
    "InMemoryEventSink",
    "InMemoryOwnershipRegistry",
    "PaymentOutcome",
    "SingleOwnerAuthorization",
]

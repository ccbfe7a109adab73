"""Collaborators - внешние сервисы, которые вызывает контроллер выпуска.

- PaymentSettlement: сверка приложенного платежа с требуемой суммой
- OwnershipRegistry: регистрация владельца выпущенного токена
- OwnerAuthorization: проверка привилегии owner
- EventSink: приём событий TokenMinted
- EntropySource: seed для генератора уникальных id

Для каждого протокола есть in-memory реализация по умолчанию.
"""

import hashlib
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from src.core.contracts.validators import token_minted_payload
from src.core.domain.sale_phase import PaymentPolicy
from src.core.domain.token import TokenMinted, TokenRecord
from src.core.errors import IncorrectPayment
from src.gatekeeper.gates.gate_05_payment import Gate05Payment


# =============================================================================
# PAYMENT
# =============================================================================


@dataclass(frozen=True)
class PaymentOutcome:
    """Результат сверки платежа."""

    charged: int
    refund: int


class PaymentSettlement(Protocol):
    def charge_exact(self, wallet: str, attached: int, required: int) -> PaymentOutcome:
        ...


class ExactPaymentSettlement:
    """Сверка платежа по правилу GATE 5 (Gate05Payment).

    - REJECT_ON_MISMATCH: attached != required → IncorrectPayment
    - REFUND_EXCESS: attached > required → излишек возвращается;
      attached < required → IncorrectPayment
    """

    def __init__(self, policy: PaymentPolicy = PaymentPolicy.REJECT_ON_MISMATCH):
        self.policy = policy
        self._gate = Gate05Payment(policy)

    def charge_exact(self, wallet: str, attached: int, required: int) -> PaymentOutcome:
        result = self._gate.evaluate(attached, required)
        if not result.entry_allowed:
            raise IncorrectPayment(
                result.message,
                wallet=wallet,
                attached=attached,
                required=required,
            )
        return PaymentOutcome(charged=required, refund=result.refund)


# =============================================================================
# OWNERSHIP
# =============================================================================


class OwnershipRegistry(Protocol):
    def register_ownership(self, token_id: int, wallet: str) -> None:
        ...

    def revoke_ownership(self, token_id: int) -> None:
        ...


class InMemoryOwnershipRegistry:
    """Реестр владения в памяти (token_id → owner)."""

    def __init__(self):
        self._owners: Dict[int, str] = {}

    def register_ownership(self, token_id: int, wallet: str) -> None:
        if token_id in self._owners:
            raise ValueError(f"token {token_id} already registered")
        self._owners[token_id] = wallet

    def revoke_ownership(self, token_id: int) -> None:
        self._owners.pop(token_id, None)

    def owner_of(self, token_id: int) -> Optional[str]:
        return self._owners.get(token_id)

    def balance_of(self, wallet: str) -> int:
        return sum(1 for owner in self._owners.values() if owner == wallet)

    def records(self) -> List[TokenRecord]:
        return [
            TokenRecord(token_id=token_id, owner=owner)
            for token_id, owner in sorted(self._owners.items())
        ]


# =============================================================================
# AUTHORIZATION
# =============================================================================


class OwnerAuthorization(Protocol):
    def is_owner(self, caller: str) -> bool:
        ...


class SingleOwnerAuthorization:
    """Единственный owner, заданный при конструировании."""

    def __init__(self, owner: str):
        if not owner:
            raise ValueError("owner address must be non-empty")
        self.owner = owner

    def is_owner(self, caller: str) -> bool:
        return caller == self.owner


# =============================================================================
# EVENTS
# =============================================================================


class EventSink(Protocol):
    def emit(self, event: TokenMinted) -> None:
        ...


class InMemoryEventSink:
    """Упорядоченный журнал событий.

    Каждое событие перед записью сериализуется и проверяется по
    token_minted.json; payloads хранит JSON-представления.
    """

    def __init__(self):
        self.events: List[TokenMinted] = []
        self.payloads: List[Dict[str, Any]] = []

    def emit(self, event: TokenMinted) -> None:
        payload = token_minted_payload(event)
        self.events.append(event)
        self.payloads.append(payload)

    def for_wallet(self, wallet: str) -> List[TokenMinted]:
        return [e for e in self.events if e.wallet == wallet]

    def __len__(self) -> int:
        return len(self.events)


# =============================================================================
# ENTROPY
# =============================================================================


class EntropySource(Protocol):
    def seed(self) -> int:
        ...


class FixedEntropySource:
    """Фиксированный seed (тесты, воспроизводимые развёртывания)."""

    def __init__(self, value: int):
        self.value = value

    def seed(self) -> int:
        return self.value


class HashEntropySource:
    """Seed из контекста конструирования (sha256 от байтов контекста).

    context - например, хэш блока/транзакции развёртывания.
    """

    def __init__(self, context: bytes):
        self.context = context

    def seed(self) -> int:
        return int.from_bytes(hashlib.sha256(self.context).digest()[:8], "big")

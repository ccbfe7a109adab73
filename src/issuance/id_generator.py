"""Token Id Generator - уникальные идентификаторы токенов в [1, total_supply].

Два источника id:
1. Пул уникальных id - генерируется один раз при конструировании
   детерминированной hash-цепочкой SHA-256 от seed; воспроизводим при
   фиксированном seed.
2. Последовательный счётчик - возрастающие id, пропускающие id из пула.

На каждый выпуск seeded-розыгрыш решает, брать ли id из пула:
P(пул) = оставшийся пул / оставшийся supply. Пул исчерпывается ровно тогда,
когда исчерпан supply; ни один id не выдаётся дважды.
"""

import hashlib
import random
from dataclasses import dataclass
from typing import Any, FrozenSet, List, Set, Tuple


@dataclass(frozen=True)
class GeneratorSnapshot:
    """Курсоры и состояние RNG генератора до commit."""

    pool_cursor: int
    sequential_cursor: int
    dealt_count: int
    rng_state: Any


class TokenIdGenerator:
    """Генератор id без коллизий с seeded пулом уникальных id."""

    def __init__(self, total_supply: int, unique_pool_size: int, seed: int):
        """
        Args:
            total_supply: размер пространства id [1, total_supply]
            unique_pool_size: количество уникальных id в пуле
            seed: seed детерминированной генерации
        """
        if total_supply < 1:
            raise ValueError(f"total_supply must be >= 1, got {total_supply}")
        if not 0 <= unique_pool_size <= total_supply:
            raise ValueError(
                f"unique_pool_size must be in [0, {total_supply}], got {unique_pool_size}"
            )

        self.total_supply = total_supply
        self.seed = seed

        self._pool: Tuple[int, ...] = self._generate_pool(unique_pool_size)
        self._pool_set: FrozenSet[int] = frozenset(self._pool)
        self._rng = random.Random(seed)

        self._pool_cursor = 0
        self._sequential_cursor = 0
        self._dealt: Set[int] = set()
        self._dealt_log: List[int] = []

    def _generate_pool(self, size: int) -> Tuple[int, ...]:
        """Hash-цепочка sha256(seed:nonce) → id, дубликаты отбрасываются."""
        pool: List[int] = []
        seen: Set[int] = set()
        nonce = 0
        while len(pool) < size:
            digest = hashlib.sha256(f"{self.seed}:{nonce}".encode()).hexdigest()
            token_id = int(digest, 16) % self.total_supply + 1
            nonce += 1
            if token_id in seen:
                continue
            seen.add(token_id)
            pool.append(token_id)
        return tuple(pool)

    # -------------------------------------------------------------------------
    # Состояние
    # -------------------------------------------------------------------------

    @property
    def unique_pool(self) -> Tuple[int, ...]:
        return self._pool

    @property
    def generated_uniques_count(self) -> int:
        """Размер пула, сгенерированного при конструировании."""
        return len(self._pool)

    @property
    def uniques_dealt_count(self) -> int:
        return self._pool_cursor

    @property
    def dealt_count(self) -> int:
        return len(self._dealt)

    @property
    def remaining(self) -> int:
        return self.total_supply - len(self._dealt)

    def is_unique(self, token_id: int) -> bool:
        return token_id in self._pool_set

    def was_dealt(self, token_id: int) -> bool:
        return token_id in self._dealt

    # -------------------------------------------------------------------------
    # Выдача
    # -------------------------------------------------------------------------

    def next_id(self) -> int:
        """Следующий id.

        Raises:
            RuntimeError: пространство id исчерпано (контроллер не допускает
                этого через SupplyState)
        """
        remaining = self.remaining
        if remaining <= 0:
            raise RuntimeError("token id space exhausted")

        pool_remaining = len(self._pool) - self._pool_cursor
        if pool_remaining > 0 and self._rng.randrange(remaining) < pool_remaining:
            token_id = self._pool[self._pool_cursor]
            self._pool_cursor += 1
        else:
            token_id = self._next_sequential()

        self._dealt.add(token_id)
        self._dealt_log.append(token_id)
        return token_id

    def next_ids(self, count: int) -> List[int]:
        return [self.next_id() for _ in range(count)]

    def _next_sequential(self) -> int:
        candidate = self._sequential_cursor + 1
        while candidate in self._pool_set:
            candidate += 1
        self._sequential_cursor = candidate
        return candidate

    # -------------------------------------------------------------------------
    # Откат
    # -------------------------------------------------------------------------

    def snapshot(self) -> GeneratorSnapshot:
        return GeneratorSnapshot(
            pool_cursor=self._pool_cursor,
            sequential_cursor=self._sequential_cursor,
            dealt_count=len(self._dealt_log),
            rng_state=self._rng.getstate(),
        )

    def restore(self, snapshot: GeneratorSnapshot) -> None:
        """Возврат к snapshot: id, выданные после него, снова свободны."""
        for token_id in self._dealt_log[snapshot.dealt_count:]:
            self._dealt.discard(token_id)
        del self._dealt_log[snapshot.dealt_count:]
        self._pool_cursor = snapshot.pool_cursor
        self._sequential_cursor = snapshot.sequential_cursor
        self._rng.setstate(snapshot.rng_state)

"""Тесты Token Id Generator.

Coverage:
- Детерминизм пула при фиксированном seed
- Отсутствие коллизий на всём пространстве id
- Исчерпание пула ровно к исчерпанию supply
- Откат к snapshot
"""

import pytest

from src.issuance.id_generator import TokenIdGenerator


def test_pool_is_reproducible_for_fixed_seed():
    a = TokenIdGenerator(total_supply=100, unique_pool_size=10, seed=42)
    b = TokenIdGenerator(total_supply=100, unique_pool_size=10, seed=42)

    assert a.unique_pool == b.unique_pool
    assert a.next_ids(30) == b.next_ids(30)


def test_pool_differs_between_seeds():
    a = TokenIdGenerator(total_supply=10_000, unique_pool_size=10, seed=1)
    b = TokenIdGenerator(total_supply=10_000, unique_pool_size=10, seed=2)

    assert a.unique_pool != b.unique_pool


def test_pool_ids_are_distinct_and_in_range():
    gen = TokenIdGenerator(total_supply=12, unique_pool_size=12, seed=7)

    assert gen.generated_uniques_count == 12
    assert sorted(gen.unique_pool) == list(range(1, 13))


@pytest.mark.parametrize("supply, pool", [(1, 0), (1, 1), (17, 5), (100, 10), (250, 0)])
def test_full_issuance_is_a_permutation(supply, pool):
    gen = TokenIdGenerator(total_supply=supply, unique_pool_size=pool, seed=2021)

    ids = gen.next_ids(supply)

    assert sorted(ids) == list(range(1, supply + 1))
    assert gen.uniques_dealt_count == pool
    assert gen.remaining == 0
    with pytest.raises(RuntimeError):
        gen.next_id()


def test_sequential_ids_skip_pool():
    gen = TokenIdGenerator(total_supply=100, unique_pool_size=10, seed=3)

    ids = gen.next_ids(50)
    sequential = [i for i in ids if not gen.is_unique(i)]

    assert sequential == sorted(sequential)
    assert not set(sequential) & set(gen.unique_pool)
    assert all(gen.was_dealt(i) for i in ids)


def test_invalid_arguments():
    with pytest.raises(ValueError):
        TokenIdGenerator(total_supply=0, unique_pool_size=0, seed=1)
    with pytest.raises(ValueError):
        TokenIdGenerator(total_supply=5, unique_pool_size=6, seed=1)


def test_restore_replays_same_ids():
    gen = TokenIdGenerator(total_supply=50, unique_pool_size=10, seed=7)
    gen.next_ids(5)
    snapshot = gen.snapshot()

    first = gen.next_ids(8)
    gen.restore(snapshot)

    assert gen.dealt_count == 5
    assert not any(gen.was_dealt(token_id) for token_id in first)
    assert gen.next_ids(8) == first

"""Тесты атомарности запросов при конкурентном доступе.

Параллельные bulk_buy никогда не превышают total_supply и квоту кошелька;
id не повторяются.
"""

from concurrent.futures import ThreadPoolExecutor

from src.core.errors import QuotaExceeded, SupplyExhausted
from tests.conftest import MINT_PRICE, PUBLIC_START, SUPPLY, wallet


def _attempt(fn):
    try:
        return fn()
    except (QuotaExceeded, SupplyExhausted) as e:
        return e


def test_concurrent_bulk_buys_never_over_issue(controller, clock, events):
    clock.now = PUBLIC_START

    with ThreadPoolExecutor(max_workers=16) as pool:
        futures = [
            pool.submit(_attempt, lambda i=i: controller.bulk_buy(wallet(i), 5, MINT_PRICE * 5))
            for i in range(30)
        ]
        outcomes = [f.result() for f in futures]

    receipts = [o for o in outcomes if not isinstance(o, Exception)]
    failures = [o for o in outcomes if isinstance(o, Exception)]

    assert len(receipts) == SUPPLY // 5
    assert len(failures) == 10
    assert all(isinstance(f, SupplyExhausted) for f in failures)
    assert controller.issued_count() == SUPPLY

    token_ids = [e.token_id for e in events.events]
    assert len(token_ids) == len(set(token_ids)) == SUPPLY


def test_concurrent_requests_from_one_wallet_respect_quota(controller, clock):
    clock.now = PUBLIC_START

    with ThreadPoolExecutor(max_workers=8) as pool:
        futures = [
            pool.submit(_attempt, lambda: controller.bulk_buy(wallet(99), 4, MINT_PRICE * 4))
            for _ in range(8)
        ]
        outcomes = [f.result() for f in futures]

    successes = [o for o in outcomes if not isinstance(o, Exception)]

    assert len(successes) == 1
    assert controller.total_minted_count(wallet(99)) == 4
    assert controller.issued_count() == 4

"""Общие fixtures для тестов контроллера выпуска."""

import pytest

from src.core.domain import CollectionConfig
from src.issuance import (
    FixedEntropySource,
    InMemoryEventSink,
    InMemoryOwnershipRegistry,
    IssuanceController,
    SingleOwnerAuthorization,
)


OWNER = "0xowner"
MINT_PRICE = 10**17
SUPPLY = 100
BULK_BUY_LIMIT = 5
PRESALE_START = 1_700_000_000
PUBLIC_START = PRESALE_START + 7200
SEED = 20211117


def wallet(i: int) -> str:
    """Детерминированный адрес i-го аккаунта."""
    return f"0x{i:040x}"


class FakeClock:
    """Управляемый источник времени."""

    def __init__(self, now: int):
        self.now = now

    def __call__(self) -> int:
        return self.now


def make_config(**overrides) -> CollectionConfig:
    data = {
        "name": "Metapass",
        "symbol": "MPASS",
        "base_uri": "ipfs://metapass/",
        "beneficiary": "0xdao",
        "unit_price": MINT_PRICE,
        "total_supply": SUPPLY,
        "bulk_buy_limit": BULK_BUY_LIMIT,
        "max_per_wallet": 6,
        "max_per_wallet_presale": 1,
        "reserve_mint_limit": 50,
        "presale_start": PRESALE_START,
        "public_start": PUBLIC_START,
        "unique_pool_size": 10,
    }
    data.update(overrides)
    return CollectionConfig(**data)


@pytest.fixture
def clock():
    """Часы на начале presale."""
    return FakeClock(PRESALE_START)


@pytest.fixture
def events():
    return InMemoryEventSink()


@pytest.fixture
def registry():
    return InMemoryOwnershipRegistry()


@pytest.fixture
def make_controller(clock, events, registry):
    """Фабрика контроллера с переопределением полей конфигурации."""

    def _make(**overrides) -> IssuanceController:
        return IssuanceController(
            config=make_config(**overrides),
            authorization=SingleOwnerAuthorization(OWNER),
            time_source=clock,
            entropy=FixedEntropySource(SEED),
            registry=registry,
            event_sink=events,
        )

    return _make


@pytest.fixture
def controller(make_controller):
    """Контроллер по умолчанию с whitelist из аккаунтов 1..50."""
    ctrl = make_controller()
    ctrl.add_to_presale_list(OWNER, [wallet(i) for i in range(1, 51)])
    return ctrl

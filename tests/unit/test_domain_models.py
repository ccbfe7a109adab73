"""
Tests for Domain Models

Покрывает:
- CollectionConfig: валидация полей и межполевых инвариантов
- Immutability (frozen=True)
- TokenMinted / MintReceipt / WalletQuota
- Таксономия ошибок
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    CollectionConfig,
    MintReceipt,
    PaymentPolicy,
    SalePhase,
    TokenMinted,
    TokenRecord,
    WalletQuota,
)
from src.core.errors import (
    ERRORS_BY_REASON,
    IssuanceError,
    QuotaExceeded,
    RejectionReason,
    SupplyExhausted,
    error_for,
)
from tests.conftest import make_config


# =============================================================================
# COLLECTION CONFIG
# =============================================================================


class TestCollectionConfig:
    def test_defaults(self):
        config = make_config()

        assert config.payment_policy == PaymentPolicy.REJECT_ON_MISMATCH
        assert config.required_payment(5) == config.unit_price * 5

    def test_frozen(self):
        config = make_config()

        with pytest.raises(ValidationError):
            config.total_supply = 1000

    def test_public_before_presale_rejected(self):
        with pytest.raises(ValidationError, match="public_start"):
            make_config(presale_start=200, public_start=100)

    def test_pool_larger_than_supply_rejected(self):
        with pytest.raises(ValidationError, match="unique_pool_size"):
            make_config(total_supply=5, unique_pool_size=6)

    def test_presale_cap_above_wallet_cap_rejected(self):
        with pytest.raises(ValidationError, match="max_per_wallet_presale"):
            make_config(max_per_wallet=2, max_per_wallet_presale=3)

    @pytest.mark.parametrize(
        "field, value",
        [("total_supply", 0), ("bulk_buy_limit", 0), ("unit_price", -1), ("name", "")],
    )
    def test_field_constraints(self, field, value):
        with pytest.raises(ValidationError):
            make_config(**{field: value})

    def test_equal_boundaries_allowed(self):
        config = make_config(presale_start=100, public_start=100)

        assert isinstance(config, CollectionConfig)


# =============================================================================
# TOKEN MODELS
# =============================================================================


def test_token_record_requires_positive_id():
    assert TokenRecord(token_id=1, owner="a").owner == "a"
    with pytest.raises(ValidationError):
        TokenRecord(token_id=0, owner="a")


def test_token_minted_defaults():
    event = TokenMinted(token_id=5, wallet="a", sequence=1)

    assert event.is_unique is False


def test_mint_receipt_count():
    receipt = MintReceipt(wallet="a", token_ids=(1, 2, 3), phase=SalePhase.PUBLIC)

    assert receipt.count == 3
    assert receipt.refund == 0
    with pytest.raises(ValidationError):
        MintReceipt(wallet="a", token_ids=(), phase=SalePhase.PUBLIC)


def test_wallet_quota_invariant():
    assert WalletQuota().total_minted == 0
    with pytest.raises(ValidationError):
        WalletQuota(presale_minted=2, total_minted=1)


# =============================================================================
# ERRORS
# =============================================================================


def test_every_reason_has_error_type():
    assert set(ERRORS_BY_REASON) == set(RejectionReason)
    for reason, cls in ERRORS_BY_REASON.items():
        assert issubclass(cls, IssuanceError)
        assert cls.reason == reason


def test_error_for_builds_typed_error():
    err = error_for(RejectionReason.SUPPLY_EXHAUSTED, wallet="a")

    assert isinstance(err, SupplyExhausted)
    assert str(err) == "Total supply reached"
    assert err.context == {"wallet": "a"}


def test_custom_message():
    err = QuotaExceeded("Presale mint limit exceeded")

    assert err.message == "Presale mint limit exceeded"
    assert err.reason == RejectionReason.QUOTA_EXCEEDED

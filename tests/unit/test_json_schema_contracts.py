"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Интеграция с Pydantic моделями
- Загрузка конфигурации коллекции
- Проверка событий на границе EventSink
"""

import json

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from src.core.contracts import (
    contract_validator,
    load_collection_config,
    token_minted_payload,
    validate_collection_config,
)
from src.core.domain import CollectionConfig, TokenMinted
from src.issuance.collaborators import InMemoryEventSink


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_collection_config():
    """Валидный collection_config для тестирования."""
    return {
        "name": "Metapass",
        "symbol": "MPASS",
        "base_uri": "ipfs://metapass/",
        "beneficiary": "0xdao",
        "unit_price": 100000000000000000,
        "total_supply": 100,
        "bulk_buy_limit": 5,
        "max_per_wallet": 6,
        "max_per_wallet_presale": 1,
        "presale_start": 1700000000,
        "public_start": 1700007200,
    }


@pytest.fixture
def valid_token_minted():
    return {"token_id": 17, "wallet": "0xabc", "is_unique": False, "sequence": 1}


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@pytest.mark.parametrize("schema_name", ["collection_config", "token_minted"])
def test_schemas_load_and_are_valid(schema_name):
    validator = contract_validator(schema_name)

    assert validator.schema["type"] == "object"


def test_validators_are_cached():
    assert contract_validator("token_minted") is contract_validator("token_minted")


def test_missing_schema():
    with pytest.raises(FileNotFoundError):
        contract_validator("does_not_exist")


# =============================================================================
# COLLECTION CONFIG
# =============================================================================


class TestCollectionConfigContract:
    def test_valid(self, valid_collection_config):
        validate_collection_config(valid_collection_config)

    @pytest.mark.parametrize("field", ["name", "total_supply", "presale_start", "public_start"])
    def test_missing_required(self, valid_collection_config, field):
        del valid_collection_config[field]

        with pytest.raises(ValidationError):
            validate_collection_config(valid_collection_config)

    def test_wrong_type(self, valid_collection_config):
        valid_collection_config["unit_price"] = "0.1"

        assert contract_validator("collection_config").is_valid(valid_collection_config) is False

    def test_constraints(self, valid_collection_config):
        valid_collection_config["total_supply"] = 0
        valid_collection_config["payment_policy"] = "BURN"

        errors = list(contract_validator("collection_config").iter_errors(valid_collection_config))

        assert len(errors) == 2

    def test_unknown_field(self, valid_collection_config):
        valid_collection_config["auction"] = True

        with pytest.raises(ValidationError):
            validate_collection_config(valid_collection_config)

    def test_pydantic_model_dump_matches_schema(self, valid_collection_config):
        config = CollectionConfig(**valid_collection_config)

        validate_collection_config(config.model_dump(mode="json"))


class TestLoadCollectionConfig:
    def test_load_from_dict(self, valid_collection_config):
        config = load_collection_config(valid_collection_config)

        assert config.name == "Metapass"
        assert config.reserve_mint_limit == 50
        assert config.unique_pool_size == 10

    def test_load_from_file(self, valid_collection_config, tmp_path):
        path = tmp_path / "collection.json"
        path.write_text(json.dumps(valid_collection_config), encoding="utf-8")

        config = load_collection_config(path)

        assert config.total_supply == 100

    def test_schema_violation(self, valid_collection_config):
        valid_collection_config["bulk_buy_limit"] = 0

        with pytest.raises(ValidationError):
            load_collection_config(valid_collection_config)

    def test_cross_field_violation(self, valid_collection_config):
        valid_collection_config["public_start"] = valid_collection_config["presale_start"] - 1

        with pytest.raises(PydanticValidationError):
            load_collection_config(valid_collection_config)


# =============================================================================
# EVENTS
# =============================================================================


class TestTokenMintedContract:
    def test_valid(self, valid_token_minted):
        contract_validator("token_minted").validate(valid_token_minted)

    def test_zero_token_id(self, valid_token_minted):
        valid_token_minted["token_id"] = 0

        assert contract_validator("token_minted").is_valid(valid_token_minted) is False

    def test_unknown_field(self, valid_token_minted):
        valid_token_minted["price"] = 1

        with pytest.raises(ValidationError):
            contract_validator("token_minted").validate(valid_token_minted)

    def test_payload_from_pydantic_event(self):
        event = TokenMinted(token_id=1, wallet="0xabc", is_unique=True, sequence=9)

        payload = token_minted_payload(event)

        assert payload == {"token_id": 1, "wallet": "0xabc", "is_unique": True, "sequence": 9}


def test_event_sink_records_validated_payloads():
    sink = InMemoryEventSink()

    sink.emit(TokenMinted(token_id=4, wallet="0xabc", sequence=1))

    assert sink.payloads == [
        {"token_id": 4, "wallet": "0xabc", "is_unique": False, "sequence": 1}
    ]

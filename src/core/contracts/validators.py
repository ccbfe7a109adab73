"""
JSON Schema контракты выпуска

Схемы лежат в contracts/schema/ в корне проекта и проверяются
meta-схемой Draft 2020-12 при первой загрузке. Скомпилированные
валидаторы кэшируются по имени схемы.

Границы, на которых применяются контракты:
- collection_config.json: загрузка конфигурации (config_loader)
- token_minted.json: запись события в EventSink (token_minted_payload)
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from jsonschema import Draft202012Validator

from src.core.domain.token import TokenMinted

SCHEMA_DIR = Path(__file__).resolve().parents[3] / "contracts" / "schema"

COLLECTION_CONFIG_SCHEMA = "collection_config"
TOKEN_MINTED_SCHEMA = "token_minted"


@lru_cache(maxsize=None)
def contract_validator(schema_name: str) -> Draft202012Validator:
    """
    Валидатор для схемы contracts/schema/<schema_name>.json.

    Raises:
        FileNotFoundError: Файл схемы не найден
        jsonschema.SchemaError: Схема не проходит meta-validation
    """
    with open(SCHEMA_DIR / f"{schema_name}.json", "r", encoding="utf-8") as f:
        schema = json.load(f)
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def validate_collection_config(data: Dict[str, Any]) -> None:
    """
    Проверка сырого dict конфигурации до построения модели.

    Raises:
        jsonschema.ValidationError: Нарушение схемы
    """
    contract_validator(COLLECTION_CONFIG_SCHEMA).validate(data)


def token_minted_payload(event: TokenMinted) -> Dict[str, Any]:
    """JSON-представление события, проверенное по token_minted.json."""
    payload = event.model_dump(mode="json")
    contract_validator(TOKEN_MINTED_SCHEMA).validate(payload)
    return payload

"""
Загрузка CollectionConfig из JSON

Двухступенчатая валидация:
1. JSON Schema (collection_config.json) - структура, типы, диапазоны
2. Pydantic модель - межполевые инварианты (границы фаз, лимиты)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from src.core.contracts.validators import validate_collection_config
from src.core.domain.collection_config import CollectionConfig

logger = logging.getLogger(__name__)


def load_collection_config(source: Union[str, Path, Dict[str, Any]]) -> CollectionConfig:
    """
    Загрузка конфигурации коллекции из файла или dict.

    Args:
        source: Путь к JSON файлу или уже разобранный dict

    Returns:
        Immutable CollectionConfig

    Raises:
        jsonschema.ValidationError: Нарушение JSON Schema
        pydantic.ValidationError: Нарушение межполевых инвариантов
        FileNotFoundError: Файл не найден
    """
    if isinstance(source, dict):
        data = source
    else:
        with open(source, "r", encoding="utf-8") as f:
            data = json.load(f)

    validate_collection_config(data)
    config = CollectionConfig.model_validate(data)

    logger.info(
        "collection config loaded: name=%s supply=%d presale_start=%d public_start=%d",
        config.name,
        config.total_supply,
        config.presale_start,
        config.public_start,
    )
    return config

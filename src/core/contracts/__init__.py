"""
Contract Validation Module

Модуль для валидации JSON контрактов системы выпуска.
"""

from .validators import (
    contract_validator,
    token_minted_payload,
    validate_collection_config,
)
from .config_loader import load_collection_config

__all__ = [
    "contract_validator",
    "validate_collection_config",
    "token_minted_payload",
    "load_collection_config",
]

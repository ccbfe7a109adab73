"""
Domain models and value objects.

Contains fundamental issuance entities: CollectionConfig, SalePhase,
TokenRecord, TokenMinted, MintReceipt, WalletQuota.
"""

from src.core.domain.collection_config import (
    DEFAULT_RESERVE_MINT_LIMIT,
    DEFAULT_UNIQUE_POOL_SIZE,
    CollectionConfig,
)
from src.core.domain.sale_phase import PaymentPolicy, SalePhase
from src.core.domain.token import MintReceipt, TokenMinted, TokenRecord, WalletQuota

__all__ = [
    # Config
    "CollectionConfig",
    "DEFAULT_RESERVE_MINT_LIMIT",
    "DEFAULT_UNIQUE_POOL_SIZE",
    # Enums
    "SalePhase",
    "PaymentPolicy",
    # Token models
    "TokenRecord",
    "TokenMinted",
    "MintReceipt",
    "WalletQuota",
]

"""
CollectionConfig - Конфигурация коллекции

Immutable Pydantic модель, задаваемая один раз при конструировании контроллера.
Полная совместимость с JSON Schema (contracts/schema/collection_config.json).
"""

from typing import Final

from pydantic import BaseModel, Field, model_validator

from .sale_phase import PaymentPolicy


# =============================================================================
# ЗНАЧЕНИЯ ПО УМОЛЧАНИЮ
# =============================================================================

# Лимит owner-резерва (кумулятивно за все вызовы reserve_mint)
DEFAULT_RESERVE_MINT_LIMIT: Final[int] = 50

# Размер пула "уникальных" id, генерируемых при конструировании
DEFAULT_UNIQUE_POOL_SIZE: Final[int] = 10


class CollectionConfig(BaseModel):
    """
    Конфигурация коллекции (неизменяемая после конструирования).

    Цены - в минимальных единицах валюты (int, например wei).
    Временные границы - unix timestamp в секундах.
    """

    # Метаданные коллекции
    name: str = Field(..., min_length=1, description="Имя коллекции")
    symbol: str = Field(..., min_length=1, description="Символ токена")
    base_uri: str = Field("", description="Базовая ссылка на метаданные")
    beneficiary: str = Field(..., min_length=1, description="Адрес получателя выручки")

    # Экономика
    unit_price: int = Field(..., ge=0, description="Цена одной единицы")
    total_supply: int = Field(..., ge=1, description="Максимальный выпуск")

    # Лимиты
    bulk_buy_limit: int = Field(..., ge=1, description="Лимит единиц на один запрос")
    max_per_wallet: int = Field(..., ge=1, description="Лимит кошелька за всё время")
    max_per_wallet_presale: int = Field(
        ..., ge=0, description="Лимит кошелька в presale"
    )
    reserve_mint_limit: int = Field(
        DEFAULT_RESERVE_MINT_LIMIT, ge=0, description="Кумулятивный лимит owner-резерва"
    )

    # Фазы
    presale_start: int = Field(..., ge=0, description="Начало presale (unix, сек)")
    public_start: int = Field(..., ge=0, description="Начало public sale (unix, сек)")

    # Идентификаторы
    unique_pool_size: int = Field(
        DEFAULT_UNIQUE_POOL_SIZE, ge=0, description="Размер пула уникальных id"
    )

    payment_policy: PaymentPolicy = Field(
        PaymentPolicy.REJECT_ON_MISMATCH, description="Политика расхождения платежа"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_consistency(self) -> "CollectionConfig":
        """Проверка согласованности границ фаз и лимитов."""
        if self.public_start < self.presale_start:
            raise ValueError("public_start must be >= presale_start")
        if self.unique_pool_size > self.total_supply:
            raise ValueError("unique_pool_size must be <= total_supply")
        if self.max_per_wallet_presale > self.max_per_wallet:
            raise ValueError("max_per_wallet_presale must be <= max_per_wallet")
        return self

    def required_payment(self, count: int) -> int:
        """Требуемая оплата за count единиц."""
        return self.unit_price * count

"""
Token - Модели выпуска: запись токена, событие TokenMinted, квитанция, квота

Immutable Pydantic модели. TokenMinted совместим с JSON Schema
(contracts/schema/token_minted.json).
"""

from pydantic import BaseModel, Field, model_validator

from .sale_phase import SalePhase


class TokenRecord(BaseModel):
    """Выпущенный токен: (token_id, owner)."""

    token_id: int = Field(..., ge=1, description="Идентификатор токена")
    owner: str = Field(..., min_length=1, description="Адрес владельца")

    model_config = {"frozen": True}


class TokenMinted(BaseModel):
    """
    Событие выпуска одного токена.

    sequence - глобальный порядковый номер выпуска (1..total_supply).
    """

    token_id: int = Field(..., ge=1, description="Идентификатор токена")
    wallet: str = Field(..., min_length=1, description="Получатель")
    is_unique: bool = Field(False, description="Выдан из пула уникальных id")
    sequence: int = Field(..., ge=1, description="Порядковый номер выпуска")

    model_config = {"frozen": True}


class MintReceipt(BaseModel):
    """
    Результат успешного запроса на выпуск.

    amount_charged + refund == приложенный платёж.
    """

    wallet: str = Field(..., min_length=1, description="Получатель")
    token_ids: tuple[int, ...] = Field(..., min_length=1, description="Выпущенные id")
    phase: SalePhase = Field(..., description="Фаза на момент запроса")
    amount_charged: int = Field(0, ge=0, description="Списанная сумма")
    refund: int = Field(0, ge=0, description="Возвращённый излишек")

    model_config = {"frozen": True}

    @property
    def count(self) -> int:
        return len(self.token_ids)


class WalletQuota(BaseModel):
    """Счётчики кошелька: выпуск в presale и общий выпуск."""

    presale_minted: int = Field(0, ge=0, description="Выпущено в presale")
    total_minted: int = Field(0, ge=0, description="Выпущено всего")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_counters(self) -> "WalletQuota":
        if self.presale_minted > self.total_minted:
            raise ValueError("presale_minted must be <= total_minted")
        return self

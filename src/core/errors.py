"""
Issuance Errors - таксономия ошибок отклонения запросов

Все ошибки - ошибки отклонения конкретного запроса (не фатальные для процесса).
Каждая ошибка несёт машиночитаемый код (RejectionReason) и человекочитаемое
сообщение. Вызывающая сторона различает причины по типу исключения.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибка поднимается синхронно и атомарно, без мутации состояния
2. Внутренних retry нет - политика повторов принадлежит вызывающей стороне
3. Ни одна ошибка не проглатывается
"""

from enum import Enum
from typing import Dict, Type


class RejectionReason(str, Enum):
    """Код причины отклонения запроса."""

    UNAUTHORIZED = "unauthorized"
    SALE_NOT_ACTIVE = "sale_not_active"
    NOT_WHITELISTED = "not_whitelisted"
    QUOTA_EXCEEDED = "quota_exceeded"
    BULK_LIMIT_EXCEEDED = "bulk_limit_exceeded"
    SUPPLY_EXHAUSTED = "supply_exhausted"
    INCORRECT_PAYMENT = "incorrect_payment"
    INVALID_REQUEST = "invalid_request"


# =============================================================================
# СООБЩЕНИЯ ПО УМОЛЧАНИЮ
# =============================================================================

MSG_NOT_OWNER = "Ownable: caller is not the owner"
MSG_PRESALE_NOT_ACTIVE = "Presale not started/already finished"
MSG_SALE_NOT_STARTED = "Sale not started"
MSG_NOT_IN_PRESALE_LIST = "Not in presale list"
MSG_PRESALE_LIMIT_EXCEEDED = "Presale mint limit exceeded"
MSG_MINT_LIMIT_EXCEEDED = "Mint limit exceeded"
MSG_BULK_LIMIT_EXCEEDED = "Cannot bulk buy more than the preset limit"
MSG_TOTAL_SUPPLY_REACHED = "Total supply reached"
MSG_INCORRECT_PAYMENT = "Incorrect payment amount"


class IssuanceError(Exception):
    """Базовая ошибка отклонения запроса на выпуск."""

    reason: RejectionReason = RejectionReason.INVALID_REQUEST
    default_message: str = "Request rejected"

    def __init__(self, message: str = "", **context):
        self.message = message or self.default_message
        self.context = context
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class Unauthorized(IssuanceError):
    """Вызывающий не имеет привилегии owner."""

    reason = RejectionReason.UNAUTHORIZED
    default_message = MSG_NOT_OWNER


class SaleNotActive(IssuanceError):
    """Операция вне своего окна фазы."""

    reason = RejectionReason.SALE_NOT_ACTIVE
    default_message = MSG_SALE_NOT_STARTED


class NotWhitelisted(IssuanceError):
    """Presale mint от кошелька вне whitelist."""

    reason = RejectionReason.NOT_WHITELISTED
    default_message = MSG_NOT_IN_PRESALE_LIST


class QuotaExceeded(IssuanceError):
    """Превышение квоты кошелька или owner-резерва."""

    reason = RejectionReason.QUOTA_EXCEEDED
    default_message = MSG_MINT_LIMIT_EXCEEDED


class BulkLimitExceeded(IssuanceError):
    """Запрошенное количество больше лимита на одну транзакцию."""

    reason = RejectionReason.BULK_LIMIT_EXCEEDED
    default_message = MSG_BULK_LIMIT_EXCEEDED


class SupplyExhausted(IssuanceError):
    """Выпуск превысил бы total supply."""

    reason = RejectionReason.SUPPLY_EXHAUSTED
    default_message = MSG_TOTAL_SUPPLY_REACHED


class IncorrectPayment(IssuanceError):
    """Приложенный платёж не равен требуемой сумме."""

    reason = RejectionReason.INCORRECT_PAYMENT
    default_message = MSG_INCORRECT_PAYMENT


class InvalidRequest(IssuanceError):
    """Некорректный запрос (count < 1, неизвестный token id и т.п.)."""

    reason = RejectionReason.INVALID_REQUEST
    default_message = "Invalid request"


ERRORS_BY_REASON: Dict[RejectionReason, Type[IssuanceError]] = {
    RejectionReason.UNAUTHORIZED: Unauthorized,
    RejectionReason.SALE_NOT_ACTIVE: SaleNotActive,
    RejectionReason.NOT_WHITELISTED: NotWhitelisted,
    RejectionReason.QUOTA_EXCEEDED: QuotaExceeded,
    RejectionReason.BULK_LIMIT_EXCEEDED: BulkLimitExceeded,
    RejectionReason.SUPPLY_EXHAUSTED: SupplyExhausted,
    RejectionReason.INCORRECT_PAYMENT: IncorrectPayment,
    RejectionReason.INVALID_REQUEST: InvalidRequest,
}


def error_for(reason: RejectionReason, message: str = "", **context) -> IssuanceError:
    """
    Построение типизированной ошибки по коду причины.

    Args:
        reason: Код причины отклонения
        message: Сообщение (по умолчанию - сообщение класса)

    Returns:
        Экземпляр соответствующего подкласса IssuanceError
    """
    return ERRORS_BY_REASON[reason](message, **context)

"""
SalePhase / PaymentPolicy - перечисления домена выпуска
"""

from enum import Enum


class SalePhase(str, Enum):
    """
    Фаза продажи, производная от текущего времени и границ конфигурации.

    - BEFORE: now < presale_start
    - PRESALE: presale_start <= now < public_start
    - PUBLIC: now >= public_start
    """

    BEFORE = "BEFORE"
    PRESALE = "PRESALE"
    PUBLIC = "PUBLIC"


class PaymentPolicy(str, Enum):
    """Политика обработки расхождения приложенного платежа и требуемой суммы."""

    REJECT_ON_MISMATCH = "REJECT_ON_MISMATCH"
    REFUND_EXCESS = "REFUND_EXCESS"

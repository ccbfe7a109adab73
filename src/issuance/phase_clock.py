"""Phase Clock - определение текущей фазы продажи по времени.

- BEFORE: now < presale_start
- PRESALE: presale_start <= now < public_start
- PUBLIC: now >= public_start

Полуоткрытые интервалы: при presale_start == public_start фаза PRESALE
недостижима.
"""

import time
from typing import Callable, Optional

from src.core.domain.collection_config import CollectionConfig
from src.core.domain.sale_phase import SalePhase


TimeSource = Callable[[], int]


def system_time() -> int:
    """Текущее unix время в секундах."""
    return int(time.time())


def current_phase(now: int, presale_start: int, public_start: int) -> SalePhase:
    """Чистая функция: фаза по времени и границам.

    Args:
        now: текущее время (unix, сек)
        presale_start: начало presale
        public_start: начало public sale

    Returns:
        SalePhase
    """
    if now >= public_start:
        return SalePhase.PUBLIC
    if now >= presale_start:
        return SalePhase.PRESALE
    return SalePhase.BEFORE


class PhaseClock:
    """Phase Clock поверх источника времени и конфигурации.

    Читается один раз на запрос; побочных эффектов нет.
    """

    def __init__(self, config: CollectionConfig, time_source: Optional[TimeSource] = None):
        """
        Args:
            config: конфигурация коллекции (границы фаз)
            time_source: источник времени (default: системное время)
        """
        self.config = config
        self.time_source = time_source or system_time

    def now(self) -> int:
        return int(self.time_source())

    def phase_at(self, now: int) -> SalePhase:
        return current_phase(now, self.config.presale_start, self.config.public_start)

    def phase(self) -> SalePhase:
        """Фаза на текущий момент источника времени."""
        return self.phase_at(self.now())

"""Supply State - глобальный счётчик выпуска.

issued_count монотонно растёт и никогда не превышает total_supply.
Изменяется только под lock контроллера.
"""

from src.core.errors import MSG_TOTAL_SUPPLY_REACHED, SupplyExhausted


class SupplyState:
    """Счётчик выпущенных единиц с жёстким потолком."""

    def __init__(self, total_supply: int):
        if total_supply < 1:
            raise ValueError(f"total_supply must be >= 1, got {total_supply}")
        self.total_supply = total_supply
        self._issued = 0

    @property
    def issued_count(self) -> int:
        return self._issued

    @property
    def remaining(self) -> int:
        return self.total_supply - self._issued

    def can_allocate(self, count: int) -> bool:
        return self._issued + count <= self.total_supply

    def allocate(self, count: int) -> range:
        """Check-and-increment на count единиц.

        Returns:
            диапазон порядковых номеров выпуска (1-based)

        Raises:
            SupplyExhausted: потолок был бы превышен
        """
        if not self.can_allocate(count):
            raise SupplyExhausted(
                MSG_TOTAL_SUPPLY_REACHED,
                issued=self._issued,
                requested=count,
                total_supply=self.total_supply,
            )
        start = self._issued + 1
        self._issued += count
        return range(start, self._issued + 1)

    def release_to(self, issued_count: int) -> None:
        """Откат счётчика к ранее прочитанному issued_count."""
        if not 0 <= issued_count <= self._issued:
            raise ValueError(
                f"cannot release to {issued_count}, issued={self._issued}"
            )
        self._issued = issued_count

"""Whitelist Registry - множество кошельков, допущенных к presale.

Изменения только явным действием owner (add/remove); проверка прав
выполняется контроллером через OwnerAuthorization.
"""

import logging
from typing import FrozenSet, Iterable, Set

logger = logging.getLogger(__name__)


class WhitelistRegistry:
    """Set membership для presale eligibility."""

    def __init__(self):
        self._members: Set[str] = set()

    def add(self, addresses: Iterable[str]) -> int:
        """Идемпотентное добавление (set-union).

        Returns:
            количество реально добавленных адресов
        """
        added = 0
        for address in addresses:
            if address not in self._members:
                self._members.add(address)
                added += 1
        logger.info("presale list: added=%d size=%d", added, len(self._members))
        return added

    def remove(self, addresses: Iterable[str]) -> int:
        """Явный отзыв членства. Отсутствующие адреса игнорируются."""
        removed = 0
        for address in addresses:
            if address in self._members:
                self._members.discard(address)
                removed += 1
        logger.info("presale list: removed=%d size=%d", removed, len(self._members))
        return removed

    def contains(self, address: str) -> bool:
        return address in self._members

    def members(self) -> FrozenSet[str]:
        return frozenset(self._members)

    def __contains__(self, address: str) -> bool:
        return self.contains(address)

    def __len__(self) -> int:
        return len(self._members)

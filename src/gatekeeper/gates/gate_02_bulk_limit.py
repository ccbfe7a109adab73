"""GATE 2: Request Size / Bulk Limit

- count - целое число (int, не bool), иначе InvalidRequest
- count >= 1 для любой операции (иначе InvalidRequest)
- count <= bulk_buy_limit, если лимит применим (bulk_buy);
  превышение → BulkLimitExceeded независимо от supply и квоты
"""

from dataclasses import dataclass
from typing import Optional

from src.core.errors import MSG_BULK_LIMIT_EXCEEDED, RejectionReason


@dataclass(frozen=True)
class Gate02Result:
    """Результат GATE 2."""

    entry_allowed: bool
    block_reason: Optional[RejectionReason]
    message: str

    count: int
    bulk_limit: Optional[int]

    details: str


class Gate02BulkLimit:
    """GATE 2: размер запроса."""

    def evaluate(self, count: int, bulk_limit: Optional[int] = None) -> Gate02Result:
        """Оценка GATE 2.

        Args:
            count: запрошенное количество единиц
            bulk_limit: лимит на запрос (None - не применяется)
        """
        if isinstance(count, bool) or not isinstance(count, int):
            return Gate02Result(
                entry_allowed=False,
                block_reason=RejectionReason.INVALID_REQUEST,
                message=f"count must be an integer, got {count!r}",
                count=count,
                bulk_limit=bulk_limit,
                details=f"non-integer count: {type(count).__name__}",
            )

        if count < 1:
            return Gate02Result(
                entry_allowed=False,
                block_reason=RejectionReason.INVALID_REQUEST,
                message=f"count must be >= 1, got {count}",
                count=count,
                bulk_limit=bulk_limit,
                details="non-positive count",
            )

        if bulk_limit is not None and count > bulk_limit:
            return Gate02Result(
                entry_allowed=False,
                block_reason=RejectionReason.BULK_LIMIT_EXCEEDED,
                message=MSG_BULK_LIMIT_EXCEEDED,
                count=count,
                bulk_limit=bulk_limit,
                details=f"count={count} > bulk_limit={bulk_limit}",
            )

        return Gate02Result(
            entry_allowed=True,
            block_reason=None,
            message="",
            count=count,
            bulk_limit=bulk_limit,
            details=f"PASS: count={count}",
        )

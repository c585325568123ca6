"""CreditTransaction Entity - Ledger 감사 기록."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from apps.skyparty.domain.enums import BalanceOperation


@dataclass(frozen=True)
class CreditTransaction:
    """크레딧 거래 기록.

    Ledger 변경 1건당 1행이 추가되며 수정되지 않습니다.
    amount는 부호가 있는 값입니다 (subtract는 음수).
    """

    user_id: UUID
    amount: int
    type: BalanceOperation
    balance_after: int
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

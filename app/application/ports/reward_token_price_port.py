from __future__ import annotations

from decimal import Decimal
from typing import Protocol


class RewardTokenPricePort(Protocol):
    def get_reward_token_price_usd(self, *, pool_id: str | None = None) -> Decimal:
        ...

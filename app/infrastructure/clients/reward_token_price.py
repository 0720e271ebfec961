from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from app.application.ports.reward_token_price_port import RewardTokenPricePort


def _normalize_pool_key(value: str) -> str:
    return value.strip().lower()


@dataclass(frozen=True)
class RewardTokenPriceOverrides:
    data: dict

    def get_price(self, pool_id: str) -> Decimal | None:
        if not isinstance(self.data, dict):
            return None
        value = self.data.get(pool_id)
        if value is None:
            value = self.data.get(_normalize_pool_key(pool_id))
        if value is None:
            return None
        return Decimal(str(value))


class ConfiguredRewardTokenPriceProvider(RewardTokenPricePort):
    """Reference price for the emitted reward token, taken from settings.

    Live price resolution belongs to the data-fetching collaborators; this
    service only reads the configured default and per-pool overrides.
    """

    def __init__(self, *, default_price_usd: Decimal, overrides: RewardTokenPriceOverrides):
        self._default_price_usd = default_price_usd
        self._overrides = overrides

    def get_reward_token_price_usd(self, *, pool_id: str | None = None) -> Decimal:
        if pool_id:
            override = self._overrides.get_price(pool_id)
            if override is not None:
                return override
        return self._default_price_usd

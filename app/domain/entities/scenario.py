from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal, Union


@dataclass(frozen=True)
class TokenPath:
    """Raw coin type path, e.g. ``0x2::sui::SUI``."""

    path: str


@dataclass(frozen=True)
class TokenInfo:
    symbol: str | None = None
    name: str | None = None
    address: str | None = None
    decimals: int | None = None


TokenIdentity = Union[TokenPath, TokenInfo]


@dataclass(frozen=True)
class RewardDescriptor:
    token: TokenIdentity | None
    apr_percent: Decimal | None


@dataclass(frozen=True)
class Pool:
    pool_id: str
    tvl_usd: Decimal
    current_price: Decimal | None
    daily_emission_raw: Decimal
    position_apr_percent: Decimal | None = None
    rewards: tuple[RewardDescriptor, ...] = ()


@dataclass(frozen=True)
class Scenario:
    deposit_usd: Decimal
    timeline_days: Decimal
    claim_strategy_percent: Decimal
    price_range_low: Decimal | None = None
    price_range_high: Decimal | None = None
    exit_price: Decimal | None = None
    apr_override: Decimal | None = None

    @property
    def has_price_range(self) -> bool:
        return self.price_range_low is not None and self.price_range_high is not None


@dataclass(frozen=True)
class PriceContext:
    reward_token_price_usd: Decimal


@dataclass(frozen=True)
class ScenarioAssumptions:
    emission_decimals: int = 9
    baseline_range_percent: Decimal = Decimal("10")
    max_leverage: Decimal = Decimal("10000")


@dataclass(frozen=True)
class ExternalRewardProjection:
    token: str
    apr_percent: Decimal
    projected_value_usd: Decimal


ProjectionRegimeName = Literal["apr", "emission"]


@dataclass(frozen=True)
class ScenarioResult:
    deposit_usd: Decimal
    regime: ProjectionRegimeName
    projected_reward_tokens: Decimal
    reward_value_usd: Decimal
    lock_tokens: Decimal
    lock_value_usd: Decimal
    redeem_tokens: Decimal
    redeem_value_usd: Decimal
    value_multiplier: Decimal
    strategy_gain_usd: Decimal
    reward_apr: Decimal
    lock_apr: Decimal
    redeem_apr: Decimal
    pool_emission_apr: Decimal
    estimated_range_apr: Decimal
    external_rewards: tuple[ExternalRewardProjection, ...]
    external_rewards_value_usd: Decimal
    external_rewards_apr: Decimal
    il_percent: Decimal
    il_usd: Decimal
    il_apr: Decimal
    leverage: Decimal
    time_in_range_fraction: Decimal
    net_yield_usd: Decimal
    net_apr: Decimal


@dataclass(frozen=True)
class PortfolioEntry:
    pool: Pool
    scenario: Scenario
    external_apr: Decimal | None = None


@dataclass(frozen=True)
class PortfolioTotals:
    scenario_count: int
    total_deposit_usd: Decimal
    total_reward_tokens: Decimal
    total_reward_value_usd: Decimal
    total_external_rewards_usd: Decimal
    total_il_usd: Decimal
    total_net_yield_usd: Decimal
    weighted_reward_apr: Decimal
    weighted_external_apr: Decimal
    weighted_il_apr: Decimal
    weighted_net_apr: Decimal
    results: tuple[ScenarioResult, ...] = field(default_factory=tuple)

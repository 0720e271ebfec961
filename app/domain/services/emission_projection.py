from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from app.domain.services.numeric import (
    DAYS_PER_YEAR,
    HUNDRED,
    ONE,
    ZERO,
    is_finite,
    is_positive,
    period_value_from_apr,
)


@dataclass(frozen=True)
class EmissionRegime:
    """Rewards derived from the pool's emission schedule and deposit share."""

    daily_emission_tokens: Decimal
    pool_tvl_usd: Decimal
    baseline_leverage: Decimal


@dataclass(frozen=True)
class AprRegime:
    """Rewards derived from an externally resolved position APR (percent)."""

    apr_percent: Decimal


ProjectionRegime = Union[EmissionRegime, AprRegime]


@dataclass(frozen=True)
class RewardProjection:
    reward_tokens: Decimal
    full_value_usd: Decimal


def raw_to_tokens(raw_amount: Decimal | None, decimals: int) -> Decimal:
    if not is_finite(raw_amount) or raw_amount <= 0:
        return ZERO
    return raw_amount / (Decimal(10) ** decimals)


def select_regime(
    *,
    apr_percent: Decimal | None,
    daily_emission_tokens: Decimal,
    pool_tvl_usd: Decimal,
    baseline_leverage: Decimal,
) -> ProjectionRegime:
    # An APR of exactly 0 is indistinguishable from "not supplied".
    if is_positive(apr_percent):
        return AprRegime(apr_percent=apr_percent)
    return EmissionRegime(
        daily_emission_tokens=daily_emission_tokens,
        pool_tvl_usd=pool_tvl_usd,
        baseline_leverage=baseline_leverage,
    )


def project_from_emissions(
    regime: EmissionRegime,
    *,
    deposit_usd: Decimal,
    timeline_days: Decimal,
    leverage: Decimal,
    time_in_range: Decimal,
) -> Decimal:
    if not is_positive(regime.pool_tvl_usd) or not is_positive(deposit_usd):
        return ZERO
    if not is_positive(regime.daily_emission_tokens) or not is_positive(timeline_days):
        return ZERO

    share = deposit_usd / regime.pool_tvl_usd
    base_emission = share * regime.daily_emission_tokens * timeline_days
    baseline = regime.baseline_leverage if is_positive(regime.baseline_leverage) else ONE
    return base_emission * (leverage / baseline) * time_in_range


def project_from_apr(
    regime: AprRegime,
    *,
    deposit_usd: Decimal,
    timeline_days: Decimal,
    time_in_range: Decimal,
) -> Decimal:
    return period_value_from_apr(
        deposit_usd=deposit_usd,
        apr_percent=regime.apr_percent,
        timeline_days=timeline_days,
    ) * time_in_range


def project_rewards(
    regime: ProjectionRegime,
    *,
    deposit_usd: Decimal,
    timeline_days: Decimal,
    leverage: Decimal,
    time_in_range: Decimal,
    reward_token_price_usd: Decimal,
) -> RewardProjection:
    """Projected reward tokens and their full (lock) USD value."""
    price_ok = is_positive(reward_token_price_usd)
    if isinstance(regime, AprRegime):
        value_usd = project_from_apr(
            regime,
            deposit_usd=deposit_usd,
            timeline_days=timeline_days,
            time_in_range=time_in_range,
        )
        tokens = value_usd / reward_token_price_usd if price_ok else ZERO
        return RewardProjection(reward_tokens=tokens, full_value_usd=value_usd if price_ok else ZERO)

    tokens = project_from_emissions(
        regime,
        deposit_usd=deposit_usd,
        timeline_days=timeline_days,
        leverage=leverage,
        time_in_range=time_in_range,
    )
    return RewardProjection(
        reward_tokens=tokens,
        full_value_usd=tokens * reward_token_price_usd if price_ok else ZERO,
    )


def emission_apr(
    *,
    daily_emission_tokens: Decimal,
    reward_token_price_usd: Decimal,
    pool_tvl_usd: Decimal,
) -> Decimal:
    """Pool-wide emission APR in percent."""
    if not is_positive(pool_tvl_usd) or not is_finite(daily_emission_tokens):
        return ZERO
    if not is_finite(reward_token_price_usd):
        return ZERO
    yearly_value = daily_emission_tokens * reward_token_price_usd * DAYS_PER_YEAR
    return yearly_value / pool_tvl_usd * HUNDRED


def full_value_apr(
    regime: ProjectionRegime,
    *,
    leverage: Decimal,
    reward_token_price_usd: Decimal,
) -> Decimal:
    """Annualized full-value (lock) rate in percent while the position is in range.

    Time in range scales the projected amount, not this rate.
    """
    if isinstance(regime, AprRegime):
        return regime.apr_percent
    baseline = regime.baseline_leverage if is_positive(regime.baseline_leverage) else ONE
    pool_apr = emission_apr(
        daily_emission_tokens=regime.daily_emission_tokens,
        reward_token_price_usd=reward_token_price_usd,
        pool_tvl_usd=regime.pool_tvl_usd,
    )
    return pool_apr * (leverage / baseline)

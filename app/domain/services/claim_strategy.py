from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from app.domain.services.numeric import (
    HUNDRED,
    ONE,
    ZERO,
    clamp,
    is_finite,
    is_positive,
)


REDEEM_DISCOUNT = Decimal("0.5")


@dataclass(frozen=True)
class StrategyPreset:
    name: str
    lock_percent: Decimal


STRATEGY_PRESETS: dict[str, StrategyPreset] = {
    "lock_all": StrategyPreset(name="100% Lock", lock_percent=Decimal("100")),
    "redeem_all": StrategyPreset(name="100% Redeem", lock_percent=Decimal("0")),
    "balanced": StrategyPreset(name="50/50", lock_percent=Decimal("50")),
    "mostly_lock": StrategyPreset(name="70% Lock", lock_percent=Decimal("70")),
}


@dataclass(frozen=True)
class ClaimSplit:
    lock_fraction: Decimal
    lock_tokens: Decimal
    lock_value_usd: Decimal
    redeem_tokens: Decimal
    redeem_value_usd: Decimal
    total_value_usd: Decimal
    value_multiplier: Decimal


@dataclass(frozen=True)
class ClaimAprs:
    lock_apr: Decimal
    redeem_apr: Decimal
    reward_apr: Decimal


@dataclass(frozen=True)
class StrategyComparison:
    value_diff_usd: Decimal
    percent_diff: Decimal
    winner: int


def lock_fraction_from_percent(claim_strategy_percent: Decimal | None) -> Decimal:
    if not is_finite(claim_strategy_percent):
        return ZERO
    return clamp(claim_strategy_percent / HUNDRED, ZERO, ONE)


def split_claim_value(
    *,
    reward_tokens: Decimal,
    reward_token_price_usd: Decimal,
    lock_fraction: Decimal,
) -> ClaimSplit:
    """Lock claims keep full token value; redeem claims get half of it."""
    price = reward_token_price_usd if is_positive(reward_token_price_usd) else ZERO
    lock_tokens = reward_tokens * lock_fraction
    redeem_tokens = reward_tokens * (ONE - lock_fraction)
    lock_value = lock_tokens * price
    redeem_value = redeem_tokens * price * REDEEM_DISCOUNT
    total_value = lock_value + redeem_value

    redeem_all_value = reward_tokens * price * REDEEM_DISCOUNT
    multiplier = total_value / redeem_all_value if redeem_all_value > 0 else ONE
    return ClaimSplit(
        lock_fraction=lock_fraction,
        lock_tokens=lock_tokens,
        lock_value_usd=lock_value,
        redeem_tokens=redeem_tokens,
        redeem_value_usd=redeem_value,
        total_value_usd=total_value,
        value_multiplier=multiplier,
    )


def claim_aprs(*, lock_apr: Decimal, lock_fraction: Decimal) -> ClaimAprs:
    redeem_apr = lock_apr / 2
    reward_apr = lock_fraction * lock_apr + (ONE - lock_fraction) * redeem_apr
    return ClaimAprs(lock_apr=lock_apr, redeem_apr=redeem_apr, reward_apr=reward_apr)


def compare_strategies(first: ClaimSplit, second: ClaimSplit) -> StrategyComparison:
    value_diff = first.total_value_usd - second.total_value_usd
    if second.total_value_usd > 0:
        percent_diff = value_diff / second.total_value_usd * HUNDRED
    else:
        percent_diff = ZERO
    if value_diff > 0:
        winner = 1
    elif value_diff < 0:
        winner = 2
    else:
        winner = 0
    return StrategyComparison(value_diff_usd=value_diff, percent_diff=percent_diff, winner=winner)

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from app.domain.services.numeric import HUNDRED, ONE, ZERO, dsqrt, is_finite, is_positive


DEFAULT_MAX_LEVERAGE = Decimal("10000")
DEFAULT_BASELINE_RANGE_PERCENT = Decimal("10")


@dataclass(frozen=True)
class RangePreset:
    label: str
    lower_pct: Decimal
    upper_pct: Decimal
    description: str


RANGE_PRESETS: tuple[RangePreset, ...] = (
    RangePreset("±10%", Decimal("-10"), Decimal("10"), "±10% from current price"),
    RangePreset("±1%", Decimal("-1"), Decimal("1"), "±1% from current price"),
    RangePreset("-50%/+100%", Decimal("-50"), Decimal("100"), "Wide asymmetric range"),
    RangePreset("Full", Decimal("-99"), Decimal("10000"), "Full Range"),
)


@dataclass(frozen=True)
class RangeApr:
    leverage: Decimal
    base_apr: Decimal
    estimated_apr: Decimal
    is_concentrated: bool


def calculate_leverage(
    current_price: Decimal | None,
    price_low: Decimal | None,
    price_high: Decimal | None,
    *,
    max_leverage: Decimal = DEFAULT_MAX_LEVERAGE,
) -> Decimal:
    """Capital efficiency of [price_low, price_high] relative to full range.

    Returns 1 for a missing or invalid range, or when the current price is not
    strictly inside it.
    """
    if not is_positive(current_price):
        return ONE
    if not is_positive(price_low) or not is_positive(price_high):
        return ONE
    if price_low >= price_high:
        return ONE
    if current_price <= price_low or current_price >= price_high:
        return ONE

    denom = ONE - dsqrt(price_low / current_price)
    if denom <= 0:
        return max_leverage
    leverage = ONE / denom
    return max(ONE, min(leverage, max_leverage))


def price_range_from_percent(
    current_price: Decimal,
    lower_pct: Decimal,
    upper_pct: Decimal,
) -> tuple[Decimal, Decimal]:
    if not is_positive(current_price):
        return ZERO, ZERO
    price_low = current_price * (ONE + lower_pct / HUNDRED)
    price_high = current_price * (ONE + upper_pct / HUNDRED)
    return max(ZERO, price_low), price_high


def baseline_leverage(
    baseline_range_percent: Decimal = DEFAULT_BASELINE_RANGE_PERCENT,
    *,
    max_leverage: Decimal = DEFAULT_MAX_LEVERAGE,
) -> Decimal:
    """Leverage implied by the symmetric ±N% range a pool's APR is quoted at."""
    price_low, price_high = price_range_from_percent(ONE, -baseline_range_percent, baseline_range_percent)
    return calculate_leverage(ONE, price_low, price_high, max_leverage=max_leverage)


def range_apr(
    *,
    pool_apr: Decimal | None,
    current_price: Decimal | None,
    price_low: Decimal | None,
    price_high: Decimal | None,
    baseline: Decimal,
    max_leverage: Decimal = DEFAULT_MAX_LEVERAGE,
) -> RangeApr:
    leverage = calculate_leverage(current_price, price_low, price_high, max_leverage=max_leverage)
    if not is_positive(pool_apr) or not is_finite(baseline) or baseline <= 0:
        base_apr = ZERO
    else:
        base_apr = pool_apr / baseline
    return RangeApr(
        leverage=leverage,
        base_apr=base_apr,
        estimated_apr=base_apr * leverage,
        is_concentrated=leverage > ONE,
    )

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from app.domain.services.numeric import (
    DAYS_PER_YEAR,
    ONE,
    ZERO,
    dsqrt,
    is_finite,
    is_positive,
)


TWO = Decimal("2")


@dataclass(frozen=True)
class PositionComposition:
    """Token amounts held per unit of liquidity at a given price."""

    base_amount: Decimal
    quote_amount: Decimal


@dataclass(frozen=True)
class VolatilityIlEstimate:
    optimistic: Decimal
    expected: Decimal
    pessimistic: Decimal
    optimistic_price_multiplier: Decimal
    expected_price_multiplier: Decimal
    pessimistic_price_multiplier: Decimal


def full_range_il(entry_price: Decimal, exit_price: Decimal) -> Decimal:
    """Classic constant-product IL: 2*sqrt(k)/(1+k) - 1 with k = exit/entry."""
    if not is_positive(entry_price) or not is_positive(exit_price):
        return ZERO
    if exit_price == entry_price:
        return ZERO
    ratio = exit_price / entry_price
    return (TWO * dsqrt(ratio)) / (ONE + ratio) - ONE


def position_composition(
    price: Decimal,
    *,
    price_low: Decimal,
    price_high: Decimal,
) -> PositionComposition:
    sqrt_low = dsqrt(price_low)
    sqrt_high = dsqrt(price_high)
    if price <= price_low:
        return PositionComposition(
            base_amount=(ONE / sqrt_low) - (ONE / sqrt_high),
            quote_amount=ZERO,
        )
    if price >= price_high:
        return PositionComposition(
            base_amount=ZERO,
            quote_amount=sqrt_high - sqrt_low,
        )
    sqrt_price = dsqrt(price)
    return PositionComposition(
        base_amount=(ONE / sqrt_price) - (ONE / sqrt_high),
        quote_amount=sqrt_price - sqrt_low,
    )


def concentrated_il(
    entry_price: Decimal,
    exit_price: Decimal,
    *,
    price_low: Decimal,
    price_high: Decimal,
) -> Decimal:
    if not is_positive(entry_price) or not is_positive(exit_price):
        return ZERO
    if exit_price == entry_price:
        return ZERO
    if not _is_valid_range(price_low, price_high):
        return full_range_il(entry_price, exit_price)

    at_entry = position_composition(entry_price, price_low=price_low, price_high=price_high)
    at_exit = position_composition(exit_price, price_low=price_low, price_high=price_high)

    lp_value = at_exit.base_amount * exit_price + at_exit.quote_amount
    hodl_value = at_entry.base_amount * exit_price + at_entry.quote_amount
    if hodl_value <= 0:
        return ZERO
    return lp_value / hodl_value - ONE


def impermanent_loss(
    entry_price: Decimal,
    exit_price: Decimal,
    *,
    price_low: Decimal | None = None,
    price_high: Decimal | None = None,
) -> Decimal:
    """IL as a signed fraction (negative = loss vs. holding).

    Uses the concentrated formula when a valid range is given, otherwise the
    full-range one.
    """
    if price_low is None or price_high is None:
        return full_range_il(entry_price, exit_price)
    return concentrated_il(entry_price, exit_price, price_low=price_low, price_high=price_high)


def impermanent_loss_usd(deposit_usd: Decimal, il_fraction: Decimal) -> Decimal:
    if not is_finite(deposit_usd) or not is_finite(il_fraction):
        return ZERO
    return abs(il_fraction) * deposit_usd


def estimate_il_from_volatility(
    annualized_volatility: Decimal,
    timeline_days: Decimal,
) -> VolatilityIlEstimate:
    # 0.5, 1 and 2 standard-deviation upward moves over the timeline
    if not is_finite(annualized_volatility) or not is_positive(timeline_days):
        scaled = ZERO
    else:
        scaled = annualized_volatility * dsqrt(timeline_days / DAYS_PER_YEAR)

    optimistic = ONE + scaled * Decimal("0.5")
    expected = ONE + scaled
    pessimistic = ONE + scaled * TWO
    return VolatilityIlEstimate(
        optimistic=full_range_il(ONE, optimistic),
        expected=full_range_il(ONE, expected),
        pessimistic=full_range_il(ONE, pessimistic),
        optimistic_price_multiplier=optimistic,
        expected_price_multiplier=expected,
        pessimistic_price_multiplier=pessimistic,
    )


def _is_valid_range(price_low: Decimal | None, price_high: Decimal | None) -> bool:
    return is_positive(price_low) and is_positive(price_high) and price_low < price_high

from __future__ import annotations

from decimal import Decimal

from app.domain.services.numeric import ONE, ZERO, clamp, is_finite


def time_in_range_fraction(
    entry_price: Decimal,
    exit_price: Decimal,
    *,
    price_low: Decimal | None,
    price_high: Decimal | None,
) -> Decimal:
    """Share of the timeline spent inside the range on a linear entry->exit path."""
    if price_low is None or price_high is None:
        return ONE
    if not all(is_finite(value) for value in (entry_price, exit_price, price_low, price_high)):
        return ONE
    if entry_price == exit_price:
        return ONE
    if price_low <= exit_price <= price_high:
        return ONE

    boundary = price_high if exit_price > price_high else price_low
    fraction = (boundary - entry_price) / (exit_price - entry_price)
    return clamp(fraction, ZERO, ONE)

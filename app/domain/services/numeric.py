from __future__ import annotations

from contextlib import contextmanager
from decimal import Decimal, DivisionByZero, InvalidOperation, Overflow, getcontext, localcontext
from typing import Iterator


ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")
DAYS_PER_YEAR = Decimal("365")


def is_finite(value: Decimal | None) -> bool:
    return value is not None and value.is_finite()


def is_positive(value: Decimal | None) -> bool:
    return is_finite(value) and value > 0


def sanitize(value: Decimal | int | None) -> Decimal:
    """Return a finite Decimal, mapping None/NaN/Infinity to zero."""
    if value is None:
        return ZERO
    if isinstance(value, int):
        return Decimal(value)
    return value if value.is_finite() else ZERO


def dsqrt(value: Decimal) -> Decimal:
    return value.sqrt(getcontext())


def clamp(value: Decimal, lower: Decimal, upper: Decimal) -> Decimal:
    return max(lower, min(upper, value))


def annualized_percent(*, value_usd: Decimal, deposit_usd: Decimal, timeline_days: Decimal) -> Decimal:
    # value earned over timeline_days, expressed as a yearly % of the deposit
    if not is_positive(deposit_usd) or not is_positive(timeline_days) or not is_finite(value_usd):
        return ZERO
    return (value_usd / deposit_usd) * (DAYS_PER_YEAR / timeline_days) * HUNDRED


def period_value_from_apr(*, deposit_usd: Decimal, apr_percent: Decimal, timeline_days: Decimal) -> Decimal:
    if not is_positive(deposit_usd) or not is_finite(apr_percent) or not is_positive(timeline_days):
        return ZERO
    return deposit_usd * (apr_percent / HUNDRED / DAYS_PER_YEAR) * timeline_days


@contextmanager
def lenient_context() -> Iterator[None]:
    """Decimal context where overflow and division by zero yield Infinity and
    invalid operations yield NaN instead of raising.

    Results computed inside must go through ``sanitize`` before leaving.
    """
    with localcontext() as ctx:
        ctx.traps[Overflow] = False
        ctx.traps[DivisionByZero] = False
        ctx.traps[InvalidOperation] = False
        yield

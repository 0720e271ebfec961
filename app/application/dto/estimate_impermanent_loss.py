from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class EstimateImpermanentLossInput:
    annualized_volatility: Decimal
    timeline_days: Decimal
    deposit_usd: Decimal | None = None


@dataclass(frozen=True)
class ImpermanentLossCaseOutput:
    price_multiplier: Decimal
    il_percent: Decimal
    il_usd: Decimal | None


@dataclass(frozen=True)
class EstimateImpermanentLossOutput:
    optimistic: ImpermanentLossCaseOutput
    expected: ImpermanentLossCaseOutput
    pessimistic: ImpermanentLossCaseOutput

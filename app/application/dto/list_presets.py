from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class RangePresetOutput:
    label: str
    lower_pct: Decimal
    upper_pct: Decimal
    description: str
    leverage: Decimal


@dataclass(frozen=True)
class StrategyPresetOutput:
    key: str
    name: str
    lock_percent: Decimal
    value_multiplier: Decimal


@dataclass(frozen=True)
class ListPresetsOutput:
    ranges: list[RangePresetOutput]
    strategies: list[StrategyPresetOutput]

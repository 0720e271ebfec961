from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class RangePresetResponse(BaseModel):
    label: str
    lower_pct: Decimal = Field(..., description="Limite inferior em % do preco atual.")
    upper_pct: Decimal = Field(..., description="Limite superior em % do preco atual.")
    description: str
    leverage: Decimal = Field(..., description="Alavancagem da faixa frente a full range.")


class StrategyPresetResponse(BaseModel):
    key: str
    name: str
    lock_percent: Decimal
    value_multiplier: Decimal = Field(..., description="Valor relativo a resgatar tudo.")


class PresetsResponse(BaseModel):
    ranges: list[RangePresetResponse]
    strategies: list[StrategyPresetResponse]

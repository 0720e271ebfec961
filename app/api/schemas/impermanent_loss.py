from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class EstimateImpermanentLossRequest(BaseModel):
    annualized_volatility: Decimal = Field(
        Decimal("0.8"),
        ge=0,
        description="Volatilidade anualizada (ex.: 0.8 = 80%).",
    )
    timeline_days: Decimal = Field(..., gt=0, description="Horizonte em dias.")
    deposit_usd: Decimal | None = Field(None, gt=0, description="Deposito em USD para IL em valor.")


class ImpermanentLossCaseResponse(BaseModel):
    price_multiplier: Decimal
    il_percent: Decimal
    il_usd: Decimal | None


class EstimateImpermanentLossResponse(BaseModel):
    optimistic: ImpermanentLossCaseResponse
    expected: ImpermanentLossCaseResponse
    pessimistic: ImpermanentLossCaseResponse

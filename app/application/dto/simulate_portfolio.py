from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from app.domain.entities.scenario import PortfolioEntry, PortfolioTotals


@dataclass(frozen=True)
class SimulatePortfolioInput:
    entries: list[PortfolioEntry]
    reward_token_price_usd: Decimal | None = None


@dataclass(frozen=True)
class SimulatePortfolioOutput:
    totals: PortfolioTotals
    skipped_count: int
    reward_token_price_usd: Decimal

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from app.domain.entities.scenario import Pool, Scenario, ScenarioResult


@dataclass(frozen=True)
class SimulateScenarioInput:
    pool: Pool
    scenario: Scenario
    external_apr: Decimal | None = None
    reward_token_price_usd: Decimal | None = None


@dataclass(frozen=True)
class SimulateScenarioOutput:
    computable: bool
    reward_token_price_usd: Decimal
    result: ScenarioResult | None

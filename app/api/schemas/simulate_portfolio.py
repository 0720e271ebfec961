from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from app.api.schemas.simulate_scenario import (
    PoolSnapshotRequest,
    ScenarioRequest,
    ScenarioResultResponse,
)


class PortfolioEntryRequest(BaseModel):
    pool: PoolSnapshotRequest
    scenario: ScenarioRequest
    external_apr: Decimal | None = Field(None, description="APR de posicao resolvida externamente (%).")


class SimulatePortfolioRequest(BaseModel):
    entries: list[PortfolioEntryRequest] = Field(..., description="Cenarios na ordem informada.")
    reward_token_price_usd: Decimal | None = Field(
        None,
        description="Preco de referencia do token de recompensa; padrao vem da configuracao.",
    )


class SimulatePortfolioResponse(BaseModel):
    scenario_count: int
    skipped_count: int
    reward_token_price_usd: Decimal
    total_deposit_usd: Decimal
    total_reward_tokens: Decimal
    total_reward_value_usd: Decimal
    total_external_rewards_usd: Decimal
    total_il_usd: Decimal
    total_net_yield_usd: Decimal
    weighted_reward_apr: Decimal
    weighted_external_apr: Decimal
    weighted_il_apr: Decimal
    weighted_net_apr: Decimal
    results: list[ScenarioResultResponse]

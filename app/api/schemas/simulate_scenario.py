from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field


class TokenInfoRequest(BaseModel):
    symbol: str | None = Field(None, description="Simbolo do token (ex.: SUI).")
    name: str | None = Field(None, description="Nome do token.")
    address: str | None = Field(None, description="Endereco/coin type do token.")
    decimals: int | None = Field(None, ge=0, description="Casas decimais do token.")


class RewardDescriptorRequest(BaseModel):
    token: str | TokenInfoRequest | None = Field(
        None,
        description="Token da recompensa: path bruto (0x2::sui::SUI) ou objeto {symbol, name, ...}.",
    )
    apr: Decimal | None = Field(None, description="APR da recompensa em %; ignorada quando ausente ou 0.")


class PoolSnapshotRequest(BaseModel):
    pool_id: str = Field(..., description="Identificador da pool.")
    tvl_usd: Decimal = Field(Decimal("0"), ge=0, description="TVL da pool em USD.")
    current_price: Decimal | None = Field(None, description="Preco atual (quote por base).")
    daily_emission_raw: Decimal = Field(
        Decimal("0"),
        ge=0,
        description="Emissao diaria do token de recompensa em unidades brutas.",
    )
    position_apr: Decimal | None = Field(None, description="APR de posicao resolvida externamente (%).")
    rewards: list[RewardDescriptorRequest] = Field(default_factory=list)


class ScenarioRequest(BaseModel):
    deposit_usd: Decimal = Field(..., description="Valor depositado em USD.")
    price_range_low: Decimal | None = Field(None, description="Preco minimo da faixa.")
    price_range_high: Decimal | None = Field(None, description="Preco maximo da faixa.")
    exit_price: Decimal | None = Field(None, description="Preco de saida; padrao = preco atual.")
    timeline_days: Decimal = Field(Decimal("30"), description="Horizonte da simulacao em dias.")
    claim_strategy_percent: Decimal = Field(
        Decimal("0"),
        description="Percentual das recompensas destinado a lock (0-100).",
    )
    apr_override: Decimal | None = Field(None, description="APR informada pelo usuario (%).")


class SimulateScenarioRequest(BaseModel):
    pool: PoolSnapshotRequest
    scenario: ScenarioRequest
    external_apr: Decimal | None = Field(None, description="APR de posicao resolvida externamente (%).")
    reward_token_price_usd: Decimal | None = Field(
        None,
        description="Preco de referencia do token de recompensa; padrao vem da configuracao.",
    )


class ExternalRewardResponse(BaseModel):
    token: str
    apr: Decimal
    projected_value_usd: Decimal


class ScenarioResultResponse(BaseModel):
    deposit_usd: Decimal
    regime: Literal["apr", "emission"]
    projected_reward_tokens: Decimal
    reward_value_usd: Decimal
    lock_tokens: Decimal
    lock_value_usd: Decimal
    redeem_tokens: Decimal
    redeem_value_usd: Decimal
    value_multiplier: Decimal
    strategy_gain_usd: Decimal
    reward_apr: Decimal
    lock_apr: Decimal
    redeem_apr: Decimal
    pool_emission_apr: Decimal
    estimated_range_apr: Decimal
    external_rewards: list[ExternalRewardResponse]
    external_rewards_value_usd: Decimal
    external_rewards_apr: Decimal
    il_percent: Decimal
    il_usd: Decimal
    il_apr: Decimal
    leverage: Decimal
    time_in_range_fraction: Decimal
    net_yield_usd: Decimal
    net_apr: Decimal


class SimulateScenarioResponse(BaseModel):
    computable: bool
    reward_token_price_usd: Decimal
    result: ScenarioResultResponse | None

from __future__ import annotations

from app.api.schemas.simulate_scenario import (
    ExternalRewardResponse,
    PoolSnapshotRequest,
    RewardDescriptorRequest,
    ScenarioRequest,
    ScenarioResultResponse,
    TokenInfoRequest,
)
from app.domain.entities.scenario import (
    Pool,
    RewardDescriptor,
    Scenario,
    ScenarioResult,
    TokenIdentity,
    TokenInfo,
    TokenPath,
)


def to_token_identity(token: str | TokenInfoRequest | None) -> TokenIdentity | None:
    if token is None:
        return None
    if isinstance(token, str):
        return TokenPath(path=token)
    return TokenInfo(
        symbol=token.symbol,
        name=token.name,
        address=token.address,
        decimals=token.decimals,
    )


def to_reward_descriptor(req: RewardDescriptorRequest) -> RewardDescriptor:
    return RewardDescriptor(token=to_token_identity(req.token), apr_percent=req.apr)


def to_pool(req: PoolSnapshotRequest) -> Pool:
    return Pool(
        pool_id=req.pool_id,
        tvl_usd=req.tvl_usd,
        current_price=req.current_price,
        daily_emission_raw=req.daily_emission_raw,
        position_apr_percent=req.position_apr,
        rewards=tuple(to_reward_descriptor(row) for row in req.rewards),
    )


def to_scenario(req: ScenarioRequest) -> Scenario:
    return Scenario(
        deposit_usd=req.deposit_usd,
        timeline_days=req.timeline_days,
        claim_strategy_percent=req.claim_strategy_percent,
        price_range_low=req.price_range_low,
        price_range_high=req.price_range_high,
        exit_price=req.exit_price,
        apr_override=req.apr_override,
    )


def to_scenario_result_response(result: ScenarioResult) -> ScenarioResultResponse:
    return ScenarioResultResponse(
        deposit_usd=result.deposit_usd,
        regime=result.regime,
        projected_reward_tokens=result.projected_reward_tokens,
        reward_value_usd=result.reward_value_usd,
        lock_tokens=result.lock_tokens,
        lock_value_usd=result.lock_value_usd,
        redeem_tokens=result.redeem_tokens,
        redeem_value_usd=result.redeem_value_usd,
        value_multiplier=result.value_multiplier,
        strategy_gain_usd=result.strategy_gain_usd,
        reward_apr=result.reward_apr,
        lock_apr=result.lock_apr,
        redeem_apr=result.redeem_apr,
        pool_emission_apr=result.pool_emission_apr,
        estimated_range_apr=result.estimated_range_apr,
        external_rewards=[
            ExternalRewardResponse(
                token=row.token,
                apr=row.apr_percent,
                projected_value_usd=row.projected_value_usd,
            )
            for row in result.external_rewards
        ],
        external_rewards_value_usd=result.external_rewards_value_usd,
        external_rewards_apr=result.external_rewards_apr,
        il_percent=result.il_percent,
        il_usd=result.il_usd,
        il_apr=result.il_apr,
        leverage=result.leverage,
        time_in_range_fraction=result.time_in_range_fraction,
        net_yield_usd=result.net_yield_usd,
        net_apr=result.net_apr,
    )

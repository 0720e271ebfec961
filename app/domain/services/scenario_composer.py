from __future__ import annotations

from decimal import Decimal

from app.domain.entities.scenario import (
    ExternalRewardProjection,
    Pool,
    PriceContext,
    Scenario,
    ScenarioAssumptions,
    ScenarioResult,
)
from app.domain.services.claim_strategy import (
    claim_aprs,
    compare_strategies,
    lock_fraction_from_percent,
    split_claim_value,
)
from app.domain.services.emission_projection import (
    AprRegime,
    emission_apr,
    full_value_apr,
    project_rewards,
    raw_to_tokens,
    select_regime,
)
from app.domain.services.external_rewards import project_external_rewards
from app.domain.services.impermanent_loss import impermanent_loss, impermanent_loss_usd
from app.domain.services.leverage import baseline_leverage, calculate_leverage, range_apr
from app.domain.services.numeric import (
    ONE,
    ZERO,
    annualized_percent,
    is_positive,
    lenient_context,
    sanitize,
)
from app.domain.services.time_in_range import time_in_range_fraction


def resolve_exit_price(scenario: Scenario, current_price: Decimal) -> Decimal:
    if is_positive(scenario.exit_price):
        return scenario.exit_price
    return current_price


def resolve_apr(
    *,
    pool: Pool,
    scenario: Scenario,
    external_apr: Decimal | None,
) -> Decimal | None:
    for candidate in (scenario.apr_override, external_apr, pool.position_apr_percent):
        if is_positive(candidate):
            return candidate
    return None


def is_computable(pool: Pool, scenario: Scenario) -> bool:
    return (
        is_positive(scenario.deposit_usd)
        and is_positive(pool.current_price)
        and is_positive(scenario.timeline_days)
    )


def compose_scenario(
    pool: Pool,
    scenario: Scenario,
    *,
    price_context: PriceContext,
    external_apr: Decimal | None = None,
    assumptions: ScenarioAssumptions | None = None,
) -> ScenarioResult | None:
    """Project rewards, IL and net yield for one scenario.

    Returns None when the scenario lacks the data to be computed (deposit,
    current price or timeline missing or non-positive). Values that overflow
    the Decimal context come back as 0.
    """
    if not is_computable(pool, scenario):
        return None
    with lenient_context():
        return _compose(
            pool,
            scenario,
            price_context=price_context,
            external_apr=external_apr,
            assumptions=assumptions or ScenarioAssumptions(),
        )


def _compose(
    pool: Pool,
    scenario: Scenario,
    *,
    price_context: PriceContext,
    external_apr: Decimal | None,
    assumptions: ScenarioAssumptions,
) -> ScenarioResult:
    deposit = scenario.deposit_usd
    days = scenario.timeline_days
    price = price_context.reward_token_price_usd
    entry_price = pool.current_price
    exit_price = resolve_exit_price(scenario, entry_price)
    price_low = scenario.price_range_low if scenario.has_price_range else None
    price_high = scenario.price_range_high if scenario.has_price_range else None

    il_fraction = impermanent_loss(entry_price, exit_price, price_low=price_low, price_high=price_high)
    il_usd = impermanent_loss_usd(deposit, il_fraction)

    leverage = calculate_leverage(
        entry_price,
        price_low,
        price_high,
        max_leverage=assumptions.max_leverage,
    )
    in_range = time_in_range_fraction(entry_price, exit_price, price_low=price_low, price_high=price_high)

    apr = resolve_apr(pool=pool, scenario=scenario, external_apr=external_apr)
    daily_tokens = raw_to_tokens(pool.daily_emission_raw, assumptions.emission_decimals)
    baseline = baseline_leverage(assumptions.baseline_range_percent, max_leverage=assumptions.max_leverage)
    regime = select_regime(
        apr_percent=apr,
        daily_emission_tokens=daily_tokens,
        pool_tvl_usd=pool.tvl_usd,
        baseline_leverage=baseline,
    )
    projection = project_rewards(
        regime,
        deposit_usd=deposit,
        timeline_days=days,
        leverage=leverage,
        time_in_range=in_range,
        reward_token_price_usd=price,
    )

    lock_fraction = lock_fraction_from_percent(scenario.claim_strategy_percent)
    split = split_claim_value(
        reward_tokens=projection.reward_tokens,
        reward_token_price_usd=price,
        lock_fraction=lock_fraction,
    )
    redeem_all = split_claim_value(
        reward_tokens=projection.reward_tokens,
        reward_token_price_usd=price,
        lock_fraction=ZERO,
    )
    aprs = claim_aprs(
        lock_apr=sanitize(full_value_apr(regime, leverage=leverage, reward_token_price_usd=price)),
        lock_fraction=lock_fraction,
    )
    ranged = range_apr(
        pool_apr=apr,
        current_price=entry_price,
        price_low=price_low,
        price_high=price_high,
        baseline=baseline,
        max_leverage=assumptions.max_leverage,
    )

    external = project_external_rewards(pool.rewards, deposit_usd=deposit, timeline_days=days)

    reward_value = sanitize(split.total_value_usd)
    external_value = sanitize(external.total_value_usd)
    il_usd = sanitize(il_usd)
    net_yield = sanitize(reward_value + external_value - abs(il_usd))

    return ScenarioResult(
        deposit_usd=sanitize(deposit),
        regime="apr" if isinstance(regime, AprRegime) else "emission",
        projected_reward_tokens=sanitize(projection.reward_tokens),
        reward_value_usd=reward_value,
        lock_tokens=sanitize(split.lock_tokens),
        lock_value_usd=sanitize(split.lock_value_usd),
        redeem_tokens=sanitize(split.redeem_tokens),
        redeem_value_usd=sanitize(split.redeem_value_usd),
        value_multiplier=sanitize(split.value_multiplier) or ONE,
        strategy_gain_usd=sanitize(compare_strategies(split, redeem_all).value_diff_usd),
        reward_apr=sanitize(aprs.reward_apr),
        lock_apr=sanitize(aprs.lock_apr),
        redeem_apr=sanitize(aprs.redeem_apr),
        pool_emission_apr=sanitize(
            emission_apr(
                daily_emission_tokens=daily_tokens,
                reward_token_price_usd=price,
                pool_tvl_usd=pool.tvl_usd,
            )
        ),
        estimated_range_apr=sanitize(ranged.estimated_apr),
        external_rewards=tuple(
            ExternalRewardProjection(
                token=row.token,
                apr_percent=sanitize(row.apr_percent),
                projected_value_usd=sanitize(row.projected_value_usd),
            )
            for row in external.rewards
        ),
        external_rewards_value_usd=external_value,
        external_rewards_apr=sanitize(external.total_apr),
        il_percent=sanitize(il_fraction),
        il_usd=il_usd,
        il_apr=sanitize(annualized_percent(value_usd=il_usd, deposit_usd=deposit, timeline_days=days)),
        leverage=max(ONE, sanitize(leverage)),
        time_in_range_fraction=sanitize(in_range),
        net_yield_usd=net_yield,
        net_apr=sanitize(annualized_percent(value_usd=net_yield, deposit_usd=deposit, timeline_days=days)),
    )

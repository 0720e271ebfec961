from __future__ import annotations

from decimal import Decimal
from typing import Callable, Iterable

from app.domain.entities.scenario import (
    PortfolioEntry,
    PortfolioTotals,
    PriceContext,
    ScenarioAssumptions,
    ScenarioResult,
)
from app.domain.services.numeric import ZERO, lenient_context, sanitize
from app.domain.services.scenario_composer import compose_scenario


def aggregate_portfolio(
    entries: Iterable[PortfolioEntry],
    *,
    price_context: PriceContext,
    assumptions: ScenarioAssumptions | None = None,
) -> PortfolioTotals:
    results: list[ScenarioResult] = []
    for entry in entries:
        result = compose_scenario(
            entry.pool,
            entry.scenario,
            price_context=price_context,
            external_apr=entry.external_apr,
            assumptions=assumptions,
        )
        if result is not None:
            results.append(result)
    return summarize_results(results)


def summarize_results(results: list[ScenarioResult]) -> PortfolioTotals:
    total_deposit = _total(results, lambda row: row.deposit_usd)
    return PortfolioTotals(
        scenario_count=len(results),
        total_deposit_usd=total_deposit,
        total_reward_tokens=_total(results, lambda row: row.projected_reward_tokens),
        total_reward_value_usd=_total(results, lambda row: row.reward_value_usd),
        total_external_rewards_usd=_total(results, lambda row: row.external_rewards_value_usd),
        total_il_usd=_total(results, lambda row: row.il_usd),
        total_net_yield_usd=_total(results, lambda row: row.net_yield_usd),
        weighted_reward_apr=_weighted(results, total_deposit, lambda row: row.reward_apr),
        weighted_external_apr=_weighted(results, total_deposit, lambda row: row.external_rewards_apr),
        weighted_il_apr=_weighted(results, total_deposit, lambda row: row.il_apr),
        weighted_net_apr=_weighted(results, total_deposit, lambda row: row.net_apr),
        results=tuple(results),
    )


def _total(results: list[ScenarioResult], pick: Callable[[ScenarioResult], Decimal]) -> Decimal:
    with lenient_context():
        return sanitize(sum((pick(row) for row in results), ZERO))


def _weighted(
    results: list[ScenarioResult],
    total_deposit: Decimal,
    pick: Callable[[ScenarioResult], Decimal],
) -> Decimal:
    # deposit-weighted mean; undefined for an empty/zero-deposit portfolio
    if total_deposit <= 0:
        return ZERO
    with lenient_context():
        weighted_sum = sum((pick(row) * row.deposit_usd for row in results), ZERO)
        return sanitize(weighted_sum / total_deposit)

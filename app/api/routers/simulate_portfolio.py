from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_simulate_portfolio_use_case
from app.api.mappers import to_pool, to_scenario, to_scenario_result_response
from app.api.schemas.simulate_portfolio import SimulatePortfolioRequest, SimulatePortfolioResponse
from app.application.dto.simulate_portfolio import SimulatePortfolioInput
from app.application.use_cases.simulate_portfolio import SimulatePortfolioUseCase
from app.domain.entities.scenario import PortfolioEntry
from app.domain.exceptions import InvalidPriceContextError, InvalidScenarioInputError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/v1/simulate/portfolio", response_model=SimulatePortfolioResponse)
def simulate_portfolio(
    req: SimulatePortfolioRequest,
    use_case: SimulatePortfolioUseCase = Depends(get_simulate_portfolio_use_case),
):
    try:
        output = use_case.execute(
            SimulatePortfolioInput(
                entries=[
                    PortfolioEntry(
                        pool=to_pool(row.pool),
                        scenario=to_scenario(row.scenario),
                        external_apr=row.external_apr,
                    )
                    for row in req.entries
                ],
                reward_token_price_usd=req.reward_token_price_usd,
            )
        )
    except (InvalidScenarioInputError, InvalidPriceContextError) as exc:
        logger.warning(
            "simulate_portfolio_router: invalid_input entries=%s detail=%s",
            len(req.entries),
            exc,
        )
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    totals = output.totals
    return SimulatePortfolioResponse(
        scenario_count=totals.scenario_count,
        skipped_count=output.skipped_count,
        reward_token_price_usd=output.reward_token_price_usd,
        total_deposit_usd=totals.total_deposit_usd,
        total_reward_tokens=totals.total_reward_tokens,
        total_reward_value_usd=totals.total_reward_value_usd,
        total_external_rewards_usd=totals.total_external_rewards_usd,
        total_il_usd=totals.total_il_usd,
        total_net_yield_usd=totals.total_net_yield_usd,
        weighted_reward_apr=totals.weighted_reward_apr,
        weighted_external_apr=totals.weighted_external_apr,
        weighted_il_apr=totals.weighted_il_apr,
        weighted_net_apr=totals.weighted_net_apr,
        results=[to_scenario_result_response(row) for row in totals.results],
    )

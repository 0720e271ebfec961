from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_simulate_scenario_use_case
from app.api.mappers import to_pool, to_scenario, to_scenario_result_response
from app.api.schemas.simulate_scenario import SimulateScenarioRequest, SimulateScenarioResponse
from app.application.dto.simulate_scenario import SimulateScenarioInput
from app.application.use_cases.simulate_scenario import SimulateScenarioUseCase
from app.domain.exceptions import InvalidPriceContextError, InvalidScenarioInputError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/v1/simulate/scenario", response_model=SimulateScenarioResponse)
def simulate_scenario(
    req: SimulateScenarioRequest,
    use_case: SimulateScenarioUseCase = Depends(get_simulate_scenario_use_case),
):
    try:
        output = use_case.execute(
            SimulateScenarioInput(
                pool=to_pool(req.pool),
                scenario=to_scenario(req.scenario),
                external_apr=req.external_apr,
                reward_token_price_usd=req.reward_token_price_usd,
            )
        )
    except (InvalidScenarioInputError, InvalidPriceContextError) as exc:
        logger.warning(
            "simulate_scenario_router: invalid_input pool=%s detail=%s",
            req.pool.pool_id,
            exc,
        )
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return SimulateScenarioResponse(
        computable=output.computable,
        reward_token_price_usd=output.reward_token_price_usd,
        result=to_scenario_result_response(output.result) if output.result is not None else None,
    )

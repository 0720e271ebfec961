from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_estimate_impermanent_loss_use_case
from app.api.schemas.impermanent_loss import (
    EstimateImpermanentLossRequest,
    EstimateImpermanentLossResponse,
    ImpermanentLossCaseResponse,
)
from app.application.dto.estimate_impermanent_loss import (
    EstimateImpermanentLossInput,
    ImpermanentLossCaseOutput,
)
from app.application.use_cases.estimate_impermanent_loss import EstimateImpermanentLossUseCase
from app.domain.exceptions import InvalidScenarioInputError

router = APIRouter()


def _case(row: ImpermanentLossCaseOutput) -> ImpermanentLossCaseResponse:
    return ImpermanentLossCaseResponse(
        price_multiplier=row.price_multiplier,
        il_percent=row.il_percent,
        il_usd=row.il_usd,
    )


@router.post("/v1/impermanent-loss/estimate", response_model=EstimateImpermanentLossResponse)
def estimate_impermanent_loss(
    req: EstimateImpermanentLossRequest,
    use_case: EstimateImpermanentLossUseCase = Depends(get_estimate_impermanent_loss_use_case),
):
    try:
        result = use_case.execute(
            EstimateImpermanentLossInput(
                annualized_volatility=req.annualized_volatility,
                timeline_days=req.timeline_days,
                deposit_usd=req.deposit_usd,
            )
        )
    except InvalidScenarioInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return EstimateImpermanentLossResponse(
        optimistic=_case(result.optimistic),
        expected=_case(result.expected),
        pessimistic=_case(result.pessimistic),
    )

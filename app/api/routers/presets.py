from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_list_presets_use_case
from app.api.schemas.presets import PresetsResponse, RangePresetResponse, StrategyPresetResponse
from app.application.use_cases.list_presets import ListPresetsUseCase

router = APIRouter()


@router.get("/v1/presets", response_model=PresetsResponse)
def list_presets(use_case: ListPresetsUseCase = Depends(get_list_presets_use_case)):
    result = use_case.execute()
    return PresetsResponse(
        ranges=[
            RangePresetResponse(
                label=row.label,
                lower_pct=row.lower_pct,
                upper_pct=row.upper_pct,
                description=row.description,
                leverage=row.leverage,
            )
            for row in result.ranges
        ],
        strategies=[
            StrategyPresetResponse(
                key=row.key,
                name=row.name,
                lock_percent=row.lock_percent,
                value_multiplier=row.value_multiplier,
            )
            for row in result.strategies
        ],
    )

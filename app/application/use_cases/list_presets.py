from __future__ import annotations

from decimal import Decimal

from app.application.dto.list_presets import ListPresetsOutput, RangePresetOutput, StrategyPresetOutput
from app.domain.services.claim_strategy import (
    STRATEGY_PRESETS,
    lock_fraction_from_percent,
    split_claim_value,
)
from app.domain.services.leverage import (
    DEFAULT_MAX_LEVERAGE,
    RANGE_PRESETS,
    calculate_leverage,
    price_range_from_percent,
)
from app.domain.services.numeric import ONE


class ListPresetsUseCase:
    def __init__(self, *, max_leverage: Decimal = DEFAULT_MAX_LEVERAGE):
        self._max_leverage = max_leverage

    def execute(self) -> ListPresetsOutput:
        ranges = []
        for preset in RANGE_PRESETS:
            # leverage depends only on the bounds relative to the current price
            price_low, price_high = price_range_from_percent(ONE, preset.lower_pct, preset.upper_pct)
            ranges.append(
                RangePresetOutput(
                    label=preset.label,
                    lower_pct=preset.lower_pct,
                    upper_pct=preset.upper_pct,
                    description=preset.description,
                    leverage=calculate_leverage(ONE, price_low, price_high, max_leverage=self._max_leverage),
                )
            )

        strategies = [
            StrategyPresetOutput(
                key=key,
                name=preset.name,
                lock_percent=preset.lock_percent,
                value_multiplier=split_claim_value(
                    reward_tokens=ONE,
                    reward_token_price_usd=ONE,
                    lock_fraction=lock_fraction_from_percent(preset.lock_percent),
                ).value_multiplier,
            )
            for key, preset in STRATEGY_PRESETS.items()
        ]
        return ListPresetsOutput(ranges=ranges, strategies=strategies)

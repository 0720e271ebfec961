from __future__ import annotations

from decimal import Decimal

from app.application.dto.estimate_impermanent_loss import (
    EstimateImpermanentLossInput,
    EstimateImpermanentLossOutput,
    ImpermanentLossCaseOutput,
)
from app.domain.exceptions import InvalidScenarioInputError
from app.domain.services.impermanent_loss import estimate_il_from_volatility, impermanent_loss_usd
from app.domain.services.numeric import lenient_context, sanitize


class EstimateImpermanentLossUseCase:
    def execute(self, command: EstimateImpermanentLossInput) -> EstimateImpermanentLossOutput:
        if not command.annualized_volatility.is_finite() or command.annualized_volatility < 0:
            raise InvalidScenarioInputError("annualized_volatility must be >= 0.")
        if not command.timeline_days.is_finite() or command.timeline_days <= 0:
            raise InvalidScenarioInputError("timeline_days must be > 0.")
        if command.deposit_usd is not None and command.deposit_usd <= 0:
            raise InvalidScenarioInputError("deposit_usd must be positive.")

        with lenient_context():
            return self._estimate(command)

    def _estimate(self, command: EstimateImpermanentLossInput) -> EstimateImpermanentLossOutput:
        estimate = estimate_il_from_volatility(command.annualized_volatility, command.timeline_days)
        return EstimateImpermanentLossOutput(
            optimistic=self._case(
                estimate.optimistic_price_multiplier,
                estimate.optimistic,
                command.deposit_usd,
            ),
            expected=self._case(
                estimate.expected_price_multiplier,
                estimate.expected,
                command.deposit_usd,
            ),
            pessimistic=self._case(
                estimate.pessimistic_price_multiplier,
                estimate.pessimistic,
                command.deposit_usd,
            ),
        )

    def _case(
        self,
        multiplier: Decimal,
        il_fraction: Decimal,
        deposit_usd: Decimal | None,
    ) -> ImpermanentLossCaseOutput:
        return ImpermanentLossCaseOutput(
            price_multiplier=sanitize(multiplier),
            il_percent=sanitize(il_fraction),
            il_usd=sanitize(impermanent_loss_usd(deposit_usd, il_fraction)) if deposit_usd is not None else None,
        )

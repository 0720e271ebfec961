from __future__ import annotations

import logging

from app.application.dto.simulate_portfolio import SimulatePortfolioInput, SimulatePortfolioOutput
from app.application.ports.reward_token_price_port import RewardTokenPricePort
from app.application.use_cases.scenario_common import build_price_context, validate_scenario
from app.domain.entities.scenario import ScenarioAssumptions
from app.domain.exceptions import InvalidScenarioInputError
from app.domain.services.portfolio import aggregate_portfolio


logger = logging.getLogger(__name__)


class SimulatePortfolioUseCase:
    def __init__(
        self,
        *,
        price_port: RewardTokenPricePort,
        assumptions: ScenarioAssumptions | None = None,
        max_scenarios: int = 50,
    ):
        self._price_port = price_port
        self._assumptions = assumptions or ScenarioAssumptions()
        self._max_scenarios = max_scenarios

    def execute(self, command: SimulatePortfolioInput) -> SimulatePortfolioOutput:
        if not command.entries:
            raise InvalidScenarioInputError("Provide at least one scenario.")
        if len(command.entries) > self._max_scenarios:
            raise InvalidScenarioInputError(
                f"A portfolio accepts at most {self._max_scenarios} scenarios."
            )
        for entry in command.entries:
            validate_scenario(entry.scenario)

        # One reference price for the whole portfolio.
        price_context = build_price_context(
            price_port=self._price_port,
            requested_price=command.reward_token_price_usd,
        )
        totals = aggregate_portfolio(
            command.entries,
            price_context=price_context,
            assumptions=self._assumptions,
        )

        skipped = len(command.entries) - totals.scenario_count
        if skipped:
            logger.warning(
                "simulate_portfolio: skipped_not_computable skipped=%s total=%s",
                skipped,
                len(command.entries),
            )
        logger.info(
            "simulate_portfolio: aggregated scenarios=%s total_deposit_usd=%s",
            totals.scenario_count,
            totals.total_deposit_usd,
        )
        return SimulatePortfolioOutput(
            totals=totals,
            skipped_count=skipped,
            reward_token_price_usd=price_context.reward_token_price_usd,
        )

from __future__ import annotations

import logging

from app.application.dto.simulate_scenario import SimulateScenarioInput, SimulateScenarioOutput
from app.application.ports.reward_token_price_port import RewardTokenPricePort
from app.application.use_cases.scenario_common import build_price_context, validate_scenario
from app.domain.entities.scenario import ScenarioAssumptions
from app.domain.services.scenario_composer import compose_scenario


logger = logging.getLogger(__name__)


class SimulateScenarioUseCase:
    def __init__(
        self,
        *,
        price_port: RewardTokenPricePort,
        assumptions: ScenarioAssumptions | None = None,
    ):
        self._price_port = price_port
        self._assumptions = assumptions or ScenarioAssumptions()

    def execute(self, command: SimulateScenarioInput) -> SimulateScenarioOutput:
        validate_scenario(command.scenario)
        price_context = build_price_context(
            price_port=self._price_port,
            requested_price=command.reward_token_price_usd,
            pool_id=command.pool.pool_id,
        )

        result = compose_scenario(
            command.pool,
            command.scenario,
            price_context=price_context,
            external_apr=command.external_apr,
            assumptions=self._assumptions,
        )
        if result is None:
            logger.warning(
                "simulate_scenario: not_computable pool=%s deposit=%s current_price=%s timeline_days=%s",
                command.pool.pool_id,
                command.scenario.deposit_usd,
                command.pool.current_price,
                command.scenario.timeline_days,
            )

        return SimulateScenarioOutput(
            computable=result is not None,
            reward_token_price_usd=price_context.reward_token_price_usd,
            result=result,
        )

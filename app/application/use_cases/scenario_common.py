from __future__ import annotations

from decimal import Decimal

from app.application.ports.reward_token_price_port import RewardTokenPricePort
from app.domain.entities.scenario import PriceContext, Scenario, ScenarioAssumptions
from app.domain.exceptions import InvalidPriceContextError, InvalidScenarioInputError
from app.shared.config import Settings


def validate_scenario(scenario: Scenario) -> None:
    low = scenario.price_range_low
    high = scenario.price_range_high
    if (low is None) != (high is None):
        raise InvalidScenarioInputError("price_range_low and price_range_high must be provided together.")
    if low is not None and high is not None:
        if not low.is_finite() or not high.is_finite():
            raise InvalidScenarioInputError("price range bounds must be finite.")
        if low <= 0:
            raise InvalidScenarioInputError("price_range_low must be positive.")
        if low >= high:
            raise InvalidScenarioInputError("price_range_low must be lower than price_range_high.")

    percent = scenario.claim_strategy_percent
    if not percent.is_finite() or percent < 0 or percent > 100:
        raise InvalidScenarioInputError("claim_strategy_percent must be between 0 and 100.")

    if scenario.exit_price is not None and scenario.exit_price.is_finite() and scenario.exit_price < 0:
        raise InvalidScenarioInputError("exit_price must not be negative.")


def build_price_context(
    *,
    price_port: RewardTokenPricePort,
    requested_price: Decimal | None,
    pool_id: str | None = None,
) -> PriceContext:
    price = requested_price
    if price is None:
        price = price_port.get_reward_token_price_usd(pool_id=pool_id)
    if not price.is_finite() or price <= 0:
        raise InvalidPriceContextError("reward_token_price_usd must be positive.")
    return PriceContext(reward_token_price_usd=price)


def assumptions_from_settings(settings: Settings) -> ScenarioAssumptions:
    return ScenarioAssumptions(
        emission_decimals=settings.emission_decimals,
        baseline_range_percent=settings.baseline_range_percent,
        max_leverage=settings.max_leverage,
    )

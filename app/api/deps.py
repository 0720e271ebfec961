from __future__ import annotations

from functools import lru_cache

from app.application.use_cases.estimate_impermanent_loss import EstimateImpermanentLossUseCase
from app.application.use_cases.list_presets import ListPresetsUseCase
from app.application.use_cases.scenario_common import assumptions_from_settings
from app.application.use_cases.simulate_portfolio import SimulatePortfolioUseCase
from app.application.use_cases.simulate_scenario import SimulateScenarioUseCase
from app.infrastructure.clients.reward_token_price import (
    ConfiguredRewardTokenPriceProvider,
    RewardTokenPriceOverrides,
)
from app.shared.config import get_settings


@lru_cache(maxsize=1)
def _get_reward_token_price_provider() -> ConfiguredRewardTokenPriceProvider:
    settings = get_settings()
    return ConfiguredRewardTokenPriceProvider(
        default_price_usd=settings.reward_token_price_usd,
        overrides=RewardTokenPriceOverrides(settings.reward_token_price_overrides),
    )


def get_simulate_scenario_use_case() -> SimulateScenarioUseCase:
    return SimulateScenarioUseCase(
        price_port=_get_reward_token_price_provider(),
        assumptions=assumptions_from_settings(get_settings()),
    )


def get_simulate_portfolio_use_case() -> SimulatePortfolioUseCase:
    return SimulatePortfolioUseCase(
        price_port=_get_reward_token_price_provider(),
        assumptions=assumptions_from_settings(get_settings()),
    )


def get_estimate_impermanent_loss_use_case() -> EstimateImpermanentLossUseCase:
    return EstimateImpermanentLossUseCase()


def get_list_presets_use_case() -> ListPresetsUseCase:
    return ListPresetsUseCase(max_leverage=get_settings().max_leverage)

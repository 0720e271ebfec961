from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

import pytest

from app.domain.entities.scenario import (
    Pool,
    PriceContext,
    RewardDescriptor,
    Scenario,
    TokenInfo,
    TokenPath,
)
from app.domain.services.scenario_composer import compose_scenario, resolve_apr


PRICE = PriceContext(reward_token_price_usd=Decimal("0.5"))


def _pool(**overrides) -> Pool:
    payload = {
        "pool_id": "0xpool",
        "tvl_usd": Decimal("500000"),
        "current_price": Decimal("1"),
        "daily_emission_raw": Decimal("50000000000"),
    }
    payload.update(overrides)
    return Pool(**payload)


def _scenario(**overrides) -> Scenario:
    payload = {
        "deposit_usd": Decimal("10000"),
        "timeline_days": Decimal("30"),
        "claim_strategy_percent": Decimal("50"),
    }
    payload.update(overrides)
    return Scenario(**payload)


class TestComposeScenario:
    def test_apr_regime_full_range(self):
        result = compose_scenario(_pool(), _scenario(apr_override=Decimal("36.5")), price_context=PRICE)

        assert result is not None
        assert result.regime == "apr"
        assert result.leverage == Decimal("1")
        assert result.time_in_range_fraction == Decimal("1")
        assert result.projected_reward_tokens == Decimal("600")
        assert result.lock_value_usd == Decimal("150")
        assert result.redeem_value_usd == Decimal("75")
        assert result.reward_value_usd == Decimal("225")
        assert result.il_percent == Decimal("0")
        assert result.il_usd == Decimal("0")
        assert result.net_yield_usd == Decimal("225")
        assert abs(result.lock_apr - Decimal("36.5")) < Decimal("0.0001")
        assert result.redeem_apr == result.lock_apr / 2

    def test_emission_regime_with_external_rewards(self):
        pool = _pool(rewards=(RewardDescriptor(token=TokenPath("0x2::sui::SUI"), apr_percent=Decimal("30")),))

        result = compose_scenario(pool, _scenario(), price_context=PRICE)

        assert result is not None
        assert result.regime == "emission"
        # full range earns 1/baseline of the ±10% emission share
        assert Decimal("1.5") < result.projected_reward_tokens < Decimal("1.6")
        assert [row.token for row in result.external_rewards] == ["SUI"]
        assert abs(result.external_rewards_value_usd - Decimal("246.58")) < Decimal("0.01")
        assert result.external_rewards_apr == Decimal("30")
        assert result.net_yield_usd > result.reward_value_usd
        assert result.net_yield_usd == result.reward_value_usd + result.external_rewards_value_usd

    def test_exit_outside_range_reduces_time_in_range(self):
        scenario = _scenario(
            price_range_low=Decimal("0.9"),
            price_range_high=Decimal("1.1"),
            exit_price=Decimal("1.2"),
        )

        result = compose_scenario(_pool(), scenario, price_context=PRICE)

        assert result is not None
        assert result.time_in_range_fraction == Decimal("0.5")
        assert Decimal("19") < result.leverage < Decimal("20")
        # range equals the baseline, so half of the 30 baseline tokens
        assert abs(result.projected_reward_tokens - Decimal("15")) < Decimal("1e-12")
        assert result.il_percent < 0
        assert result.il_usd > 0
        assert result.il_apr > 0
        assert result.net_yield_usd == result.reward_value_usd - result.il_usd

    def test_range_result_bounds(self):
        scenario = _scenario(
            price_range_low=Decimal("0.95"),
            price_range_high=Decimal("1.05"),
            exit_price=Decimal("0.5"),
            claim_strategy_percent=Decimal("70"),
        )

        result = compose_scenario(_pool(), scenario, price_context=PRICE)

        assert result is not None
        assert result.leverage >= 1
        assert Decimal("0") <= result.time_in_range_fraction <= Decimal("1")
        assert result.redeem_apr == result.lock_apr / 2
        assert abs(result.lock_tokens + result.redeem_tokens - result.projected_reward_tokens) < Decimal("1e-20")

    @pytest.mark.parametrize(
        "pool_overrides, scenario_overrides",
        [
            ({}, {"deposit_usd": Decimal("0")}),
            ({"current_price": None}, {}),
            ({"current_price": Decimal("0")}, {}),
            ({}, {"timeline_days": Decimal("0")}),
        ],
    )
    def test_not_computable(self, pool_overrides, scenario_overrides):
        result = compose_scenario(_pool(**pool_overrides), _scenario(**scenario_overrides), price_context=PRICE)
        assert result is None

    def test_zero_tvl_yields_zero_emission_rewards(self):
        result = compose_scenario(_pool(tvl_usd=Decimal("0")), _scenario(), price_context=PRICE)

        assert result is not None
        assert result.projected_reward_tokens == Decimal("0")
        assert result.reward_value_usd == Decimal("0")
        assert result.net_yield_usd == Decimal("0")

    def test_external_rewards_never_use_leverage(self):
        pool = _pool(rewards=(RewardDescriptor(token=TokenInfo(symbol="DEEP"), apr_percent=Decimal("36.5")),))
        narrow = _scenario(price_range_low=Decimal("0.99"), price_range_high=Decimal("1.01"))

        wide_result = compose_scenario(pool, _scenario(), price_context=PRICE)
        narrow_result = compose_scenario(pool, narrow, price_context=PRICE)

        assert wide_result.external_rewards_value_usd == Decimal("300")
        assert narrow_result.external_rewards_value_usd == Decimal("300")

    def test_lock_apr_ignores_time_out_of_range(self):
        scenario = _scenario(
            apr_override=Decimal("30"),
            price_range_low=Decimal("0.9"),
            price_range_high=Decimal("1.1"),
            exit_price=Decimal("1.2"),
        )

        result = compose_scenario(_pool(), scenario, price_context=PRICE)

        assert result.regime == "apr"
        assert result.time_in_range_fraction == Decimal("0.5")
        assert result.lock_apr == Decimal("30")
        assert result.redeem_apr == Decimal("15")
        assert result.reward_apr == Decimal("22.5")
        # the projected amount still carries the time-in-range factor
        assert result.lock_value_usd + result.redeem_value_usd == result.reward_value_usd
        assert abs(result.projected_reward_tokens - Decimal("246.5753424657534246575342466")) < Decimal("1e-20")

    def test_emission_lock_apr_uses_pool_rate_and_leverage(self):
        scenario = _scenario(
            price_range_low=Decimal("0.9"),
            price_range_high=Decimal("1.1"),
            exit_price=Decimal("1.2"),
        )

        result = compose_scenario(_pool(), scenario, price_context=PRICE)

        assert result.regime == "emission"
        assert result.pool_emission_apr == Decimal("1.825")
        assert result.lock_apr == Decimal("1.825")
        assert result.estimated_range_apr == Decimal("0")

    def test_range_apr_and_strategy_gain(self):
        scenario = _scenario(
            apr_override=Decimal("20"),
            price_range_low=Decimal("0.9"),
            price_range_high=Decimal("1.1"),
            claim_strategy_percent=Decimal("100"),
        )

        result = compose_scenario(_pool(), scenario, price_context=PRICE)

        assert abs(result.estimated_range_apr - Decimal("20")) < Decimal("1e-20")
        assert abs(result.value_multiplier - Decimal("2")) < Decimal("1e-20")
        assert abs(result.strategy_gain_usd - result.reward_value_usd / 2) < Decimal("1e-20")

    def test_overflowing_inputs_are_sanitized(self):
        pool = _pool(tvl_usd=Decimal("1e-999990"), daily_emission_raw=Decimal("1e20"))
        scenario = _scenario(deposit_usd=Decimal("1e999990"))

        result = compose_scenario(pool, scenario, price_context=PRICE)

        assert result is not None
        assert result.regime == "emission"
        assert result.projected_reward_tokens == Decimal("0")
        assert result.reward_value_usd == Decimal("0")
        assert result.lock_apr == Decimal("0")
        assert result.pool_emission_apr == Decimal("0")
        assert result.value_multiplier == Decimal("1")
        assert result.net_yield_usd == Decimal("0")
        assert result.deposit_usd == Decimal("1e999990")


def test_apr_precedence():
    pool = _pool(position_apr_percent=Decimal("12"))
    scenario = _scenario()

    assert resolve_apr(pool=pool, scenario=scenario, external_apr=None) == Decimal("12")
    assert resolve_apr(pool=pool, scenario=scenario, external_apr=Decimal("20")) == Decimal("20")
    assert resolve_apr(
        pool=pool,
        scenario=replace(scenario, apr_override=Decimal("40")),
        external_apr=Decimal("20"),
    ) == Decimal("40")
    assert resolve_apr(pool=_pool(), scenario=scenario, external_apr=Decimal("0")) is None

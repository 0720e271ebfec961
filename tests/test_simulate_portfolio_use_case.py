from __future__ import annotations

from decimal import Decimal

import pytest

from app.application.dto.estimate_impermanent_loss import EstimateImpermanentLossInput
from app.application.dto.simulate_portfolio import SimulatePortfolioInput
from app.application.use_cases.estimate_impermanent_loss import EstimateImpermanentLossUseCase
from app.application.use_cases.simulate_portfolio import SimulatePortfolioUseCase
from app.domain.entities.scenario import Pool, PortfolioEntry, Scenario
from app.domain.exceptions import InvalidScenarioInputError


class FakeRewardTokenPricePort:
    def get_reward_token_price_usd(self, *, pool_id: str | None = None) -> Decimal:
        return Decimal("0.5")


def _entry(deposit: str, current_price: str | None = "1") -> PortfolioEntry:
    return PortfolioEntry(
        pool=Pool(
            pool_id="0xpool",
            tvl_usd=Decimal("500000"),
            current_price=Decimal(current_price) if current_price is not None else None,
            daily_emission_raw=Decimal("50000000000"),
        ),
        scenario=Scenario(
            deposit_usd=Decimal(deposit),
            timeline_days=Decimal("30"),
            claim_strategy_percent=Decimal("100"),
        ),
        external_apr=Decimal("36.5"),
    )


class TestSimulatePortfolioUseCase:
    def test_execute_aggregates_and_counts_skipped(self, caplog):
        use_case = SimulatePortfolioUseCase(price_port=FakeRewardTokenPricePort())

        with caplog.at_level("WARNING"):
            output = use_case.execute(
                SimulatePortfolioInput(entries=[_entry("10000"), _entry("5000", current_price=None)])
            )

        assert output.skipped_count == 1
        assert output.totals.scenario_count == 1
        assert output.totals.total_deposit_usd == Decimal("10000")
        assert output.totals.total_reward_value_usd == Decimal("300")
        assert output.reward_token_price_usd == Decimal("0.5")
        assert "skipped_not_computable" in caplog.text

    def test_empty_portfolio_is_rejected(self):
        use_case = SimulatePortfolioUseCase(price_port=FakeRewardTokenPricePort())

        with pytest.raises(InvalidScenarioInputError):
            use_case.execute(SimulatePortfolioInput(entries=[]))

    def test_portfolio_size_is_limited(self):
        use_case = SimulatePortfolioUseCase(price_port=FakeRewardTokenPricePort(), max_scenarios=2)

        with pytest.raises(InvalidScenarioInputError):
            use_case.execute(SimulatePortfolioInput(entries=[_entry("1"), _entry("2"), _entry("3")]))


class TestEstimateImpermanentLossUseCase:
    def test_cases_are_ordered_by_severity(self):
        output = EstimateImpermanentLossUseCase().execute(
            EstimateImpermanentLossInput(
                annualized_volatility=Decimal("0.8"),
                timeline_days=Decimal("30"),
                deposit_usd=Decimal("1000"),
            )
        )

        assert output.optimistic.price_multiplier < output.expected.price_multiplier
        assert output.expected.price_multiplier < output.pessimistic.price_multiplier
        assert output.optimistic.il_percent > output.expected.il_percent > output.pessimistic.il_percent
        assert output.pessimistic.il_usd > output.optimistic.il_usd > 0

    def test_without_deposit_has_no_usd_loss(self):
        output = EstimateImpermanentLossUseCase().execute(
            EstimateImpermanentLossInput(annualized_volatility=Decimal("0.5"), timeline_days=Decimal("7"))
        )

        assert output.expected.il_usd is None
        assert output.expected.il_percent < 0

    def test_extreme_volatility_is_sanitized(self):
        output = EstimateImpermanentLossUseCase().execute(
            EstimateImpermanentLossInput(
                annualized_volatility=Decimal("9e999999"),
                timeline_days=Decimal("365"),
                deposit_usd=Decimal("1000"),
            )
        )

        assert output.pessimistic.price_multiplier == Decimal("0")
        assert output.pessimistic.il_percent == Decimal("0")
        assert output.optimistic.il_usd.is_finite()

    @pytest.mark.parametrize(
        "volatility, days",
        [(Decimal("-0.1"), Decimal("30")), (Decimal("0.8"), Decimal("0"))],
    )
    def test_invalid_input_raises(self, volatility, days):
        with pytest.raises(InvalidScenarioInputError):
            EstimateImpermanentLossUseCase().execute(
                EstimateImpermanentLossInput(annualized_volatility=volatility, timeline_days=days)
            )

from __future__ import annotations

from decimal import Decimal
import unittest

from app.domain.entities.scenario import Pool, PortfolioEntry, PriceContext, Scenario
from app.domain.services.portfolio import aggregate_portfolio, summarize_results


PRICE = PriceContext(reward_token_price_usd=Decimal("0.5"))
TOLERANCE = Decimal("1e-9")


def _entry(deposit: str, apr: str | None = None, current_price: str | None = "1") -> PortfolioEntry:
    return PortfolioEntry(
        pool=Pool(
            pool_id=f"pool-{deposit}",
            tvl_usd=Decimal("1000000"),
            current_price=Decimal(current_price) if current_price is not None else None,
            daily_emission_raw=Decimal("0"),
        ),
        scenario=Scenario(
            deposit_usd=Decimal(deposit),
            timeline_days=Decimal("365"),
            claim_strategy_percent=Decimal("100"),
            apr_override=Decimal(apr) if apr is not None else None,
        ),
    )


class PortfolioTests(unittest.TestCase):
    def test_totals_and_deposit_weighted_aprs(self):
        totals = aggregate_portfolio(
            [_entry("1000", apr="10"), _entry("3000", apr="30")],
            price_context=PRICE,
        )

        self.assertEqual(totals.scenario_count, 2)
        self.assertEqual(totals.total_deposit_usd, Decimal("4000"))
        self.assertAlmostEqual(totals.total_reward_value_usd, Decimal("1000"), delta=TOLERANCE)
        self.assertAlmostEqual(totals.total_reward_tokens, Decimal("2000"), delta=TOLERANCE)
        self.assertAlmostEqual(totals.total_net_yield_usd, Decimal("1000"), delta=TOLERANCE)
        self.assertAlmostEqual(totals.weighted_reward_apr, Decimal("25"), delta=TOLERANCE)
        self.assertAlmostEqual(totals.weighted_net_apr, Decimal("25"), delta=TOLERANCE)
        self.assertEqual(len(totals.results), 2)

    def test_not_computable_entries_are_left_out(self):
        totals = aggregate_portfolio(
            [_entry("1000", apr="10"), _entry("5000", apr="10", current_price=None)],
            price_context=PRICE,
        )

        self.assertEqual(totals.scenario_count, 1)
        self.assertEqual(totals.total_deposit_usd, Decimal("1000"))

    def test_empty_portfolio(self):
        totals = summarize_results([])

        self.assertEqual(totals.scenario_count, 0)
        self.assertEqual(totals.total_deposit_usd, Decimal("0"))
        self.assertEqual(totals.weighted_net_apr, Decimal("0"))
        self.assertEqual(totals.results, ())

    def test_overflowing_totals_are_sanitized(self):
        totals = aggregate_portfolio(
            [_entry("9e999999", apr="10"), _entry("9e999999", apr="10")],
            price_context=PRICE,
        )

        self.assertEqual(totals.scenario_count, 2)
        self.assertEqual(totals.total_deposit_usd, Decimal("0"))
        self.assertEqual(totals.weighted_reward_apr, Decimal("0"))
        self.assertTrue(totals.total_reward_value_usd.is_finite())


if __name__ == "__main__":
    unittest.main()

"""Tests for multi-plan comparison."""

from lifeplan_sim_jp import (
    Income,
    Person,
    SimulationParameters,
    compare_all,
    compare_assets_at_year,
    compare_peak_assets,
    compare_retirement_assets,
    simulate,
)


class TestCompare:
    def test_compare_all_pairs_plan_with_results(self, make_plan):
        plans = [make_plan(name="A"), make_plan(name="B")]
        pairs = compare_all(plans)
        assert [p.name for p, _ in pairs] == ["A", "B"]
        assert pairs[0][1] == simulate(plans[0])

    def test_assets_at_year(self, make_plan):
        plans = [
            make_plan(name="A"),
            make_plan(name="B", income=Income(user_income=6_000_000)),
        ]
        rows = compare_assets_at_year(plans, 2025)
        assert rows == [
            {"plan_name": "A", "assets": 4_000_000},
            {"plan_name": "B", "assets": 5_000_000},
        ]

    def test_assets_outside_horizon_is_zero(self, make_plan):
        assert compare_assets_at_year([make_plan(name="A")], 2040)[0]["assets"] == 0

    def test_retirement_assets(self, make_plan):
        plan = make_plan(
            name="A",
            user=Person(birth_year=1960, retirement_age=66),
            simulation=SimulationParameters(start_year=2025, end_year=2027),
        )
        row = compare_retirement_assets([plan])[0]
        assert row["retirement_year"] == 2026
        assert row["assets"] == 6_000_000

    def test_retirement_outside_horizon(self, make_plan):
        row = compare_retirement_assets([make_plan(name="A")])[0]
        assert row["retirement_year"] == 2050
        assert row["assets"] == 0

    def test_peak_assets(self, make_plan):
        plan = make_plan(
            name="A",
            income=Income(),
            simulation=SimulationParameters(start_year=2025, end_year=2027),
        )
        row = compare_peak_assets([plan])[0]
        assert row == {"plan_name": "A", "peak_assets": -1_000_000, "peak_year": 2025}

    def test_peak_tie_keeps_first_year(self, make_plan):
        plan = make_plan(
            name="A",
            income=Income(user_income=3_000_000),
            simulation=SimulationParameters(start_year=2025, end_year=2030),
        )
        row = compare_peak_assets([plan])[0]
        assert row["peak_assets"] == 2_000_000
        assert row["peak_year"] == 2025

    def test_peak_empty_results(self, make_plan):
        plan = make_plan(name="A", simulation=SimulationParameters(start_year=2030, end_year=2025))
        assert compare_peak_assets([plan])[0] == {"plan_name": "A", "peak_assets": 0, "peak_year": None}

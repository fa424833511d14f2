"""Tests for text report formatting."""

from lifeplan_sim_jp import (
    Child,
    Income,
    SimulationParameters,
    compare_peak_assets,
    compare_retirement_assets,
    simulate,
)
from lifeplan_sim_jp.report import (
    fmt_man,
    fmt_oku,
    fmt_pct,
    format_comparison,
    format_header,
    format_scenario_table,
    format_summary,
    format_yearly_table,
)


class TestFormatters:
    def test_fmt_man(self):
        assert fmt_man(12_345_678) == "1,235万円"

    def test_fmt_oku(self):
        assert fmt_oku(150_000_000) == "1.50億円"

    def test_fmt_pct(self):
        assert fmt_pct(0.85) == "85.0%"


class TestFormatHeader:
    def test_no_family(self, make_plan):
        header = format_header(make_plan())
        assert "「テスト」" in header
        assert "子ども: なし" in header
        assert "配偶者" not in header

    def test_children(self, make_plan):
        header = format_header(make_plan(children=(Child(birth_year=2020),)))
        assert "子ども: 1人" in header


class TestFormatSummary:
    def test_final_assets(self, make_plan):
        plan = make_plan()
        summary = format_summary(plan, simulate(plan))
        assert "最終資産: 400万円" in summary
        assert "資産枯渇" not in summary

    def test_depletion_warning(self, make_plan):
        plan = make_plan(income=Income())
        summary = format_summary(plan, simulate(plan), current_year=2025)
        assert "2025年に資産枯渇、あと0年" in summary

    def test_empty(self, make_plan):
        plan = make_plan(simulation=SimulationParameters(start_year=2030, end_year=2025))
        assert "シミュレーション対象年がありません" in format_summary(plan, [])


class TestFormatYearlyTable:
    def test_every_nth_plus_last(self, make_plan):
        plan = make_plan(simulation=SimulationParameters(start_year=2025, end_year=2036))
        table = format_yearly_table(simulate(plan), every=5)
        rows = [line for line in table.splitlines() if line[:4].isdigit()]
        assert [row.split()[0] for row in rows] == ["2025", "2030", "2035", "2036"]


class TestFormatScenarioTable:
    def test_one_row_per_scenario(self, make_plan):
        results = simulate(make_plan())
        table = format_scenario_table({"低成長": results, "高成長": results}, retirement_age=65)
        lines = table.splitlines()
        assert len(lines) == 4
        assert lines[2].startswith("低成長")
        assert "400万円" in lines[3]


class TestFormatComparison:
    def test_rows(self, make_plan):
        plans = [make_plan(name="A"), make_plan(name="B", simulation=SimulationParameters(start_year=2030, end_year=2025))]
        table = format_comparison(compare_peak_assets(plans), compare_retirement_assets(plans))
        lines = table.splitlines()
        assert lines[2].startswith("A")
        assert "400万円" in lines[2]
        assert lines[3].rstrip().endswith("---")

"""Scenario definitions and multi-scenario execution."""

import dataclasses

from lifeplan_sim_jp.params import LifePlan, YearResult
from lifeplan_sim_jp.simulation import simulate

# 値は％表記（2 = 2%）。標準はプラン自身の前提をそのまま使う
SCENARIOS: dict[str, dict[str, float]] = {
    "低成長": {
        "inflation_rate": 0.5,
        "investment_return_rate": 1.0,
        "income_growth_rate": 0.5,
    },
    "標準": {},
    "高成長": {
        "inflation_rate": 2.0,
        "investment_return_rate": 5.0,
        "income_growth_rate": 2.5,
    },
}


def apply_scenario(plan: LifePlan, overrides: dict[str, float]) -> LifePlan:
    """Return a copy of the plan with the scenario's macro assumptions."""
    sim_overrides = {
        k: v for k, v in overrides.items()
        if k in ("inflation_rate", "investment_return_rate")
    }
    simulation = dataclasses.replace(plan.simulation, **sim_overrides)
    income = plan.income
    if "income_growth_rate" in overrides:
        income = dataclasses.replace(income, income_growth_rate=overrides["income_growth_rate"])
    return dataclasses.replace(plan, simulation=simulation, income=income)


def run_scenarios(
    plan: LifePlan,
    scenarios: dict[str, dict[str, float]] | None = None,
) -> dict[str, list[YearResult]]:
    """Simulate the plan once per scenario, keyed by scenario name."""
    if scenarios is None:
        scenarios = SCENARIOS
    return {
        name: simulate(apply_scenario(plan, overrides))
        for name, overrides in scenarios.items()
    }

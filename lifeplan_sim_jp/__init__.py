"""Household Life Plan Simulation Package."""

from lifeplan_sim_jp.params import (
    LifePlan,
    Person,
    Spouse,
    Child,
    EducationPath,
    Income,
    Expenses,
    Assets,
    Pension,
    SimulationParameters,
    YearResult,
    pct,
    round_half_up,
)
from lifeplan_sim_jp.education import (
    EDUCATION_COSTS,
    EDUCATION_PERIODS,
    education_cost,
    monthly_child_allowance,
    annual_child_allowance,
    child_education_cost_for_year,
)
from lifeplan_sim_jp.simulation import (
    simulate,
    calc_income,
    calc_expenses,
    calc_education_costs,
    calc_child_allowance,
    calc_pension_income,
    next_balance,
    PENSION_START_AGE,
)
from lifeplan_sim_jp.stats import (
    SimulationStatistics,
    DetailedStatistics,
    calculate_statistics,
    calculate_detailed_statistics,
    find_depletion_year,
    financial_health,
    retirement_assets,
)
from lifeplan_sim_jp.compare import (
    compare_all,
    compare_assets_at_year,
    compare_retirement_assets,
    compare_peak_assets,
)
from lifeplan_sim_jp.scenarios import SCENARIOS, apply_scenario, run_scenarios
from lifeplan_sim_jp.validation import ValidationError, validate_plan
from lifeplan_sim_jp.storage import PlanStore

__all__ = [
    "LifePlan",
    "Person",
    "Spouse",
    "Child",
    "EducationPath",
    "Income",
    "Expenses",
    "Assets",
    "Pension",
    "SimulationParameters",
    "YearResult",
    "pct",
    "round_half_up",
    "EDUCATION_COSTS",
    "EDUCATION_PERIODS",
    "education_cost",
    "monthly_child_allowance",
    "annual_child_allowance",
    "child_education_cost_for_year",
    "simulate",
    "calc_income",
    "calc_expenses",
    "calc_education_costs",
    "calc_child_allowance",
    "calc_pension_income",
    "next_balance",
    "PENSION_START_AGE",
    "SimulationStatistics",
    "DetailedStatistics",
    "calculate_statistics",
    "calculate_detailed_statistics",
    "find_depletion_year",
    "financial_health",
    "retirement_assets",
    "compare_all",
    "compare_assets_at_year",
    "compare_retirement_assets",
    "compare_peak_assets",
    "SCENARIOS",
    "apply_scenario",
    "run_scenarios",
    "ValidationError",
    "validate_plan",
    "PlanStore",
]

"""Side-by-side comparison of several life plans."""

from lifeplan_sim_jp.params import LifePlan, YearResult
from lifeplan_sim_jp.simulation import simulate


def compare_all(plans: list[LifePlan]) -> list[tuple[LifePlan, list[YearResult]]]:
    return [(plan, simulate(plan)) for plan in plans]


def compare_assets_at_year(plans: list[LifePlan], year: int) -> list[dict]:
    """Cumulative assets of each plan in the given year (0 outside the horizon)."""
    rows = []
    for plan, results in compare_all(plans):
        match = next((r for r in results if r.year == year), None)
        rows.append({
            "plan_name": plan.name,
            "assets": match.cumulative_assets if match else 0,
        })
    return rows


def compare_retirement_assets(plans: list[LifePlan]) -> list[dict]:
    rows = []
    for plan, results in compare_all(plans):
        retirement_year = plan.user.birth_year + plan.user.retirement_age
        match = next((r for r in results if r.year == retirement_year), None)
        rows.append({
            "plan_name": plan.name,
            "assets": match.cumulative_assets if match else 0,
            "retirement_year": retirement_year,
        })
    return rows


def compare_peak_assets(plans: list[LifePlan]) -> list[dict]:
    """Peak assets and the first year they are reached, per plan."""
    rows = []
    for plan, results in compare_all(plans):
        if not results:
            rows.append({"plan_name": plan.name, "peak_assets": 0, "peak_year": None})
            continue
        peak = results[0]
        for r in results[1:]:
            if r.cumulative_assets > peak.cumulative_assets:
                peak = r
        rows.append({
            "plan_name": plan.name,
            "peak_assets": peak.cumulative_assets,
            "peak_year": peak.year,
        })
    return rows

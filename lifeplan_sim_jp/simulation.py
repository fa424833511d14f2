"""Core simulation engine: year-by-year household cash flow and assets."""

from lifeplan_sim_jp.education import (
    ALLOWANCE_MAX_AGE,
    annual_child_allowance,
    child_education_cost_for_year,
)
from lifeplan_sim_jp.params import (
    WORK_STATUS_RATIOS,
    LifePlan,
    YearResult,
    pct,
    round_half_up,
)

PENSION_START_AGE = 65  # 年金受給開始年齢（固定）


def _growth_factor(rate_pct: float, years_elapsed: int) -> float:
    return (1 + pct(rate_pct)) ** years_elapsed


def spouse_income_ratio(work_status: str) -> float:
    """Income multiplier for the spouse's work status (unknown → 0)."""
    return WORK_STATUS_RATIOS.get(work_status, 0.0)


def calc_pension_income(plan: LifePlan, year: int) -> float:
    """Flat annual pension from age 65, regardless of retirement age."""
    if plan.user.age_in(year) < PENSION_START_AGE:
        return 0
    return plan.pension.total


def calc_income(plan: LifePlan, year: int) -> int:
    """Household income for the year.

    Earned income stops after the retirement age; pension only starts once the
    user is both retired and 65+, so retiring before 65 leaves a gap with
    neither earned income nor pension. Other income grows at the same rate as
    earned income.
    """
    years_elapsed = year - plan.simulation.start_year
    factor = _growth_factor(plan.income.income_growth_rate, years_elapsed)
    user_age = plan.user.age_in(year)

    total = 0.0
    if user_age <= plan.user.retirement_age:
        total += plan.income.user_income * factor

    spouse = plan.spouse
    if spouse is not None and spouse.age_in(year) <= spouse.retirement_age:
        total += plan.income.spouse_income * spouse_income_ratio(spouse.work_status) * factor

    total += plan.income.other_income * factor

    if user_age > plan.user.retirement_age:
        total += calc_pension_income(plan, year)

    return round_half_up(total)


def calc_expenses(plan: LifePlan, year: int) -> int:
    """Living + housing + other expenses grown by (expense growth + inflation)."""
    years_elapsed = year - plan.simulation.start_year
    combined_rate = plan.expenses.expense_growth_rate + plan.simulation.inflation_rate
    factor = _growth_factor(combined_rate, years_elapsed)
    e = plan.expenses
    return round_half_up(
        e.living_expenses * factor + e.housing_expenses * factor + e.other_expenses * factor
    )


def calc_education_costs(plan: LifePlan, year: int) -> int:
    return sum(child_education_cost_for_year(child, year) for child in plan.children)


def calc_child_allowance(plan: LifePlan, year: int, income: int | None = None) -> int:
    """Annual child allowance for children aged 0-14 in the given year.

    Birth order is the 1-based position in plan.children. The income test uses
    the household income of the same year.
    """
    eligible = [
        (child.age_in(year), order)
        for order, child in enumerate(plan.children, start=1)
        if 0 <= child.age_in(year) <= ALLOWANCE_MAX_AGE
    ]
    if not eligible:
        return 0
    if income is None:
        income = calc_income(plan, year)
    return annual_child_allowance(eligible, income)


def total_initial_assets(plan: LifePlan) -> float:
    return plan.assets.total


def next_balance(balance: float, net_cash_flow: float, return_rate_pct: float) -> float:
    """Apply one year's cash flow, then investment return on a positive balance.

    A zero or negative balance earns nothing (and is not charged either).
    """
    balance += net_cash_flow
    if balance > 0:
        balance += balance * pct(return_rate_pct)
    return balance


def simulate(plan: LifePlan) -> list[YearResult]:
    """Run the projection for every year in [start_year, end_year].

    Pure function of the plan: start_year > end_year simply yields [].
    The balance is carried unrounded; each year's reported assets are rounded.
    """
    return_rate = plan.simulation.investment_return_rate
    balance = total_initial_assets(plan)
    results: list[YearResult] = []

    for year in plan.simulation.years:
        income = calc_income(plan, year)
        expenses = calc_expenses(plan, year)
        education = calc_education_costs(plan, year)
        allowance = calc_child_allowance(plan, year, income)
        net = income - expenses - education + allowance

        balance = next_balance(balance, net, return_rate)
        results.append(
            YearResult(
                year=year,
                age=plan.user.age_in(year),
                income=income,
                expenses=expenses,
                education_costs=education,
                child_allowance=allowance,
                net_cash_flow=net,
                cumulative_assets=round_half_up(balance),
            )
        )

    return results

"""Summary statistics over a simulated year series."""

from dataclasses import dataclass

from lifeplan_sim_jp.params import Person, YearResult

DEFAULT_RETIREMENT_AGE = 65

# 退職準備度の評価しきい値
READINESS_GOOD = 0.8
READINESS_CAUTION = 0.6


@dataclass
class SimulationStatistics:
    total_income: int = 0
    total_expenses: int = 0
    total_education_costs: int = 0
    total_child_allowance: int = 0
    final_assets: int = 0
    peak_assets: int = 0
    min_assets: int = 0
    negative_years: int = 0
    simulation_years: int = 0


@dataclass
class DetailedStatistics:
    stats: SimulationStatistics
    average_annual_income: float = 0.0
    average_annual_expenses: float = 0.0
    average_annual_savings: float = 0.0
    retirement_years: int = 0
    pre_retirement_assets: int = 0
    retirement_readiness: float = 1.0
    depletion_year: int | None = None
    years_until_depletion: int | None = None

    @property
    def health(self) -> str:
        return financial_health(self.retirement_readiness)


def calculate_statistics(results: list[YearResult]) -> SimulationStatistics:
    """Totals, extremes and shortfall count. Empty input → all zeros."""
    if not results:
        return SimulationStatistics()
    assets = [r.cumulative_assets for r in results]
    return SimulationStatistics(
        total_income=sum(r.income for r in results),
        total_expenses=sum(r.expenses for r in results),
        total_education_costs=sum(r.education_costs for r in results),
        total_child_allowance=sum(r.child_allowance for r in results),
        final_assets=assets[-1],
        peak_assets=max(assets),
        min_assets=min(assets),
        negative_years=sum(1 for a in assets if a < 0),
        simulation_years=len(results),
    )


def find_depletion_year(results: list[YearResult]) -> int | None:
    """First year whose cumulative assets are zero or below."""
    for r in results:
        if r.cumulative_assets <= 0:
            return r.year
    return None


def calculate_detailed_statistics(
    results: list[YearResult],
    retirement_age: int = DEFAULT_RETIREMENT_AGE,
    current_year: int | None = None,
) -> DetailedStatistics:
    """Averages, retirement readiness and asset depletion timing.

    retirement_readiness = assets at retirement age ÷
    (average annual expenses × years at or after retirement age).
    With no retirement years in the horizon the ratio is 1.0.
    """
    stats = calculate_statistics(results)
    n = stats.simulation_years
    detail = DetailedStatistics(stats=stats)
    if n == 0:
        return detail

    detail.average_annual_income = stats.total_income / n
    detail.average_annual_expenses = stats.total_expenses / n
    detail.average_annual_savings = (stats.total_income - stats.total_expenses) / n

    detail.retirement_years = sum(1 for r in results if r.age >= retirement_age)
    detail.pre_retirement_assets = next(
        (r.cumulative_assets for r in results if r.age == retirement_age), 0
    )
    required = detail.average_annual_expenses * detail.retirement_years
    if detail.retirement_years > 0 and required != 0:
        detail.retirement_readiness = detail.pre_retirement_assets / required

    detail.depletion_year = find_depletion_year(results)
    if detail.depletion_year is not None and current_year is not None:
        detail.years_until_depletion = detail.depletion_year - current_year
    return detail


def financial_health(readiness: float) -> str:
    if readiness >= READINESS_GOOD:
        return "良好"
    if readiness >= READINESS_CAUTION:
        return "注意"
    return "危険"


def retirement_assets(results: list[YearResult], person: Person) -> int | None:
    """Cumulative assets in the user's retirement year, if simulated."""
    retirement_year = person.birth_year + person.retirement_age
    for r in results:
        if r.year == retirement_year:
            return r.cumulative_assets
    return None

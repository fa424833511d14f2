"""Household profile data model and numeric helpers.

All currency amounts are whole yen (not 万円). All rates are whole-number
percentages as entered in the plan (2 means 2%); convert with ``pct()``.
"""

import math
from dataclasses import dataclass, field

# 配偶者の勤務状況 → 収入倍率
WORK_STATUS_RATIOS: dict[str, float] = {
    "working": 1.0,
    "partTime": 0.5,
    "notWorking": 0.0,
}

HIGH_SCHOOL_TYPES = ("public", "private")
UNIVERSITY_TYPES = ("none", "national", "private")


def pct(rate: float) -> float:
    """Whole-number percentage → fraction (2 → 0.02)."""
    return rate / 100


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +inf (JavaScript Math.round)."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class EducationPath:
    elementary: bool = True
    junior_high: bool = True
    high_school: str = "public"     # public | private
    university: str = "national"    # none | national | private
    graduate_school: bool = False

    def to_dict(self) -> dict:
        return {
            "elementary": self.elementary,
            "juniorHigh": self.junior_high,
            "highSchool": self.high_school,
            "university": self.university,
            "graduateSchool": self.graduate_school,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "EducationPath":
        return cls(
            elementary=bool(d.get("elementary", True)),
            junior_high=bool(d.get("juniorHigh", True)),
            high_school=d.get("highSchool", "public"),
            university=d.get("university", "national"),
            graduate_school=bool(d.get("graduateSchool", False)),
        )


@dataclass(frozen=True)
class Person:
    birth_year: int
    retirement_age: int = 65
    name: str = ""

    def age_in(self, year: int) -> int:
        return year - self.birth_year

    def to_dict(self) -> dict:
        return {"name": self.name, "birthYear": self.birth_year, "retirementAge": self.retirement_age}

    @classmethod
    def from_dict(cls, d: dict) -> "Person":
        return cls(
            birth_year=int(d["birthYear"]),
            retirement_age=int(d.get("retirementAge", 65)),
            name=d.get("name", ""),
        )


@dataclass(frozen=True)
class Spouse(Person):
    work_status: str = "working"  # working | partTime | notWorking

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["workStatus"] = self.work_status
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "Spouse":
        return cls(
            birth_year=int(d["birthYear"]),
            retirement_age=int(d.get("retirementAge", 65)),
            name=d.get("name", ""),
            work_status=d.get("workStatus", "working"),
        )


@dataclass(frozen=True)
class Child:
    birth_year: int
    education_path: EducationPath = field(default_factory=EducationPath)
    name: str = ""
    child_id: str = ""

    def age_in(self, year: int) -> int:
        return year - self.birth_year

    def to_dict(self) -> dict:
        return {
            "id": self.child_id,
            "name": self.name,
            "birthYear": self.birth_year,
            "educationPath": self.education_path.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Child":
        return cls(
            birth_year=int(d["birthYear"]),
            education_path=EducationPath.from_dict(d.get("educationPath", {})),
            name=d.get("name", ""),
            child_id=d.get("id", ""),
        )


@dataclass(frozen=True)
class Income:
    user_income: float = 0
    spouse_income: float = 0
    other_income: float = 0
    income_growth_rate: float = 0  # %/年（本人・配偶者・その他共通）


@dataclass(frozen=True)
class Expenses:
    living_expenses: float = 0
    housing_expenses: float = 0
    other_expenses: float = 0
    expense_growth_rate: float = 0  # %/年（インフレ率に上乗せ）

    @property
    def base_total(self) -> float:
        return self.living_expenses + self.housing_expenses + self.other_expenses


@dataclass(frozen=True)
class Assets:
    savings: float = 0
    investments: float = 0
    real_estate: float = 0
    other: float = 0

    @property
    def total(self) -> float:
        return self.savings + self.investments + self.real_estate + self.other


@dataclass(frozen=True)
class Pension:
    """Annual pension amounts, paid flat from age 65 (not inflation-adjusted)."""

    national_pension: float = 0
    employee_pension: float = 0
    corporate_pension: float = 0
    private_pension: float = 0

    @property
    def total(self) -> float:
        return (
            self.national_pension + self.employee_pension
            + self.corporate_pension + self.private_pension
        )


@dataclass(frozen=True)
class SimulationParameters:
    start_year: int
    end_year: int
    inflation_rate: float = 0         # %
    investment_return_rate: float = 0  # %

    @property
    def years(self) -> range:
        return range(self.start_year, self.end_year + 1)


# camelCase JSON keys for the flat sections
_INCOME_KEYS = {
    "user_income": "userIncome",
    "spouse_income": "spouseIncome",
    "other_income": "otherIncome",
    "income_growth_rate": "incomeGrowthRate",
}
_EXPENSE_KEYS = {
    "living_expenses": "livingExpenses",
    "housing_expenses": "housingExpenses",
    "other_expenses": "otherExpenses",
    "expense_growth_rate": "expenseGrowthRate",
}
_ASSET_KEYS = {
    "savings": "savings",
    "investments": "investments",
    "real_estate": "realEstate",
    "other": "other",
}
_PENSION_KEYS = {
    "national_pension": "nationalPension",
    "employee_pension": "employeePension",
    "corporate_pension": "corporatePension",
    "private_pension": "privatePension",
}
_SIM_KEYS = {
    "start_year": "simulationStartYear",
    "end_year": "simulationEndYear",
    "inflation_rate": "inflationRate",
    "investment_return_rate": "investmentReturnRate",
}


def _section_to_dict(obj, keys: dict[str, str]) -> dict:
    return {camel: getattr(obj, attr) for attr, camel in keys.items()}


def _section_from_dict(cls, d: dict | None, keys: dict[str, str]):
    d = d or {}
    return cls(**{attr: d[camel] for attr, camel in keys.items() if camel in d})


@dataclass(frozen=True)
class LifePlan:
    """Complete household profile handed to the simulator (never mutated)."""

    user: Person
    simulation: SimulationParameters
    income: Income = field(default_factory=Income)
    expenses: Expenses = field(default_factory=Expenses)
    assets: Assets = field(default_factory=Assets)
    pension: Pension = field(default_factory=Pension)
    spouse: Spouse | None = None
    children: tuple[Child, ...] = ()
    name: str = ""
    plan_id: str = ""
    created_at: str = ""
    updated_at: str = ""

    def to_dict(self) -> dict:
        d = {
            "id": self.plan_id,
            "name": self.name,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "user": self.user.to_dict(),
            "children": [c.to_dict() for c in self.children],
            "income": _section_to_dict(self.income, _INCOME_KEYS),
            "expenses": _section_to_dict(self.expenses, _EXPENSE_KEYS),
            "assets": _section_to_dict(self.assets, _ASSET_KEYS),
            "pension": _section_to_dict(self.pension, _PENSION_KEYS),
            "simulationParameters": _section_to_dict(self.simulation, _SIM_KEYS),
        }
        if self.spouse is not None:
            d["spouse"] = self.spouse.to_dict()
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "LifePlan":
        spouse = d.get("spouse")
        return cls(
            user=Person.from_dict(d["user"]),
            simulation=_section_from_dict(SimulationParameters, d["simulationParameters"], _SIM_KEYS),
            income=_section_from_dict(Income, d.get("income"), _INCOME_KEYS),
            expenses=_section_from_dict(Expenses, d.get("expenses"), _EXPENSE_KEYS),
            assets=_section_from_dict(Assets, d.get("assets"), _ASSET_KEYS),
            pension=_section_from_dict(Pension, d.get("pension"), _PENSION_KEYS),
            spouse=Spouse.from_dict(spouse) if spouse else None,
            children=tuple(Child.from_dict(c) for c in d.get("children") or []),
            name=d.get("name", ""),
            plan_id=d.get("id", ""),
            created_at=d.get("createdAt", ""),
            updated_at=d.get("updatedAt", ""),
        )


@dataclass(frozen=True)
class YearResult:
    """One simulated year. Amounts in yen, rounded to whole yen."""

    year: int
    age: int
    income: int
    expenses: int
    education_costs: int
    child_allowance: int
    net_cash_flow: int
    cumulative_assets: int

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "age": self.age,
            "income": self.income,
            "expenses": self.expenses,
            "educationCosts": self.education_costs,
            "childAllowance": self.child_allowance,
            "netCashFlow": self.net_cash_flow,
            "cumulativeAssets": self.cumulative_assets,
        }

"""Input validation for life plans (run before simulation, never by it)."""

from dataclasses import dataclass

from lifeplan_sim_jp.params import HIGH_SCHOOL_TYPES, UNIVERSITY_TYPES, WORK_STATUS_RATIOS, LifePlan

MAX_NAME_LENGTH = 50
RETIREMENT_AGE_RANGE = (50, 80)
GROWTH_RATE_RANGE = (-10, 20)
INFLATION_RATE_RANGE = (-5, 10)
RETURN_RATE_RANGE = (-10, 20)
MAX_INCOME = 100_000_000
MAX_ASSET = 1_000_000_000


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str


class _Checker:
    def __init__(self):
        self.errors: list[ValidationError] = []

    def add(self, field: str, message: str):
        self.errors.append(ValidationError(field, message))

    def number_range(self, field: str, value: float, lo: float, hi: float, label: str):
        if value < 0 <= lo:
            self.add(field, f"{label}は0以上で入力してください")
        elif value < lo or value > hi:
            self.add(field, f"{label}は{lo}以上{hi}以下で入力してください")

    def max_length(self, field: str, value: str, limit: int, label: str):
        if value and len(value) > limit:
            self.add(field, f"{label}は{limit}文字以下で入力してください")


def validate_plan(plan: LifePlan, current_year: int) -> list[ValidationError]:
    """Validate a plan against the form rules. Returns list of errors (empty = OK)."""
    c = _Checker()

    if not plan.name.strip():
        c.add("name", "プラン名は必須です")
    c.max_length("name", plan.name, MAX_NAME_LENGTH, "プラン名")

    c.number_range("user.birthYear", plan.user.birth_year, current_year - 100, current_year, "生年")
    c.number_range("user.retirementAge", plan.user.retirement_age, *RETIREMENT_AGE_RANGE, "退職予定年齢")

    if plan.spouse is not None:
        s = plan.spouse
        c.number_range("spouse.birthYear", s.birth_year, current_year - 100, current_year, "配偶者生年")
        c.number_range("spouse.retirementAge", s.retirement_age, *RETIREMENT_AGE_RANGE, "配偶者退職予定年齢")
        if s.work_status not in WORK_STATUS_RATIOS:
            c.add("spouse.workStatus", f"配偶者勤務状況が不正です: {s.work_status}")

    for i, child in enumerate(plan.children):
        prefix = f"children.{i}"
        label = f"子ども{i + 1}"
        c.number_range(f"{prefix}.birthYear", child.birth_year, current_year - 25, current_year + 10, f"{label}の生年")
        if child.education_path.high_school not in HIGH_SCHOOL_TYPES:
            c.add(f"{prefix}.educationPath.highSchool", f"{label}の高校種別が不正です")
        if child.education_path.university not in UNIVERSITY_TYPES:
            c.add(f"{prefix}.educationPath.university", f"{label}の大学種別が不正です")

    inc = plan.income
    c.number_range("income.userIncome", inc.user_income, 0, MAX_INCOME, "年収")
    c.number_range("income.spouseIncome", inc.spouse_income, 0, MAX_INCOME, "配偶者年収")
    c.number_range("income.otherIncome", inc.other_income, 0, MAX_INCOME, "その他収入")
    c.number_range("income.incomeGrowthRate", inc.income_growth_rate, *GROWTH_RATE_RANGE, "収入成長率")

    exp = plan.expenses
    c.number_range("expenses.livingExpenses", exp.living_expenses, 0, 50_000_000, "生活費")
    c.number_range("expenses.housingExpenses", exp.housing_expenses, 0, 20_000_000, "住居費")
    c.number_range("expenses.otherExpenses", exp.other_expenses, 0, 50_000_000, "その他支出")
    c.number_range("expenses.expenseGrowthRate", exp.expense_growth_rate, *GROWTH_RATE_RANGE, "支出成長率")

    a = plan.assets
    for attr, label in (("savings", "預貯金"), ("investments", "投資資産"),
                        ("real_estate", "不動産"), ("other", "その他資産")):
        c.number_range(f"assets.{attr}", getattr(a, attr), 0, MAX_ASSET, label)

    p = plan.pension
    c.number_range("pension.nationalPension", p.national_pension, 0, 10_000_000, "国民年金")
    c.number_range("pension.employeePension", p.employee_pension, 0, 20_000_000, "厚生年金")
    c.number_range("pension.corporatePension", p.corporate_pension, 0, 20_000_000, "企業年金")
    c.number_range("pension.privatePension", p.private_pension, 0, 20_000_000, "個人年金")

    sim = plan.simulation
    c.number_range("simulation.startYear", sim.start_year, current_year - 5, current_year + 5, "シミュレーション開始年")
    c.number_range("simulation.endYear", sim.end_year, current_year, current_year + 100, "シミュレーション終了年")
    if sim.start_year >= sim.end_year:
        c.add("simulation.years", "シミュレーション期間の開始年は終了年より前である必要があります")
    c.number_range("simulation.inflationRate", sim.inflation_rate, *INFLATION_RATE_RANGE, "インフレ率")
    c.number_range("simulation.investmentReturnRate", sim.investment_return_rate, *RETURN_RATE_RANGE, "投資収益率")

    return c.errors

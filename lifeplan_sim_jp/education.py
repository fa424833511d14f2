"""Education cost table and child allowance (児童手当) lookup."""

from lifeplan_sim_jp.params import Child

# 文部科学省「子供の学習費調査」（令和3年度）・「国公私立大学の授業料等の推移」ほか
# (stage, type) → (年間費用・円, 在学期間総額・円, データ年度)
EDUCATION_COSTS: dict[tuple[str, str], tuple[int, int, int]] = {
    ("elementary", "public"): (352566, 2115396, 2021),
    ("elementary", "private"): (1666949, 10001694, 2021),
    ("juniorHigh", "public"): (538799, 1616397, 2021),
    ("juniorHigh", "private"): (1436353, 4309059, 2021),
    ("highSchool", "public"): (512971, 1538913, 2021),
    ("highSchool", "private"): (1054444, 3163332, 2021),
    ("university", "national"): (817800, 3271200, 2023),
    ("university", "public"): (935000, 3740000, 2023),
    ("university", "private"): (1542000, 6168000, 2023),
    ("graduateSchool", "national"): (817800, 1635600, 2023),  # 修士2年
    ("graduateSchool", "private"): (1200000, 2400000, 2023),
}

# 教育段階: (在学年数, 入学年齢)
EDUCATION_PERIODS: dict[str, tuple[int, int]] = {
    "elementary": (6, 6),
    "juniorHigh": (3, 12),
    "highSchool": (3, 15),
    "university": (4, 18),
    "graduateSchool": (2, 22),
}

# 児童手当（令和4年6月分〜）: 所得制限は年収ベース概算
ALLOWANCE_INCOME_LIMIT = 8_330_000         # 所得制限限度額 → 特例給付
ALLOWANCE_INCOME_UPPER_LIMIT = 12_000_000  # 所得上限限度額 → 支給なし
SPECIAL_ALLOWANCE_MONTHLY = 5_000          # 特例給付（月額）
ALLOWANCE_MAX_AGE = 14                     # 中学校修了まで

# (下限年齢, 上限年齢, 第1・2子月額, 第3子以降月額)
CHILD_ALLOWANCE_SCHEDULE: tuple[tuple[int, int, int, int], ...] = (
    (0, 2, 15_000, 15_000),
    (3, 11, 10_000, 15_000),
    (12, 14, 10_000, 10_000),
)


def education_cost(stage: str, school_type: str, annual: bool = True) -> int:
    """Return the annual (or whole-stage) cost for a stage/type pair.

    Unknown combinations (e.g. national elementary school) cost 0.
    """
    entry = EDUCATION_COSTS.get((stage, school_type))
    if entry is None:
        return 0
    annual_cost, total_cost, _ = entry
    return annual_cost if annual else total_cost


def monthly_child_allowance(child_age: int, birth_order: int, household_income: float) -> int:
    """Monthly child allowance for one child.

    birth_order is 1-based (第何子). Income bands are checked before age:
    above the upper limit nothing is paid, above the lower limit the flat
    special allowance applies regardless of age or order.
    """
    if household_income > ALLOWANCE_INCOME_UPPER_LIMIT:
        return 0
    if household_income > ALLOWANCE_INCOME_LIMIT:
        return SPECIAL_ALLOWANCE_MONTHLY
    if child_age < 0:
        # 3歳未満の帯に含める（年次集計では0歳未満を除外）
        return CHILD_ALLOWANCE_SCHEDULE[0][2]
    for lo, hi, amount, third_plus_amount in CHILD_ALLOWANCE_SCHEDULE:
        if lo <= child_age <= hi:
            return third_plus_amount if birth_order >= 3 else amount
    return 0


def annual_child_allowance(children: list[tuple[int, int]], household_income: float) -> int:
    """Sum of monthly allowance × 12 over (age, birth_order) pairs."""
    return sum(
        monthly_child_allowance(age, order, household_income) * 12
        for age, order in children
    )


def child_education_cost_for_year(child: Child, year: int) -> int:
    """Annual education cost for one child in the given calendar year.

    Elementary and junior high are always costed at the public tier;
    only high school, university and graduate school follow the path.
    """
    age = child.age_in(year)
    path = child.education_path
    if 6 <= age <= 11:
        return education_cost("elementary", "public")
    if 12 <= age <= 14:
        return education_cost("juniorHigh", "public")
    if 15 <= age <= 17:
        return education_cost("highSchool", path.high_school)
    if 18 <= age <= 21 and path.university != "none":
        return education_cost("university", path.university)
    if 22 <= age <= 23 and path.graduate_school:
        return education_cost("graduateSchool", "national")
    return 0

"""TOML config loader with CLI > config > default resolution."""

import argparse
import sys
import tomllib
from pathlib import Path
from typing import Callable

from lifeplan_sim_jp.params import (
    HIGH_SCHOOL_TYPES,
    UNIVERSITY_TYPES,
    Assets,
    Child,
    EducationPath,
    Expenses,
    Income,
    LifePlan,
    Pension,
    Person,
    SimulationParameters,
    Spouse,
)

DEFAULT_CONFIG_PATH = Path("plan.toml")
DEFAULT_HORIZON_YEARS = 50

# 金額は円、率は％表記
DEFAULTS = {
    "name": "標準プラン",
    "birth_year": 1990,
    "retirement_age": 65,
    "has_spouse": True,
    "spouse_birth_year": 1992,
    "spouse_retirement_age": 65,
    "spouse_work_status": "working",
    "children": "2020:public:national,2022:public:private",
    "user_income": 6_000_000,
    "spouse_income": 4_000_000,
    "other_income": 0,
    "income_growth_rate": 2.0,
    "living_expenses": 3_000_000,
    "housing_expenses": 1_500_000,
    "other_expenses": 500_000,
    "expense_growth_rate": 1.0,
    "savings": 5_000_000,
    "investments": 2_000_000,
    "real_estate": 0,
    "other_assets": 0,
    "national_pension": 780_000,
    "employee_pension": 1_200_000,
    "corporate_pension": 0,
    "private_pension": 0,
    "start_year": None,  # None → current year
    "end_year": None,    # None → start_year + 50
    "inflation_rate": 1.0,
    "investment_return_rate": 3.0,
}


def _child_table_to_str(item: dict) -> str:
    parts = [
        str(item["birth_year"]),
        item.get("high_school", "public"),
        item.get("university", "national"),
    ]
    if item.get("graduate_school"):
        parts.append("grad")
    return ":".join(parts)


def load_config(path: Path | None = None) -> dict:
    """Load TOML config file. Returns empty dict if file doesn't exist."""
    if path is None:
        path = DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        print(f"設定ファイルの読み込みに失敗: {path}: {e}", file=sys.stderr)
        raise SystemExit(1)
    # Normalize children: TOML list → CLI-compatible string
    # Supports: [2020, 2022], ["2020:private"], [{birth_year = 2020, university = "private"}]
    if "children" in raw:
        v = raw["children"]
        if isinstance(v, list):
            parts = []
            for item in v:
                if isinstance(item, dict):
                    parts.append(_child_table_to_str(item))
                else:
                    parts.append(str(item))
            raw["children"] = ",".join(parts) if parts else "none"
        elif v is False:
            raw["children"] = "none"
    # Optional [spouse] table → flat spouse_* keys
    if isinstance(raw.get("spouse"), dict):
        spouse = raw.pop("spouse")
        raw.setdefault("has_spouse", True)
        for key in ("birth_year", "retirement_age", "work_status"):
            if key in spouse:
                raw.setdefault(f"spouse_{key}", spouse[key])
    elif raw.get("spouse") is False:
        raw.pop("spouse")
        raw["has_spouse"] = False
    return raw


def create_parser(description: str) -> argparse.ArgumentParser:
    """Create argparse parser with shared plan flags."""
    d = DEFAULTS
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--config", type=Path, default=None, help="設定ファイルパス (default: plan.toml)")
    parser.add_argument("--name", type=str, default=None, help=f"プラン名 (default: {d['name']})")
    parser.add_argument("--birth-year", type=int, default=None, help=f"本人の生年 (default: {d['birth_year']})")
    parser.add_argument("--retirement-age", type=int, default=None, help=f"本人の退職年齢 (default: {d['retirement_age']})")
    parser.add_argument("--no-spouse", dest="has_spouse", action="store_const", const=False, default=None, help="配偶者なし")
    parser.add_argument("--spouse-birth-year", type=int, default=None, help=f"配偶者の生年 (default: {d['spouse_birth_year']})")
    parser.add_argument("--spouse-retirement-age", type=int, default=None, help=f"配偶者の退職年齢 (default: {d['spouse_retirement_age']})")
    parser.add_argument("--spouse-work-status", type=str, default=None, choices=["working", "partTime", "notWorking"], help="配偶者の勤務状況 (default: working)")
    parser.add_argument("--children", type=str, default=None, help=f"子ども（生年[:高校[:大学[:grad]]]のカンマ区切り、noneで子なし）(default: {d['children']})")
    parser.add_argument("--user-income", type=float, default=None, help=f"本人年収・円 (default: {d['user_income']:,})")
    parser.add_argument("--spouse-income", type=float, default=None, help=f"配偶者年収・円 (default: {d['spouse_income']:,})")
    parser.add_argument("--other-income", type=float, default=None, help=f"その他収入・円/年 (default: {d['other_income']})")
    parser.add_argument("--income-growth-rate", type=float, default=None, help=f"収入成長率・%% (default: {d['income_growth_rate']})")
    parser.add_argument("--living-expenses", type=float, default=None, help=f"生活費・円/年 (default: {d['living_expenses']:,})")
    parser.add_argument("--housing-expenses", type=float, default=None, help=f"住居費・円/年 (default: {d['housing_expenses']:,})")
    parser.add_argument("--other-expenses", type=float, default=None, help=f"その他支出・円/年 (default: {d['other_expenses']:,})")
    parser.add_argument("--expense-growth-rate", type=float, default=None, help=f"支出成長率・%% (default: {d['expense_growth_rate']})")
    parser.add_argument("--savings", type=float, default=None, help=f"預貯金・円 (default: {d['savings']:,})")
    parser.add_argument("--investments", type=float, default=None, help=f"投資資産・円 (default: {d['investments']:,})")
    parser.add_argument("--real-estate", type=float, default=None, help="不動産・円 (default: 0)")
    parser.add_argument("--other-assets", type=float, default=None, help="その他資産・円 (default: 0)")
    parser.add_argument("--national-pension", type=float, default=None, help=f"国民年金・円/年 (default: {d['national_pension']:,})")
    parser.add_argument("--employee-pension", type=float, default=None, help=f"厚生年金・円/年 (default: {d['employee_pension']:,})")
    parser.add_argument("--corporate-pension", type=float, default=None, help="企業年金・円/年 (default: 0)")
    parser.add_argument("--private-pension", type=float, default=None, help="個人年金・円/年 (default: 0)")
    parser.add_argument("--start-year", type=int, default=None, help="シミュレーション開始年 (default: 今年)")
    parser.add_argument("--end-year", type=int, default=None, help=f"シミュレーション終了年 (default: 開始年+{DEFAULT_HORIZON_YEARS})")
    parser.add_argument("--inflation-rate", type=float, default=None, help=f"インフレ率・%% (default: {d['inflation_rate']})")
    parser.add_argument("--investment-return-rate", type=float, default=None, help=f"運用利回り・%% (default: {d['investment_return_rate']})")
    parser.add_argument("--current-year", type=int, default=None, help="基準年（入力チェック・枯渇までの年数に使用, default: 今年）")
    return parser


def parse_children(s: str) -> tuple[Child, ...]:
    """Parse children string → Child tuple.

    Format: "2020:public:national,2022:private:private:grad"
    Each entry is birth_year[:high_school[:university[:grad]]]; "none" → no children.
    """
    s = str(s).strip()
    if not s or s.lower() == "none":
        return ()
    children = []
    for i, part in enumerate(s.split(","), start=1):
        fields = [f.strip() for f in part.strip().split(":")]
        high_school = fields[1] if len(fields) >= 2 and fields[1] else "public"
        university = fields[2] if len(fields) >= 3 and fields[2] else "national"
        grad = len(fields) >= 4 and fields[3].lower() == "grad"
        if high_school not in HIGH_SCHOOL_TYPES:
            raise ValueError(f"高校種別が不正です: {high_school}（{'/'.join(HIGH_SCHOOL_TYPES)}）")
        if university not in UNIVERSITY_TYPES:
            raise ValueError(f"大学種別が不正です: {university}（{'/'.join(UNIVERSITY_TYPES)}）")
        children.append(
            Child(
                birth_year=int(fields[0]),
                education_path=EducationPath(
                    high_school=high_school, university=university, graduate_school=grad,
                ),
                name=f"子ども{i}",
                child_id=f"child-{i}",
            )
        )
    return tuple(children)


def resolve(args: argparse.Namespace, config: dict) -> dict:
    """Resolve values with priority: CLI flag > config.toml > hardcoded default."""
    resolved = {}
    for key, default in DEFAULTS.items():
        cli_val = getattr(args, key, None)
        resolved[key] = cli_val if cli_val is not None else config.get(key, default)
    return resolved


def resolve_years(r: dict, current_year: int) -> tuple[int, int]:
    start = r["start_year"] if r["start_year"] is not None else current_year
    end = r["end_year"] if r["end_year"] is not None else start + DEFAULT_HORIZON_YEARS
    return start, end


def build_plan(r: dict, current_year: int) -> LifePlan:
    """Build LifePlan from resolved config dict."""
    start_year, end_year = resolve_years(r, current_year)
    spouse = None
    if r["has_spouse"]:
        spouse = Spouse(
            birth_year=r["spouse_birth_year"],
            retirement_age=r["spouse_retirement_age"],
            work_status=r["spouse_work_status"],
        )
    return LifePlan(
        name=r["name"],
        user=Person(birth_year=r["birth_year"], retirement_age=r["retirement_age"]),
        spouse=spouse,
        children=parse_children(r["children"]),
        income=Income(
            user_income=r["user_income"],
            spouse_income=r["spouse_income"],
            other_income=r["other_income"],
            income_growth_rate=r["income_growth_rate"],
        ),
        expenses=Expenses(
            living_expenses=r["living_expenses"],
            housing_expenses=r["housing_expenses"],
            other_expenses=r["other_expenses"],
            expense_growth_rate=r["expense_growth_rate"],
        ),
        assets=Assets(
            savings=r["savings"],
            investments=r["investments"],
            real_estate=r["real_estate"],
            other=r["other_assets"],
        ),
        pension=Pension(
            national_pension=r["national_pension"],
            employee_pension=r["employee_pension"],
            corporate_pension=r["corporate_pension"],
            private_pension=r["private_pension"],
        ),
        simulation=SimulationParameters(
            start_year=start_year,
            end_year=end_year,
            inflation_rate=r["inflation_rate"],
            investment_return_rate=r["investment_return_rate"],
        ),
    )


def parse_args(
    description: str,
    add_args_fn: Callable[[argparse.ArgumentParser], None] | None = None,
) -> tuple[dict, argparse.Namespace]:
    """Parse CLI args, load config, resolve values.

    Returns (resolved_dict, namespace). The namespace carries any extra flags
    added via add_args_fn.
    """
    parser = create_parser(description)
    if add_args_fn:
        add_args_fn(parser)
    args = parser.parse_args()
    config = load_config(args.config)
    return resolve(args, config), args

"""Text report formatting for simulation results.

Amounts come out of the simulator in yen; everything here is shown in 万円
(and 億円 for large totals).
"""

from lifeplan_sim_jp.params import LifePlan, YearResult
from lifeplan_sim_jp.stats import (
    calculate_detailed_statistics,
    retirement_assets,
)

YEN_PER_MAN = 10_000
YEN_PER_OKU = 100_000_000


def fmt_man(yen: float) -> str:
    """円 → "X,XXX万円" """
    return f"{yen / YEN_PER_MAN:,.0f}万円"


def fmt_oku(yen: float) -> str:
    """円 → "X.XX億円" """
    return f"{yen / YEN_PER_OKU:.2f}億円"


def fmt_pct(v: float) -> str:
    """0.85 → "85.0%" """
    return f"{v * 100:.1f}%"


def format_header(plan: LifePlan) -> str:
    sim = plan.simulation
    lines = [
        "=" * 80,
        f"ライフプランシミュレーション「{plan.name}」（{sim.start_year}-{sim.end_year}年）",
        f"  本人: {plan.user.birth_year}年生まれ / {plan.user.retirement_age}歳退職"
        f" / 年収{fmt_man(plan.income.user_income)}",
    ]
    if plan.spouse is not None:
        lines.append(
            f"  配偶者: {plan.spouse.birth_year}年生まれ / {plan.spouse.retirement_age}歳退職"
            f" / 年収{fmt_man(plan.income.spouse_income)}（{plan.spouse.work_status}）"
        )
    if plan.children:
        parts = [
            f"{c.birth_year}年生（高校{c.education_path.high_school}・大学{c.education_path.university}"
            f"{'・院' if c.education_path.graduate_school else ''}）"
            for c in plan.children
        ]
        lines.append(f"  子ども: {len(plan.children)}人 {', '.join(parts)}")
    else:
        lines.append("  子ども: なし")
    lines.append(
        f"  収入成長{plan.income.income_growth_rate}% / 支出成長{plan.expenses.expense_growth_rate}%"
        f" / インフレ{sim.inflation_rate}% / 運用利回り{sim.investment_return_rate}%"
    )
    lines.append(f"  初期資産: {fmt_man(plan.assets.total)} / 年金: {fmt_man(plan.pension.total)}/年（65歳〜）")
    lines.append("=" * 80)
    return "\n".join(lines)


def format_summary(plan: LifePlan, results: list[YearResult], current_year: int | None = None) -> str:
    detail = calculate_detailed_statistics(results, plan.user.retirement_age, current_year)
    s = detail.stats
    lines = ["【サマリー】"]
    if not results:
        lines.append("  シミュレーション対象年がありません")
        return "\n".join(lines)

    final_age = results[-1].age
    lines.append(f"  最終資産: {fmt_man(s.final_assets)}（{final_age}歳時点, {fmt_oku(s.final_assets)}）")
    lines.append(f"  最大資産: {fmt_man(s.peak_assets)} / 最小資産: {fmt_man(s.min_assets)}")
    at_retirement = retirement_assets(results, plan.user)
    if at_retirement is not None:
        lines.append(f"  退職時資産: {fmt_man(at_retirement)}（{plan.user.retirement_age}歳時点）")
    lines.append(f"  総収入: {fmt_man(s.total_income)}（{s.simulation_years}年間）")
    lines.append(f"  総支出: {fmt_man(s.total_expenses)} / 総教育費: {fmt_man(s.total_education_costs)}")
    lines.append(f"  児童手当総額: {fmt_man(s.total_child_allowance)}")
    lines.append(
        f"  年間平均: 収入{fmt_man(detail.average_annual_income)}"
        f" / 支出{fmt_man(detail.average_annual_expenses)}"
        f" / 貯蓄{fmt_man(detail.average_annual_savings)}"
    )
    lines.append(f"  退職準備度: {fmt_pct(detail.retirement_readiness)}（{detail.health}）")
    if detail.depletion_year is not None:
        note = ""
        if detail.years_until_depletion is not None:
            note = f"、あと{detail.years_until_depletion}年"
        lines.append(f"  ⚠ {detail.depletion_year}年に資産枯渇{note}（マイナス{s.negative_years}年）")
    return "\n".join(lines)


def format_yearly_table(results: list[YearResult], every: int = 5) -> str:
    """Every N-th year plus the final year, in 万円."""
    header = (
        f"{'年':<6} {'年齢':<5} {'収入(万)':>10} {'支出(万)':>10} {'教育費(万)':>10}"
        f" {'児童手当(万)':>12} {'収支(万)':>10} {'資産残高(万)':>12}"
    )
    lines = ["【年次推移】", "-" * 90, header, "-" * 90]
    for i, r in enumerate(results):
        if i % every == 0 or i == len(results) - 1:
            lines.append(
                f"{r.year:<6} {r.age:<5} "
                f"{r.income / YEN_PER_MAN:>10.1f} "
                f"{r.expenses / YEN_PER_MAN:>10.1f} "
                f"{r.education_costs / YEN_PER_MAN:>10.1f} "
                f"{r.child_allowance / YEN_PER_MAN:>12.1f} "
                f"{r.net_cash_flow / YEN_PER_MAN:>10.1f} "
                f"{r.cumulative_assets / YEN_PER_MAN:>12.1f}"
            )
    lines.append("-" * 90)
    return "\n".join(lines)


def format_scenario_table(scenario_results: dict[str, list[YearResult]], retirement_age: int) -> str:
    """One row per scenario: final/peak/min assets and depletion year."""
    lines = [
        f"{'シナリオ':<10} {'最終資産':>14} {'最大資産':>14} {'最小資産':>14} {'枯渇年':>8} {'退職準備度':>10}",
        "-" * 80,
    ]
    for name, results in scenario_results.items():
        detail = calculate_detailed_statistics(results, retirement_age)
        s = detail.stats
        depletion = str(detail.depletion_year) if detail.depletion_year is not None else "---"
        lines.append(
            f"{name:<10} {fmt_man(s.final_assets):>14} {fmt_man(s.peak_assets):>14}"
            f" {fmt_man(s.min_assets):>14} {depletion:>8} {fmt_pct(detail.retirement_readiness):>10}"
        )
    return "\n".join(lines)


def format_comparison(peak_rows: list[dict], retirement_rows: list[dict]) -> str:
    """One row per plan: assets at retirement and peak assets (from compare.py)."""
    lines = [
        f"{'プラン':<20} {'退職時資産':>14} {'退職年':>6} {'最大資産':>14} {'到達年':>6}",
        "-" * 70,
    ]
    for peak, ret in zip(peak_rows, retirement_rows):
        peak_year = peak["peak_year"] if peak["peak_year"] is not None else "---"
        lines.append(
            f"{peak['plan_name']:<20} {fmt_man(ret['assets']):>14} {ret['retirement_year']:>6}"
            f" {fmt_man(peak['peak_assets']):>14} {peak_year:>6}"
        )
    return "\n".join(lines)

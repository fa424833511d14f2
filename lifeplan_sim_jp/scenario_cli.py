"""CLI entry point for macro scenario comparison."""

import argparse
import sys
from pathlib import Path

from lifeplan_sim_jp.charts import plot_comparison
from lifeplan_sim_jp.cli import load_plan
from lifeplan_sim_jp.report import format_header, format_scenario_table
from lifeplan_sim_jp.scenarios import SCENARIOS, run_scenarios


def _add_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--chart", type=Path, default=None,
        help="比較チャートの出力ディレクトリ（省略時は表のみ）",
    )


def main():
    plan, _, args = load_plan("ライフプラン シナリオ比較", _add_args)

    print(format_header(plan))
    for name, overrides in SCENARIOS.items():
        if overrides:
            desc = " / ".join(f"{k}={v}%" for k, v in overrides.items())
        else:
            desc = "プランの前提どおり"
        print(f"  {name}: {desc}")
    print()

    scenario_results = run_scenarios(plan)
    print(format_scenario_table(scenario_results, plan.user.retirement_age))

    if args.chart:
        path = plot_comparison(scenario_results, args.chart, name="scenarios")
        print(f"  → {path}", file=sys.stderr)


if __name__ == "__main__":
    main()

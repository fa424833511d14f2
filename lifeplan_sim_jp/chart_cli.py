"""CLI entry point for chart generation."""

import argparse
import sys
from pathlib import Path

from lifeplan_sim_jp.charts import plot_assets, plot_cashflow
from lifeplan_sim_jp.cli import load_plan
from lifeplan_sim_jp.simulation import simulate


def _add_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--output", type=Path, default=Path("reports/charts"),
        help="出力ディレクトリ (default: reports/charts)",
    )
    parser.add_argument(
        "--chart-name", type=str, default="",
        help="出力ファイル名のサフィックス（例: a → assets-a.png）",
    )


def main():
    plan, _, args = load_plan("ライフプランシミュレーション チャート生成", _add_args)

    print(f"シミュレーション（{plan.simulation.start_year}→{plan.simulation.end_year}年）...", file=sys.stderr)
    results = simulate(plan)
    if not results:
        print("  有効な結果なし", file=sys.stderr)
        raise SystemExit(1)

    path = plot_assets(results, args.output, name=args.chart_name)
    print(f"  → {path}", file=sys.stderr)
    path = plot_cashflow(results, args.output, name=args.chart_name)
    print(f"  → {path}", file=sys.stderr)
    print("完了", file=sys.stderr)


if __name__ == "__main__":
    main()

"""CLI entry point for a single life plan simulation."""

import argparse
import json
import sys
from datetime import date
from pathlib import Path
from typing import Callable

from lifeplan_sim_jp.config import build_plan, parse_args
from lifeplan_sim_jp.params import LifePlan
from lifeplan_sim_jp.report import format_header, format_summary, format_yearly_table
from lifeplan_sim_jp.simulation import simulate
from lifeplan_sim_jp.validation import validate_plan


def load_plan(
    description: str,
    add_args_fn: Callable[[argparse.ArgumentParser], None] | None = None,
) -> tuple[LifePlan, int, argparse.Namespace]:
    """Parse flags/config into a validated plan. Exits with status 1 on bad input.

    Returns (plan, current_year, namespace).
    """
    r, args = parse_args(description, add_args_fn)
    current_year = args.current_year or date.today().year
    try:
        plan = build_plan(r, current_year)
    except ValueError as e:
        print(f"入力エラー: {e}", file=sys.stderr)
        raise SystemExit(1)
    errors = validate_plan(plan, current_year)
    if errors:
        print("入力内容に誤りがあります:", file=sys.stderr)
        for err in errors:
            print(f"  {err.field}: {err.message}", file=sys.stderr)
        raise SystemExit(1)
    return plan, current_year, args


def _add_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--every", type=int, default=5,
        help="年次推移の表示間隔（年, default: 5）",
    )
    parser.add_argument(
        "--json", type=Path, default=None, dest="json_path",
        help="結果をJSONで出力するファイルパス",
    )


def main():
    """Execute simulation and print summary + yearly table."""
    plan, current_year, args = load_plan("ライフプランシミュレーション", _add_args)
    results = simulate(plan)

    print(format_header(plan))
    print()
    print(format_summary(plan, results, current_year))
    print()
    print(format_yearly_table(results, every=max(1, args.every)))

    if args.json_path:
        payload = {
            "plan": plan.to_dict(),
            "results": [r.to_dict() for r in results],
        }
        args.json_path.parent.mkdir(parents=True, exist_ok=True)
        args.json_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        print(f"  → {args.json_path}", file=sys.stderr)


if __name__ == "__main__":
    main()

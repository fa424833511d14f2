"""CLI entry point for the saved plan store."""

import argparse
import sys
from datetime import date
from pathlib import Path

from lifeplan_sim_jp.compare import compare_peak_assets, compare_retirement_assets
from lifeplan_sim_jp.config import build_plan, load_config, resolve
from lifeplan_sim_jp.report import format_comparison, format_header, format_summary
from lifeplan_sim_jp.simulation import simulate
from lifeplan_sim_jp.storage import DEFAULT_STORE_PATH, PlanStore
from lifeplan_sim_jp.validation import validate_plan


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ライフプラン保存データの管理")
    parser.add_argument(
        "--store", type=Path, default=DEFAULT_STORE_PATH,
        help=f"保存ファイル (default: {DEFAULT_STORE_PATH})",
    )
    parser.add_argument(
        "--current-year", type=int, default=None,
        help="基準年 (default: 今年)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="保存済みプラン一覧")

    p = sub.add_parser("show", help="プランをシミュレーションして表示")
    p.add_argument("plan_id")

    p = sub.add_parser("save", help="設定ファイルからプランを保存")
    p.add_argument("--config", type=Path, required=True, help="TOML設定ファイル")

    p = sub.add_parser("delete", help="プランを削除")
    p.add_argument("plan_id")

    p = sub.add_parser("duplicate", help="プランを複製")
    p.add_argument("plan_id")
    p.add_argument("new_name")

    p = sub.add_parser("export", help="保存データをJSONで出力")
    p.add_argument("--output", type=Path, default=None, help="出力ファイル（省略時は標準出力）")

    p = sub.add_parser("import", help="JSONから保存データを復元（上書き）")
    p.add_argument("path", type=Path)

    p = sub.add_parser("compare", help="複数プランの資産比較")
    p.add_argument("plan_ids", nargs="*", help="比較するプランID（省略時は全件）")
    return parser


def _cmd_list(store: PlanStore, _args):
    plans = store.list_plans()
    if not plans:
        print("保存済みプランはありません")
        return
    for plan in plans:
        sim = plan.simulation
        print(f"{plan.plan_id}  {plan.name}  ({sim.start_year}-{sim.end_year})  更新: {plan.updated_at}")


def _cmd_show(store: PlanStore, args):
    plan = store.get_plan(args.plan_id)
    if plan is None:
        print(f"プランが見つかりません: {args.plan_id}", file=sys.stderr)
        raise SystemExit(1)
    print(format_header(plan))
    print()
    print(format_summary(plan, simulate(plan), args.current_year))


def _cmd_save(store: PlanStore, args):
    if not args.config.exists():
        print(f"設定ファイルが見つかりません: {args.config}", file=sys.stderr)
        raise SystemExit(1)
    r = resolve(argparse.Namespace(), load_config(args.config))
    plan = build_plan(r, args.current_year)
    errors = validate_plan(plan, args.current_year)
    if errors:
        for err in errors:
            print(f"  {err.field}: {err.message}", file=sys.stderr)
        raise SystemExit(1)
    saved = store.save_plan(plan)
    print(f"保存しました: {saved.plan_id}（{saved.name}）")


def _cmd_delete(store: PlanStore, args):
    if not store.delete_plan(args.plan_id):
        print(f"プランが見つかりません: {args.plan_id}", file=sys.stderr)
        raise SystemExit(1)
    print(f"削除しました: {args.plan_id}")


def _cmd_duplicate(store: PlanStore, args):
    copy = store.duplicate_plan(args.plan_id, args.new_name)
    print(f"複製しました: {copy.plan_id}（{copy.name}）")


def _cmd_export(store: PlanStore, args):
    data = store.export_data()
    if args.output:
        args.output.write_text(data, encoding="utf-8")
        print(f"  → {args.output}", file=sys.stderr)
    else:
        print(data)


def _cmd_import(store: PlanStore, args):
    store.import_data(args.path.read_text(encoding="utf-8"))
    print(f"インポートしました: {args.path}")


def _cmd_compare(store: PlanStore, args):
    plans = store.list_plans()
    if args.plan_ids:
        wanted = set(args.plan_ids)
        plans = [p for p in plans if p.plan_id in wanted]
    if not plans:
        print("比較対象のプランがありません", file=sys.stderr)
        raise SystemExit(1)
    print(format_comparison(compare_peak_assets(plans), compare_retirement_assets(plans)))


COMMANDS = {
    "list": _cmd_list,
    "show": _cmd_show,
    "save": _cmd_save,
    "delete": _cmd_delete,
    "duplicate": _cmd_duplicate,
    "export": _cmd_export,
    "import": _cmd_import,
    "compare": _cmd_compare,
}


def main():
    parser = _build_parser()
    args = parser.parse_args()
    if args.current_year is None:
        args.current_year = date.today().year
    store = PlanStore(args.store)
    try:
        COMMANDS[args.command](store, args)
    except (ValueError, OSError) as e:
        print(f"エラー: {e}", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    main()

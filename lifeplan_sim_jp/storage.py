"""JSON file store for saved life plans."""

import dataclasses
import json
import random
import string
import time
from datetime import datetime, timezone
from pathlib import Path

from lifeplan_sim_jp.params import LifePlan

DEFAULT_STORE_PATH = Path("lifeplans.json")
STORAGE_VERSION = "1.0.0"


def generate_id() -> str:
    """Unique plan id: lps_<epoch ms>_<9 random chars>."""
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=9))
    return f"lps_{int(time.time() * 1000)}_{suffix}"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds")


def _is_valid_document(data) -> bool:
    return (
        isinstance(data, dict)
        and isinstance(data.get("lifePlans"), list)
        and isinstance(data.get("version"), str)
    )


class PlanStore:
    """Plans kept in one JSON document: {"lifePlans": [...], "lastUpdated", "version"}."""

    def __init__(self, path: Path = DEFAULT_STORE_PATH):
        self.path = Path(path)

    def _read(self) -> list[dict]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"保存データの読み込みに失敗: {self.path}: {e}") from e
        if not _is_valid_document(data):
            raise ValueError(f"保存データの形式が不正です: {self.path}")
        return data["lifePlans"]

    def _write(self, raw_plans: list[dict]):
        doc = {
            "lifePlans": raw_plans,
            "lastUpdated": _now_iso(),
            "version": STORAGE_VERSION,
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")

    def _to_plan(self, d) -> LifePlan:
        try:
            return LifePlan.from_dict(d)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ValueError(f"保存データの形式が不正です: {self.path}: {e!r}") from e

    def list_plans(self) -> list[LifePlan]:
        return [self._to_plan(d) for d in self._read()]

    def get_plan(self, plan_id: str) -> LifePlan | None:
        for d in self._read():
            if isinstance(d, dict) and d.get("id") == plan_id:
                return self._to_plan(d)
        return None

    def save_plan(self, plan: LifePlan) -> LifePlan:
        """Insert or replace by id. Returns the stored plan (with id/timestamps)."""
        now = _now_iso()
        plan = dataclasses.replace(
            plan,
            plan_id=plan.plan_id or generate_id(),
            created_at=plan.created_at or now,
            updated_at=now,
        )
        raw = [d for d in self._read() if not (isinstance(d, dict) and d.get("id") == plan.plan_id)]
        raw.append(plan.to_dict())
        self._write(raw)
        return plan

    def delete_plan(self, plan_id: str) -> bool:
        """Remove a plan. Returns False if no plan had that id."""
        raw = self._read()
        remaining = [d for d in raw if not (isinstance(d, dict) and d.get("id") == plan_id)]
        if len(remaining) == len(raw):
            return False
        self._write(remaining)
        return True

    def duplicate_plan(self, plan_id: str, new_name: str) -> LifePlan:
        original = self.get_plan(plan_id)
        if original is None:
            raise ValueError(f"複製対象のライフプランが見つかりません: {plan_id}")
        copy = dataclasses.replace(
            original, plan_id=generate_id(), name=new_name, created_at="", updated_at="",
        )
        return self.save_plan(copy)

    def clear(self):
        if self.path.exists():
            self.path.unlink()

    def export_data(self) -> str:
        if not self.path.exists():
            return ""
        return self.path.read_text(encoding="utf-8")

    def import_data(self, json_data: str):
        """Replace the store with an exported document after a structure check."""
        try:
            data = json.loads(json_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"データのインポートに失敗しました: {e}") from e
        if not _is_valid_document(data):
            raise ValueError("データのインポートに失敗しました: 無効なデータ形式です")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json_data, encoding="utf-8")

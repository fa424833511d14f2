"""Tests for config loading, flag resolution and plan building."""

import argparse

import pytest
from lifeplan_sim_jp.config import (
    DEFAULTS,
    build_plan,
    create_parser,
    load_config,
    parse_children,
    resolve,
)


class TestParseChildren:
    def test_none(self):
        assert parse_children("none") == ()
        assert parse_children("") == ()

    def test_birth_year_only(self):
        (child,) = parse_children("2020")
        assert child.birth_year == 2020
        assert child.education_path.high_school == "public"
        assert child.education_path.university == "national"
        assert child.education_path.graduate_school is False
        assert child.name == "子ども1"

    def test_full_entry(self):
        first, second = parse_children("2020:public:none, 2022:private:private:grad")
        assert first.education_path.university == "none"
        assert second.birth_year == 2022
        assert second.education_path.high_school == "private"
        assert second.education_path.graduate_school is True
        assert second.child_id == "child-2"

    def test_invalid_high_school(self):
        with pytest.raises(ValueError, match="高校種別が不正です"):
            parse_children("2020:international")

    def test_invalid_university(self):
        with pytest.raises(ValueError, match="大学種別が不正です"):
            parse_children("2020:public:overseas")


class TestLoadConfig:
    def test_missing_file(self, tmp_path):
        assert load_config(tmp_path / "missing.toml") == {}

    def test_children_and_spouse_tables(self, tmp_path):
        path = tmp_path / "plan.toml"
        path.write_text(
            'name = "テスト"\n'
            'children = [2020, {birth_year = 2022, university = "private", graduate_school = true}]\n'
            "\n[spouse]\n"
            "birth_year = 1991\n"
            'work_status = "partTime"\n',
            encoding="utf-8",
        )
        config = load_config(path)
        assert config["name"] == "テスト"
        assert config["children"] == "2020,2022:public:private:grad"
        assert config["has_spouse"] is True
        assert config["spouse_birth_year"] == 1991
        assert config["spouse_work_status"] == "partTime"
        assert "spouse" not in config

    def test_no_spouse_no_children(self, tmp_path):
        path = tmp_path / "plan.toml"
        path.write_text("spouse = false\nchildren = []\n", encoding="utf-8")
        config = load_config(path)
        assert config["has_spouse"] is False
        assert config["children"] == "none"

    def test_invalid_toml_exits(self, tmp_path):
        path = tmp_path / "plan.toml"
        path.write_text("name = \n", encoding="utf-8")
        with pytest.raises(SystemExit):
            load_config(path)


class TestResolve:
    def test_priority(self):
        args = argparse.Namespace(name="CLI", birth_year=None)
        config = {"name": "設定", "birth_year": 1980}
        r = resolve(args, config)
        assert r["name"] == "CLI"
        assert r["birth_year"] == 1980
        assert r["retirement_age"] == DEFAULTS["retirement_age"]

    def test_parser_flags(self):
        args = create_parser("test").parse_args(["--no-spouse", "--user-income", "7000000"])
        r = resolve(args, {})
        assert r["has_spouse"] is False
        assert r["user_income"] == 7_000_000
        assert r["spouse_income"] == DEFAULTS["spouse_income"]


class TestBuildPlan:
    def test_defaults(self):
        plan = build_plan(resolve(argparse.Namespace(), {}), current_year=2025)
        assert plan.simulation.start_year == 2025
        assert plan.simulation.end_year == 2075
        assert plan.spouse is not None
        assert len(plan.children) == 2
        assert plan.income.user_income == 6_000_000
        assert plan.assets.total == 7_000_000

    def test_explicit_years(self):
        r = resolve(argparse.Namespace(start_year=2030, end_year=2040), {})
        plan = build_plan(r, current_year=2025)
        assert (plan.simulation.start_year, plan.simulation.end_year) == (2030, 2040)

    def test_no_spouse(self):
        r = resolve(argparse.Namespace(has_spouse=False), {})
        assert build_plan(r, current_year=2025).spouse is None

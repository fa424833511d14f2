import dataclasses

import pytest

from lifeplan_sim_jp import (
    Assets,
    Expenses,
    Income,
    LifePlan,
    Person,
    SimulationParameters,
)


def _base_plan() -> LifePlan:
    # 単年・成長率ゼロ・子なし・配偶者なし
    return LifePlan(
        name="テスト",
        user=Person(birth_year=1985, retirement_age=65),
        income=Income(user_income=5_000_000),
        expenses=Expenses(living_expenses=3_000_000),
        assets=Assets(savings=2_000_000),
        simulation=SimulationParameters(start_year=2025, end_year=2025),
    )


@pytest.fixture
def make_plan():
    """Factory: make_plan(section=...) replaces whole sections of the base plan."""
    def _make(**overrides) -> LifePlan:
        return dataclasses.replace(_base_plan(), **overrides)
    return _make

"""Tests for the education cost table and child allowance lookup."""

from lifeplan_sim_jp import (
    Child,
    EducationPath,
    annual_child_allowance,
    child_education_cost_for_year,
    education_cost,
    monthly_child_allowance,
)


class TestEducationCost:
    def test_annual_values(self):
        assert education_cost("elementary", "public") == 352566
        assert education_cost("juniorHigh", "private") == 1436353
        assert education_cost("highSchool", "public") == 512971
        assert education_cost("university", "private") == 1542000
        assert education_cost("graduateSchool", "national") == 817800

    def test_total_value(self):
        assert education_cost("university", "private", annual=False) == 6168000

    def test_unknown_pair_is_zero(self):
        assert education_cost("elementary", "national") == 0
        assert education_cost("kindergarten", "public") == 0


class TestMonthlyChildAllowance:
    INCOME = 5_000_000

    def test_under_three(self):
        assert monthly_child_allowance(0, 1, self.INCOME) == 15_000
        assert monthly_child_allowance(2, 1, self.INCOME) == 15_000

    def test_three_to_eleven_by_order(self):
        assert monthly_child_allowance(3, 1, self.INCOME) == 10_000
        assert monthly_child_allowance(3, 2, self.INCOME) == 10_000
        assert monthly_child_allowance(11, 3, self.INCOME) == 15_000

    def test_junior_high(self):
        assert monthly_child_allowance(12, 3, self.INCOME) == 10_000
        assert monthly_child_allowance(14, 1, self.INCOME) == 10_000

    def test_over_fourteen(self):
        assert monthly_child_allowance(15, 1, self.INCOME) == 0

    def test_negative_age_in_first_band(self):
        assert monthly_child_allowance(-1, 1, self.INCOME) == 15_000

    def test_income_limit_boundaries(self):
        assert monthly_child_allowance(5, 1, 8_330_000) == 10_000
        assert monthly_child_allowance(5, 1, 8_330_001) == 5_000
        assert monthly_child_allowance(5, 1, 12_000_000) == 5_000
        assert monthly_child_allowance(5, 1, 12_000_001) == 0

    def test_special_allowance_ignores_age(self):
        assert monthly_child_allowance(20, 1, 10_000_000) == 5_000

    def test_non_increasing_in_income(self):
        amounts = [monthly_child_allowance(1, 1, inc) for inc in (0, 8_330_000, 9_000_000, 13_000_000)]
        assert amounts == sorted(amounts, reverse=True)


class TestAnnualChildAllowance:
    def test_sum_times_twelve(self):
        assert annual_child_allowance([(1, 1), (5, 2)], 5_000_000) == (15_000 + 10_000) * 12

    def test_empty(self):
        assert annual_child_allowance([], 5_000_000) == 0


class TestChildEducationCostForYear:
    def setup_method(self):
        self.child = Child(
            birth_year=2000,
            education_path=EducationPath(high_school="private", university="private", graduate_school=True),
        )

    def test_preschool(self):
        assert child_education_cost_for_year(self.child, 2005) == 0

    def test_elementary_always_public(self):
        assert child_education_cost_for_year(self.child, 2006) == 352566
        assert child_education_cost_for_year(self.child, 2011) == 352566

    def test_junior_high_always_public(self):
        assert child_education_cost_for_year(self.child, 2012) == 538799

    def test_high_school_follows_path(self):
        assert child_education_cost_for_year(self.child, 2017) == 1054444

    def test_university_follows_path(self):
        assert child_education_cost_for_year(self.child, 2018) == 1542000
        assert child_education_cost_for_year(self.child, 2021) == 1542000

    def test_graduate_school_national_rate(self):
        assert child_education_cost_for_year(self.child, 2022) == 817800
        assert child_education_cost_for_year(self.child, 2023) == 817800

    def test_after_graduate_school(self):
        assert child_education_cost_for_year(self.child, 2024) == 0

    def test_no_university(self):
        child = Child(birth_year=2000, education_path=EducationPath(university="none"))
        assert child_education_cost_for_year(child, 2019) == 0

    def test_no_graduate_school(self):
        child = Child(birth_year=2000)
        assert child_education_cost_for_year(child, 2022) == 0

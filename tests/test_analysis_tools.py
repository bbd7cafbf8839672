"""Tests for yearly aggregation and emission attribution."""

import pytest

from carbon_dashboard.support.data_generators.consumption_patterns import generate_historical_data
from carbon_dashboard.support.data_generators.schema import (
    InvalidInputError,
    MonthlyRecord,
    YearlyTotals,
)
from carbon_dashboard.tools.analysis_tools import (
    calculate_carbon_sources,
    calculate_daily_peak,
    calculate_emission_share,
    calculate_usage_group_averages,
    calculate_yearly_totals,
)


def _record_with_carbon(electricity, water, gas):
    return MonthlyRecord(
        month="Jan",
        electricity=0,
        water=0,
        gas=0,
        carbon_electricity=electricity,
        carbon_water=water,
        carbon_gas=gas,
        total_carbon=electricity + water + gas,
    )


class TestYearlyTotals:

    def test_empty_series_is_all_zero(self):
        assert calculate_yearly_totals([]) == YearlyTotals(0, 0, 0, 0)

    def test_sums(self, two_month_history):
        totals = calculate_yearly_totals(two_month_history)
        assert totals == YearlyTotals(
            electricity=400000, water=80000, gas=100000, total_carbon=544
        )

    def test_total_carbon_matches_records(self, noiseless_history):
        totals = calculate_yearly_totals(noiseless_history)
        assert totals.total_carbon == sum(r.total_carbon for r in noiseless_history)

    @pytest.mark.parametrize("value", [None, 12, "Jan"])
    def test_non_sequence_rejected(self, value):
        with pytest.raises(InvalidInputError):
            calculate_yearly_totals(value)


class TestCarbonSources:

    def test_fixed_order_and_exact_split(self):
        shares = calculate_carbon_sources([_record_with_carbon(50, 25, 25)])
        assert [s.name for s in shares] == ["Electricity", "Water", "Natural Gas"]
        assert [s.value for s in shares] == [50, 25, 25]
        assert [s.percentage for s in shares] == [50.0, 25.0, 25.0]

    def test_rounded_to_one_decimal(self):
        shares = calculate_carbon_sources([_record_with_carbon(1, 1, 1)])
        assert [s.percentage for s in shares] == [33.3, 33.3, 33.3]

    def test_sums_across_records(self):
        shares = calculate_carbon_sources([
            _record_with_carbon(10, 0, 0),
            _record_with_carbon(0, 10, 20),
        ])
        assert [s.value for s in shares] == [10, 10, 20]
        assert [s.percentage for s in shares] == [25.0, 25.0, 50.0]

    @pytest.mark.parametrize("seed", range(10))
    def test_percentages_sum_to_hundred(self, seed):
        shares = calculate_carbon_sources(generate_historical_data(seed=seed))
        assert abs(sum(s.percentage for s in shares) - 100) <= 0.2

    def test_all_zero_emissions(self):
        shares = calculate_carbon_sources([_record_with_carbon(0, 0, 0)])
        assert [(s.value, s.percentage) for s in shares] == [(0, 0), (0, 0), (0, 0)]

    def test_empty_series(self):
        shares = calculate_carbon_sources([])
        assert [s.percentage for s in shares] == [0, 0, 0]

    def test_non_sequence_rejected(self):
        with pytest.raises(InvalidInputError):
            calculate_carbon_sources(None)


class TestUsageGroups:

    def test_low_end_group_averages(self, low_end_buildings):
        assert calculate_usage_group_averages(low_end_buildings) == {
            "Teaching Buildings": 95,
            "Laboratories": 128,
            "Dormitories": 89,
            "Administration": 76,
            "Dining Facilities": 139,
        }

    def test_missing_groups_omitted(self, low_end_buildings):
        labs_only = [b for b in low_end_buildings if b.name.startswith("Laboratory")]
        assert calculate_usage_group_averages(labs_only) == {"Laboratories": 128}

    @pytest.mark.parametrize("buildings", [None, "Cafeteria"])
    def test_rejects_non_sequence(self, buildings):
        with pytest.raises(InvalidInputError):
            calculate_usage_group_averages(buildings)

    def test_custom_groups(self, low_end_buildings):
        averages = calculate_usage_group_averages(
            low_end_buildings, groups={"Sports": ("Gymnasium",)}
        )
        assert averages == {"Sports": 76}


class TestPeakAndShare:

    def test_daily_peak(self, two_month_history):
        assert calculate_daily_peak(two_month_history, "electricity") == 6667
        assert calculate_daily_peak([], "electricity") == 0

    def test_emission_share(self, two_month_history):
        yearly = calculate_yearly_totals(two_month_history)
        assert calculate_emission_share(yearly, "electricity") == 58
        assert calculate_emission_share(yearly, "water") == 4
        assert calculate_emission_share(yearly, "gas") == 39

    def test_emission_share_without_emissions(self):
        assert calculate_emission_share(YearlyTotals(), "gas") == 0

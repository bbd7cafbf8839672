"""Tests for dashboard KPIs, recommendations and the Markdown report."""

import pytest

from carbon_dashboard.core import build_dashboard
from carbon_dashboard.output_formatting import (
    estimate_reduction_potential,
    format_dashboard_report,
    recommend_building_retrofits,
    summarize_dashboard,
)
from carbon_dashboard.support.data_generators.schema import InvalidInputError
from carbon_dashboard.tools.analysis_tools import calculate_yearly_totals


class TestSummary:

    def test_resource_figures(self, two_month_history):
        summary = summarize_dashboard(two_month_history, population=100)
        electricity = summary.resources["electricity"]
        assert electricity.annual_consumption == 400000
        assert electricity.annual_consumption_10k == 40
        assert electricity.annual_carbon == 314
        assert electricity.emission_share_percent == 58
        assert electricity.daily_peak == 6667
        assert electricity.unit == "kWh"
        assert summary.resources["gas"].annual_carbon == 210
        assert summary.resources["water"].annual_carbon == 20

    def test_campus_figures(self, two_month_history):
        summary = summarize_dashboard(two_month_history, population=100)
        assert summary.total_carbon == 544
        assert summary.tree_offset_equivalent == 8976
        assert summary.per_capita_carbon == 5.44
        assert summary.campus_population == 100

    def test_per_capita_rounds_half_up(self, two_month_history):
        # 544 / 4352 is exactly 0.125
        summary = summarize_dashboard(two_month_history, population=4352)
        assert summary.per_capita_carbon == 0.13

    def test_uses_precomputed_yearly_totals(self, two_month_history):
        yearly = calculate_yearly_totals(two_month_history[:1])
        summary = summarize_dashboard(two_month_history, population=100, yearly=yearly)
        assert summary.total_carbon == yearly.total_carbon == 272

    def test_default_population(self, two_month_history):
        assert summarize_dashboard(two_month_history).campus_population == 8500

    def test_empty_history(self):
        summary = summarize_dashboard([])
        assert summary.total_carbon == 0
        assert summary.per_capita_carbon == 0
        assert all(r.emission_share_percent == 0 for r in summary.resources.values())

    @pytest.mark.parametrize("population", [0, -5])
    def test_population_must_be_positive(self, two_month_history, population):
        with pytest.raises(InvalidInputError):
            summarize_dashboard(two_month_history, population=population)


class TestRecommendations:

    def test_top_three_retrofits(self, low_end_buildings):
        retrofits = recommend_building_retrofits(low_end_buildings)
        assert [r.building_name for r in retrofits] == ["Cafeteria", "Laboratory A", "Laboratory B"]
        assert [r.estimated_reduction_tons for r in retrofits] == [25, 19, 28]
        assert [r.payback_years for r in retrofits] == [3.5, 4.2, 2.8]
        assert [r.rank for r in retrofits] == [1, 2, 3]

    def test_fewer_buildings_than_plans(self, low_end_buildings):
        assert len(recommend_building_retrofits(low_end_buildings[:2])) == 2
        assert recommend_building_retrofits([]) == []

    def test_reduction_potential(self, two_month_history):
        measures = estimate_reduction_potential(calculate_yearly_totals(two_month_history))
        assert [m.reduction_percent for m in measures] == [15, 8, 20, 12, 25]
        assert [m.resource for m in measures] == ["electricity", "electricity", "water", "gas", "electricity"]
        assert [m.estimated_reduction_tons for m in measures] == [47, 25, 4, 25, 79]


class TestReport:

    def test_report_sections(self, low_rng):
        data = build_dashboard(rng=low_rng, population=1000)
        report = format_dashboard_report(data)
        assert report.startswith("# Campus Carbon Emission Report")
        for heading in (
            "## Annual Overview",
            "## Emission Sources",
            "## Projection",
            "## Building Ranking",
            "## Building Retrofit Recommendations",
            "## Reduction Potential",
        ):
            assert heading in report
        assert "| 1 | Cafeteria |" in report
        assert "Dining Facilities: 139 t" in report
        assert "(1,000 people)" in report

    def test_to_dict_is_plain_data(self, low_rng):
        import json

        data = build_dashboard(rng=low_rng)
        payload = data.to_dict()
        json.dumps(payload)
        assert len(payload["history"]) == 12
        assert payload["buildings"][0]["name"] == "Cafeteria"
        assert payload["summary"]["resources"]["gas"]["unit"] == "m³"

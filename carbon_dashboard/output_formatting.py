# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Dashboard summaries, recommendations and report formatting.

This module turns the generated series into the figures the dashboard
shows: headline KPIs per resource, retrofit recommendations for the top
emitting buildings, campus-wide reduction measures, and a Markdown report.
"""

import logging
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from .config import DEFAULT_CAMPUS_POPULATION
from .support.data_generators.schema import (
    RESOURCES,
    TREES_PER_TON_CO2,
    BuildingRecord,
    CarbonSourceShare,
    InvalidInputError,
    MonthlyRecord,
    YearlyTotals,
    carbon_tons,
    round_half_up,
)
from .tools.analysis_tools import (
    calculate_daily_peak,
    calculate_emission_share,
    calculate_yearly_totals,
)

# Configure logging
logger = logging.getLogger(__name__)

RESOURCE_UNITS = {
    "electricity": "kWh",
    "water": "tons",
    "gas": "m³",
}

RESOURCE_LABELS = {
    "electricity": "Electricity",
    "water": "Water",
    "gas": "Natural Gas",
}

# (measures, reduction rate, payback years) for the top three emitters
RETROFIT_PLANS = [
    ("Upgrade energy management system, replace with efficient lighting", 0.18, 3.5),
    ("Install smart electricity systems, optimize water recycling", 0.15, 4.2),
    ("Improve building insulation, install solar water heating system", 0.22, 2.8),
]

# (description, resource whose emissions are reduced, reduction rate)
CAMPUS_REDUCTION_MEASURES = [
    ("Optimize air conditioning usage time and temperature settings", "electricity", 0.15),
    ("Replace with energy-efficient lighting equipment", "electricity", 0.08),
    ("Install water recycling systems", "water", 0.20),
    ("Improve building insulation to cut winter heating", "gas", 0.12),
    ("Install campus solar panels", "electricity", 0.25),
]


@dataclass
class ResourceSummary:
    """Headline figures for one resource.

    Attributes:
        resource: "electricity", "water" or "gas"
        annual_consumption: Yearly raw total in the resource's unit
        annual_consumption_10k: Yearly total in units of ten thousand
        annual_carbon: Tons CO2 derived from the yearly total
        emission_share_percent: Whole-percent share of total emissions
        daily_peak: Peak month's consumption per day
        unit: Display unit
    """
    resource: str
    annual_consumption: int
    annual_consumption_10k: int
    annual_carbon: int
    emission_share_percent: int
    daily_peak: int
    unit: str


@dataclass
class DashboardSummary:
    """Campus-level KPIs.

    Attributes:
        resources: Per-resource headline figures
        total_carbon: Tons CO2 across the historical series
        tree_offset_equivalent: Trees needed to offset the total
        per_capita_carbon: Tons CO2 per campus member
        campus_population: Headcount used for the per-capita figure
    """
    resources: Dict[str, ResourceSummary]
    total_carbon: int
    tree_offset_equivalent: int
    per_capita_carbon: float
    campus_population: int


@dataclass
class RetrofitRecommendation:
    """Suggested efficiency retrofit for one building."""
    rank: int
    building_name: str
    measures: str
    estimated_reduction_tons: int
    payback_years: float


@dataclass
class ReductionMeasure:
    """Campus-wide measure and the emissions it could avoid."""
    description: str
    resource: str
    reduction_percent: int
    estimated_reduction_tons: int


@dataclass
class DashboardData:
    """Everything the dashboard shows, computed once per session.

    Attributes:
        history: Twelve historical months
        predictions: Projected months following the history
        yearly: Totals over the history
        carbon_sources: Emissions by source over the history
        buildings: Buildings ranked by emissions
        summary: Headline KPIs
        usage_group_averages: Mean emissions per building usage group
        retrofits: Recommendations for the top emitters
        reduction_measures: Campus-wide reduction potential
        generated_at: ISO timestamp of generation
        generation_duration_ms: How long generation took
    """
    history: List[MonthlyRecord]
    predictions: List[MonthlyRecord]
    yearly: YearlyTotals
    carbon_sources: List[CarbonSourceShare]
    buildings: List[BuildingRecord]
    summary: DashboardSummary
    usage_group_averages: Dict[str, int] = field(default_factory=dict)
    retrofits: List[RetrofitRecommendation] = field(default_factory=list)
    reduction_measures: List[ReductionMeasure] = field(default_factory=list)
    generated_at: str = field(default_factory=lambda: datetime.now().isoformat())
    generation_duration_ms: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "history": [r.to_dict() for r in self.history],
            "predictions": [r.to_dict() for r in self.predictions],
            "yearly": self.yearly.to_dict(),
            "carbon_sources": [s.to_dict() for s in self.carbon_sources],
            "buildings": [b.to_dict() for b in self.buildings],
            "summary": asdict(self.summary),
            "usage_group_averages": dict(self.usage_group_averages),
            "retrofits": [asdict(r) for r in self.retrofits],
            "reduction_measures": [asdict(m) for m in self.reduction_measures],
            "generated_at": self.generated_at,
            "generation_duration_ms": self.generation_duration_ms,
        }


def summarize_dashboard(
    history: Sequence[MonthlyRecord],
    population: int = DEFAULT_CAMPUS_POPULATION,
    yearly: Optional[YearlyTotals] = None
) -> DashboardSummary:
    """Compute the headline KPIs for a historical series.

    Args:
        history: Monthly records
        population: Campus headcount for the per-capita figure
        yearly: Totals already aggregated from ``history``, if available

    Returns:
        DashboardSummary

    Raises:
        InvalidInputError: If population is not positive
    """
    if population <= 0:
        raise InvalidInputError(f"Campus population must be positive, got {population}")

    if yearly is None:
        yearly = calculate_yearly_totals(history)

    resources = {}
    for resource in RESOURCES:
        amount = getattr(yearly, resource)
        resources[resource] = ResourceSummary(
            resource=resource,
            annual_consumption=amount,
            annual_consumption_10k=round_half_up(amount / 10000),
            annual_carbon=carbon_tons(resource, amount),
            emission_share_percent=calculate_emission_share(yearly, resource),
            daily_peak=calculate_daily_peak(history, resource),
            unit=RESOURCE_UNITS[resource],
        )

    return DashboardSummary(
        resources=resources,
        total_carbon=yearly.total_carbon,
        tree_offset_equivalent=round_half_up(yearly.total_carbon * TREES_PER_TON_CO2),
        per_capita_carbon=round_half_up(yearly.total_carbon * 100 / population) / 100,
        campus_population=population,
    )


def recommend_building_retrofits(
    buildings: Sequence[BuildingRecord]
) -> List[RetrofitRecommendation]:
    """Pair the highest-emitting buildings with retrofit plans.

    Args:
        buildings: Buildings ranked descending by total_carbon

    Returns:
        One recommendation per plan, fewer if there are fewer buildings
    """
    recommendations = []
    for rank, (building, plan) in enumerate(zip(buildings, RETROFIT_PLANS), start=1):
        measures, rate, payback_years = plan
        recommendations.append(RetrofitRecommendation(
            rank=rank,
            building_name=building.name,
            measures=measures,
            estimated_reduction_tons=round_half_up(building.total_carbon * rate),
            payback_years=payback_years,
        ))
    return recommendations


def estimate_reduction_potential(yearly: YearlyTotals) -> List[ReductionMeasure]:
    """Estimate the emissions each campus-wide measure could avoid.

    Args:
        yearly: Yearly totals for the campus

    Returns:
        ReductionMeasure entries in a fixed order
    """
    measures = []
    for description, resource, rate in CAMPUS_REDUCTION_MEASURES:
        source_carbon = carbon_tons(resource, getattr(yearly, resource))
        measures.append(ReductionMeasure(
            description=description,
            resource=resource,
            reduction_percent=round_half_up(rate * 100),
            estimated_reduction_tons=round_half_up(source_carbon * rate),
        ))
    return measures


def format_dashboard_report(data: DashboardData) -> str:
    """Format dashboard data as a Markdown report.

    Args:
        data: Generated dashboard data

    Returns:
        Markdown-formatted report text
    """
    lines = []
    summary = data.summary

    # Header
    lines.append("# Campus Carbon Emission Report")
    lines.append(f"\n**Generated:** {data.generated_at}\n")

    # KPIs
    lines.append("## Annual Overview\n")
    for resource, figures in summary.resources.items():
        lines.append(
            f"- **{RESOURCE_LABELS[resource]}:** {figures.annual_consumption_10k:,} 10K {figures.unit}, "
            f"{figures.annual_carbon:,} t CO₂ ({figures.emission_share_percent}% of total), "
            f"daily peak {figures.daily_peak:,} {figures.unit}"
        )
    lines.append(f"- **Total Carbon Emissions:** {summary.total_carbon:,} t CO₂ equivalent")
    lines.append(f"- **Tree Offset Equivalent:** {summary.tree_offset_equivalent:,} trees")
    lines.append(
        f"- **Per Capita:** {summary.per_capita_carbon:.2f} t CO₂/person "
        f"({summary.campus_population:,} people)"
    )
    lines.append("")

    # Sources
    lines.append("## Emission Sources\n")
    for share in data.carbon_sources:
        lines.append(f"- {share.name}: {share.value:,} t ({share.percentage}%)")
    lines.append("")

    # Projection
    if data.predictions:
        projected_total = sum(r.total_carbon for r in data.predictions)
        lines.append("## Projection\n")
        lines.append(
            f"{len(data.predictions)} months ({data.predictions[0].month} to "
            f"{data.predictions[-1].month}): {projected_total:,} t CO₂ projected\n"
        )

    # Buildings
    lines.append("## Building Ranking\n")
    lines.append("| Rank | Building | Electricity (kWh) | Water (t) | Gas (m³) | Carbon (t) |")
    lines.append("|---:|---|---:|---:|---:|---:|")
    for rank, building in enumerate(data.buildings, start=1):
        lines.append(
            f"| {rank} | {building.name} | {building.electricity:,} | {building.water:,} "
            f"| {building.gas:,} | {building.total_carbon:,} |"
        )
    lines.append("")

    if data.usage_group_averages:
        lines.append("**Average Emissions by Usage:**")
        for group, average in data.usage_group_averages.items():
            lines.append(f"- {group}: {average:,} t")
        lines.append("")

    # Recommendations
    if data.retrofits:
        lines.append("## Building Retrofit Recommendations\n")
        lines.append("| Building | Recommended Measures | Estimated Reduction | Payback |")
        lines.append("|---|---|---:|---:|")
        for rec in data.retrofits:
            lines.append(
                f"| {rec.building_name} | {rec.measures} "
                f"| {rec.estimated_reduction_tons:,} t/year | {rec.payback_years} years |"
            )
        lines.append("")

    if data.reduction_measures:
        lines.append("## Reduction Potential\n")
        for measure in data.reduction_measures:
            lines.append(
                f"- {measure.description}: about {measure.reduction_percent}% of "
                f"{RESOURCE_LABELS[measure.resource].lower()} emissions "
                f"({measure.estimated_reduction_tons:,} t)"
            )
        lines.append("")

    # Footer
    lines.append("---")
    if data.generation_duration_ms is not None:
        lines.append(f"\n*Generated in {data.generation_duration_ms:.0f}ms*")

    return "\n".join(lines)

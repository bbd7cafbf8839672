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

"""Analysis tools for aggregating consumption and attributing emissions.

This module provides the aggregation functions behind the dashboard:
- Yearly totals over a monthly series
- Carbon emissions split by source
- Average emissions per building usage group
- Monthly peak and share-of-total helpers
"""

import logging
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..support.data_generators.schema import (
    BUILDING_USAGE_GROUPS,
    CARBON_SOURCE_NAMES,
    DAYS_PER_MONTH,
    EMISSION_COEFFICIENTS,
    BuildingRecord,
    CarbonSourceShare,
    MonthlyRecord,
    YearlyTotals,
    require_sequence,
    round_half_up,
)

# Configure logging
logger = logging.getLogger(__name__)


def calculate_yearly_totals(records: Sequence[MonthlyRecord]) -> YearlyTotals:
    """Sum consumption and emissions across a monthly series.

    Args:
        records: Monthly records to aggregate; may be empty

    Returns:
        YearlyTotals, all zero for an empty series

    Raises:
        InvalidInputError: If records is not a sequence
    """
    require_sequence(records, "records")

    totals = YearlyTotals(
        electricity=sum(r.electricity for r in records),
        water=sum(r.water for r in records),
        gas=sum(r.gas for r in records),
        total_carbon=sum(r.total_carbon for r in records),
    )

    logger.info(
        f"Aggregated {len(records)} months: {totals.total_carbon} t CO2 "
        f"({totals.electricity} kWh, {totals.water} t water, {totals.gas} m3 gas)"
    )
    return totals


def calculate_carbon_sources(records: Sequence[MonthlyRecord]) -> List[CarbonSourceShare]:
    """Split a series' emissions into electricity, water and natural gas.

    Percentages are rounded to one decimal place. When the series carries
    no emissions at all every share is reported as zero.

    Args:
        records: Monthly records to attribute

    Returns:
        Three CarbonSourceShare entries: Electricity, Water, Natural Gas

    Raises:
        InvalidInputError: If records is not a sequence
    """
    require_sequence(records, "records")

    values = {
        "electricity": sum(r.carbon_electricity for r in records),
        "water": sum(r.carbon_water for r in records),
        "gas": sum(r.carbon_gas for r in records),
    }
    total = sum(values.values())

    if total == 0:
        logger.warning(f"No emissions across {len(records)} records; reporting zero shares")

    shares = []
    for resource, display_name in CARBON_SOURCE_NAMES.items():
        value = values[resource]
        percentage = round_half_up(value / total * 1000) / 10 if total > 0 else 0.0
        shares.append(CarbonSourceShare(name=display_name, value=value, percentage=percentage))

    logger.debug(
        "Carbon sources: " + ", ".join(f"{s.name}={s.percentage}%" for s in shares)
    )
    return shares


def calculate_usage_group_averages(
    buildings: Sequence[BuildingRecord],
    groups: Optional[Dict[str, Sequence[str]]] = None
) -> Dict[str, int]:
    """Average total emissions per building usage group.

    Args:
        buildings: Building records in any order
        groups: Group name to member building names; defaults to the
            campus usage groups

    Returns:
        Group name to rounded mean emissions, for groups with at least one
        matching building, in group order
    """
    require_sequence(buildings, "buildings")
    if groups is None:
        groups = BUILDING_USAGE_GROUPS

    by_name = {b.name: b for b in buildings}
    averages = {}

    for group_name, members in groups.items():
        emissions = [by_name[m].total_carbon for m in members if m in by_name]
        if not emissions:
            logger.debug(f"No buildings found for usage group '{group_name}'")
            continue
        averages[group_name] = round_half_up(float(np.mean(emissions)))

    return averages


def calculate_daily_peak(records: Sequence[MonthlyRecord], resource: str) -> int:
    """Busiest month's consumption spread over a 30-day month.

    Args:
        records: Monthly records
        resource: "electricity", "water" or "gas"

    Returns:
        Rounded daily figure for the peak month, 0 for an empty series
    """
    if not records:
        return 0
    peak = max(getattr(r, resource) for r in records)
    return round_half_up(peak / DAYS_PER_MONTH)


def calculate_emission_share(yearly: YearlyTotals, resource: str) -> int:
    """Whole-percent share of total emissions produced by one resource.

    The resource's emissions are derived from its yearly raw total, so the
    figure can differ slightly from summing the rounded monthly values.

    Args:
        yearly: Yearly totals
        resource: "electricity", "water" or "gas"

    Returns:
        Integer percentage, 0 when there are no emissions
    """
    if yearly.total_carbon <= 0:
        return 0
    amount = getattr(yearly, resource)
    return round_half_up(amount * EMISSION_COEFFICIENTS[resource] / 10 / yearly.total_carbon)

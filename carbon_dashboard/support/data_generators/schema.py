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

"""
Campus Emissions Schema
Defines the data structures, lookup tables and carbon derivation for the
synthetic campus utility and emissions dataset.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, List, Tuple


class InvalidInputError(ValueError):
    """Raised when an operation receives input it cannot work with."""


MONTHS: Tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

SUMMER_MONTH_INDICES = frozenset({5, 6, 7})       # Jun-Aug
WINTER_MONTH_INDICES = frozenset({0, 1, 10, 11})  # Nov-Feb

# kg CO2 per unit of resource (kWh, ton of water, m3 of gas)
EMISSION_COEFFICIENTS: Dict[str, float] = {
    "electricity": 0.785,
    "water": 0.25,
    "gas": 2.1,
}

RESOURCES: Tuple[str, ...] = ("electricity", "water", "gas")

# Display names for the carbon source breakdown, in output order
CARBON_SOURCE_NAMES: Dict[str, str] = {
    "electricity": "Electricity",
    "water": "Water",
    "gas": "Natural Gas",
}

TREES_PER_TON_CO2 = 16.5
DAYS_PER_MONTH = 30


class BuildingCategory(Enum):
    """Building usage categories that drive consumption multipliers."""
    LABORATORY = "laboratory"
    DINING = "dining"
    TEACHING = "teaching"
    DORMITORY = "dormitory"
    GENERAL = "general"


BUILDING_NAMES: Tuple[str, ...] = (
    "Library",
    "Administration Building",
    "Teaching Building A",
    "Teaching Building B",
    "Student Dormitory Area 1",
    "Student Dormitory Area 2",
    "Cafeteria",
    "Laboratory A",
    "Laboratory B",
    "Gymnasium",
)

# Ordered (name keyword, category, multiplier); first match wins
BUILDING_CATEGORY_RULES: Tuple[Tuple[str, BuildingCategory, float], ...] = (
    ("Laboratory", BuildingCategory.LABORATORY, 1.8),
    ("Cafeteria", BuildingCategory.DINING, 1.5),
    ("Teaching", BuildingCategory.TEACHING, 1.3),
    ("Dormitory", BuildingCategory.DORMITORY, 1.2),
)
DEFAULT_BUILDING_MULTIPLIER = 1.0
DINING_FACILITY_KEYWORD = "Cafeteria"

# Usage groups compared in the usage-vs-emissions breakdown
BUILDING_USAGE_GROUPS: Dict[str, Tuple[str, ...]] = {
    "Teaching Buildings": ("Teaching Building A", "Teaching Building B"),
    "Laboratories": ("Laboratory A", "Laboratory B"),
    "Dormitories": ("Student Dormitory Area 1", "Student Dormitory Area 2"),
    "Administration": ("Administration Building",),
    "Dining Facilities": ("Cafeteria",),
}


def require_sequence(records: Any, argument: str) -> Sequence:
    """Reject anything that is not a list-like sequence of records."""
    if isinstance(records, (str, bytes)) or not isinstance(records, Sequence):
        raise InvalidInputError(
            f"{argument} must be a sequence of records, got {type(records).__name__}"
        )
    return records


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (0.5 -> 1, -0.5 -> 0)."""
    return int(math.floor(value + 0.5))


def carbon_tons(resource: str, amount: float) -> int:
    """
    Convert a raw resource quantity into whole tons of CO2-equivalent.

    Args:
        resource: One of "electricity", "water", "gas"
        amount: Raw consumption in the resource's native unit

    Returns:
        Tons of CO2, rounded half-up
    """
    return round_half_up(amount * EMISSION_COEFFICIENTS[resource] / 1000)


def derive_carbon(electricity: float, water: float, gas: float) -> Dict[str, int]:
    """Derive the per-source and total carbon fields for one consumption row."""
    carbon_electricity = carbon_tons("electricity", electricity)
    carbon_water = carbon_tons("water", water)
    carbon_gas = carbon_tons("gas", gas)
    return {
        "carbon_electricity": carbon_electricity,
        "carbon_water": carbon_water,
        "carbon_gas": carbon_gas,
        "total_carbon": carbon_electricity + carbon_water + carbon_gas,
    }


# CSV Table Schema Definition
EMISSIONS_SCHEMA = {
    "month": {
        "type": "STRING",
        "mode": "REQUIRED",
        "description": "Three-letter calendar month label",
        "enum": list(MONTHS)
    },
    "name": {
        "type": "STRING",
        "mode": "REQUIRED",
        "description": "Building or emission source name"
    },
    "electricity": {
        "type": "INT64",
        "mode": "REQUIRED",
        "description": "Electricity consumption in kilowatt-hours",
        "min": 0
    },
    "water": {
        "type": "INT64",
        "mode": "REQUIRED",
        "description": "Water consumption in tons",
        "min": 0
    },
    "gas": {
        "type": "INT64",
        "mode": "REQUIRED",
        "description": "Natural gas consumption in cubic meters",
        "min": 0
    },
    "carbon_electricity": {
        "type": "INT64",
        "mode": "REQUIRED",
        "description": "Electricity emissions in tons CO2-equivalent",
        "min": 0
    },
    "carbon_water": {
        "type": "INT64",
        "mode": "REQUIRED",
        "description": "Water emissions in tons CO2-equivalent",
        "min": 0
    },
    "carbon_gas": {
        "type": "INT64",
        "mode": "REQUIRED",
        "description": "Natural gas emissions in tons CO2-equivalent",
        "min": 0
    },
    "total_carbon": {
        "type": "INT64",
        "mode": "REQUIRED",
        "description": "Sum of the per-source emissions in tons CO2-equivalent",
        "min": 0
    },
    "is_prediction": {
        "type": "BOOL",
        "mode": "REQUIRED",
        "description": "True for projected rows, False for historical rows"
    },
    "value": {
        "type": "INT64",
        "mode": "REQUIRED",
        "description": "Summed emissions for one source in tons CO2-equivalent",
        "min": 0
    },
    "percentage": {
        "type": "FLOAT64",
        "mode": "REQUIRED",
        "description": "Share of all emissions, one decimal place",
        "min": 0.0,
        "precision": 1
    },
}


@dataclass(frozen=True)
class MonthlyRecord:
    """One month of campus consumption with derived emissions."""
    month: str
    electricity: int
    water: int
    gas: int
    carbon_electricity: int
    carbon_water: int
    carbon_gas: int
    total_carbon: int
    is_prediction: bool = False

    @classmethod
    def from_consumption(
        cls,
        month: str,
        electricity: int,
        water: int,
        gas: int,
        is_prediction: bool = False
    ) -> "MonthlyRecord":
        """Build a record from raw consumption, deriving the carbon fields."""
        return cls(
            month=month,
            electricity=electricity,
            water=water,
            gas=gas,
            is_prediction=is_prediction,
            **derive_carbon(electricity, water, gas)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for CSV export."""
        return {
            "month": self.month,
            "electricity": self.electricity,
            "water": self.water,
            "gas": self.gas,
            "carbon_electricity": self.carbon_electricity,
            "carbon_water": self.carbon_water,
            "carbon_gas": self.carbon_gas,
            "total_carbon": self.total_carbon,
            "is_prediction": self.is_prediction,
        }


@dataclass(frozen=True)
class BuildingRecord:
    """Annual consumption and emissions for a single campus building."""
    name: str
    electricity: int
    water: int
    gas: int
    carbon_electricity: int
    carbon_water: int
    carbon_gas: int
    total_carbon: int

    @classmethod
    def from_consumption(
        cls,
        name: str,
        electricity: int,
        water: int,
        gas: int
    ) -> "BuildingRecord":
        """Build a record from raw consumption, deriving the carbon fields."""
        return cls(
            name=name,
            electricity=electricity,
            water=water,
            gas=gas,
            **derive_carbon(electricity, water, gas)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for CSV export."""
        return {
            "name": self.name,
            "electricity": self.electricity,
            "water": self.water,
            "gas": self.gas,
            "carbon_electricity": self.carbon_electricity,
            "carbon_water": self.carbon_water,
            "carbon_gas": self.carbon_gas,
            "total_carbon": self.total_carbon,
        }


@dataclass(frozen=True)
class YearlyTotals:
    """Sums across a monthly series."""
    electricity: int = 0
    water: int = 0
    gas: int = 0
    total_carbon: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "electricity": self.electricity,
            "water": self.water,
            "gas": self.gas,
            "total_carbon": self.total_carbon,
        }


@dataclass(frozen=True)
class CarbonSourceShare:
    """Emissions attributed to one source and its share of the total."""
    name: str
    value: int
    percentage: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "percentage": self.percentage,
        }


# CSV Column Order (for consistent export)
MONTHLY_CSV_COLUMNS: List[str] = [
    "month",
    "electricity",
    "water",
    "gas",
    "carbon_electricity",
    "carbon_water",
    "carbon_gas",
    "total_carbon",
    "is_prediction",
]

BUILDING_CSV_COLUMNS: List[str] = [
    "name",
    "electricity",
    "water",
    "gas",
    "carbon_electricity",
    "carbon_water",
    "carbon_gas",
    "total_carbon",
]

CARBON_SOURCE_CSV_COLUMNS: List[str] = [
    "name",
    "value",
    "percentage",
]

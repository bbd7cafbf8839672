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

"""Synthetic campus consumption generators and their schema."""

from .schema import (
    InvalidInputError,
    MonthlyRecord,
    BuildingRecord,
    YearlyTotals,
    CarbonSourceShare,
    BuildingCategory,
)
from .consumption_patterns import (
    ConsumptionPatternEngine,
    generate_historical_data,
    generate_projection,
)
from .building_profiles import (
    BuildingProfileGenerator,
    classify_building,
    generate_building_data,
)

__all__ = [
    "InvalidInputError",
    "MonthlyRecord",
    "BuildingRecord",
    "YearlyTotals",
    "CarbonSourceShare",
    "BuildingCategory",
    "ConsumptionPatternEngine",
    "generate_historical_data",
    "generate_projection",
    "BuildingProfileGenerator",
    "classify_building",
    "generate_building_data",
]

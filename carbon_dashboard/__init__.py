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

"""Campus Carbon Dashboard Package.

This package synthesizes campus utility consumption (electricity, water,
natural gas), derives carbon emissions from fixed coefficients, projects the
series forward and aggregates it for a carbon emissions dashboard.
"""

from .core import build_dashboard
from .output_formatting import (
    DashboardData,
    DashboardSummary,
    format_dashboard_report,
    summarize_dashboard,
)
from .support.data_generators import (
    BuildingRecord,
    CarbonSourceShare,
    InvalidInputError,
    MonthlyRecord,
    YearlyTotals,
    generate_building_data,
    generate_historical_data,
    generate_projection,
)
from .tools import (
    calculate_carbon_sources,
    calculate_yearly_totals,
)

__all__ = [
    "build_dashboard",
    "DashboardData",
    "DashboardSummary",
    "format_dashboard_report",
    "summarize_dashboard",
    "BuildingRecord",
    "CarbonSourceShare",
    "InvalidInputError",
    "MonthlyRecord",
    "YearlyTotals",
    "generate_building_data",
    "generate_historical_data",
    "generate_projection",
    "calculate_carbon_sources",
    "calculate_yearly_totals",
]

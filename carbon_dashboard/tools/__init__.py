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

"""Tools module for aggregating campus emissions."""

from .analysis_tools import (
    calculate_yearly_totals,
    calculate_carbon_sources,
    calculate_usage_group_averages,
    calculate_daily_peak,
    calculate_emission_share,
)

__all__ = [
    "calculate_yearly_totals",
    "calculate_carbon_sources",
    "calculate_usage_group_averages",
    "calculate_daily_peak",
    "calculate_emission_share",
]

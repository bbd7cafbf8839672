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
Monthly Consumption Pattern Engine
Generates a year of campus utility consumption with seasonal variations and
projects it forward with a linear growth trend.
"""

import logging
from typing import Dict, List, Optional, Sequence

import numpy as np

from .schema import (
    InvalidInputError,
    MONTHS,
    RESOURCES,
    MonthlyRecord,
    SUMMER_MONTH_INDICES,
    WINTER_MONTH_INDICES,
    require_sequence,
    round_half_up,
)

logger = logging.getLogger(__name__)

PREDICTION_HORIZON_MONTHS = 12
MONTHLY_TREND_RATE = 0.005  # 0.5% growth per projected month


def seasonal_terms(month_index: int) -> Dict[str, float]:
    """
    Seasonal adjustment for each resource in a calendar month.

    Electricity follows a slow sine with a summer cooling uplift, water a
    cosine, and gas a flat heating level that is tripled in winter.

    Args:
        month_index: Calendar month, 0 for January

    Returns:
        Seasonal term per resource
    """
    is_summer = month_index in SUMMER_MONTH_INDICES
    is_winter = month_index in WINTER_MONTH_INDICES

    return {
        "electricity": 50000 * float(np.sin(month_index / 2)) + (80000 if is_summer else 0),
        "water": 20000 * float(np.cos(month_index / 3)),
        "gas": 40000 * (1.5 if is_winter else 0.5),
    }


class ConsumptionPatternEngine:
    """Generates monthly campus consumption series."""

    def __init__(self, seed: Optional[int] = None, rng=None):
        """
        Initialize the consumption pattern engine.

        Args:
            seed: Random seed for reproducibility
            rng: Random source to draw noise from; anything with a numpy-style
                ``uniform(low, high)``. Takes precedence over ``seed``.
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        # Base monthly load before seasonal terms
        self.baseline = {
            "electricity": 150000.0,  # kWh
            "water": 80000.0,         # tons
            "gas": 30000.0,           # m3
        }

        # Upper bound of the uniform noise added to each month
        self.noise_ceiling = {
            "electricity": 20000.0,
            "water": 5000.0,
            "gas": 5000.0,
        }

    def generate_month(self, month_index: int) -> MonthlyRecord:
        """Generate one historical month with seasonal shape and noise."""
        terms = seasonal_terms(month_index)
        values = {
            resource: round_half_up(
                self.baseline[resource]
                + terms[resource]
                + float(self.rng.uniform(0.0, self.noise_ceiling[resource]))
            )
            for resource in RESOURCES
        }

        return MonthlyRecord.from_consumption(
            month=MONTHS[month_index],
            electricity=values["electricity"],
            water=values["water"],
            gas=values["gas"],
        )

    def generate_historical_series(self) -> List[MonthlyRecord]:
        """
        Generate twelve months of historical consumption, January first.

        Returns:
            List of 12 MonthlyRecord entries in calendar order
        """
        series = [self.generate_month(i) for i in range(len(MONTHS))]

        logger.info(
            f"Generated {len(series)} historical months, "
            f"{sum(r.total_carbon for r in series)} t CO2 total"
        )
        return series


def generate_projection(
    history: Sequence[MonthlyRecord],
    horizon: int = PREDICTION_HORIZON_MONTHS
) -> List[MonthlyRecord]:
    """
    Project consumption forward from the last historical month.

    Each projected month takes the last observed value, adds the seasonal
    term of the calendar month being projected and scales it by a linear
    trend of 0.5% per month. No noise is added.

    Args:
        history: Historical series, oldest first
        horizon: Number of months to project

    Returns:
        List of projected MonthlyRecord entries flagged ``is_prediction``

    Raises:
        InvalidInputError: If history is empty or not a sequence, or the
            horizon is not positive
    """
    require_sequence(history, "history")
    if len(history) == 0:
        raise InvalidInputError("Cannot project from an empty history")
    if horizon < 1:
        raise InvalidInputError(f"Projection horizon must be at least 1, got {horizon}")

    last = history[-1]
    predictions = []

    for i in range(horizon):
        month_index = (len(history) + i) % len(MONTHS)
        trend = 1 + i * MONTHLY_TREND_RATE
        terms = seasonal_terms(month_index)

        predictions.append(MonthlyRecord.from_consumption(
            month=MONTHS[month_index],
            electricity=max(0, round_half_up((last.electricity + terms["electricity"]) * trend)),
            water=max(0, round_half_up((last.water + terms["water"]) * trend)),
            gas=max(0, round_half_up((last.gas + terms["gas"]) * trend)),
            is_prediction=True,
        ))

    logger.info(
        f"Projected {len(predictions)} months from {last.month} "
        f"({predictions[0].month} to {predictions[-1].month})"
    )
    return predictions


def generate_historical_data(seed: Optional[int] = None, rng=None) -> List[MonthlyRecord]:
    """Generate a twelve month historical series with a fresh engine."""
    return ConsumptionPatternEngine(seed=seed, rng=rng).generate_historical_series()

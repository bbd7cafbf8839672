"""Shared fixtures for the campus carbon dashboard tests."""

import numpy as np
import pytest

from carbon_dashboard.support.data_generators.building_profiles import BuildingProfileGenerator
from carbon_dashboard.support.data_generators.consumption_patterns import ConsumptionPatternEngine
from carbon_dashboard.support.data_generators.schema import MonthlyRecord


class LowEndRandom:
    """Random source whose every uniform draw returns the lower bound."""

    def uniform(self, low=0.0, high=1.0):
        return low


class HighEndRandom:
    """Random source whose every uniform draw returns the upper bound."""

    def uniform(self, low=0.0, high=1.0):
        return high


@pytest.fixture
def low_rng():
    return LowEndRandom()


@pytest.fixture
def high_rng():
    return HighEndRandom()


@pytest.fixture
def seeded_rng():
    return np.random.default_rng(42)


@pytest.fixture
def noiseless_history(low_rng):
    """Twelve historical months with every noise term at zero."""
    return ConsumptionPatternEngine(rng=low_rng).generate_historical_series()


@pytest.fixture
def low_end_buildings(low_rng):
    """Ranked buildings with every draw at the bottom of its range."""
    return BuildingProfileGenerator(rng=low_rng).generate_buildings()


@pytest.fixture
def two_month_history():
    """Two identical months with round-number carbon figures.

    200000 kWh -> 157 t, 40000 t water -> 10 t, 50000 m3 gas -> 105 t.
    """
    return [
        MonthlyRecord.from_consumption("Jan", electricity=200000, water=40000, gas=50000),
        MonthlyRecord.from_consumption("Feb", electricity=200000, water=40000, gas=50000),
    ]

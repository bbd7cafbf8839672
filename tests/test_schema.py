"""Tests for the emissions schema: rounding, carbon derivation and records."""

import dataclasses

import pytest

from carbon_dashboard.support.data_generators.schema import (
    BUILDING_CSV_COLUMNS,
    MONTHLY_CSV_COLUMNS,
    BuildingRecord,
    InvalidInputError,
    MonthlyRecord,
    carbon_tons,
    derive_carbon,
    require_sequence,
    round_half_up,
)


class TestRoundHalfUp:

    @pytest.mark.parametrize("value, expected", [
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (2.4999, 2),
        (-0.5, 0),
        (-1.6, -2),
        (237056.0004, 237056),
    ])
    def test_halves_round_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_returns_int(self):
        assert isinstance(round_half_up(10.2), int)


class TestCarbonDerivation:

    def test_coefficients(self):
        assert carbon_tons("electricity", 200000) == 157
        assert carbon_tons("water", 40000) == 10
        assert carbon_tons("gas", 50000) == 105

    def test_total_is_sum_of_components(self):
        carbon = derive_carbon(electricity=237056, water=71677, gas=50000)
        assert carbon["carbon_electricity"] == 186
        assert carbon["carbon_water"] == 18
        assert carbon["carbon_gas"] == 105
        assert carbon["total_carbon"] == 186 + 18 + 105

    def test_zero_consumption(self):
        assert derive_carbon(0, 0, 0)["total_carbon"] == 0

    def test_unknown_resource(self):
        with pytest.raises(KeyError):
            carbon_tons("coal", 100)


class TestRecords:

    def test_monthly_record_from_consumption(self):
        record = MonthlyRecord.from_consumption("Mar", 200000, 40000, 50000, is_prediction=True)
        assert record.total_carbon == 272
        assert record.is_prediction is True

    def test_records_are_frozen(self):
        record = MonthlyRecord.from_consumption("Mar", 200000, 40000, 50000)
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.electricity = 0

    def test_to_dict_matches_csv_columns(self):
        monthly = MonthlyRecord.from_consumption("Mar", 1, 2, 3)
        building = BuildingRecord.from_consumption("Library", 1, 2, 3)
        assert list(monthly.to_dict()) == MONTHLY_CSV_COLUMNS
        assert list(building.to_dict()) == BUILDING_CSV_COLUMNS


class TestRequireSequence:

    def test_accepts_lists_and_tuples(self):
        assert require_sequence([], "records") == []
        assert require_sequence((), "records") == ()

    @pytest.mark.parametrize("value", [None, 42, "Jan", {"a": 1}, (x for x in [])])
    def test_rejects_non_sequences(self, value):
        with pytest.raises(InvalidInputError):
            require_sequence(value, "records")

    def test_invalid_input_is_value_error(self):
        assert issubclass(InvalidInputError, ValueError)

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
CSV Generation and Export Module
Formats, validates and exports the synthetic campus emissions data as CSV files.
"""

import logging
from pathlib import Path
from typing import Dict, List, Sequence

import pandas as pd

from .schema import (
    BUILDING_CSV_COLUMNS,
    CARBON_SOURCE_CSV_COLUMNS,
    EMISSIONS_SCHEMA,
    MONTHLY_CSV_COLUMNS,
    BuildingRecord,
    CarbonSourceShare,
    MonthlyRecord,
)

logger = logging.getLogger(__name__)

CARBON_COMPONENT_COLUMNS = ["carbon_electricity", "carbon_water", "carbon_gas"]


class CSVExporter:
    """Exports synthetic campus emissions data to CSV files."""

    def __init__(self, output_dir: str = "output"):
        """
        Initialize the CSV exporter.

        Args:
            output_dir: Directory to write CSV files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        # Populated by export_dashboard
        self.validation_errors: Dict[str, List[str]] = {}

    def records_to_dataframe(self, records: Sequence, columns: List[str]) -> pd.DataFrame:
        """
        Build a DataFrame from records in a fixed column order.

        Args:
            records: Records exposing ``to_dict()``
            columns: Column order for the frame

        Returns:
            DataFrame with one row per record
        """
        return pd.DataFrame([r.to_dict() for r in records], columns=columns)

    def validate_data(self, df: pd.DataFrame, expect_ranked: bool = False) -> List[str]:
        """
        Validate generated data for quality issues using schema-aware validation.

        Args:
            df: DataFrame of monthly, building or source rows
            expect_ranked: Whether rows must be sorted descending by total_carbon

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        # Schema-aware minimum validation
        for col in df.columns:
            schema_def = EMISSIONS_SCHEMA.get(col)
            if schema_def is None or schema_def["type"] not in ["FLOAT64", "INT64"]:
                continue

            if "min" in schema_def:
                below_min = (df[col] < schema_def["min"]).sum()
                if below_min > 0:
                    errors.append(
                        f"Column '{col}' has {below_min} values below "
                        f"minimum {schema_def['min']}"
                    )

            if df[col].isna().any():
                errors.append(f"Column '{col}' has missing values")

        # Total carbon must equal the per-source components exactly
        if all(col in df.columns for col in CARBON_COMPONENT_COLUMNS + ["total_carbon"]):
            component_sum = df[CARBON_COMPONENT_COLUMNS].sum(axis=1)
            mismatched = (component_sum != df["total_carbon"]).sum()
            if mismatched > 0:
                errors.append(f"{mismatched} rows have total_carbon != sum of carbon components")

        if "month" in df.columns:
            unknown = (~df["month"].isin(EMISSIONS_SCHEMA["month"]["enum"])).sum()
            if unknown > 0:
                errors.append(f"{unknown} rows have an unknown month label")

        if expect_ranked and "total_carbon" in df.columns:
            if not df["total_carbon"].is_monotonic_decreasing:
                errors.append("Rows are not sorted descending by total_carbon")

        return errors

    def _write(self, df: pd.DataFrame, filename: str) -> Path:
        filepath = self.output_dir / filename
        df.to_csv(filepath, index=False)
        logger.debug(f"Wrote {len(df)} rows to {filepath}")
        return filepath

    def export_monthly_series(
        self,
        records: Sequence[MonthlyRecord],
        filename: str = "monthly_history.csv"
    ) -> Path:
        """
        Export a monthly series (historical or projected) to CSV.

        Args:
            records: Monthly records
            filename: Output file name

        Returns:
            Path to created CSV file
        """
        return self._write(self.records_to_dataframe(records, MONTHLY_CSV_COLUMNS), filename)

    def export_buildings(
        self,
        buildings: Sequence[BuildingRecord],
        filename: str = "building_ranking.csv"
    ) -> Path:
        """
        Export ranked buildings to CSV.

        Args:
            buildings: Ranked building records
            filename: Output file name

        Returns:
            Path to created CSV file
        """
        return self._write(self.records_to_dataframe(buildings, BUILDING_CSV_COLUMNS), filename)

    def export_carbon_sources(
        self,
        shares: Sequence[CarbonSourceShare],
        filename: str = "carbon_sources.csv"
    ) -> Path:
        """
        Export the emission source breakdown to CSV.

        Args:
            shares: Carbon source shares
            filename: Output file name

        Returns:
            Path to created CSV file
        """
        return self._write(self.records_to_dataframe(shares, CARBON_SOURCE_CSV_COLUMNS), filename)

    def export_dashboard(self, data) -> Dict[str, Path]:
        """
        Validate and export every frame of a generated dashboard.

        Args:
            data: DashboardData from ``build_dashboard``

        Returns:
            Dictionary with paths to generated files; validation errors
            are kept in ``self.validation_errors`` keyed by frame name
        """
        logger.info(f"Exporting campus dataset into {self.output_dir}")

        frames = {
            "history": (self.records_to_dataframe(data.history, MONTHLY_CSV_COLUMNS), False),
            "predictions": (self.records_to_dataframe(data.predictions, MONTHLY_CSV_COLUMNS), False),
            "buildings": (self.records_to_dataframe(data.buildings, BUILDING_CSV_COLUMNS), True),
            "carbon_sources": (
                self.records_to_dataframe(data.carbon_sources, CARBON_SOURCE_CSV_COLUMNS), False
            ),
        }

        self.validation_errors = {}
        for name, (df, ranked) in frames.items():
            errors = self.validate_data(df, expect_ranked=ranked)
            if errors:
                self.validation_errors[name] = errors
                logger.warning(f"{name}: {len(errors)} validation errors: {errors}")

        generated_files = {
            "history": self._write(frames["history"][0], "monthly_history.csv"),
            "predictions": self._write(frames["predictions"][0], "monthly_predictions.csv"),
            "buildings": self._write(frames["buildings"][0], "building_ranking.csv"),
            "carbon_sources": self._write(frames["carbon_sources"][0], "carbon_sources.csv"),
        }

        logger.info(
            f"Exported {len(generated_files)} files, "
            f"{len(self.validation_errors)} with validation errors"
        )
        return generated_files

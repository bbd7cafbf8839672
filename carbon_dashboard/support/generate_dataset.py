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
Generate the synthetic campus emissions dataset and export it as CSV.

Usage:
    # Generate with settings from the environment / .env
    python -m carbon_dashboard.support.generate_dataset

    # Reproducible run into a custom directory
    python -m carbon_dashboard.support.generate_dataset --seed 42 --output-dir data

    # Also print the Markdown report
    python -m carbon_dashboard.support.generate_dataset --report
"""

import argparse
import logging
import sys
from typing import List, Optional

from ..config import load_settings
from ..core import build_dashboard
from ..output_formatting import format_dashboard_report
from .data_generators.building_profiles import print_building_summary
from .data_generators.csv_exporter import CSVExporter
from .data_generators.schema import InvalidInputError


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate synthetic campus utility and emissions data"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: CARBON_DASHBOARD_SEED, else random)"
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for CSV files (default: CARBON_DASHBOARD_OUTPUT_DIR or 'output')"
    )
    parser.add_argument(
        "--population",
        type=int,
        default=None,
        help="Campus headcount for per-capita emissions (default: CARBON_DASHBOARD_POPULATION or 8500)"
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print the Markdown dashboard report after exporting"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the generator; returns the process exit code."""
    args = parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}")
        return 1

    logging.basicConfig(level=settings.log_level, format="%(name)s | %(message)s")

    seed = args.seed if args.seed is not None else settings.seed
    output_dir = args.output_dir or settings.output_dir
    population = args.population if args.population is not None else settings.campus_population

    if population <= 0:
        print(f"❌ Campus population must be positive, got {population}")
        return 1

    print("=" * 70)
    print("Campus Carbon Dataset Generator")
    print("=" * 70)
    print(f"Seed: {seed if seed is not None else 'random'}")
    print(f"Output directory: {output_dir}")
    print()

    try:
        data = build_dashboard(seed=seed, population=population)
    except InvalidInputError as e:
        print(f"❌ Dataset generation failed: {e}")
        return 1

    exporter = CSVExporter(output_dir=output_dir)
    generated_files = exporter.export_dashboard(data)

    for name, path in generated_files.items():
        print(f"  {name}: {path}")
    print()

    print_building_summary(data.buildings)
    print()

    if args.report:
        print(format_dashboard_report(data))
        print()

    if exporter.validation_errors:
        print(f"⚠️  Validation errors in {len(exporter.validation_errors)} files:")
        for name, errors in exporter.validation_errors.items():
            print(f"  {name}:")
            for error in errors:
                print(f"    - {error}")
        return 1

    print("✅ All data validated successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())

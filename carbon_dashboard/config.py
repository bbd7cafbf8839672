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

"""Runtime settings read from the environment (and a local .env file)."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_OUTPUT_DIR = "output"
DEFAULT_CAMPUS_POPULATION = 8500
DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class DashboardSettings:
    """Settings for dataset generation.

    Attributes:
        seed: Random seed; None draws fresh entropy each session
        output_dir: Directory for exported CSV files
        campus_population: Headcount used for per-capita emissions
        log_level: Logging level name for the command-line tools
    """
    seed: Optional[int] = None
    output_dir: str = DEFAULT_OUTPUT_DIR
    campus_population: int = DEFAULT_CAMPUS_POPULATION
    log_level: str = DEFAULT_LOG_LEVEL


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(dotenv_path: Optional[str] = None) -> DashboardSettings:
    """Load settings from environment variables.

    Variables already set in the environment win over the .env file.

    Args:
        dotenv_path: Optional explicit .env file; defaults to searching
            from the working directory

    Returns:
        DashboardSettings populated from CARBON_DASHBOARD_* variables
    """
    load_dotenv(dotenv_path)

    return DashboardSettings(
        seed=_int_from_env("CARBON_DASHBOARD_SEED", None),
        output_dir=os.getenv("CARBON_DASHBOARD_OUTPUT_DIR", DEFAULT_OUTPUT_DIR),
        campus_population=_int_from_env("CARBON_DASHBOARD_POPULATION", DEFAULT_CAMPUS_POPULATION),
        log_level=os.getenv("CARBON_DASHBOARD_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )

"""Tests for environment-driven settings."""

import os

import pytest

from carbon_dashboard.config import DashboardSettings, load_settings

ENV_VARS = (
    "CARBON_DASHBOARD_SEED",
    "CARBON_DASHBOARD_OUTPUT_DIR",
    "CARBON_DASHBOARD_POPULATION",
    "CARBON_DASHBOARD_LOG_LEVEL",
)


@pytest.fixture
def no_dotenv(tmp_path):
    return str(tmp_path / "missing.env")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    # load_dotenv writes straight to os.environ
    for name in ENV_VARS:
        os.environ.pop(name, None)


def test_defaults(no_dotenv):
    assert load_settings(no_dotenv) == DashboardSettings()


def test_environment_overrides(monkeypatch, no_dotenv):
    monkeypatch.setenv("CARBON_DASHBOARD_SEED", "42")
    monkeypatch.setenv("CARBON_DASHBOARD_OUTPUT_DIR", "exports")
    monkeypatch.setenv("CARBON_DASHBOARD_POPULATION", "12000")
    monkeypatch.setenv("CARBON_DASHBOARD_LOG_LEVEL", "debug")

    settings = load_settings(no_dotenv)
    assert settings.seed == 42
    assert settings.output_dir == "exports"
    assert settings.campus_population == 12000
    assert settings.log_level == "DEBUG"


def test_dotenv_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CARBON_DASHBOARD_SEED=7\nCARBON_DASHBOARD_POPULATION=300\n")
    settings = load_settings(str(env_file))
    assert settings.seed == 7
    assert settings.campus_population == 300


def test_blank_seed_means_random(monkeypatch, no_dotenv):
    monkeypatch.setenv("CARBON_DASHBOARD_SEED", "")
    assert load_settings(no_dotenv).seed is None


def test_invalid_integer(monkeypatch, no_dotenv):
    monkeypatch.setenv("CARBON_DASHBOARD_POPULATION", "lots")
    with pytest.raises(ValueError, match="CARBON_DASHBOARD_POPULATION"):
        load_settings(no_dotenv)

"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from bshs.config.schema import PageConfig, SiteConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"

TEST_UPSTREAM = "https://test-weatherapi.example.com/v1"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def forecast_payload() -> dict:
    """A WeatherAPI.com forecast.json response for Balangkayan."""
    with open(FIXTURE_DIR / "weatherapi_forecast.json") as f:
        return json.load(f)


@pytest.fixture
def site_config() -> SiteConfig:
    """Default config pointed at a fake upstream host."""
    return SiteConfig(proxy={"upstream_base_url": TEST_UPSTREAM})


@pytest.fixture
def page_config() -> PageConfig:
    return PageConfig(
        proxy_url="https://test-site.example.com/api/weather",
        weather_refresh_seconds=600,
        reminder_refresh_seconds=30,
        reminders=["First reminder", "Second reminder", "Third reminder"],
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "proxy": {"location": "Borongan,Eastern Samar,Philippines"},
        "page": {"weather_refresh_seconds": 300},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path

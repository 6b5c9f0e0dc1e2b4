"""Forecast data models extracted from the WeatherAPI.com payload."""

from dataclasses import dataclass, field
from enum import StrEnum


class RainfallIntensity(StrEnum):
    NONE = "none"
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"


@dataclass(frozen=True)
class HourlyPoint:
    time: str  # "YYYY-MM-DD HH:MM", location local time
    precip_mm: float
    chance_of_rain: int
    condition_text: str


@dataclass(frozen=True)
class WeatherAlert:
    headline: str
    event: str
    severity: str


@dataclass(frozen=True)
class WeatherReport:
    location_name: str
    region: str
    local_time: str
    condition_text: str
    temp_c: float
    feelslike_c: float
    humidity: int
    wind_kph: float
    precip_mm: float
    is_day: bool
    last_updated: str
    hourly: list[HourlyPoint] = field(default_factory=list)
    alerts: list[WeatherAlert] = field(default_factory=list)

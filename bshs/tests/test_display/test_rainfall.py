"""Tests for rainfall intensity classification with boundary conditions."""

from dataclasses import replace
from datetime import datetime

from bshs.display.forecast_parser import parse_forecast
from bshs.display.rainfall import classify_rate, rainfall_intensity, upcoming_hours
from bshs.models.forecast import RainfallIntensity


class TestClassifyRate:
    def test_none(self):
        assert classify_rate(0.0) == RainfallIntensity.NONE

    def test_light(self):
        assert classify_rate(0.1) == RainfallIntensity.LIGHT

    def test_boundary_light_moderate(self):
        # Exactly 2.5 mm/h is moderate (< 2.5 is light)
        assert classify_rate(2.49) == RainfallIntensity.LIGHT
        assert classify_rate(2.5) == RainfallIntensity.MODERATE

    def test_boundary_moderate_heavy(self):
        assert classify_rate(7.59) == RainfallIntensity.MODERATE
        assert classify_rate(7.6) == RainfallIntensity.HEAVY


class TestUpcomingHours:
    def test_window_starts_at_current_hour(self, forecast_payload: dict):
        report = parse_forecast(forecast_payload)
        hours = upcoming_hours(report.hourly, datetime(2026, 10, 18, 9, 5), 3)
        assert [h.time for h in hours] == [
            "2026-10-18 09:00", "2026-10-18 10:00", "2026-10-18 11:00",
        ]


class TestRainfallIntensity:
    def test_uses_local_time_from_payload(self, forecast_payload: dict):
        # 09:05 local, 3h window covers 09-11 → max 3.1 mm/h
        report = parse_forecast(forecast_payload)
        assert rainfall_intensity(report, 3) == RainfallIntensity.MODERATE

    def test_wider_window_reaches_heavy(self, forecast_payload: dict):
        report = parse_forecast(forecast_payload)
        assert rainfall_intensity(report, 4) == RainfallIntensity.HEAVY

    def test_explicit_now(self, forecast_payload: dict):
        report = parse_forecast(forecast_payload)
        now = datetime(2026, 10, 18, 8, 30)
        assert rainfall_intensity(report, 2, now=now) == RainfallIntensity.NONE

    def test_unknown_local_time_uses_current_precip(self, forecast_payload: dict):
        report = replace(parse_forecast(forecast_payload), local_time="", precip_mm=1.0)
        assert rainfall_intensity(report, 3) == RainfallIntensity.LIGHT

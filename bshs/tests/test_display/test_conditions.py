"""Tests for ordered condition mapping."""

import pytest

from bshs.display.conditions import (
    CONDITION_MAPPINGS,
    DEFAULT_CONDITION,
    ConditionMapping,
    any_keyword,
    match_condition,
)
from bshs.models.forecast import RainfallIntensity, WeatherReport


def _key_order() -> list[str]:
    return [mapping.key for _, mapping in CONDITION_MAPPINGS]


def _report(condition: str = "Sunny", temp: float = 31.6, is_day: bool = True) -> WeatherReport:
    return WeatherReport(
        location_name="Balangkayan",
        region="Eastern Samar",
        local_time="2026-10-18 9:05",
        condition_text=condition,
        temp_c=temp,
        feelslike_c=temp + 3,
        humidity=80,
        wind_kph=10.0,
        precip_mm=0.0,
        is_day=is_day,
        last_updated="2026-10-18 09:00",
    )


class TestFirstMatchWins:
    def test_partly_cloudy_beats_cloudy(self):
        assert match_condition("Partly cloudy").key == "partly_cloudy"

    def test_partly_cloudy_declared_before_cloudy(self):
        order = _key_order()
        assert order.index("partly_cloudy") < order.index("cloudy")

    def test_cloudy_alone(self):
        assert match_condition("Cloudy").key == "cloudy"
        assert match_condition("Overcast").key == "cloudy"

    def test_specific_rain_before_generic(self):
        order = _key_order()
        for specific in ("heavy_rain", "moderate_rain", "light_rain", "snow"):
            assert order.index(specific) < order.index("rain")

    def test_thunder_first(self):
        assert _key_order()[0] == "thunderstorm"
        assert match_condition("Patchy light rain with thunder").key == "thunderstorm"
        assert match_condition("Thundery outbreaks in nearby").key == "thunderstorm"

    def test_reordering_changes_result(self):
        cloudy = next(p for p in CONDITION_MAPPINGS if p[1].key == "cloudy")
        partly = next(p for p in CONDITION_MAPPINGS if p[1].key == "partly_cloudy")
        assert match_condition("Partly cloudy", (cloudy, partly)).key == "cloudy"


class TestMatchCondition:
    @pytest.mark.parametrize(
        "text, key",
        [
            ("Sunny", "sunny"),
            ("Clear", "sunny"),
            ("Patchy rain nearby", "light_rain"),
            ("Patchy light drizzle", "light_rain"),
            ("Light rain shower", "light_rain"),
            ("Moderate rain at times", "moderate_rain"),
            ("Heavy rain", "heavy_rain"),
            ("Moderate or heavy rain shower", "heavy_rain"),
            ("Torrential rain shower", "heavy_rain"),
            ("Moderate or heavy snow showers", "snow"),
            ("Light sleet", "snow"),
            ("Rain", "rain"),
            ("Mist", "fog"),
            ("Freezing fog", "fog"),
        ],
    )
    def test_weatherapi_texts(self, text: str, key: str):
        assert match_condition(text).key == key

    def test_case_insensitive(self):
        assert match_condition("PARTLY CLOUDY").key == "partly_cloudy"
        assert match_condition("  heavy RAIN ").key == "heavy_rain"

    def test_unknown_falls_back(self):
        assert match_condition("Volcanic ash") is DEFAULT_CONDITION

    def test_empty_falls_back(self):
        assert match_condition("") is DEFAULT_CONDITION


class TestConditionMapping:
    def test_night_icon(self):
        sunny = match_condition("Clear")
        assert sunny.icon_for(is_day=True) == "☀️"
        assert sunny.icon_for(is_day=False) == "🌙"

    def test_no_night_icon_keeps_day_icon(self):
        rain = match_condition("Rain")
        assert rain.icon_for(is_day=False) == rain.icon

    def test_render_message_fields(self):
        mapping = ConditionMapping(
            key="t", icon="x", label="T", message="{condition}|{temp}|{intensity}"
        )
        text = mapping.render_message(_report("Sunny", 31.6), RainfallIntensity.LIGHT)
        assert text == "Sunny|32|light"

    def test_all_templates_render(self):
        for _, mapping in CONDITION_MAPPINGS:
            mapping.render_message(_report(), RainfallIntensity.HEAVY)
        DEFAULT_CONDITION.render_message(_report(), RainfallIntensity.NONE)

    def test_fog_message_not_tied_to_time_of_day(self):
        fog = match_condition("Fog")
        for is_day in (True, False):
            text = fog.render_message(_report("Fog", 24.0, is_day), RainfallIntensity.NONE)
            assert "morning" not in text.lower()
            assert "Fog" in text

    def test_any_keyword(self):
        pred = any_keyword("fog", "mist")
        assert pred("freezing fog")
        assert not pred("sunny")

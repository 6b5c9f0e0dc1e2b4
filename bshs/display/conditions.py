"""Condition mapping: free-text weather descriptions → icon and message.

Entries are (predicate, mapping) pairs scanned in declaration order and the
first match wins. Specific phrases must come before the generic words they
contain ("partly cloudy" before "cloudy", "heavy rain" before "rain").
"""

from collections.abc import Callable
from dataclasses import dataclass

from bshs.models.forecast import RainfallIntensity, WeatherReport

Predicate = Callable[[str], bool]


@dataclass(frozen=True)
class ConditionMapping:
    key: str
    icon: str
    label: str
    message: str  # str.format template: {condition}, {temp}, {intensity}
    night_icon: str | None = None

    def icon_for(self, is_day: bool) -> str:
        if not is_day and self.night_icon:
            return self.night_icon
        return self.icon

    def render_message(
        self, report: WeatherReport, intensity: RainfallIntensity
    ) -> str:
        return self.message.format(
            condition=report.condition_text,
            temp=f"{report.temp_c:.0f}",
            intensity=intensity.value,
        )


def any_keyword(*keywords: str) -> Predicate:
    """Predicate matching lower-cased text that contains any keyword."""
    def _match(text: str) -> bool:
        return any(k in text for k in keywords)

    return _match


CONDITION_MAPPINGS: tuple[tuple[Predicate, ConditionMapping], ...] = (
    (
        any_keyword("thunder", "storm"),
        ConditionMapping(
            key="thunderstorm",
            icon="⛈️",
            label="Thunderstorm",
            message="Thunderstorms expected. Stay indoors and away from open fields.",
        ),
    ),
    (
        any_keyword("heavy rain", "torrential", "heavy shower"),
        ConditionMapping(
            key="heavy_rain",
            icon="🌧️",
            label="Heavy Rain",
            message=(
                "Heavy rain in the area ({intensity} rainfall expected). "
                "Watch for class suspension announcements."
            ),
        ),
    ),
    (
        any_keyword("moderate rain"),
        ConditionMapping(
            key="moderate_rain",
            icon="🌧️",
            label="Moderate Rain",
            message="Moderate rain ({intensity} rainfall expected). Bring an umbrella.",
        ),
    ),
    (
        any_keyword("light rain", "drizzle", "patchy rain", "light shower"),
        ConditionMapping(
            key="light_rain",
            icon="🌦️",
            label="Light Rain",
            message="Light rain around {temp}°C. An umbrella will come in handy.",
        ),
    ),
    (
        any_keyword("snow", "sleet", "ice", "blizzard"),
        ConditionMapping(
            key="snow",
            icon="❄️",
            label="Snow / Sleet",
            message="{condition}. Dress warmly and take care on the way to school.",
        ),
    ),
    (
        any_keyword("rain", "shower"),
        ConditionMapping(
            key="rain",
            icon="🌧️",
            label="Rain",
            message="Rain expected ({intensity} rainfall). Bring an umbrella.",
        ),
    ),
    (
        any_keyword("fog", "mist", "haze"),
        ConditionMapping(
            key="fog",
            icon="🌫️",
            label="Fog / Mist",
            message="Low visibility ({condition}). Commuters, drive carefully.",
        ),
    ),
    (
        any_keyword("partly cloudy", "partly sunny"),
        ConditionMapping(
            key="partly_cloudy",
            icon="⛅",
            label="Partly Cloudy",
            message="Partly cloudy at {temp}°C. A good day for classes.",
            night_icon="☁️",
        ),
    ),
    (
        any_keyword("cloudy", "overcast"),
        ConditionMapping(
            key="cloudy",
            icon="☁️",
            label="Cloudy",
            message="Cloudy skies at {temp}°C. Keep an umbrella nearby just in case.",
        ),
    ),
    (
        any_keyword("sunny", "clear"),
        ConditionMapping(
            key="sunny",
            icon="☀️",
            label="Sunny",
            message="Sunny at {temp}°C. Stay hydrated and avoid long exposure to the sun.",
            night_icon="🌙",
        ),
    ),
)

DEFAULT_CONDITION = ConditionMapping(
    key="default",
    icon="🌡️",
    label="Weather Update",
    message="{condition} at {temp}°C. Check back for the latest updates.",
)


def match_condition(
    text: str,
    mappings: tuple[tuple[Predicate, ConditionMapping], ...] = CONDITION_MAPPINGS,
) -> ConditionMapping:
    """Return the first mapping whose predicate accepts the lower-cased text."""
    lowered = (text or "").lower()
    for predicate, mapping in mappings:
        if predicate(lowered):
            return mapping
    return DEFAULT_CONDITION

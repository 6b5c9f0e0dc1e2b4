"""Views: subscribe to PageState keys and write into fixed document targets."""

from dataclasses import dataclass

from bshs.display.conditions import ConditionMapping
from bshs.models.forecast import RainfallIntensity, WeatherReport
from bshs.ui.dom import Document
from bshs.ui.state import PageState
from bshs.ui.widgets import ToggleWidget

WEATHER_KEY = "weather.display"
ALERTS_KEY = "weather.alerts"
REMINDER_KEY = "reminder.text"

WEATHER_TARGETS = (
    "weather-icon",
    "weather-condition",
    "weather-temp",
    "weather-message",
    "weather-details",
    "weather-updated",
)


@dataclass(frozen=True)
class WeatherDisplay:
    icon: str
    condition: str
    temp: str
    message: str
    details: str
    updated: str

    def as_targets(self) -> dict[str, str]:
        return dict(zip(WEATHER_TARGETS, (
            self.icon, self.condition, self.temp,
            self.message, self.details, self.updated,
        )))


def build_display(
    report: WeatherReport,
    mapping: ConditionMapping,
    intensity: RainfallIntensity,
) -> WeatherDisplay:
    place = ", ".join(p for p in (report.location_name, report.region) if p)
    return WeatherDisplay(
        icon=mapping.icon_for(report.is_day),
        condition=report.condition_text,
        temp=f"{report.temp_c:.0f}°C",
        message=mapping.render_message(report, intensity),
        details=(
            f"Feels like {report.feelslike_c:.0f}°C · "
            f"Humidity {report.humidity}% · Wind {report.wind_kph:.0f} km/h"
        ),
        updated=f"{place} · Updated {report.last_updated}" if place else f"Updated {report.last_updated}",
    )


class WeatherView:
    def __init__(self, document: Document, state: PageState):
        self.document = document
        state.subscribe(WEATHER_KEY, self._on_change)

    def _on_change(self, key: str, display: WeatherDisplay) -> None:
        self.render(display)

    def render(self, display: WeatherDisplay) -> None:
        """Replace the content of every weather target."""
        for element_id, text in display.as_targets().items():
            self.document.get(element_id).text = text


class AlertView:
    """Shows upstream weather alerts in the alert banner; hides it when there are none."""

    def __init__(self, document: Document, state: PageState, banner: ToggleWidget):
        self.document = document
        self.banner = banner
        state.subscribe(ALERTS_KEY, self._on_change)

    def _on_change(self, key: str, headlines: tuple[str, ...]) -> None:
        self.document.get("alert-text").text = " | ".join(headlines)
        if headlines:
            self.banner.open()
        else:
            self.banner.close()


class ReminderView:
    def __init__(self, document: Document, state: PageState):
        self.document = document
        state.subscribe(REMINDER_KEY, self._on_change)

    def _on_change(self, key: str, text: str) -> None:
        self.document.get("reminder-text").text = text

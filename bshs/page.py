"""Page controller: weather refresh, reminder rotation and widget wiring."""

import logging

from bshs.config.defaults import DEFAULT_REMINDERS
from bshs.config.schema import PageConfig
from bshs.display.conditions import match_condition
from bshs.display.forecast_parser import parse_forecast
from bshs.display.rainfall import rainfall_intensity
from bshs.ingest.proxy_client import ProxyWeatherClient
from bshs.scheduler import Scheduler
from bshs.ui.dom import Document
from bshs.ui.state import PageState
from bshs.ui.views import (
    ALERTS_KEY,
    REMINDER_KEY,
    WEATHER_KEY,
    WEATHER_TARGETS,
    AlertView,
    ReminderView,
    WeatherView,
    build_display,
)
from bshs.ui.widgets import HIDDEN_CLASS, ToggleWidget, WidgetRegistry

logger = logging.getLogger(__name__)

WEATHER_JOB = "weather-refresh"
REMINDER_JOB = "reminder-rotate"

# control id → (widget name, action)
CONTROLS: dict[str, tuple[str, str]] = {
    "weather-button": ("weather-modal", "open"),
    "weather-close": ("weather-modal", "close"),
    "chatbot-toggle": ("chatbot", "toggle"),
    "chatbot-close": ("chatbot", "close"),
    "reminder-dismiss": ("reminder-banner", "close"),
    "alert-dismiss": ("alert-banner", "close"),
}


def build_document() -> Document:
    """Create every element the controller writes to."""
    doc = Document()
    for element_id in WEATHER_TARGETS:
        doc.create(element_id, text="--")
    doc.create("weather-modal", classes={HIDDEN_CLASS})
    doc.create("chatbot-panel", classes={HIDDEN_CLASS})
    doc.create("reminder-banner")
    doc.create("reminder-text")
    doc.create("alert-banner", classes={HIDDEN_CLASS})
    doc.create("alert-text")
    return doc


class PageController:
    def __init__(
        self,
        config: PageConfig,
        client: ProxyWeatherClient | None = None,
        document: Document | None = None,
        state: PageState | None = None,
        scheduler: Scheduler | None = None,
    ):
        self.config = config
        self.client = client or ProxyWeatherClient(
            config.proxy_url, timeout=config.timeout_seconds
        )
        self.document = document or build_document()
        self.state = state or PageState()
        self.scheduler = scheduler or Scheduler()
        self.reminders = list(config.reminders) or list(DEFAULT_REMINDERS)
        self._reminder_index = -1
        self._weather_in_flight = False

        self.widgets = WidgetRegistry()
        self.widgets.add(ToggleWidget("weather-modal", "weather-modal", self.document, self.state))
        self.widgets.add(ToggleWidget("chatbot", "chatbot-panel", self.document, self.state))
        self.widgets.add(
            ToggleWidget(
                "reminder-banner", "reminder-banner", self.document, self.state,
                initially_open=True,
            )
        )
        alert_banner = self.widgets.add(
            ToggleWidget("alert-banner", "alert-banner", self.document, self.state)
        )
        for control_id, (widget_name, action) in CONTROLS.items():
            self.widgets.bind(control_id, widget_name, action)

        self.weather_view = WeatherView(self.document, self.state)
        self.alert_view = AlertView(self.document, self.state, alert_banner)
        self.reminder_view = ReminderView(self.document, self.state)

    # ── Lifecycle ──────────────────────────────────────────────────

    def start(self) -> None:
        """Page load: register both timers and fire them once."""
        if not self.scheduler.jobs:
            self.scheduler.add_job(
                WEATHER_JOB, self.config.weather_refresh_seconds, self.refresh_weather
            )
            self.scheduler.add_job(
                REMINDER_JOB, self.config.reminder_refresh_seconds, self.rotate_reminder
            )
        self.scheduler.start()

    def stop(self) -> None:
        """Page unload."""
        self.scheduler.stop()

    # ── Weather ────────────────────────────────────────────────────

    def refresh_weather(self) -> bool:
        """Fetch, map and render the current weather. Returns True on success.

        Failures are logged once and leave the last rendered content in place.
        """
        if self._weather_in_flight:
            logger.debug("Weather refresh already in flight, skipping")
            return False

        self._weather_in_flight = True
        try:
            payload = self.client.fetch()
            report = parse_forecast(payload)
            mapping = match_condition(report.condition_text)
            intensity = rainfall_intensity(report, self.config.rainfall_window_hours)
            display = build_display(report, mapping, intensity)
        except Exception:
            logger.exception("Weather update failed")
            return False
        finally:
            self._weather_in_flight = False

        logger.info(
            "Weather updated: %s (%s, rainfall %s)",
            report.condition_text, mapping.key, intensity.value,
        )
        self.state.set(WEATHER_KEY, display)
        self.state.set(ALERTS_KEY, tuple(a.headline for a in report.alerts))
        return True

    # ── Reminders ──────────────────────────────────────────────────

    def rotate_reminder(self) -> str:
        """Advance to the next reminder. Runs even while the banner is dismissed."""
        self._reminder_index = (self._reminder_index + 1) % len(self.reminders)
        text = self.reminders[self._reminder_index]
        self.state.set(REMINDER_KEY, text)
        return text

    # ── Widgets ────────────────────────────────────────────────────

    def click(self, control_id: str) -> bool:
        handled = self.widgets.click(control_id)
        if not handled:
            logger.warning("Click on unbound control %s", control_id)
        return handled

    def weather_text(self) -> dict[str, str]:
        return self.document.text_of(*WEATHER_TARGETS)

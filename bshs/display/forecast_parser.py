"""Forecast parser: turns the raw proxy payload into a WeatherReport."""

import logging

from bshs.models.forecast import HourlyPoint, WeatherAlert, WeatherReport

logger = logging.getLogger(__name__)


class ForecastParseError(ValueError):
    """Payload lacks the fields needed to render current conditions."""


def parse_forecast(payload: dict) -> WeatherReport:
    """Extract current conditions, today's hours and alerts.

    Only current.condition.text is mandatory; numeric fields default to 0.
    """
    if not isinstance(payload, dict):
        raise ForecastParseError("forecast payload is not an object")

    current = payload.get("current") or {}
    condition = current.get("condition") or {}
    condition_text = condition.get("text")
    if not condition_text:
        raise ForecastParseError("payload has no current.condition.text")

    location = payload.get("location") or {}

    return WeatherReport(
        location_name=location.get("name", ""),
        region=location.get("region", ""),
        local_time=location.get("localtime", ""),
        condition_text=str(condition_text).strip(),
        temp_c=float(current.get("temp_c", 0.0)),
        feelslike_c=float(current.get("feelslike_c", current.get("temp_c", 0.0))),
        humidity=int(current.get("humidity", 0)),
        wind_kph=float(current.get("wind_kph", 0.0)),
        precip_mm=float(current.get("precip_mm", 0.0)),
        is_day=bool(current.get("is_day", 1)),
        last_updated=current.get("last_updated", ""),
        hourly=_extract_hourly(payload),
        alerts=_extract_alerts(payload),
    )


def _extract_hourly(payload: dict) -> list[HourlyPoint]:
    days = (payload.get("forecast") or {}).get("forecastday") or []
    if not days:
        return []

    points: list[HourlyPoint] = []
    for h in days[0].get("hour") or []:
        try:
            points.append(
                HourlyPoint(
                    time=h.get("time", ""),
                    precip_mm=float(h.get("precip_mm", 0.0)),
                    chance_of_rain=int(h.get("chance_of_rain", 0)),
                    condition_text=(h.get("condition") or {}).get("text", ""),
                )
            )
        except (TypeError, ValueError):
            logger.warning("Skipping malformed hourly entry: %r", h)
    return points


def _extract_alerts(payload: dict) -> list[WeatherAlert]:
    alerts = (payload.get("alerts") or {}).get("alert") or []
    return [
        WeatherAlert(
            headline=a.get("headline") or a.get("event", ""),
            event=a.get("event", ""),
            severity=a.get("severity", ""),
        )
        for a in alerts
        if a.get("headline") or a.get("event")
    ]

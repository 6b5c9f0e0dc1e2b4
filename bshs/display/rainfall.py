"""Rainfall intensity over the next few hours from the hourly forecast."""

from datetime import datetime, timedelta

from bshs.models.forecast import HourlyPoint, RainfallIntensity, WeatherReport

LIGHT_MAX_MM = 2.5  # mm/h, exclusive
MODERATE_MAX_MM = 7.6  # mm/h, exclusive

TIME_FORMAT = "%Y-%m-%d %H:%M"


def classify_rate(mm_per_hour: float) -> RainfallIntensity:
    if mm_per_hour <= 0:
        return RainfallIntensity.NONE
    if mm_per_hour < LIGHT_MAX_MM:
        return RainfallIntensity.LIGHT
    if mm_per_hour < MODERATE_MAX_MM:
        return RainfallIntensity.MODERATE
    return RainfallIntensity.HEAVY


def upcoming_hours(
    hourly: list[HourlyPoint], now: datetime, window_hours: int
) -> list[HourlyPoint]:
    """Hourly points from the start of the current hour up to the window end."""
    start = now.replace(minute=0, second=0, microsecond=0)
    end = start + timedelta(hours=window_hours)
    selected = []
    for point in hourly:
        t = _parse_time(point.time)
        if t is not None and start <= t < end:
            selected.append(point)
    return selected


def rainfall_intensity(
    report: WeatherReport, window_hours: int = 3, now: datetime | None = None
) -> RainfallIntensity:
    """Classify the heaviest expected rate in the window.

    Falls back to the current precipitation when no hourly data covers
    the window (or the local time is unknown).
    """
    if now is None:
        now = _parse_time(report.local_time)

    rates = [report.precip_mm]
    if now is not None:
        rates.extend(p.precip_mm for p in upcoming_hours(report.hourly, now, window_hours))
    return classify_rate(max(rates))


def _parse_time(value: str) -> datetime | None:
    try:
        return datetime.strptime(value.strip(), TIME_FORMAT)
    except (ValueError, AttributeError):
        return None

"""WeatherAPI.com forecast client. Single-shot, no retry."""

import logging

import httpx

from bshs.config.defaults import (
    DEFAULT_LOCATION,
    DEFAULT_USER_AGENT,
    WEATHERAPI_BASE_URL,
)
from bshs.config.schema import ProxyConfig

logger = logging.getLogger(__name__)


class UpstreamStatusError(Exception):
    """Upstream answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"upstream returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class WeatherApiClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = WEATHERAPI_BASE_URL,
        location: str = DEFAULT_LOCATION,
        days: int = 1,
        alerts: bool = True,
        aqi: bool = False,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.location = location
        self.days = days
        self.alerts = alerts
        self.aqi = aqi
        self.user_agent = user_agent
        self.timeout = timeout

    @classmethod
    def from_config(cls, api_key: str, config: ProxyConfig) -> "WeatherApiClient":
        return cls(
            api_key=api_key,
            base_url=config.upstream_base_url,
            location=config.location,
            days=config.forecast_days,
            alerts=config.include_alerts,
            aqi=config.include_aqi,
            user_agent=config.user_agent,
            timeout=config.timeout_seconds,
        )

    def get_forecast(self) -> dict:
        """Fetch current conditions plus the hourly forecast for the fixed location.

        Raises UpstreamStatusError on a non-2xx answer. Transport errors
        (httpx.RequestError) and undecodable bodies (ValueError) propagate.
        """
        url = f"{self.base_url}/forecast.json"
        params = {
            "key": self.api_key,
            "q": self.location,
            "days": self.days,
            "aqi": "yes" if self.aqi else "no",
            "alerts": "yes" if self.alerts else "no",
        }
        headers = {"User-Agent": self.user_agent}

        resp = httpx.get(
            url,
            params=params,
            headers=headers,
            timeout=self.timeout,
            follow_redirects=True,
        )
        if not resp.is_success:
            raise UpstreamStatusError(resp.status_code, resp.text)
        logger.debug("Upstream forecast OK for %s", self.location)
        return resp.json()

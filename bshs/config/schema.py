"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from bshs.config.defaults import (
    DEFAULT_ALLOWED_ORIGIN,
    DEFAULT_LOCATION,
    DEFAULT_USER_AGENT,
    WEATHERAPI_BASE_URL,
)


class ProxyConfig(BaseModel):
    model_config = {"extra": "forbid"}

    upstream_base_url: str = WEATHERAPI_BASE_URL
    api_key_env: str = "WEATHER_API_KEY"
    location: str = DEFAULT_LOCATION
    forecast_days: int = Field(default=1, ge=1, le=14)
    include_alerts: bool = True
    include_aqi: bool = False
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    allowed_origin: str = DEFAULT_ALLOWED_ORIGIN
    cache_s_maxage: int = Field(default=300, ge=0)
    cache_stale_while_revalidate: int = Field(default=600, ge=0)


class PageConfig(BaseModel):
    model_config = {"extra": "forbid"}

    proxy_url: str = "http://127.0.0.1:8000/api/weather"
    weather_refresh_seconds: int = Field(default=600, ge=1)
    reminder_refresh_seconds: int = Field(default=30, ge=1)
    rainfall_window_hours: int = Field(default=3, ge=1, le=24)
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    reminders: list[str] = []


class SiteConfig(BaseModel):
    model_config = {"extra": "forbid"}

    proxy: ProxyConfig = ProxyConfig()
    page: PageConfig = PageConfig()

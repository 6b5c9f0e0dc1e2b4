"""Weather proxy — FastAPI app relaying WeatherAPI.com forecasts without exposing the key."""

import logging
from datetime import UTC, datetime

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from bshs.config.loader import resolve_api_key
from bshs.config.schema import SiteConfig
from bshs.ingest.weatherapi_client import UpstreamStatusError, WeatherApiClient

logger = logging.getLogger(__name__)

ALLOWED_METHODS = "GET, OPTIONS"
ANY_METHOD = ["GET", "OPTIONS", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


def cors_headers(config: SiteConfig) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": config.proxy.allowed_origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": "Content-Type",
    }


def cache_control(config: SiteConfig) -> str:
    return (
        f"public, s-maxage={config.proxy.cache_s_maxage}, "
        f"stale-while-revalidate={config.proxy.cache_stale_while_revalidate}"
    )


def create_app(config: SiteConfig | None = None) -> FastAPI:
    config = config or SiteConfig()
    app = FastAPI(title="BSHS Weather Proxy", version="1.0.0")
    app.state.config = config

    def _json(status: int, body: dict, **extra: str) -> JSONResponse:
        return JSONResponse(
            status_code=status, content=body, headers={**cors_headers(config), **extra}
        )

    # ── Weather relay ──────────────────────────────────────────────

    @app.api_route("/api/weather", methods=ANY_METHOD)
    def weather(request: Request):
        """Relay the fixed-location forecast. GET only; OPTIONS is preflight."""
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=cors_headers(config))

        if request.method != "GET":
            return _json(405, {
                "error": "Method not allowed",
                "message": "Only GET requests are supported",
            })

        api_key = resolve_api_key(config)
        if api_key is None:
            logger.error(
                "%s environment variable not set", config.proxy.api_key_env
            )
            return _json(500, {
                "error": "Server configuration error",
                "message": "Weather service is not properly configured",
            })

        client = WeatherApiClient.from_config(api_key, config.proxy)
        try:
            data = client.get_forecast()
            # NaN/Infinity decode fine but fail strict rendering
            return _json(200, data, **{"Cache-Control": cache_control(config)})
        except UpstreamStatusError as e:
            logger.error("Weather API error: %d %s", e.status_code, e.body)
            return _json(e.status_code, {
                "error": "Weather API error",
                "message": "Unable to fetch weather data from provider",
                "status": e.status_code,
            })
        except (httpx.HTTPError, ValueError):
            logger.exception(
                "Weather proxy error at %s", datetime.now(UTC).isoformat()
            )
            return _json(500, {
                "error": "Failed to fetch weather data",
                "message": (
                    "The weather service is temporarily unavailable. "
                    "Please try again later."
                ),
            })

    # ── Health ─────────────────────────────────────────────────────

    @app.get("/api/health")
    def health():
        """Report whether the upstream key is configured (never its value)."""
        return _json(200, {
            "status": "ok",
            "configured": resolve_api_key(config) is not None,
        })

    return app


app = create_app()

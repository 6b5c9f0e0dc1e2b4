"""Page-side client for the /api/weather proxy."""

import httpx


class ProxyWeatherClient:
    def __init__(self, proxy_url: str, timeout: float = 10.0):
        self.proxy_url = proxy_url
        self.timeout = timeout

    def fetch(self) -> dict:
        """GET the proxy and return the forecast payload.

        Non-2xx raises httpx.HTTPStatusError. Never falls back to the
        upstream provider; the API key stays server-side.
        """
        resp = httpx.get(
            self.proxy_url,
            headers={"Accept": "application/json"},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        return resp.json()

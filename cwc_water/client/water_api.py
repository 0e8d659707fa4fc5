"""Async client for the water data API."""

from typing import Any, Optional
from urllib.parse import urlencode

import httpx

from cwc_water.utils.config import settings
from cwc_water.utils.errors import WaterApiError


def build_query(params: Optional[dict] = None) -> str:
    """Query string from ``params``, skipping ``None`` values."""
    if not params:
        return ""
    present = {k: v for k, v in params.items() if v is not None}
    return f"?{urlencode(present)}" if present else ""


class WaterApiClient:
    """Thin wrapper over ``httpx.AsyncClient`` for ``/api/water``."""

    def __init__(self, base_url: str = None, timeout: float = None,
                 transport: httpx.AsyncBaseTransport = None):
        self.base_url = (base_url or settings.client.base_url).rstrip("/")
        self._client = httpx.AsyncClient(
            timeout=timeout or settings.client.timeout_seconds,
            transport=transport,
        )

    async def _request_json(self, path: str) -> Any:
        resp = await self._client.get(f"{self.base_url}{path}")
        if not resp.is_success:
            raise WaterApiError(resp.text or f"Request failed: {resp.status_code}", resp.status_code)
        return resp.json()

    async def reservoirs(self, limit: int = None) -> list[dict]:
        return await self._request_json(f"/reservoir-levels{build_query({'limit': limit})}")

    async def discharges(self, limit: int = None) -> list[dict]:
        return await self._request_json(f"/basin-discharges{build_query({'limit': limit})}")

    async def rainfall(self, limit: int = None) -> list[dict]:
        return await self._request_json(f"/rainfall{build_query({'limit': limit})}")

    async def flood_alerts(self) -> list[dict]:
        return await self._request_json("/flood-alerts")

    async def projects(self, limit: int = None) -> list[dict]:
        return await self._request_json(f"/projects{build_query({'limit': limit})}")

    async def dashboard(self) -> dict:
        return await self._request_json("/dashboard")

    async def health(self) -> dict:
        return await self._request_json("/health")

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()

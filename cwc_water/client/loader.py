"""Loads every water dataset at once, falling back to bundled sample data."""

import asyncio
import copy
from dataclasses import dataclass, field, replace
from typing import Optional

from loguru import logger

from cwc_water.client import fallback
from cwc_water.client.water_api import WaterApiClient
from cwc_water.utils.constants import CLIENT_ERROR_MESSAGE, CLIENT_LIMITS


@dataclass
class WaterDataState:
    reservoirs: list = field(default_factory=lambda: copy.deepcopy(fallback.RESERVOIR_LEVELS))
    discharges: list = field(default_factory=lambda: copy.deepcopy(fallback.BASIN_DISCHARGES))
    rainfall: list = field(default_factory=lambda: copy.deepcopy(fallback.RAINFALL_SUMMARIES))
    alerts: list = field(default_factory=lambda: copy.deepcopy(fallback.FLOOD_ALERTS))
    projects: list = field(default_factory=lambda: copy.deepcopy(fallback.WATER_PROJECTS))
    dashboard: dict = field(default_factory=lambda: dict(fallback.DASHBOARD_HIGHLIGHTS))
    loading: bool = True
    error: Optional[str] = None


def _or_fallback(items, default):
    """Empty results mean the store has not been seeded yet."""
    return items if items else copy.deepcopy(default)


class WaterDataLoader:
    """Fetches all six endpoints concurrently into a single state object.

    Loading never raises: on any failure the state keeps its fallback data
    and ``error`` carries a user-facing message. After :meth:`close` the
    state is no longer written.
    """

    def __init__(self, api: WaterApiClient = None):
        self.api = api or WaterApiClient()
        self.state = WaterDataState()
        self._active = True
        self._task: Optional[asyncio.Task] = None

    @property
    def trendline(self) -> list[dict]:
        return [
            {"name": r.get("reservoirName"), "value": r.get("percentLiveStorage")}
            for r in self.state.reservoirs
        ]

    async def load(self) -> WaterDataState:
        try:
            reservoirs, discharges, rainfall, alerts, projects, dashboard = await asyncio.gather(
                self.api.reservoirs(limit=CLIENT_LIMITS["reservoirs"]),
                self.api.discharges(limit=CLIENT_LIMITS["discharges"]),
                self.api.rainfall(limit=CLIENT_LIMITS["rainfall"]),
                self.api.flood_alerts(),
                self.api.projects(limit=CLIENT_LIMITS["projects"]),
                self.api.dashboard(),
            )
        except Exception as e:
            if self._active:
                logger.error(f"Failed to load water datasets: {e}")
                self.state = replace(self.state, loading=False, error=CLIENT_ERROR_MESSAGE)
            return self.state

        if not self._active:
            return self.state

        self.state = WaterDataState(
            reservoirs=_or_fallback(reservoirs, fallback.RESERVOIR_LEVELS),
            discharges=_or_fallback(discharges, fallback.BASIN_DISCHARGES),
            rainfall=_or_fallback(rainfall, fallback.RAINFALL_SUMMARIES),
            alerts=_or_fallback(alerts, fallback.FLOOD_ALERTS),
            projects=_or_fallback(projects, fallback.WATER_PROJECTS),
            dashboard=_or_fallback(dashboard, fallback.DASHBOARD_HIGHLIGHTS),
            loading=False,
            error=None,
        )
        logger.info(
            f"Loaded water datasets: {len(self.state.reservoirs)} reservoirs, "
            f"{len(self.state.discharges)} discharges, {len(self.state.alerts)} alerts"
        )
        return self.state

    def start(self) -> asyncio.Task:
        """Begin loading in the background on the running loop."""
        self._task = asyncio.create_task(self.load())
        return self._task

    async def close(self):
        """Cancel any in-flight load and release the HTTP client."""
        self._active = False
        if self._task is not None and not self._task.done():
            self._task.cancel()
            await asyncio.gather(self._task, return_exceptions=True)
        await self.api.aclose()

"""Client for the water data API."""

from cwc_water.client.loader import WaterDataLoader, WaterDataState
from cwc_water.client.water_api import WaterApiClient, build_query

__all__ = ["WaterDataLoader", "WaterDataState", "WaterApiClient", "build_query"]

import asyncio

import httpx
import pytest

from cwc_water.api.main import create_app
from cwc_water.client import WaterApiClient, WaterDataLoader, build_query
from cwc_water.client import fallback
from cwc_water.utils.constants import CLIENT_ERROR_MESSAGE
from cwc_water.utils.errors import WaterApiError

BASE = "http://testserver/api/water"


def _asgi_client(connection, config):
    app = create_app(connection=connection, config=config)
    return WaterApiClient(base_url=BASE, transport=httpx.ASGITransport(app=app))


def _mock_client(handler):
    return WaterApiClient(base_url=BASE, transport=httpx.MockTransport(handler))


def test_build_query_skips_missing_values():
    assert build_query() == ""
    assert build_query({"limit": None}) == ""
    assert build_query({"limit": 6}) == "?limit=6"
    assert build_query({"limit": 6, "q": "a b"}) == "?limit=6&q=a+b"


def test_non_success_response_raises_with_body():
    client = _mock_client(lambda request: httpx.Response(500, text='{"message":"boom"}'))
    with pytest.raises(WaterApiError) as exc:
        asyncio.run(client.reservoirs(limit=3))
    assert exc.value.status_code == 500
    assert "boom" in str(exc.value)


def test_non_success_without_body_reports_status():
    client = _mock_client(lambda request: httpx.Response(503))
    with pytest.raises(WaterApiError, match="Request failed: 503"):
        asyncio.run(client.dashboard())


def test_limit_is_sent_as_query_param():
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json=[])

    asyncio.run(_mock_client(handler).discharges(limit=12))
    assert seen == [f"{BASE}/basin-discharges?limit=12"]


def test_loader_starts_with_fallback_data():
    loader = WaterDataLoader(api=_mock_client(lambda r: httpx.Response(200, json=[])))
    assert loader.state.loading is True
    assert loader.state.error is None
    assert loader.state.reservoirs == fallback.RESERVOIR_LEVELS


def test_loader_reads_live_data(connection, config, seeded_db):
    loader = WaterDataLoader(api=_asgi_client(connection, config))
    state = asyncio.run(loader.load())

    assert state.loading is False
    assert state.error is None
    assert len(state.reservoirs) == 6
    assert len(state.discharges) == 12
    assert len(state.rainfall) == 8
    assert [a["severity"] for a in state.alerts] == ["warning", "alert", "watch"]
    assert state.dashboard["activeAlerts"] == 3
    assert loader.trendline[0] == {
        "name": state.reservoirs[0]["reservoirName"],
        "value": state.reservoirs[0]["percentLiveStorage"],
    }


def test_loader_substitutes_fallback_for_empty_results(connection, config):
    loader = WaterDataLoader(api=_asgi_client(connection, config))
    state = asyncio.run(loader.load())

    assert state.error is None
    assert state.loading is False
    assert state.reservoirs == fallback.RESERVOIR_LEVELS
    assert state.discharges == fallback.BASIN_DISCHARGES
    assert state.rainfall == fallback.RAINFALL_SUMMARIES
    assert state.alerts == fallback.FLOOD_ALERTS
    assert state.projects == fallback.WATER_PROJECTS
    # dashboard is computed even over an empty store
    assert state.dashboard["activeAlerts"] == 0


def test_loader_unreachable_store_keeps_fallback():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    loader = WaterDataLoader(api=_mock_client(handler))
    state = asyncio.run(loader.load())

    assert state.loading is False
    assert state.error == CLIENT_ERROR_MESSAGE
    assert state.reservoirs == fallback.RESERVOIR_LEVELS
    assert state.discharges == fallback.BASIN_DISCHARGES
    assert state.rainfall == fallback.RAINFALL_SUMMARIES
    assert state.alerts == fallback.FLOOD_ALERTS
    assert state.projects == fallback.WATER_PROJECTS
    assert state.dashboard == fallback.DASHBOARD_HIGHLIGHTS


def test_loader_server_error_is_absorbed(config):
    from conftest import StubConnection

    app = create_app(connection=StubConnection(error=RuntimeError("store down")), config=config)
    loader = WaterDataLoader(api=WaterApiClient(base_url=BASE, transport=httpx.ASGITransport(app=app)))
    state = asyncio.run(loader.load())
    assert state.error == CLIENT_ERROR_MESSAGE
    assert state.projects == fallback.WATER_PROJECTS


def test_close_cancels_in_flight_load():
    async def handler(request):
        await asyncio.sleep(30)
        return httpx.Response(200, json=[])

    async def scenario():
        loader = WaterDataLoader(api=_mock_client(handler))
        task = loader.start()
        await asyncio.sleep(0.01)
        await loader.close()
        return loader, task

    loader, task = asyncio.run(scenario())
    assert task.done()
    assert loader.state.loading is True
    assert loader.state.error is None


def test_fallback_dashboard_averages():
    assert fallback.DASHBOARD_HIGHLIGHTS["avgReservoirStorage"] == 86
    assert fallback.DASHBOARD_HIGHLIGHTS["avgRainfallDeparture"] == 1
    assert fallback.DASHBOARD_HIGHLIGHTS["activeAlerts"] == 3


def test_health_through_client(connection, config):
    async def scenario():
        async with _asgi_client(connection, config) as client:
            return await client.health()

    assert asyncio.run(scenario())["status"] == "ok"

"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from cwc_water import __version__
from cwc_water.api import queries
from cwc_water.store.connection import MongoConnection
from cwc_water.utils.config import Settings, settings as default_settings
from cwc_water.utils.constants import API_PREFIX, DEFAULT_LIMITS
from cwc_water.utils.logger import setup_logging


class HealthResponse(BaseModel):
    status: str
    time: str


class DashboardResponse(BaseModel):
    totalStations: int
    activeAlerts: int
    riversMonitored: int
    lastUpdated: str
    avgReservoirStorage: int
    avgRainfallDeparture: int


async def get_database(request: Request):
    """Database handle for the request; connects on first use."""
    try:
        return await request.app.state.connection.database()
    except Exception as e:
        logger.error(f"Store unavailable: {e}")
        raise HTTPException(status_code=500, detail=str(e) or "Internal server error")


def get_source_tag(request: Request) -> str:
    return request.app.state.source_tag


async def _run(query, *args):
    try:
        return await query(*args)
    except Exception as e:
        logger.error(f"API error in {query.__name__}: {e}")
        raise HTTPException(status_code=500, detail=str(e) or "Internal server error")


router = APIRouter(prefix=API_PREFIX, tags=["water"])


@router.get("/health", response_model=HealthResponse)
async def water_health():
    return await health()


@router.get("/reservoir-levels")
async def reservoir_levels(
    limit: Optional[str] = Query(None),
    db=Depends(get_database),
    source_tag: str = Depends(get_source_tag),
):
    """Latest reservoir levels, newest date first."""
    n = queries.parse_limit(limit, DEFAULT_LIMITS["reservoirs"])
    return await _run(queries.fetch_reservoir_levels, db, source_tag, n)


@router.get("/basin-discharges")
async def basin_discharges(
    limit: Optional[str] = Query(None),
    db=Depends(get_database),
    source_tag: str = Depends(get_source_tag),
):
    n = queries.parse_limit(limit, DEFAULT_LIMITS["discharges"])
    return await _run(queries.fetch_basin_discharges, db, source_tag, n)


@router.get("/rainfall")
async def rainfall(
    limit: Optional[str] = Query(None),
    db=Depends(get_database),
    source_tag: str = Depends(get_source_tag),
):
    n = queries.parse_limit(limit, DEFAULT_LIMITS["rainfall"])
    return await _run(queries.fetch_rainfall, db, source_tag, n)


@router.get("/flood-alerts")
async def flood_alerts(db=Depends(get_database), source_tag: str = Depends(get_source_tag)):
    """All active flood alerts, most severe first."""
    return await _run(queries.fetch_flood_alerts, db, source_tag)


@router.get("/projects")
async def projects(
    limit: Optional[str] = Query(None),
    db=Depends(get_database),
    source_tag: str = Depends(get_source_tag),
):
    n = queries.parse_limit(limit, DEFAULT_LIMITS["projects"])
    return await _run(queries.fetch_projects, db, source_tag, n)


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(request: Request, db=Depends(get_database), source_tag: str = Depends(get_source_tag)):
    """Headline statistics over a bounded sample."""
    cfg = request.app.state.settings.dashboard
    return await _run(queries.build_dashboard, db, source_tag, cfg.sample_size, cfg.total_stations)


async def health():
    """Health check endpoint."""
    return {"status": "ok", "time": queries.utc_now_iso()}


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"API error: {exc}")
    return JSONResponse(status_code=500, content={"message": str(exc) or "Internal server error"})


def create_app(connection: MongoConnection = None, config: Settings = None) -> FastAPI:
    """Build the API.

    Without an explicit ``connection`` one is created from ``config`` at
    startup, which fails fast when the connection string is missing. The
    connection is closed on shutdown either way. Logging is configured from
    ``config`` at startup.
    """
    config = config or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(config)
        if app.state.connection is None:
            app.state.connection = MongoConnection.from_config(config.mongo)
        logger.info(f"Water data API serving tag '{app.state.source_tag}'")
        try:
            yield
        finally:
            await app.state.connection.close()

    app = FastAPI(
        title="CWC Water Data API",
        description="Synthetic hydrology datasets for the water resources portal",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.connection = connection
    app.state.settings = config
    app.state.source_tag = config.mongo.source_tag

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.add_api_route("/health", health, methods=["GET"], response_model=HealthResponse)
    app.include_router(router)
    return app

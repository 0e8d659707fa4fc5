"""Read queries behind the water data endpoints."""

import asyncio
import math
import uuid
from datetime import datetime, timezone

from cwc_water.generation.classify import severity_rank
from cwc_water.generation.sampler import round_half_up
from cwc_water.store import collections as c
from cwc_water.utils.config import settings
from cwc_water.utils.constants import MAX_LIMIT

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def parse_limit(value, fallback: int) -> int:
    """Coerce a ``limit`` query value, falling back on anything not finite and positive.

    Values past the store's int32 range are clamped to :data:`MAX_LIMIT`.
    """
    if value is None or isinstance(value, bool):
        return fallback
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return fallback
    if not math.isfinite(parsed) or parsed <= 0:
        return fallback
    return min(max(1, int(parsed)), MAX_LIMIT)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _random_id() -> str:
    n = uuid.uuid4().int
    chars = []
    while n and len(chars) < 11:
        n, rem = divmod(n, 36)
        chars.append(_BASE36[rem])
    return "".join(chars)


def project_document(doc: dict) -> dict:
    """Client-facing copy of a stored document: ``_id`` becomes a string ``id``."""
    rest = {k: v for k, v in doc.items() if k != "_id"}
    doc_id = doc.get("_id")
    return {"id": str(doc_id) if doc_id is not None else _random_id(), **rest}


async def _find(db, collection: str, source_tag: str, sort=None, limit: int = 0) -> list[dict]:
    cursor = db[collection].find(c.tag_filter(source_tag), sort=sort, limit=limit)
    return await cursor.to_list(length=None)


async def fetch_reservoir_levels(db, source_tag: str, limit: int) -> list[dict]:
    docs = await _find(db, c.RESERVOIRS, source_tag, c.RESERVOIR_SORT, limit)
    return [project_document(d) for d in docs]


async def fetch_basin_discharges(db, source_tag: str, limit: int) -> list[dict]:
    docs = await _find(db, c.DISCHARGES, source_tag, c.DISCHARGE_SORT, limit)
    return [project_document(d) for d in docs]


async def fetch_rainfall(db, source_tag: str, limit: int) -> list[dict]:
    docs = await _find(db, c.RAINFALL, source_tag, c.RAINFALL_SORT, limit)
    return [project_document(d) for d in docs]


async def fetch_flood_alerts(db, source_tag: str) -> list[dict]:
    """All alerts, most urgent first (warning > alert > watch)."""
    docs = await _find(db, c.ALERTS, source_tag)
    docs.sort(key=lambda d: severity_rank(d.get("severity")), reverse=True)
    return [project_document(d) for d in docs]


async def fetch_projects(db, source_tag: str, limit: int) -> list[dict]:
    docs = await _find(db, c.PROJECTS, source_tag, c.PROJECT_SORT, limit)
    return [project_document(d) for d in docs]


def _mean(docs: list[dict], field: str) -> int:
    total = sum(d.get(field) or 0 for d in docs)
    return round_half_up(total / max(len(docs), 1))


async def build_dashboard(db, source_tag: str, sample_size: int = None, total_stations: int = None) -> dict:
    """Headline numbers over a capped sample of each collection.

    Averages and the river count only see the first ``sample_size`` documents
    of each collection, so they are approximate once a collection grows past
    the cap.
    """
    sample_size = sample_size or settings.dashboard.sample_size
    if total_stations is None:
        total_stations = settings.dashboard.total_stations

    reservoirs, discharges, rainfall, alerts = await asyncio.gather(
        _find(db, c.RESERVOIRS, source_tag, limit=sample_size),
        _find(db, c.DISCHARGES, source_tag, limit=sample_size),
        _find(db, c.RAINFALL, source_tag, limit=sample_size),
        _find(db, c.ALERTS, source_tag),
    )

    return {
        "totalStations": total_stations,
        "activeAlerts": len(alerts),
        "riversMonitored": len({d.get("river") for d in discharges}),
        "lastUpdated": utc_now_iso(),
        "avgReservoirStorage": _mean(reservoirs, "percentLiveStorage"),
        "avgRainfallDeparture": _mean(rainfall, "departureFromNormalPercent"),
    }

"""Collection names and query specs."""

from pymongo import ASCENDING, DESCENDING

from cwc_water.utils.constants import COLLECTIONS

RESERVOIRS = COLLECTIONS["reservoirs"]
DISCHARGES = COLLECTIONS["discharges"]
RAINFALL = COLLECTIONS["rainfall"]
ALERTS = COLLECTIONS["alerts"]
PROJECTS = COLLECTIONS["projects"]

# Sort orders
RESERVOIR_SORT = [("date", DESCENDING), ("reservoirName", ASCENDING)]
DISCHARGE_SORT = [("date", DESCENDING), ("station", ASCENDING)]
RAINFALL_SORT = [("date", DESCENDING), ("region", ASCENDING)]
PROJECT_SORT = [("completionPercent", DESCENDING)]


def tag_filter(source_tag: str) -> dict:
    return {"sourceTag": source_tag}

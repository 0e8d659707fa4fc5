"""Project-wide constants."""

DEFAULT_SOURCE_TAG = "seed-water-v1"

API_PREFIX = "/api/water"

COLLECTIONS = {
    "reservoirs": "reservoir_levels",
    "discharges": "basin_discharges",
    "rainfall": "rainfall_daily",
    "alerts": "flood_alerts",
    "projects": "water_projects",
}

DEFAULT_LIMITS = {
    "reservoirs": 6,
    "discharges": 6,
    "rainfall": 8,
    "projects": 6,
}

# Largest limit passed through to the store, which rejects values past int32
MAX_LIMIT = 2**31 - 1

# Limits the client loader asks for on a full refresh
CLIENT_LIMITS = {
    "reservoirs": 6,
    "discharges": 12,
    "rainfall": 8,
    "projects": 6,
}

# Rainfall category upper bounds in mm, checked in order after the dry case
RAINFALL_THRESHOLDS_MM = {
    "light": 15,
    "moderate": 65,
}

# Higher rank sorts first
SEVERITY_RANK = {
    "warning": 3,
    "alert": 2,
    "watch": 1,
}

# Generation bounds, as fractions of static template capacity
STORAGE_FRACTION = (0.45, 0.95)
LEVEL_FRACTION = (0.6, 0.99)
INFLOW_CUSECS = (500, 6000)
OUTFLOW_CUSECS = (400, 4500)
DISCHARGE_CUMECS = (800, 7500)
DEVIATION_PERCENT = (-25, 45)
RAINFALL_MM = (0, 120)
DEPARTURE_PERCENT = (-80, 120)

FIRST_COMMISSION_YEAR = 2026

CLIENT_ERROR_MESSAGE = "Live water datasets unavailable; showing cached sample data."

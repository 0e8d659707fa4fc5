"""Synthetic dataset generation."""
from cwc_water.generation.builders import (
    build_basin_discharges, build_datasets, build_flood_alerts,
    build_rainfall_summaries, build_reservoir_levels, build_water_projects,
)
from cwc_water.generation.classify import (
    AlertSeverity, DischargeStatus, RainfallCategory,
    classify_discharge, classify_rainfall, severity_rank,
)
from cwc_water.generation.sampler import build_date_window, round_fixed, seeded_float, seeded_number

"""Dataset builders: static templates x date window -> seed documents."""

from datetime import date, timedelta
from typing import Optional

from cwc_water.generation import templates as tpl
from cwc_water.generation.classify import classify_discharge, classify_rainfall
from cwc_water.generation.sampler import round_fixed, round_half_up, seeded_number, today_utc
from cwc_water.store.models import (
    BasinDischarge, Dataset, FloodAlert, RainfallSummary, ReservoirLevel, WaterProject,
)
from cwc_water.utils.constants import (
    COLLECTIONS, DEFAULT_SOURCE_TAG, DEPARTURE_PERCENT, DEVIATION_PERCENT,
    DISCHARGE_CUMECS, FIRST_COMMISSION_YEAR, INFLOW_CUSECS, LEVEL_FRACTION,
    OUTFLOW_CUSECS, RAINFALL_MM, STORAGE_FRACTION,
)


def build_reservoir_levels(dates: list[str], templates=None, tag: str = DEFAULT_SOURCE_TAG) -> list[ReservoirLevel]:
    templates = tpl.RESERVOIRS if templates is None else templates
    docs = []
    for day in dates:
        for t in templates:
            key = f"{t.reservoir_name}-{day}"
            storage = seeded_number(
                t.live_capacity_tmc * STORAGE_FRACTION[0],
                t.live_capacity_tmc * STORAGE_FRACTION[1],
                f"{key}-storage",
            )
            level = seeded_number(
                t.full_reservoir_level_m * LEVEL_FRACTION[0],
                t.full_reservoir_level_m * LEVEL_FRACTION[1],
                f"{key}-level",
            )
            inflow = round_half_up(seeded_number(*INFLOW_CUSECS, f"{key}-inflow", 3))
            outflow = round_half_up(seeded_number(*OUTFLOW_CUSECS, f"{key}-outflow", 3))
            docs.append(ReservoirLevel(
                template=t,
                date=day,
                live_storage_tmc=storage,
                percent_live_storage=round_fixed(storage / t.live_capacity_tmc * 100, 2),
                water_level_meters=level,
                inflow_cusecs=inflow,
                outflow_cusecs=outflow,
                net_inflow_cusecs=inflow - outflow,
                source_tag=tag,
            ))
    return docs


def build_basin_discharges(dates: list[str], templates=None, tag: str = DEFAULT_SOURCE_TAG) -> list[BasinDischarge]:
    templates = tpl.DISCHARGE_STATIONS if templates is None else templates
    docs = []
    for day in dates:
        for t in templates:
            key = f"{t.station}-{day}"
            discharge = round_half_up(seeded_number(*DISCHARGE_CUMECS, f"{key}-discharge", 3))
            status = classify_discharge(discharge, t.alert_level_cumecs, t.danger_level_cumecs)
            docs.append(BasinDischarge(
                template=t,
                date=day,
                discharge_cumecs=discharge,
                status=status.value,
                deviation_percent=round_fixed(seeded_number(*DEVIATION_PERCENT, f"{key}-deviation"), 1),
                source_tag=tag,
            ))
    return docs


def build_rainfall_summaries(dates: list[str], templates=None, tag: str = DEFAULT_SOURCE_TAG) -> list[RainfallSummary]:
    templates = tpl.RAINFALL_STATIONS if templates is None else templates
    docs = []
    for day in dates:
        for t in templates:
            key = f"{t.district}-{day}"
            rainfall = seeded_number(*RAINFALL_MM, f"{key}-rain")
            docs.append(RainfallSummary(
                station=t,
                date=day,
                rainfall_mm=rainfall,
                departure_from_normal_percent=seeded_number(*DEPARTURE_PERCENT, f"{key}-departure"),
                category=classify_rainfall(rainfall).value,
                source_tag=tag,
            ))
    return docs


def build_flood_alerts(templates=None, tag: str = DEFAULT_SOURCE_TAG, today: Optional[date] = None) -> list[FloodAlert]:
    """Alerts are static content; only the peak date moves with the index."""
    templates = tpl.FLOOD_ALERTS if templates is None else templates
    today = today or today_utc()
    return [
        FloodAlert(
            seed=seed,
            advisory=tpl.ADVISORIES[min(idx, len(tpl.ADVISORIES) - 1)],
            last_updated_at=today.isoformat(),
            expected_peak_date=(today + timedelta(days=idx + 1)).isoformat(),
            source_tag=tag,
        )
        for idx, seed in enumerate(templates)
    ]


def build_water_projects(templates=None, tag: str = DEFAULT_SOURCE_TAG) -> list[WaterProject]:
    templates = tpl.PROJECTS if templates is None else templates
    projects = []
    for idx, seed in enumerate(templates):
        milestone, issues = tpl.PROJECT_MILESTONES[idx % 2]
        projects.append(WaterProject(
            seed=seed,
            commission_year=FIRST_COMMISSION_YEAR + idx,
            next_milestone=milestone,
            issues=list(issues),
            source_tag=tag,
        ))
    return projects


def build_datasets(dates: list[str], tag: str = DEFAULT_SOURCE_TAG, today: Optional[date] = None) -> list[Dataset]:
    """All five datasets in seeding order."""
    return [
        Dataset("Reservoir levels", COLLECTIONS["reservoirs"], build_reservoir_levels(dates, tag=tag)),
        Dataset("Basin discharge", COLLECTIONS["discharges"], build_basin_discharges(dates, tag=tag)),
        Dataset("Rainfall summary", COLLECTIONS["rainfall"], build_rainfall_summaries(dates, tag=tag)),
        Dataset("Flood alerts", COLLECTIONS["alerts"], build_flood_alerts(tag=tag, today=today)),
        Dataset("Project stats", COLLECTIONS["projects"], build_water_projects(tag=tag)),
    ]

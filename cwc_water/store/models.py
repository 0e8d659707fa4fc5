"""Data models for seeded water documents."""

from dataclasses import dataclass, field


@dataclass
class ReservoirTemplate:
    """Static reservoir metadata."""
    reservoir_name: str
    basin: str
    river: str
    state: str
    live_capacity_tmc: float
    full_reservoir_level_m: float


@dataclass
class StationTemplate:
    """Discharge gauging station with flood thresholds."""
    basin: str
    station: str
    river: str
    state: str
    alert_level_cumecs: float
    danger_level_cumecs: float


@dataclass
class RainfallStation:
    region: str
    state: str
    district: str


@dataclass
class FloodAlertSeed:
    basin: str
    location: str
    severity: str
    impact: str


@dataclass
class ProjectSeed:
    project_name: str
    basin: str
    state: str
    phase: str
    budget_crore: float
    completion_percent: float
    beneficiaries_lakh: float


@dataclass
class ReservoirLevel:
    """Daily storage snapshot of one reservoir."""
    template: ReservoirTemplate
    date: str
    live_storage_tmc: float
    percent_live_storage: float
    water_level_meters: float
    inflow_cusecs: int
    outflow_cusecs: int
    net_inflow_cusecs: int
    source_tag: str

    def to_dict(self) -> dict:
        return {
            "reservoirName": self.template.reservoir_name,
            "basin": self.template.basin,
            "river": self.template.river,
            "state": self.template.state,
            "liveCapacityTMC": self.template.live_capacity_tmc,
            "fullReservoirLevelM": self.template.full_reservoir_level_m,
            "date": self.date,
            "liveStorageTMC": self.live_storage_tmc,
            "percentLiveStorage": self.percent_live_storage,
            "waterLevelMeters": self.water_level_meters,
            "inflowCusecs": self.inflow_cusecs,
            "outflowCusecs": self.outflow_cusecs,
            "netInflowCusecs": self.net_inflow_cusecs,
            "sourceTag": self.source_tag,
        }


@dataclass
class BasinDischarge:
    """Daily discharge reading at a gauging station."""
    template: StationTemplate
    date: str
    discharge_cumecs: int
    status: str
    deviation_percent: float
    source_tag: str

    def to_dict(self) -> dict:
        return {
            "basin": self.template.basin,
            "station": self.template.station,
            "river": self.template.river,
            "state": self.template.state,
            "alertLevelCumecs": self.template.alert_level_cumecs,
            "dangerLevelCumecs": self.template.danger_level_cumecs,
            "date": self.date,
            "dischargeCumecs": self.discharge_cumecs,
            "status": self.status,
            "deviationPercent": self.deviation_percent,
            "sourceTag": self.source_tag,
        }


@dataclass
class RainfallSummary:
    station: RainfallStation
    date: str
    rainfall_mm: float
    departure_from_normal_percent: float
    category: str
    source_tag: str

    def to_dict(self) -> dict:
        return {
            "region": self.station.region,
            "state": self.station.state,
            "district": self.station.district,
            "date": self.date,
            "rainfallMm": self.rainfall_mm,
            "departureFromNormalPercent": self.departure_from_normal_percent,
            "category": self.category,
            "sourceTag": self.source_tag,
        }


@dataclass
class FloodAlert:
    seed: FloodAlertSeed
    advisory: str
    last_updated_at: str
    expected_peak_date: str
    source_tag: str

    def to_dict(self) -> dict:
        return {
            "basin": self.seed.basin,
            "location": self.seed.location,
            "severity": self.seed.severity,
            "impact": self.seed.impact,
            "advisory": self.advisory,
            "lastUpdatedAt": self.last_updated_at,
            "expectedPeakDate": self.expected_peak_date,
            "sourceTag": self.source_tag,
        }


@dataclass
class WaterProject:
    seed: ProjectSeed
    commission_year: int
    next_milestone: str
    source_tag: str
    issues: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "projectName": self.seed.project_name,
            "basin": self.seed.basin,
            "state": self.seed.state,
            "phase": self.seed.phase,
            "budgetCrore": self.seed.budget_crore,
            "completionPercent": self.seed.completion_percent,
            "beneficiariesLakh": self.seed.beneficiaries_lakh,
            "commissionYear": self.commission_year,
            "nextMilestone": self.next_milestone,
            "issues": list(self.issues),
            "sourceTag": self.source_tag,
        }


@dataclass
class Dataset:
    """One collection's worth of seed documents."""
    label: str
    collection: str
    documents: list = field(default_factory=list)

    def to_documents(self) -> list[dict]:
        return [doc.to_dict() for doc in self.documents]

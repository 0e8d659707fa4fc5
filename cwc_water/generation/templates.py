"""Static seed templates for the synthetic water datasets."""

from cwc_water.store.models import (
    FloodAlertSeed, ProjectSeed, RainfallStation, ReservoirTemplate, StationTemplate,
)

RESERVOIRS = [
    ReservoirTemplate("Tehri", "Ganga", "Bhagirathi", "Uttarakhand", 71.0, 830.0),
    ReservoirTemplate("Bhakra", "Satluj", "Satluj", "Himachal Pradesh", 72.4, 518.0),
    ReservoirTemplate("Hirakud", "Mahanadi", "Mahanadi", "Odisha", 68.8, 195.0),
    ReservoirTemplate("Sardar Sarovar", "Narmada", "Narmada", "Gujarat", 155.0, 138.7),
    ReservoirTemplate("Nagarjuna Sagar", "Krishna", "Krishna", "Telangana", 312.0, 179.8),
]

DISCHARGE_STATIONS = [
    StationTemplate("Ganga", "Hardinge Bridge", "Ganga", "Uttar Pradesh", 4000, 5500),
    StationTemplate("Brahmaputra", "Dibrugarh", "Brahmaputra", "Assam", 5500, 7000),
    StationTemplate("Godavari", "Polavaram", "Godavari", "Andhra Pradesh", 4500, 6000),
    StationTemplate("Narmada", "Garudeshwar", "Narmada", "Gujarat", 3500, 5200),
]

RAINFALL_STATIONS = [
    RainfallStation("Northwest", "Uttarakhand", "Dehradun"),
    RainfallStation("East & Northeast", "Assam", "Dibrugarh"),
    RainfallStation("Central", "Madhya Pradesh", "Bhopal"),
    RainfallStation("South Peninsula", "Tamil Nadu", "Chennai"),
    RainfallStation("West", "Maharashtra", "Pune"),
]

FLOOD_ALERTS = [
    FloodAlertSeed(
        "Brahmaputra", "Kaziranga, Assam", "warning",
        "Low-lying forest stretches likely to remain inundated; wildlife movement advisories active.",
    ),
    FloodAlertSeed(
        "Ganga", "Patna, Bihar", "watch",
        "River flowing 0.4 m below danger level; embankment patrol teams on standby.",
    ),
    FloodAlertSeed(
        "Godavari", "Bhadrachalam, Telangana", "alert",
        "Second warning level triggered; ferry services halted across the river.",
    ),
]

# Indexed by alert position; later alerts reuse the last advisory
ADVISORIES = [
    "Restrict tourist movement near river islands; deploy mobile veterinary support.",
    "Keep evacuation boats ready and secure temporary shelters in low-lying wards.",
    "Maintain two extra gates open at upstream barrage; continue hourly level reporting.",
]

PROJECTS = [
    ProjectSeed("Upper Yamuna Barrage Automation", "Ganga", "Uttar Pradesh", "Execution", 425, 62, 18),
    ProjectSeed("Brahmaputra Riverfront Floodwalls", "Brahmaputra", "Assam", "Planning", 690, 18, 12),
    ProjectSeed("Godavari Delta Modernisation", "Godavari", "Andhra Pradesh", "Execution", 1035, 47, 26),
    ProjectSeed("National Hydrology Observation Grid", "All India", "Pan-India", "Pilot", 310, 35, 40),
]

# (nextMilestone, issues) alternating by project index parity
PROJECT_MILESTONES = [
    ("SCADA hardware delivery", ["Land acquisition pending", "Need revised DPR"]),
    ("Contract award", ["Environmental clearance under appraisal"]),
]

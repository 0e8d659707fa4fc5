"""Threshold classifiers for derived document fields."""

from enum import Enum

from cwc_water.utils.constants import RAINFALL_THRESHOLDS_MM, SEVERITY_RANK


class DischargeStatus(str, Enum):
    NORMAL = "normal"
    ALERT = "alert"
    DANGER = "danger"


class RainfallCategory(str, Enum):
    DRY = "dry"
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"


class AlertSeverity(str, Enum):
    WATCH = "watch"
    ALERT = "alert"
    WARNING = "warning"

    @property
    def rank(self) -> int:
        return SEVERITY_RANK[self.value]


def classify_discharge(discharge_cumecs: float, alert_level: float, danger_level: float) -> DischargeStatus:
    if discharge_cumecs >= danger_level:
        return DischargeStatus.DANGER
    if discharge_cumecs >= alert_level:
        return DischargeStatus.ALERT
    return DischargeStatus.NORMAL


def classify_rainfall(rainfall_mm: float) -> RainfallCategory:
    if rainfall_mm == 0:
        return RainfallCategory.DRY
    if rainfall_mm < RAINFALL_THRESHOLDS_MM["light"]:
        return RainfallCategory.LIGHT
    if rainfall_mm < RAINFALL_THRESHOLDS_MM["moderate"]:
        return RainfallCategory.MODERATE
    return RainfallCategory.HEAVY


def severity_rank(severity) -> int:
    """Urgency rank for a severity value; unknown values sort last."""
    try:
        return AlertSeverity(severity).rank
    except ValueError:
        return 0

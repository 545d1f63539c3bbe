"""Compensation engine for on-call standby and overtime pay."""

from oncallcalc.engine.calculator import OnCallCalculator
from oncallcalc.engine.compensation import CompensationEngine
from oncallcalc.engine.hours import is_weekend, month_days, standard_monthly_hours
from oncallcalc.engine.reconciler import WorkLogReconciler
from oncallcalc.engine.standby import ShiftAttributor

__all__ = [
    # Pipeline
    "OnCallCalculator",
    # Components
    "CompensationEngine",
    "ShiftAttributor",
    "WorkLogReconciler",
    # Calendar helpers
    "is_weekend",
    "month_days",
    "standard_monthly_hours",
]

"""JSON persistence for the pay-period state.

The stored document uses the same keys as the browser key-value store the
calculator was first written against (``oncall-calc-state``). Loading
normalizes older documents, where ``selectedOnCallDates`` was a list of bare
date strings, into FULL assignments before anything reaches the engine.
"""

import json
import logging
from pathlib import Path
from typing import Any, Union

from oncallcalc.domain.models import (
    MalformedInputError,
    RateProfile,
    Rates,
    ShiftAssignment,
    ShiftVariant,
    WorkLogEntry,
    parse_date,
)
from oncallcalc.state.period import PayPeriodState, generate_log_id

logger = logging.getLogger(__name__)

STATE_KEY = "oncall-calc-state"
DEFAULT_STATE_FILE = f"{STATE_KEY}.json"


def migrate_legacy_assignments(raw: list) -> list:
    """Turn a list of bare date strings into FULL assignment records."""
    if raw and isinstance(raw[0], str):
        logger.info("Migrating %d legacy on-call dates to FULL assignments", len(raw))
        return [{"date": d, "type": ShiftVariant.FULL.value} for d in raw]
    return raw


def state_from_dict(data: dict[str, Any]) -> PayPeriodState:
    """Build a PayPeriodState from a stored document.

    Missing keys fall back to the state defaults.

    Raises:
        MalformedInputError: If a date, variant, profile or number is invalid.
    """
    state = PayPeriodState()

    try:
        if "monthlySalary" in data:
            state.salary = float(data["monthlySalary"])
        if data.get("selectedDate"):
            state.month = parse_date(data["selectedDate"])
        # A cleared hours field was stored as 0 and meant "use standard hours".
        override = data.get("monthlyHoursOverride")
        if override is not None and float(override) > 0:
            state.monthly_hours_override = float(override)
        if "profile" in data:
            state.profile = RateProfile.parse(data["profile"])

        custom = data.get("customRates")
        if custom:
            defaults = Rates()
            state.custom_rates = Rates(
                standby=float(custom.get("onCall", defaults.standby)),
                ot_normal=float(custom.get("otNormal", defaults.ot_normal)),
                ot_holiday=float(custom.get("otHoliday", defaults.ot_holiday)),
            )

        for item in migrate_legacy_assignments(data.get("selectedOnCallDates") or []):
            d = parse_date(item["date"])
            variant = ShiftVariant.parse(item.get("type", ShiftVariant.FULL.value))
            state.assignments[d] = ShiftAssignment(d, variant)

        for item in data.get("workLogs") or []:
            holiday_override = item.get("isHolidayOverride", False)
            if not isinstance(holiday_override, bool):
                raise MalformedInputError(
                    f"isHolidayOverride must be true or false, got {holiday_override!r}"
                )
            state.work_logs.append(
                WorkLogEntry(
                    id=str(item.get("id") or generate_log_id()),
                    date=parse_date(item["date"]),
                    hours=float(item.get("hours", 0)),
                    holiday_override=holiday_override,
                )
            )
    except MalformedInputError:
        raise
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise MalformedInputError(f"Malformed stored state: {e}") from e

    return state


def state_to_dict(state: PayPeriodState) -> dict[str, Any]:
    """Serialize a PayPeriodState to the stored document shape."""
    return {
        "monthlySalary": state.salary,
        "selectedDate": state.month.isoformat(),
        "monthlyHoursOverride": state.monthly_hours_override,
        "profile": state.profile.value,
        "customRates": {
            "onCall": state.custom_rates.standby,
            "otNormal": state.custom_rates.ot_normal,
            "otHoliday": state.custom_rates.ot_holiday,
        },
        "selectedOnCallDates": [
            {"date": d.isoformat(), "type": a.variant.value}
            for d, a in sorted(state.assignments.items())
        ],
        "workLogs": [
            {
                "id": entry.id,
                "date": entry.date.isoformat(),
                "hours": entry.hours,
                "isHolidayOverride": entry.holiday_override,
            }
            for entry in state.work_logs
        ],
    }


class StateStore:
    """Loads and saves a PayPeriodState as a JSON file.

    Example:
        >>> store = StateStore("oncall-calc-state.json")
        >>> state = store.load()
        >>> state.toggle_date(date(2024, 4, 9))
        >>> store.save(state)
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_STATE_FILE):
        self.path = Path(path)

    def load(self) -> PayPeriodState:
        """Load the stored state.

        A missing or unreadable file yields the default state. Structurally
        valid JSON with bad values raises MalformedInputError.
        """
        if not self.path.exists():
            logger.debug("No stored state at %s, using defaults", self.path)
            return PayPeriodState()

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to load state from %s: %s", self.path, e)
            return PayPeriodState()

        if not isinstance(data, dict):
            logger.warning("Ignoring stored state at %s: not a JSON object", self.path)
            return PayPeriodState()

        return state_from_dict(data)

    def save(self, state: PayPeriodState) -> None:
        """Write the state to the JSON file."""
        self.path.write_text(
            json.dumps(state_to_dict(state), indent=2),
            encoding="utf-8",
        )
        logger.debug("Saved state to %s", self.path)

"""Policy definitions for compensation rules.

This module contains configurable policies that define the business rules
for standby hour attribution and pay rates. Policies are kept separate from
the engine to allow independent testing and easy modification.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from oncallcalc.domain.models import MalformedInputError, RateProfile, Rates, ShiftVariant


class StandbyHoursPolicy(ABC):
    """Abstract base class for standby hour attribution."""

    @abstractmethod
    def standby_hours(self, variant: ShiftVariant, is_rest_day: bool) -> float:
        """Get standby hours contributed by one assignment.

        Args:
            variant: The shift variant of the assignment.
            is_rest_day: True if the day is a weekend day or a holiday.

        Returns:
            Standby hours for the day.
        """
        pass


class RateTable(ABC):
    """Abstract base class for resolving a profile into rates."""

    @abstractmethod
    def rates_for(self, profile: RateProfile, custom_rates: Rates) -> Rates:
        """Get the rates that apply to a profile.

        Args:
            profile: The selected role profile.
            custom_rates: User-entered rates, used only for CUSTOM.
        """
        pass


@dataclass
class DefaultStandbyHoursPolicy(StandbyHoursPolicy):
    """Default standby hour table.

    Hours per variant (workday / rest day):
    - Full: 16 / 24 (17:00-09:00 on workdays, whole day otherwise)
    - Start: 7 / 15 (17:00-24:00, or 09:00-24:00 on rest days)
    - End: 9 / 9 (00:00-09:00)
    - Split: 16 / 16 (00:00-09:00 plus 17:00-24:00)
    """

    full_workday: float = 16
    full_rest_day: float = 24
    start_workday: float = 7
    start_rest_day: float = 15
    end_hours: float = 9
    split_hours: float = 16

    def standby_hours(self, variant: ShiftVariant, is_rest_day: bool) -> float:
        if variant is ShiftVariant.FULL:
            return self.full_rest_day if is_rest_day else self.full_workday
        elif variant is ShiftVariant.START:
            return self.start_rest_day if is_rest_day else self.start_workday
        elif variant is ShiftVariant.END:
            return self.end_hours
        elif variant is ShiftVariant.SPLIT:
            return self.split_hours
        raise MalformedInputError(f"Unknown shift variant: {variant!r}")


@dataclass
class DefaultRateTable(RateTable):
    """Default rates per role profile.

    - DevOps / Infra: 20% standby, +50% normal overtime, +150% holiday overtime
    - Other employee: 10% standby, same overtime premiums
    - Custom: whatever the user entered
    """

    devops_infra: Rates = field(default_factory=lambda: Rates(0.2, 0.5, 1.5))
    other_employee: Rates = field(default_factory=lambda: Rates(0.1, 0.5, 1.5))

    def rates_for(self, profile: RateProfile, custom_rates: Rates) -> Rates:
        if profile is RateProfile.CUSTOM:
            return custom_rates
        elif profile is RateProfile.DEVOPS_INFRA:
            return self.devops_infra
        elif profile is RateProfile.OTHER_EMPLOYEE:
            return self.other_employee
        raise MalformedInputError(f"Unknown rate profile: {profile!r}")

"""Tests for the compensation engine components."""

from datetime import date

import pytest

from oncallcalc.domain.models import (
    MalformedInputError,
    RateProfile,
    Rates,
    ShiftAssignment,
    ShiftVariant,
    WorkLogEntry,
)
from oncallcalc.engine.compensation import CompensationEngine
from oncallcalc.engine.hours import is_weekend, month_days, standard_monthly_hours
from oncallcalc.engine.reconciler import WorkLogReconciler
from oncallcalc.engine.standby import ShiftAttributor

# April 2024: Monday the 1st (Easter Monday), 22 weekdays
TUESDAY = date(2024, 4, 9)
WEDNESDAY = date(2024, 4, 10)
SATURDAY = date(2024, 4, 6)
SUNDAY = date(2024, 4, 7)
EASTER_MONDAY = date(2024, 4, 1)
CHRISTMAS_EVE = date(2024, 12, 24)  # Tuesday


class TestStandardMonthlyHours:
    """Tests for standard_monthly_hours."""

    def test_month_with_22_weekdays(self):
        assert standard_monthly_hours(date(2024, 4, 15)) == 176

    def test_leap_february(self):
        assert standard_monthly_hours(date(2024, 2, 1)) == 168

    def test_weekday_holidays_are_not_excluded(self):
        """May 2024 has holidays on two Wednesdays; all 23 weekdays count."""
        assert standard_monthly_hours(date(2024, 5, 31)) == 184

    def test_any_day_of_month_gives_same_result(self):
        assert standard_monthly_hours(date(2024, 4, 1)) == standard_monthly_hours(date(2024, 4, 30))

    def test_custom_hours_per_day(self):
        assert standard_monthly_hours(date(2024, 4, 1), hours_per_day=7.5) == 165

    def test_month_days(self):
        days = month_days(date(2024, 2, 10))
        assert len(days) == 29
        assert days[0] == date(2024, 2, 1)
        assert days[-1] == date(2024, 2, 29)

    def test_is_weekend(self):
        assert is_weekend(SATURDAY)
        assert is_weekend(SUNDAY)
        assert not is_weekend(TUESDAY)


class TestShiftAttributor:
    """Tests for ShiftAttributor."""

    @pytest.fixture
    def attributor(self):
        return ShiftAttributor()

    def test_full_on_saturday(self, attributor):
        assert attributor.hours_for(ShiftAssignment(SATURDAY, ShiftVariant.FULL)) == 24

    def test_full_on_tuesday(self, attributor):
        assert attributor.hours_for(ShiftAssignment(TUESDAY, ShiftVariant.FULL)) == 16

    def test_full_on_weekday_holiday(self, attributor):
        assert attributor.hours_for(ShiftAssignment(EASTER_MONDAY, ShiftVariant.FULL)) == 24
        assert attributor.hours_for(ShiftAssignment(CHRISTMAS_EVE, ShiftVariant.FULL)) == 24

    def test_start_on_wednesday(self, attributor):
        assert attributor.hours_for(ShiftAssignment(WEDNESDAY, ShiftVariant.START)) == 7

    def test_start_on_rest_days(self, attributor):
        assert attributor.hours_for(ShiftAssignment(SUNDAY, ShiftVariant.START)) == 15
        assert attributor.hours_for(ShiftAssignment(CHRISTMAS_EVE, ShiftVariant.START)) == 15

    @pytest.mark.parametrize("day", [TUESDAY, SATURDAY, EASTER_MONDAY])
    def test_end_is_always_nine(self, attributor, day):
        assert attributor.hours_for(ShiftAssignment(day, ShiftVariant.END)) == 9

    @pytest.mark.parametrize("day", [TUESDAY, SATURDAY, EASTER_MONDAY])
    def test_split_is_always_sixteen(self, attributor, day):
        assert attributor.hours_for(ShiftAssignment(day, ShiftVariant.SPLIT)) == 16

    def test_sums_over_mapping(self, attributor):
        assignments = {
            TUESDAY: ShiftAssignment(TUESDAY, ShiftVariant.FULL),
            SATURDAY: ShiftAssignment(SATURDAY, ShiftVariant.FULL),
            WEDNESDAY: ShiftAssignment(WEDNESDAY, ShiftVariant.END),
        }
        assert attributor.attribute_standby_hours(assignments) == 16 + 24 + 9

    def test_sums_over_list(self, attributor):
        assignments = [
            ShiftAssignment(TUESDAY, ShiftVariant.START),
            ShiftAssignment(SUNDAY, ShiftVariant.SPLIT),
        ]
        assert attributor.attribute_standby_hours(assignments) == 7 + 16

    def test_duplicate_dates_count_once(self, attributor):
        assignments = [
            ShiftAssignment(TUESDAY, ShiftVariant.FULL),
            ShiftAssignment(TUESDAY, ShiftVariant.FULL),
        ]
        assert attributor.attribute_standby_hours(assignments) == 16
        assert len(attributor.breakdown(assignments)) == 1

    def test_later_duplicate_replaces_earlier(self, attributor):
        assignments = [
            ShiftAssignment(TUESDAY, ShiftVariant.FULL),
            ShiftAssignment(TUESDAY, ShiftVariant.END),
        ]
        assert attributor.attribute_standby_hours(assignments) == 9

    def test_empty_assignments(self, attributor):
        assert attributor.attribute_standby_hours({}) == 0

    def test_breakdown_sorted_by_date(self, attributor):
        assignments = [
            ShiftAssignment(TUESDAY, ShiftVariant.FULL),
            ShiftAssignment(SATURDAY, ShiftVariant.FULL),
        ]
        breakdown = attributor.breakdown(assignments)
        assert [a.date for a, _ in breakdown] == [SATURDAY, TUESDAY]
        assert [hours for _, hours in breakdown] == [24, 16]

    def test_unknown_variant_is_rejected(self):
        with pytest.raises(MalformedInputError):
            ShiftAssignment(TUESDAY, "weekly")


class TestWorkLogReconciler:
    """Tests for WorkLogReconciler."""

    @pytest.fixture
    def reconciler(self):
        return WorkLogReconciler()

    def test_worked_hours_reduce_standby(self, reconciler):
        entries = [WorkLogEntry("a", TUESDAY, 10)]
        result = reconciler.reconcile(entries, total_standby_hours=40)
        assert result.payable_standby_hours == 30
        assert result.total_worked_hours == 10

    def test_payable_standby_never_negative(self, reconciler):
        entries = [WorkLogEntry("a", TUESDAY, 50)]
        result = reconciler.reconcile(entries, total_standby_hours=40)
        assert result.payable_standby_hours == 0

    def test_buckets_normal_and_holiday(self, reconciler):
        entries = [
            WorkLogEntry("a", TUESDAY, 2),
            WorkLogEntry("b", EASTER_MONDAY, 3),
            WorkLogEntry("c", WEDNESDAY, 1.5),
        ]
        result = reconciler.reconcile(entries, total_standby_hours=48)
        assert result.work_normal_hours == 3.5
        assert result.work_holiday_hours == 3
        assert result.total_worked_hours == 6.5
        assert result.payable_standby_hours == 41.5

    def test_weekend_work_is_normal_unless_overridden(self, reconciler):
        """Only holidays and overrides go to the holiday bucket."""
        result = reconciler.reconcile([WorkLogEntry("a", SATURDAY, 4)], 24)
        assert result.work_normal_hours == 4
        assert result.work_holiday_hours == 0

    def test_override_upgrades_to_holiday(self, reconciler):
        result = reconciler.reconcile([WorkLogEntry("a", TUESDAY, 4, holiday_override=True)], 16)
        assert result.work_holiday_hours == 4
        assert result.work_normal_hours == 0

    def test_override_cannot_downgrade_holiday(self, reconciler):
        """An auto-detected holiday stays a holiday with the override off."""
        entry = WorkLogEntry("a", EASTER_MONDAY, 4, holiday_override=False)
        assert reconciler.is_holiday_work(entry) is True
        result = reconciler.reconcile([entry], 24)
        assert result.work_holiday_hours == 4

    def test_subtraction_is_global_across_days(self, reconciler):
        """Work on a day without standby still offsets standby elsewhere."""
        entries = [WorkLogEntry("a", date(2024, 4, 20), 5)]
        result = reconciler.reconcile(entries, total_standby_hours=16)
        assert result.payable_standby_hours == 11

    def test_multiple_entries_same_date(self, reconciler):
        entries = [WorkLogEntry("a", TUESDAY, 1), WorkLogEntry("b", TUESDAY, 2)]
        result = reconciler.reconcile(entries, 16)
        assert result.work_normal_hours == 3

    def test_no_entries(self, reconciler):
        result = reconciler.reconcile([], 24)
        assert result.payable_standby_hours == 24
        assert result.work_normal_hours == 0
        assert result.work_holiday_hours == 0


class TestCompensationEngine:
    """Tests for CompensationEngine."""

    @pytest.fixture
    def engine(self):
        return CompensationEngine()

    def test_sample_scenario(self, engine):
        result = engine.compute(80000, 176, Rates(0.2, 0.5, 1.5), 16, 0, 0)
        assert result.hourly_wage == pytest.approx(454.545, abs=0.01)
        assert result.payable_standby_hours == 16
        assert result.standby_fee == pytest.approx(1454.545, abs=0.01)
        assert result.total_bonus == pytest.approx(1454.545, abs=0.01)

    def test_overtime_premiums(self, engine):
        result = engine.compute(10000, 100, Rates(0.1, 0.5, 1.5), 0, 2, 4)
        assert result.hourly_wage == 100
        assert result.overtime_normal_pay == pytest.approx(300)
        assert result.overtime_holiday_pay == pytest.approx(1000)
        assert result.total_bonus == pytest.approx(1300)

    def test_total_is_sum_of_parts(self, engine):
        result = engine.compute(65432, 168, Rates(0.2, 0.5, 1.5), 30, 3, 5)
        assert result.total_bonus == (
            result.standby_fee + result.overtime_normal_pay + result.overtime_holiday_pay
        )

    @pytest.mark.parametrize("hours", [0, -8])
    def test_non_positive_hours_give_zero_wage(self, engine, hours):
        result = engine.compute(80000, hours, Rates(), 16, 2, 2)
        assert result.hourly_wage == 0
        assert result.total_bonus == 0

    def test_no_rounding(self, engine):
        result = engine.compute(80000, 176, Rates(0.2, 0.5, 1.5), 16, 0, 0)
        assert result.standby_fee == 16 * (80000 / 176) * 0.2

    def test_effective_hours_prefers_override(self, engine):
        assert engine.effective_monthly_hours(date(2024, 4, 1), 160) == 160
        assert engine.effective_monthly_hours(date(2024, 4, 1), None) == 176

    def test_zero_override_is_used(self, engine):
        """A zero override is explicit, not a request for standard hours."""
        assert engine.effective_monthly_hours(date(2024, 4, 1), 0) == 0

    def test_resolve_rates(self, engine):
        custom = Rates(0.5, 1.0, 2.0)
        assert engine.resolve_rates(RateProfile.CUSTOM, custom) == custom
        assert engine.resolve_rates(RateProfile.OTHER_EMPLOYEE, custom).standby == 0.1

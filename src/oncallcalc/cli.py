"""Command-line interface for the on-call compensation calculator."""

import argparse
import logging
import sys
from dataclasses import replace
from datetime import date
from typing import Optional

from oncallcalc.domain.holidays import easter_sunday, holidays_for_year
from oncallcalc.domain.models import (
    CompensationRequest,
    CompensationResult,
    MalformedInputError,
    RateProfile,
    ShiftAssignment,
    ShiftVariant,
    parse_date,
)
from oncallcalc.engine.calculator import OnCallCalculator
from oncallcalc.engine.hours import standard_monthly_hours
from oncallcalc.output.pdf_generator import PDFGenerator
from oncallcalc.output.report_generator import ReportGenerator
from oncallcalc.state.store import DEFAULT_STATE_FILE, StateStore
from oncallcalc.validation.validator import InputValidator

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_INVALID = 2


def parse_month(value: str) -> date:
    """Parse ``YYYY-MM`` (or a full ISO date) into the first of the month."""
    text = value.strip()
    if len(text) == 7:
        text = f"{text}-01"
    return parse_date(text).replace(day=1)


def print_result(
    request: CompensationRequest,
    result: CompensationResult,
    stats: dict,
) -> None:
    """Print a compensation result summary."""
    print(f"  Monthly hours: {stats['effective_monthly_hours']:g}")
    print(f"  Hourly wage: {result.hourly_wage:.2f}")
    print(f"  Standby hours: {stats['total_standby_hours']:g} gross, "
          f"{result.payable_standby_hours:g} payable")
    print(f"  Worked hours: {result.work_normal_hours:g} normal, "
          f"{result.work_holiday_hours:g} holiday")
    print(f"  Standby fee: {result.standby_fee:.2f}")
    print(f"  Overtime pay: {result.overtime_normal_pay:.2f} normal, "
          f"{result.overtime_holiday_pay:.2f} holiday")
    print(f"  Total bonus: {result.total_bonus:.2f}")
    print(f"  Gross total (salary + bonus): {request.salary + result.total_bonus:.2f}")


def run_calculation(
    request: CompensationRequest,
    report_path: Optional[str] = None,
    pdf_path: Optional[str] = None,
) -> int:
    """Validate, compute and print a request, writing optional outputs."""
    validator = InputValidator()
    validation = validator.validate(request)
    for warning in validation.warnings:
        print(f"  Warning: {warning}")
    if not validation.is_valid:
        print(f"Validation: FAILED ({len(validation.errors)} errors)", file=sys.stderr)
        for error in validation.errors:
            print(f"    - {error}", file=sys.stderr)
        return EXIT_INVALID

    calculator = OnCallCalculator()
    result, stats = calculator.calculate_with_stats(request)

    print(f"On-call compensation for {request.month.strftime('%B %Y')}")
    print_result(request, result, stats)

    if report_path:
        ReportGenerator(calculator=calculator).generate(request, report_path)
        print(f"\nReport written to {report_path}")
    if pdf_path:
        PDFGenerator(calculator=calculator).generate(request, pdf_path)
        print(f"PDF written to {pdf_path}")

    return EXIT_OK


def run_demo(pdf_path: Optional[str] = None) -> int:
    """Run the sample scenario: one weekday Full shift, no work logs."""
    month = date(2024, 4, 1)  # 22 weekdays -> 176 standard hours
    shift_day = date(2024, 4, 9)  # Tuesday
    request = CompensationRequest.from_assignments(
        salary=80000,
        month=month,
        assignments=[ShiftAssignment(shift_day, ShiftVariant.FULL)],
        profile=RateProfile.DEVOPS_INFRA,
    )
    return run_calculation(request, pdf_path=pdf_path)


def cmd_holidays(args) -> int:
    print(f"Public holidays {args.year} (Easter Sunday {easter_sunday(args.year)}):")
    for d in holidays_for_year(args.year):
        print(f"  {d} ({d.strftime('%A')})")
    return EXIT_OK


def cmd_hours(args) -> int:
    month = parse_month(args.month)
    print(f"{month.strftime('%B %Y')}: {standard_monthly_hours(month):g} standard hours")
    return EXIT_OK


def cmd_calculate(args) -> int:
    state = StateStore(args.state).load()
    return run_calculation(state.to_request(), args.report, args.pdf)


def cmd_toggle(args) -> int:
    store = StateStore(args.state)
    state = store.load()
    d = parse_date(args.date)
    variant = state.toggle_date(d)
    store.save(state)
    print(f"{d}: {variant.value if variant else 'removed'}")
    return EXIT_OK


def cmd_log(args) -> int:
    store = StateStore(args.state)
    state = store.load()

    if args.log_command == "add":
        entry = state.add_work_log(
            parse_date(args.date) if args.date else None,
            args.hours,
            args.holiday,
        )
        print(f"Added work log {entry.id}: {entry.date} {entry.hours:g} h")
    elif args.log_command == "update":
        changes = {}
        if args.date:
            changes["date"] = args.date
        if args.hours is not None:
            changes["hours"] = args.hours
        if args.holiday is not None:
            changes["holiday_override"] = args.holiday
        try:
            entry = state.update_work_log(args.id, **changes)
        except KeyError:
            print(f"No work log with id {args.id}", file=sys.stderr)
            return EXIT_USAGE
        print(f"Updated work log {entry.id}: {entry.date} {entry.hours:g} h")
    elif args.log_command == "remove":
        if not state.remove_work_log(args.id):
            print(f"No work log with id {args.id}", file=sys.stderr)
            return EXIT_USAGE
        print(f"Removed work log {args.id}")
    else:
        for entry in state.work_logs:
            flag = " (holiday override)" if entry.holiday_override else ""
            print(f"  {entry.id}  {entry.date}  {entry.hours:g} h{flag}")

    store.save(state)
    return EXIT_OK


def cmd_set(args) -> int:
    store = StateStore(args.state)
    state = store.load()

    if args.salary is not None:
        state.salary = args.salary
    if args.month:
        state.month = parse_month(args.month)
    if args.reset_hours:
        state.reset_monthly_hours_override()
    elif args.hours is not None:
        state.monthly_hours_override = args.hours
    if args.profile:
        state.profile = RateProfile.parse(args.profile)

    rate_changes = {}
    if args.standby_rate is not None:
        rate_changes["standby"] = args.standby_rate
    if args.ot_normal is not None:
        rate_changes["ot_normal"] = args.ot_normal
    if args.ot_holiday is not None:
        rate_changes["ot_holiday"] = args.ot_holiday
    if rate_changes:
        state.custom_rates = replace(state.custom_rates, **rate_changes)

    store.save(state)

    hours = (
        f"{state.monthly_hours_override:g}"
        if state.monthly_hours_override is not None
        else "standard"
    )
    rates = state.custom_rates
    print(f"Salary: {state.salary:.2f}")
    print(f"Month: {state.month.strftime('%B %Y')}")
    print(f"Monthly hours: {hours}")
    print(f"Profile: {state.profile.value}")
    print(f"Custom rates: standby {rates.standby:g}, overtime {rates.ot_normal:g}, "
          f"holiday {rates.ot_holiday:g}")
    return EXIT_OK


def cmd_demo(args) -> int:
    return run_demo(args.pdf)


def _holiday_flag(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise argparse.ArgumentTypeError(f"expected yes/no, got {value!r}")


def _positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {value!r}")
    return number


def _non_negative_float(value: str) -> float:
    number = float(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative number, got {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="On-Call Calculator - standby and overtime pay for a month",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s holidays 2024                    List public holidays
  %(prog)s hours 2024-04                    Standard hours for April 2024
  %(prog)s set --salary 90000 --month 2024-04
  %(prog)s set --reset-hours                 Use standard monthly hours
  %(prog)s toggle 2024-04-09                Cycle a day Full/Start/End/Split/off
  %(prog)s log add --date 2024-04-09 --hours 2
  %(prog)s calculate --pdf statement.pdf    Compute from the stored state
  %(prog)s demo                             Run the sample scenario
        """,
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    holidays_parser = subparsers.add_parser("holidays", help="List public holidays of a year")
    holidays_parser.add_argument("year", type=int, help="Calendar year")
    holidays_parser.set_defaults(func=cmd_holidays)

    hours_parser = subparsers.add_parser("hours", help="Standard working hours of a month")
    hours_parser.add_argument("month", type=str, help="Month as YYYY-MM")
    hours_parser.set_defaults(func=cmd_hours)

    state_options = argparse.ArgumentParser(add_help=False)
    state_options.add_argument(
        "--state", "-s",
        type=str,
        default=DEFAULT_STATE_FILE,
        help=f"State file path (default: {DEFAULT_STATE_FILE})",
    )

    calculate_parser = subparsers.add_parser(
        "calculate",
        parents=[state_options],
        help="Compute compensation from the stored state",
    )
    calculate_parser.add_argument("--report", "-r", type=str, help="Text report output path")
    calculate_parser.add_argument("--pdf", "-o", type=str, help="PDF statement output path")
    calculate_parser.set_defaults(func=cmd_calculate)

    toggle_parser = subparsers.add_parser(
        "toggle",
        parents=[state_options],
        help="Cycle the shift variant of a day",
    )
    toggle_parser.add_argument("date", type=str, help="Date as YYYY-MM-DD")
    toggle_parser.set_defaults(func=cmd_toggle)

    log_parser = subparsers.add_parser(
        "log",
        parents=[state_options],
        help="Manage work logs",
    )
    log_parser.set_defaults(func=cmd_log)
    log_subparsers = log_parser.add_subparsers(dest="log_command")

    log_add = log_subparsers.add_parser("add", help="Add a work log")
    log_add.add_argument("--date", "-d", type=str, help="Date (default: today)")
    log_add.add_argument("--hours", "-H", type=float, default=0.0, help="Hours worked")
    log_add.add_argument("--holiday", action="store_true", help="Mark as holiday work")

    log_update = log_subparsers.add_parser("update", help="Update a work log")
    log_update.add_argument("id", type=str, help="Work log id")
    log_update.add_argument("--date", "-d", type=str, help="New date")
    log_update.add_argument("--hours", "-H", type=float, help="New hours")
    log_update.add_argument("--holiday", type=_holiday_flag, help="Holiday override yes/no")

    log_remove = log_subparsers.add_parser("remove", help="Remove a work log")
    log_remove.add_argument("id", type=str, help="Work log id")

    log_subparsers.add_parser("list", help="List work logs")

    set_parser = subparsers.add_parser(
        "set",
        parents=[state_options],
        help="Change salary, month, hours or rates",
    )
    set_parser.add_argument("--salary", type=_non_negative_float, help="Gross monthly salary")
    set_parser.add_argument("--month", "-m", type=str, help="Month as YYYY-MM")
    hours_group = set_parser.add_mutually_exclusive_group()
    hours_group.add_argument("--hours", type=_positive_float, help="Monthly hours override")
    hours_group.add_argument(
        "--reset-hours",
        action="store_true",
        help="Go back to the standard monthly hours",
    )
    set_parser.add_argument(
        "--profile", "-p",
        choices=[p.value for p in RateProfile],
        help="Rate profile",
    )
    set_parser.add_argument("--standby-rate", type=_non_negative_float, help="Custom standby rate")
    set_parser.add_argument("--ot-normal", type=_non_negative_float, help="Custom overtime rate")
    set_parser.add_argument(
        "--ot-holiday",
        type=_non_negative_float,
        help="Custom holiday overtime rate",
    )
    set_parser.set_defaults(func=cmd_set)

    demo_parser = subparsers.add_parser("demo", help="Run the sample scenario")
    demo_parser.add_argument("--pdf", "-o", type=str, help="PDF statement output path")
    demo_parser.set_defaults(func=cmd_demo)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return EXIT_USAGE

    try:
        return args.func(args)
    except MalformedInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())

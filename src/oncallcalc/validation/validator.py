"""Validation module for compensation inputs.

The engine assumes pre-validated numeric fields. This module is the place
where callers check a request before handing it to the engine, collecting
every problem instead of stopping at the first one.
"""

from dataclasses import dataclass, field
from enum import Enum
from numbers import Real
from typing import Optional

from oncallcalc.domain.models import CompensationRequest
from oncallcalc.engine.compensation import CompensationEngine
from oncallcalc.engine.standby import ShiftAttributor


class ValidationErrorType(Enum):
    """Types of validation errors."""

    NEGATIVE_SALARY = "negative_salary"
    NON_NUMERIC_HOURS = "non_numeric_hours"
    NEGATIVE_HOURS = "negative_hours"
    NEGATIVE_RATE = "negative_rate"
    ASSIGNMENT_DATE_MISMATCH = "assignment_date_mismatch"
    DUPLICATE_LOG_ID = "duplicate_log_id"


@dataclass
class ValidationError:
    """A single validation error."""

    error_type: ValidationErrorType
    message: str
    log_id: Optional[str] = None
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        parts = [f"[{self.error_type.value}]"]
        if self.log_id:
            parts.append(f"Work log {self.log_id}:")
        parts.append(self.message)
        return " ".join(parts)


@dataclass
class ValidationResult:
    """Result of validating a request."""

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, error: ValidationError) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(warning)


class InputValidator:
    """Validates compensation requests before they reach the engine.

    Example:
        >>> validator = InputValidator()
        >>> result = validator.validate(request)
        >>> if not result.is_valid:
        ...     for error in result.errors:
        ...         print(error)
    """

    def __init__(
        self,
        engine: Optional[CompensationEngine] = None,
        attributor: Optional[ShiftAttributor] = None,
    ):
        self.engine = engine or CompensationEngine()
        self.attributor = attributor or ShiftAttributor()

    def validate(self, request: CompensationRequest) -> ValidationResult:
        """Validate a complete request.

        Args:
            request: The request to validate.

        Returns:
            ValidationResult with is_valid flag, errors and warnings.
        """
        result = ValidationResult(is_valid=True)

        self._validate_salary(request, result)
        self._validate_monthly_hours(request, result)
        self._validate_rates(request, result)
        self._validate_assignments(request, result)
        self._validate_work_logs(request, result)

        return result

    def _validate_salary(self, request: CompensationRequest, result: ValidationResult) -> None:
        if not _is_number(request.salary) or request.salary < 0:
            result.add_error(
                ValidationError(
                    error_type=ValidationErrorType.NEGATIVE_SALARY,
                    message=f"Salary must be a non-negative number, got {request.salary!r}",
                )
            )

    def _validate_monthly_hours(
        self,
        request: CompensationRequest,
        result: ValidationResult,
    ) -> None:
        override = request.monthly_hours_override
        if override is not None and not _is_number(override):
            result.add_error(
                ValidationError(
                    error_type=ValidationErrorType.NON_NUMERIC_HOURS,
                    message=f"Monthly hours override must be a number, got {override!r}",
                )
            )
            return

        effective = self.engine.effective_monthly_hours(request.month, override)
        if effective <= 0:
            result.add_warning(
                f"Effective monthly hours is {effective}; hourly wage will be zero"
            )

    def _validate_rates(self, request: CompensationRequest, result: ValidationResult) -> None:
        rates = self.engine.resolve_rates(request.profile, request.custom_rates)
        for name in ("standby", "ot_normal", "ot_holiday"):
            value = getattr(rates, name)
            if not _is_number(value) or value < 0:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.NEGATIVE_RATE,
                        message=f"Rate {name} must be a non-negative number, got {value!r}",
                        details={"rate": name},
                    )
                )

    def _validate_assignments(
        self,
        request: CompensationRequest,
        result: ValidationResult,
    ) -> None:
        for key, assignment in request.assignments.items():
            if key != assignment.date:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.ASSIGNMENT_DATE_MISMATCH,
                        message=f"Assignment for {assignment.date} is stored under {key}",
                    )
                )
            if not _same_month(assignment.date, request):
                result.add_warning(f"On-call day {assignment.date} is outside the selected month")

    def _validate_work_logs(
        self,
        request: CompensationRequest,
        result: ValidationResult,
    ) -> None:
        seen_ids: set[str] = set()
        total_worked = 0.0

        for entry in request.work_logs:
            if entry.id in seen_ids:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.DUPLICATE_LOG_ID,
                        message="Duplicate work log id",
                        log_id=entry.id,
                    )
                )
            seen_ids.add(entry.id)

            if not _is_number(entry.hours):
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.NON_NUMERIC_HOURS,
                        message=f"Hours must be a number, got {entry.hours!r}",
                        log_id=entry.id,
                    )
                )
                continue

            if entry.hours < 0:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.NEGATIVE_HOURS,
                        message=f"Hours must not be negative, got {entry.hours}",
                        log_id=entry.id,
                    )
                )
            total_worked += entry.hours

            if not _same_month(entry.date, request):
                result.add_warning(f"Work log {entry.id} on {entry.date} is outside the selected month")

        if request.work_logs and result.is_valid:
            self._check_worked_vs_standby(request, total_worked, result)

    def _check_worked_vs_standby(
        self,
        request: CompensationRequest,
        total_worked: float,
        result: ValidationResult,
    ) -> None:
        """Warn when worked hours exceed standby, since standby floors at zero."""
        total_standby = self.attributor.attribute_standby_hours(request.assignments)
        if total_worked > total_standby:
            result.add_warning(
                f"Worked hours ({total_worked}) exceed standby hours ({total_standby}); "
                f"payable standby will be zero"
            )


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _same_month(d, request: CompensationRequest) -> bool:
    return (d.year, d.month) == (request.month.year, request.month.month)

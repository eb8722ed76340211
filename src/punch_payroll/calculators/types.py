"""Type definitions for the payroll calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

from punch_payroll.calculators.summary_builder import SummaryBuilder


class PayBand(str, Enum):
    """Wage bands hours can fall into."""

    REGULAR = "regular"
    OVERTIME = "overtime"
    DOUBLETIME = "doubletime"


@dataclass(frozen=True)
class Job:
    """Job metadata: hourly rate and flat benefit accrual rate."""

    id: str
    rate: Decimal
    benefits_rate: Decimal


@dataclass(frozen=True)
class Punch:
    """One recorded work interval."""

    job_id: str
    start: datetime
    end: datetime


@dataclass(frozen=True)
class Employee:
    """An employee and their punches (in input order, not necessarily sorted)."""

    name: str
    punches: tuple[Punch, ...] = ()


SECONDS_PER_HOUR = 3600


def seconds_to_hours(seconds: int) -> Decimal:
    """Convert whole seconds to Decimal hours."""
    return Decimal(seconds) / Decimal(SECONDS_PER_HOUR)


@dataclass(frozen=True)
class HoursBreakdown:
    """Hours split across the regular/overtime/doubletime bands."""

    regular: Decimal = Decimal("0")
    overtime: Decimal = Decimal("0")
    doubletime: Decimal = Decimal("0")

    @property
    def total(self) -> Decimal:
        return self.regular + self.overtime + self.doubletime


@dataclass(frozen=True)
class BandSeconds:
    """Worked time per band in whole seconds.

    Band bookkeeping stays in integer seconds so sums across punches are
    exact; hours are derived only when reporting.
    """

    regular: int = 0
    overtime: int = 0
    doubletime: int = 0

    @property
    def total(self) -> int:
        return self.regular + self.overtime + self.doubletime

    def __add__(self, other: BandSeconds) -> BandSeconds:
        return BandSeconds(
            regular=self.regular + other.regular,
            overtime=self.overtime + other.overtime,
            doubletime=self.doubletime + other.doubletime,
        )

    def to_hours(self) -> HoursBreakdown:
        return HoursBreakdown(
            regular=seconds_to_hours(self.regular),
            overtime=seconds_to_hours(self.overtime),
            doubletime=seconds_to_hours(self.doubletime),
        )


@dataclass(frozen=True)
class BandAllocation:
    """Time from a single punch placed into bands, with the wage it earns."""

    seconds: BandSeconds = field(default_factory=BandSeconds)
    wage: Decimal = Decimal("0")

    @property
    def hours(self) -> HoursBreakdown:
        return self.seconds.to_hours()


@dataclass(frozen=True)
class PunchAllocation:
    """Result of allocating one punch against the employee's running total.

    ``cumulative_before_seconds`` is the employee's worked time from all
    earlier punches (in chronological order); it decides which band this
    punch starts in.
    """

    punch: Punch
    seconds: int
    cumulative_before_seconds: int
    rate: Decimal
    benefits_rate: Decimal
    allocation: BandAllocation
    benefit: Decimal

    @property
    def hours(self) -> Decimal:
        return seconds_to_hours(self.seconds)

    @property
    def cumulative_before(self) -> Decimal:
        return seconds_to_hours(self.cumulative_before_seconds)

    @property
    def cumulative_after_seconds(self) -> int:
        return self.cumulative_before_seconds + self.seconds

    @property
    def cumulative_after(self) -> Decimal:
        return seconds_to_hours(self.cumulative_after_seconds)

    @property
    def wage(self) -> Decimal:
        return self.allocation.wage


@dataclass(frozen=True)
class PayrollSummary:
    """Final per-employee payroll totals.

    ``breakdown`` is derived from the total worked time alone; ``allocated``
    is the sum of the per-punch band allocations. For non-negative punches the
    two agree exactly.
    """

    employee: str
    total_hours: Decimal
    breakdown: HoursBreakdown
    allocated: HoursBreakdown
    wage_total: Decimal
    benefit_total: Decimal
    punches: tuple[PunchAllocation, ...] = ()

    @property
    def regular_hours(self) -> Decimal:
        return self.breakdown.regular

    @property
    def overtime_hours(self) -> Decimal:
        return self.breakdown.overtime

    @property
    def doubletime_hours(self) -> Decimal:
        return self.breakdown.doubletime

    @property
    def is_consistent(self) -> bool:
        """True when the per-punch band totals match the total-hours breakdown."""
        return self.breakdown == self.allocated

    def to_output_dict(self) -> dict[str, str]:
        """Return the output record with amounts as fixed 4-decimal strings."""
        return SummaryBuilder.to_record(self)

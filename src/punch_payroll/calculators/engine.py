"""Payroll calculation engine - tiered overtime allocation."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from punch_payroll.calculators.rate_registry import RateRegistry
from punch_payroll.calculators.types import (
    SECONDS_PER_HOUR,
    BandAllocation,
    BandSeconds,
    Employee,
    HoursBreakdown,
    PayBand,
    PayrollSummary,
    Punch,
    PunchAllocation,
    seconds_to_hours,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

# Cumulative ceilings for the regular and overtime bands, in seconds.
REGULAR_LIMIT = 40 * SECONDS_PER_HOUR
OVERTIME_LIMIT = 48 * SECONDS_PER_HOUR

BAND_MULTIPLIERS: dict[PayBand, Decimal] = {
    PayBand.REGULAR: Decimal("1.0"),
    PayBand.OVERTIME: Decimal("1.5"),
    PayBand.DOUBLETIME: Decimal("2.0"),
}


class NegativeDurationError(ValueError):
    """Raised when a punch ends before it starts."""

    def __init__(self, employee: str, punch: Punch):
        self.employee = employee
        self.punch = punch
        super().__init__(
            f"Punch for employee {employee!r} on job {punch.job_id!r} "
            f"ends before it starts ({punch.start} -> {punch.end})"
        )


def seconds_worked(punch: Punch) -> int:
    """Duration of a punch in whole seconds. Negative when end precedes start."""
    delta = punch.end - punch.start
    return delta.days * 86400 + delta.seconds


def hours_worked(punch: Punch) -> Decimal:
    """Duration of a punch in hours."""
    return seconds_to_hours(seconds_worked(punch))


def allocate_seconds(
    seconds: int, cumulative_before: int, rate: Decimal
) -> BandAllocation:
    """Place a punch's worked ``seconds`` into wage bands.

    ``cumulative_before`` is the time already worked, in seconds. Time fills
    the regular band up to 40 cumulative hours, then overtime up to 48, then
    doubletime. A single punch may span several bands. Non-positive
    durations allocate nothing and earn nothing.
    """
    filled = {band: 0 for band in PayBand}
    wage = ZERO
    remaining = seconds
    current = cumulative_before

    while remaining > 0:
        if current < REGULAR_LIMIT:
            band = PayBand.REGULAR
            taken = min(remaining, REGULAR_LIMIT - current)
        elif current < OVERTIME_LIMIT:
            band = PayBand.OVERTIME
            taken = min(remaining, OVERTIME_LIMIT - current)
        else:
            band = PayBand.DOUBLETIME
            taken = remaining

        filled[band] += taken
        wage += seconds_to_hours(taken) * rate * BAND_MULTIPLIERS[band]
        remaining -= taken
        current += taken

    return BandAllocation(
        seconds=BandSeconds(
            regular=filled[PayBand.REGULAR],
            overtime=filled[PayBand.OVERTIME],
            doubletime=filled[PayBand.DOUBLETIME],
        ),
        wage=wage,
    )


def breakdown_from_total(total_seconds: int) -> HoursBreakdown:
    """Split an employee's grand-total worked time into the reported bands."""
    band_width = OVERTIME_LIMIT - REGULAR_LIMIT
    return BandSeconds(
        regular=min(total_seconds, REGULAR_LIMIT),
        overtime=max(0, min(total_seconds - REGULAR_LIMIT, band_width)),
        doubletime=max(0, total_seconds - OVERTIME_LIMIT),
    ).to_hours()


class PayrollEngine:
    """Computes per-employee payroll summaries.

    Calculation pipeline (per employee):
    1) Sort punches by start time (stable)
    2) Fold over punches, threading cumulative worked seconds: allocate each
       punch into bands against the time worked before it, accrue flat
       benefits
    3) Derive the reported breakdown from total worked time
    4) Cross-check the breakdown against the per-punch band totals

    Employees share nothing but the read-only rate registry.
    """

    def __init__(
        self,
        registry: RateRegistry,
        allow_negative_durations: bool = False,
    ):
        self.registry = registry
        self.allow_negative_durations = allow_negative_durations

    def allocate_punches(self, employee: Employee) -> list[PunchAllocation]:
        """Allocate each of the employee's punches in chronological order.

        Raises:
            JobRateNotFoundError: If a punch references an unknown job
            NegativeDurationError: If a punch ends before it starts and
                negative durations are not allowed
        """
        allocations: list[PunchAllocation] = []
        cumulative = 0

        for punch in sorted(employee.punches, key=lambda p: p.start):
            seconds = seconds_worked(punch)
            if seconds < 0:
                if not self.allow_negative_durations:
                    raise NegativeDurationError(employee.name, punch)
                logger.warning(
                    "Negative punch duration %s h for %s on job %s",
                    seconds_to_hours(seconds),
                    employee.name,
                    punch.job_id,
                )

            rate, benefits_rate = self.registry.lookup(punch.job_id)
            allocation = allocate_seconds(seconds, cumulative, rate)

            entry = PunchAllocation(
                punch=punch,
                seconds=seconds,
                cumulative_before_seconds=cumulative,
                rate=rate,
                benefits_rate=benefits_rate,
                allocation=allocation,
                benefit=seconds_to_hours(seconds) * benefits_rate,
            )
            logger.debug(
                "%s: %s h on %s from %s cumulative -> wage %s",
                employee.name,
                entry.hours,
                punch.job_id,
                entry.cumulative_before,
                allocation.wage,
            )
            allocations.append(entry)
            cumulative = entry.cumulative_after_seconds

        return allocations

    def compute_summary(self, employee: Employee) -> PayrollSummary:
        """Calculate totals for a single employee."""
        allocations = self.allocate_punches(employee)

        total_seconds = 0
        wage_total = ZERO
        benefit_total = ZERO
        allocated = BandSeconds()
        for entry in allocations:
            total_seconds += entry.seconds
            wage_total += entry.wage
            benefit_total += entry.benefit
            allocated = allocated + entry.allocation.seconds

        summary = PayrollSummary(
            employee=employee.name,
            total_hours=seconds_to_hours(total_seconds),
            breakdown=breakdown_from_total(total_seconds),
            allocated=allocated.to_hours(),
            wage_total=wage_total,
            benefit_total=benefit_total,
            punches=tuple(allocations),
        )

        if not summary.is_consistent:
            logger.warning(
                "Band allocation for %s does not match total-hours breakdown: "
                "allocated=%s breakdown=%s",
                employee.name,
                summary.allocated,
                summary.breakdown,
            )

        logger.info(
            "%s: %s hours, wages %s, benefits %s",
            employee.name,
            summary.total_hours,
            wage_total,
            benefit_total,
        )
        return summary

    def compute_all(self, employees: Iterable[Employee]) -> dict[str, PayrollSummary]:
        """Calculate summaries for all employees, keeping input order."""
        results: dict[str, PayrollSummary] = {}
        for employee in employees:
            results[employee.name] = self.compute_summary(employee)
        return results

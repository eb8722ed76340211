"""Payroll calculation engine."""

from punch_payroll.calculators.engine import NegativeDurationError, PayrollEngine
from punch_payroll.calculators.rate_registry import JobRateNotFoundError, RateRegistry
from punch_payroll.calculators.summary_builder import SummaryBuilder

__all__ = [
    "PayrollEngine",
    "NegativeDurationError",
    "RateRegistry",
    "JobRateNotFoundError",
    "SummaryBuilder",
]

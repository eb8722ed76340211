"""Punch payroll: tiered overtime wages and benefit accruals from time punches."""

__version__ = "1.0.0"

"""Pytest fixtures for punch payroll tests."""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from punch_payroll.calculators.engine import PayrollEngine
from punch_payroll.calculators.rate_registry import RateRegistry
from punch_payroll.calculators.types import Employee, Job, Punch

BASE_TIME = datetime(2022, 2, 14, 8, 0, 0)


def make_punch(job_id: str, start_offset_hours: float, hours: float) -> Punch:
    """Build a punch starting ``start_offset_hours`` after ``BASE_TIME``."""
    start = BASE_TIME + timedelta(hours=start_offset_hours)
    return Punch(job_id=job_id, start=start, end=start + timedelta(hours=hours))


def make_employee(name: str, *spans: tuple[str, float, float]) -> Employee:
    """Build an employee from ``(job_id, start_offset_hours, hours)`` spans."""
    return Employee(name=name, punches=tuple(make_punch(*span) for span in spans))


@pytest.fixture
def jobs() -> list[Job]:
    """Test jobs with round rates."""
    return [
        Job(id="painter", rate=Decimal("20"), benefits_rate=Decimal("2")),
        Job(id="laborer", rate=Decimal("10"), benefits_rate=Decimal("1")),
        Job(id="foreman", rate=Decimal("31.25"), benefits_rate=Decimal("1.5")),
    ]


@pytest.fixture
def registry(jobs) -> RateRegistry:
    return RateRegistry.from_jobs(jobs)


@pytest.fixture
def engine(registry) -> PayrollEngine:
    return PayrollEngine(registry)


@pytest.fixture
def lenient_engine(registry) -> PayrollEngine:
    """Engine that accepts punches ending before they start."""
    return PayrollEngine(registry, allow_negative_durations=True)


SAMPLE_DATASET = """\
// Test dataset
// with a leading comment block
{
  "jobMeta": [
    { "job": "painter", "rate": 20.0, "benefitsRate": 2.0 },
    { "job": "laborer", "rate": 10, "benefitsRate": 1.25 }
  ],
  "employeeData": [
    {
      "employee": "Mike",
      "timePunch": [
        { "job": "laborer", "start": "2022-02-15 08:00:00", "end": "2022-02-15 12:00:00" },
        { "job": "painter", "start": "2022-02-14 08:00:00", "end": "2022-02-14 18:00:00" }
      ]
    },
    {
      "employee": "Alex",
      "timePunch": [
        { "job": "laborer", "start": "2022-02-14 09:00:00", "end": "2022-02-14 09:30:00" }
      ]
    }
  ]
}
"""


@pytest.fixture
def sample_dataset_path(tmp_path):
    """Write the sample dataset to a temporary file."""
    path = tmp_path / "punches.jsonc"
    path.write_text(SAMPLE_DATASET, encoding="utf-8")
    return path


@pytest.fixture
def punch_factory():
    """Factory for punches relative to ``BASE_TIME``."""
    return make_punch


@pytest.fixture
def employee_factory():
    """Factory for employees built from ``(job_id, offset, hours)`` spans."""
    return make_employee

"""Loading the punch dataset into typed domain records.

The dataset is relaxed JSON: it may open with a comment block before the
top-level object. Everything before the first ``{`` is dropped, then the
remainder is parsed as strict JSON and validated with pydantic.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime
from decimal import Decimal
from importlib import resources
from pathlib import Path

from punch_payroll.calculators.rate_registry import RateRegistry
from punch_payroll.calculators.types import Employee, Job, Punch
from punch_payroll.schemas import PayrollInputSchema

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
# strptime alone accepts single-digit fields
TIMESTAMP_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", re.ASCII)
DEFAULT_DATASET = "PunchLogicTest.jsonc"


class MissingResourceError(FileNotFoundError):
    """Raised when the input dataset cannot be found."""

    def __init__(self, location: str):
        self.location = location
        super().__init__(f"Cannot find payroll dataset {location}")


class InvalidPayrollInputError(ValueError):
    """Raised when the dataset holds no JSON object."""


class MalformedTimestampError(ValueError):
    """Raised when a punch timestamp does not match ``TIMESTAMP_FORMAT``."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"Timestamp {value!r} does not match format 'yyyy-MM-dd HH:mm:ss'"
        )


def parse_timestamp(value: str) -> datetime:
    """Parse a punch timestamp in the fixed zero-padded format."""
    if not TIMESTAMP_PATTERN.fullmatch(value):
        raise MalformedTimestampError(value)
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        raise MalformedTimestampError(value) from None


def strip_leading_content(text: str) -> str:
    """Drop anything (typically comments) before the top-level JSON object."""
    start = text.find("{")
    if start < 0:
        raise InvalidPayrollInputError("Payroll dataset contains no JSON object")
    return text[start:]


def read_dataset(path: str | Path | None = None) -> str:
    """Read the raw dataset text.

    Args:
        path: File to read. When omitted the packaged sample dataset is used.

    Raises:
        MissingResourceError: If the file or packaged resource is missing
    """
    if path is None:
        resource = resources.files("punch_payroll").joinpath("data").joinpath(DEFAULT_DATASET)
        if not resource.is_file():
            raise MissingResourceError(f"resource {DEFAULT_DATASET}")
        logger.info("Loading packaged dataset %s", DEFAULT_DATASET)
        return resource.read_text(encoding="utf-8")

    file_path = Path(path)
    if not file_path.is_file():
        raise MissingResourceError(str(file_path))
    logger.info("Loading dataset %s", file_path)
    return file_path.read_text(encoding="utf-8")


def parse_payroll_input(text: str) -> PayrollInputSchema:
    """Parse and validate dataset text.

    Raises:
        InvalidPayrollInputError: If no JSON object is present
        json.JSONDecodeError: If the JSON is malformed
        pydantic.ValidationError: If fields are missing or mistyped
    """
    data = json.loads(strip_leading_content(text), parse_float=Decimal)
    return PayrollInputSchema.model_validate(data)


def build_registry(payroll_input: PayrollInputSchema) -> RateRegistry:
    """Build the rate registry from job metadata."""
    return RateRegistry.from_jobs(
        Job(id=meta.job, rate=meta.rate, benefits_rate=meta.benefits_rate)
        for meta in payroll_input.job_meta
    )


def build_employees(payroll_input: PayrollInputSchema) -> list[Employee]:
    """Convert employee records to domain employees, in input order.

    Raises:
        MalformedTimestampError: If any punch timestamp is malformed
    """
    employees: list[Employee] = []
    for record in payroll_input.employee_data:
        punches = tuple(
            Punch(
                job_id=p.job,
                start=parse_timestamp(p.start),
                end=parse_timestamp(p.end),
            )
            for p in record.time_punch
        )
        employees.append(Employee(name=record.employee, punches=punches))
    return employees


def load_payroll(
    path: str | Path | None = None,
) -> tuple[RateRegistry, list[Employee]]:
    """Read, validate and convert a dataset in one step."""
    payroll_input = parse_payroll_input(read_dataset(path))
    registry = build_registry(payroll_input)
    employees = build_employees(payroll_input)
    logger.info(
        "Loaded %d jobs and %d employees", len(registry), len(employees)
    )
    return registry, employees

"""Pydantic schemas for the payroll input dataset."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class JobMetaSchema(BaseModel):
    """One entry of ``jobMeta``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    job: str
    rate: Decimal
    benefits_rate: Decimal = Field(alias="benefitsRate")


class TimePunchSchema(BaseModel):
    """One entry of an employee's ``timePunch`` list.

    Timestamps stay as strings here; they are parsed with the fixed
    ``yyyy-MM-dd HH:mm:ss`` format when converted to domain punches.
    """

    model_config = ConfigDict(frozen=True)

    job: str
    start: str
    end: str


class EmployeeDataSchema(BaseModel):
    """One entry of ``employeeData``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    employee: str
    time_punch: list[TimePunchSchema] = Field(alias="timePunch")


class PayrollInputSchema(BaseModel):
    """Top-level dataset: job metadata plus employee punches."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    job_meta: list[JobMetaSchema] = Field(alias="jobMeta")
    employee_data: list[EmployeeDataSchema] = Field(alias="employeeData")

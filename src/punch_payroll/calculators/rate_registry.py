"""Job rate lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from decimal import Decimal
from types import MappingProxyType

from punch_payroll.calculators.types import Job


class JobRateNotFoundError(KeyError):
    """Raised when a punch references a job with no rate."""

    def __init__(self, job_id: str):
        self.job_id = job_id
        super().__init__(job_id)

    def __str__(self) -> str:
        return f"No pay rate found for job {self.job_id!r}"


class RateRegistry:
    """Read-only mapping of job id to its pay and benefit rates.

    Built once from job metadata. Later jobs with a duplicate id replace
    earlier ones. Lookups for unknown jobs raise ``JobRateNotFoundError``
    rather than falling back to a default rate.
    """

    __slots__ = ("_jobs",)

    def __init__(self, jobs: Mapping[str, Job] | None = None):
        self._jobs: Mapping[str, Job] = MappingProxyType(dict(jobs or {}))

    @classmethod
    def from_jobs(cls, jobs: Iterable[Job]) -> RateRegistry:
        """Index jobs by id (last write wins)."""
        indexed: dict[str, Job] = {}
        for job in jobs:
            indexed[job.id] = job
        return cls(indexed)

    def get(self, job_id: str) -> Job:
        """Return the job for ``job_id``.

        Raises:
            JobRateNotFoundError: If the job is not registered
        """
        try:
            return self._jobs[job_id]
        except KeyError:
            raise JobRateNotFoundError(job_id) from None

    def lookup(self, job_id: str) -> tuple[Decimal, Decimal]:
        """Return ``(rate, benefits_rate)`` for a job."""
        job = self.get(job_id)
        return job.rate, job.benefits_rate

    def __contains__(self, job_id: object) -> bool:
        return job_id in self._jobs

    def __len__(self) -> int:
        return len(self._jobs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._jobs)

    def __repr__(self) -> str:
        return f"RateRegistry(jobs={list(self._jobs)!r})"

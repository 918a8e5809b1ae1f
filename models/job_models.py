"""Data models for job postings."""
from __future__ import annotations
from datetime import date
from typing import Any, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator

JobType = Literal["Full-time", "Part-time", "Contract", "Internship"]
JOB_TYPES: tuple[str, ...] = get_args(JobType)

SALARY_FIELDS = ("salary_min", "salary_max")


class JobPostingDraft(BaseModel):
    """A job posting as entered in the create form, before the server sees it."""

    model_config = ConfigDict(str_strip_whitespace=True)

    # Required
    job_title: str = Field(min_length=1)
    company_name: str = Field(min_length=1)
    location: str = Field(min_length=1)
    job_type: JobType
    job_description: str = Field(min_length=1)
    requirements: str = Field(min_length=1)
    responsibilities: str = Field(min_length=1)

    # Optional (monthly salary bounds, no ordering between them)
    salary_min: Optional[float] = Field(default=None, ge=0)
    salary_max: Optional[float] = Field(default=None, ge=0)
    experience: Optional[str] = None
    application_deadline: Optional[date] = None

    @field_validator(*SALARY_FIELDS)
    @classmethod
    def _zero_salary_is_unset(cls, value: Optional[float]) -> Optional[float]:
        return value or None

    @field_validator("experience")
    @classmethod
    def _blank_experience_is_unset(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    def to_payload(self) -> dict[str, Any]:
        """Return the plain JSON-ready record sent to the backend.

        Whole-number salaries are sent as integers (``50000`` rather than
        ``50000.0``).
        """
        payload = self.model_dump(mode="json")
        for field in SALARY_FIELDS:
            value = payload.get(field)
            if isinstance(value, float) and value.is_integer():
                payload[field] = int(value)
        return payload

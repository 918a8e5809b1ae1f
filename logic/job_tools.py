"""Utility functions for validating and displaying job postings."""

from __future__ import annotations
import math
import re
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any

from pydantic import ValidationError

from models.job_models import JobPostingDraft

# Messages shown below each form field when validation fails
FIELD_MESSAGES: dict[str, str] = {
    "job_title": "Job Title is required",
    "company_name": "Company Name is required",
    "location": "Location is required",
    "job_type": "Job Type is required",
    "job_description": "Job Description is required",
    "requirements": "Requirements are required",
    "responsibilities": "Responsibilities are required",
    "salary_min": "Salary cannot be negative",
    "salary_max": "Salary cannot be negative",
    "application_deadline": "Application Deadline must be a valid date",
}

CURRENCY_SYMBOL = "₹"

# Characters Streamlit markdown treats as formatting anywhere in a line ($ starts LaTeX)
MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()<>#|~$!])")
# List, rule and heading markers only matter at the start of a line
LINE_MARKER = re.compile(r"^(\s*)([-+=])", re.MULTILINE)
ORDERED_MARKER = re.compile(r"^(\s*)(\d+)\.", re.MULTILINE)


def validate_job_form(
    values: Mapping[str, Any],
) -> tuple[JobPostingDraft | None, dict[str, str]]:
    """Validate raw form values.

    Args:
        values: Field name to entered value, as collected by the form.

    Returns:
        ``(draft, {})`` when the values are acceptable, otherwise
        ``(None, errors)`` where ``errors`` maps each failing field to the
        message displayed below it.
    """
    try:
        return JobPostingDraft.model_validate(dict(values)), {}
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for err in exc.errors():
            field = str(err["loc"][0]) if err["loc"] else "__all__"
            errors.setdefault(field, FIELD_MESSAGES.get(field, err["msg"]))
        return None, errors


def _to_number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def format_number(value: Any) -> str:
    """Format a number with thousands separators and at most three decimals.

    Args:
        value: Number or numeric string.

    Returns:
        ``"50,000"`` for ``50000``; ``"NaN"`` for non-numeric input.
    """
    number = _to_number(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "∞" if number > 0 else "-∞"
    text = f"{number:,.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_salary(salary_min: Any, salary_max: Any) -> str:
    """Render a salary range such as ``₹50,000 - ₹80,000``.

    Args:
        salary_min: Lower bound or ``None``.
        salary_max: Upper bound or ``None``.

    Returns:
        The range, a one-sided ``From``/``Up to`` phrase, or ``Not specified``
        when neither bound is set. Zero counts as unset.
    """
    if salary_min and salary_max:
        return f"{CURRENCY_SYMBOL}{format_number(salary_min)} - {CURRENCY_SYMBOL}{format_number(salary_max)}"
    if salary_min:
        return f"From {CURRENCY_SYMBOL}{format_number(salary_min)}"
    if salary_max:
        return f"Up to {CURRENCY_SYMBOL}{format_number(salary_max)}"
    return "Not specified"


def escape_markdown(text: str) -> str:
    """Make ``text`` render literally inside ``st.markdown``.

    Args:
        text: User or server supplied text.

    Returns:
        Text with formatting characters backslash-escaped and line breaks
        kept as hard breaks.
    """
    text = MARKDOWN_SPECIAL.sub(r"\\\1", text)
    text = LINE_MARKER.sub(r"\1\\\2", text)
    text = ORDERED_MARKER.sub(r"\1\2\\.", text)
    return text.replace("\n", "  \n")


def shows_salary(job: Mapping[str, Any]) -> bool:
    """A card hides the salary row only when both bounds are explicitly null."""
    return not ("salary_min" in job and job["salary_min"] is None
                and "salary_max" in job and job["salary_max"] is None)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a ``datetime``, ``date`` or ISO string into an aware UTC datetime.

    Naive values are taken to be UTC. Returns ``None`` when ``value`` cannot
    be parsed.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        # Epoch milliseconds
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_date(value: Any) -> str:
    """Return the UTC calendar date of ``value`` as ``YYYY-MM-DD``.

    Args:
        value: Date, datetime or ISO string.

    Returns:
        ``N/A`` for empty input; the input unchanged when it cannot be parsed.
    """
    if not value:
        return "N/A"
    parsed = parse_timestamp(value)
    if parsed is None:
        return str(value)
    return parsed.date().isoformat()


def _round(value: float) -> int:
    return int(math.floor(value + 0.5))


def _relative(seconds: float) -> str:
    """Describe an absolute duration in words ("5 minutes", "a day")."""
    minutes = _round(seconds / 60)
    hours = _round(minutes / 60)
    days = _round(hours / 24)
    months = _round(days / 30.4)
    years = _round(days / 365)
    if _round(seconds) < 45:
        return "a few seconds"
    if _round(seconds) < 90:
        return "a minute"
    if minutes < 45:
        return f"{minutes} minutes"
    if minutes < 90:
        return "an hour"
    if hours < 22:
        return f"{hours} hours"
    if hours < 36:
        return "a day"
    if days < 26:
        return f"{days} days"
    if days < 45:
        return "a month"
    if days < 320:
        return f"{max(months, 2)} months"
    if days < 548:
        return "a year"
    return f"{max(years, 2)} years"


def time_ago(value: Any, now: datetime | None = None) -> str:
    """Return a human readable age like ``"3 hours ago"`` or ``"in a day"``.

    Args:
        value: Creation timestamp (datetime, ISO string, epoch milliseconds).
        now: Reference time, defaults to the current UTC time.

    Returns:
        The relative phrase, or ``Invalid date`` if ``value`` is ``None`` or
        unparseable.
    """
    now = now or datetime.now(timezone.utc)
    parsed = parse_timestamp(value)
    if parsed is None:
        return "Invalid date"
    delta = (now - parsed).total_seconds()
    phrase = _relative(abs(delta))
    return f"{phrase} ago" if delta >= 0 else f"in {phrase}"


def job_age(job: Mapping[str, Any], now: datetime | None = None) -> str:
    """Relative age of a job card; a record without ``created_at`` counts as new."""
    now = now or datetime.now(timezone.utc)
    return time_ago(job.get("created_at", now), now=now)

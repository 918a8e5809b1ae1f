"""Client for the remote ``/jobs`` REST resource."""

from __future__ import annotations

import logging
from typing import Any

import requests  # type: ignore

from utils import config

logger = logging.getLogger(__name__)

COMPANY_EXISTS_MESSAGE = "Company details already exist."


class JobsApiError(Exception):
    """The jobs backend answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CompanyExistsError(JobsApiError):
    """The backend rejected a posting because the company is already registered (HTTP 409)."""


def _is_success(resp: requests.Response) -> bool:
    return 200 <= resp.status_code < 300


def _error_message(resp: requests.Response, default: str) -> str:
    """Return the ``message`` field of a JSON error body, or ``default``."""
    try:
        data = resp.json()
    except ValueError as exc:
        logger.error("Could not parse error response: %s", exc)
        return default
    logger.info("Error data from backend: %s", data)
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return default


def fetch_jobs(url: str | None = None, timeout: float | None = None) -> list[dict[str, Any]]:
    """Return all job postings from the backend.

    A JSON body that is not a list yields an empty list. Raises
    ``JobsApiError`` for non-2xx responses; transport and decoding errors
    propagate as ``requests.RequestException`` / ``ValueError``.
    """
    resp = requests.get(url or config.JOBS_API_URL, timeout=timeout or config.JOBS_API_TIMEOUT)
    if not _is_success(resp):
        raise JobsApiError(f"HTTP error! status: {resp.status_code}", resp.status_code)
    data = resp.json()
    if not isinstance(data, list):
        logger.warning("Unexpected jobs payload of type %s, treating as empty", type(data).__name__)
        return []
    return [job for job in data if isinstance(job, dict)]


def create_job(
    payload: dict[str, Any], url: str | None = None, timeout: float | None = None
) -> dict[str, Any]:
    """POST a new job posting and return the backend's JSON response.

    Raises ``CompanyExistsError`` on HTTP 409 and ``JobsApiError`` on any
    other non-2xx status. An undecodable success body raises ``ValueError``.
    """
    logger.info("Submitting job data to backend: %s", payload)
    resp = requests.post(
        url or config.JOBS_API_URL,
        json=payload,
        headers={"Content-Type": "application/json"},
        timeout=timeout or config.JOBS_API_TIMEOUT,
    )
    logger.info("Response from backend: status=%s", resp.status_code)

    if resp.status_code == 409:
        raise CompanyExistsError(_error_message(resp, COMPANY_EXISTS_MESSAGE), 409)
    if not _is_success(resp):
        default = f"Failed to create job in backend. Status: {resp.status_code}"
        raise JobsApiError(_error_message(resp, default), resp.status_code)

    data = resp.json()
    logger.info("Received response from backend: %s", data)
    return data if isinstance(data, dict) else {}

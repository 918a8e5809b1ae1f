from __future__ import annotations
import logging
from collections.abc import MutableMapping
from typing import Any, cast

import requests  # type: ignore
import streamlit as st

from logic.job_list import insert_optimistic_job, reconcile_job_id, replace_jobs
from logic.job_tools import escape_markdown, format_date, format_salary, job_age, shows_salary
from services.jobs_api import CompanyExistsError, JobsApiError, create_job, fetch_jobs
from services.logger import log_event

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load job postings. Please try again later."
POST_ERROR_MESSAGE = "An unexpected error occurred while posting the job to the backend."


def _state(state: MutableMapping[str, Any] | None) -> MutableMapping[str, Any]:
    if state is None:
        return cast(MutableMapping[str, Any], st.session_state)
    return state


def load_jobs(state: MutableMapping[str, Any] | None = None) -> None:
    """Fetch the job list from the backend into ``state``.

    On any failure the list is cleared and a user-facing error is stored.
    """
    state = _state(state)
    state["is_loading"] = True
    state["error"] = None
    try:
        jobs = replace_jobs(fetch_jobs(), state)
        log_event("jobs_loaded", {"count": len(jobs)})
    except (JobsApiError, requests.RequestException, ValueError) as exc:
        logger.error("Error fetching jobs: %s", exc)
        state["error"] = LOAD_ERROR_MESSAGE
        replace_jobs([], state)
    finally:
        state["is_loading"] = False
        state["jobs_loaded"] = True


def open_job_form(state: MutableMapping[str, Any] | None = None) -> None:
    """Request the create-job dialog on the next run."""
    state = _state(state)
    state["show_form"] = True
    state["job_form_errors"] = {}


def close_job_form(state: MutableMapping[str, Any] | None = None) -> None:
    _state(state)["show_form"] = False


def handle_submit_job(
    payload: dict[str, Any], state: MutableMapping[str, Any] | None = None
) -> dict[str, Any]:
    """Show ``payload`` immediately and queue its POST for this session.

    Returns the optimistic record with its temporary id.
    """
    state = _state(state)
    state["error"] = None
    state["company_exists_error"] = None
    record = insert_optimistic_job(payload, state)
    close_job_form(state)
    state["pending_jobs"] = [
        *(state.get("pending_jobs") or []),
        {"temp_id": record["id"], "payload": payload},
    ]
    log_event("job_submitted", {"temp_id": record["id"], "company": payload.get("company_name")})
    return record


def post_job(
    temp_id: Any, payload: dict[str, Any], state: MutableMapping[str, Any] | None = None
) -> None:
    """POST one optimistic record and reconcile its id.

    Failures leave the optimistic record in place and store a message in
    ``company_exists_error`` (HTTP 409) or ``error``.
    """
    state = _state(state)
    try:
        created = create_job(payload)
    except CompanyExistsError as exc:
        logger.warning("Company already exists: %s", exc)
        state["company_exists_error"] = str(exc)
        return
    except (JobsApiError, requests.RequestException, ValueError) as exc:
        logger.error("Error posting job to backend: %s", exc)
        state["error"] = str(exc) or POST_ERROR_MESSAGE
        return
    server_id = created.get("id")
    if not reconcile_job_id(temp_id, server_id, state):
        logger.warning("Could not reconcile job %s with server id %s", temp_id, server_id)
        return
    log_event("job_created", {"temp_id": temp_id, "id": server_id})


def submit_pending_jobs(state: MutableMapping[str, Any] | None = None) -> bool:
    """POST queued optimistic records in order. Returns ``True`` if any were sent.

    Each record leaves the queue right before its own POST, so an interrupted
    run keeps the unsent ones for the next run.
    """
    state = _state(state)
    sent = False
    while state.get("pending_jobs"):
        item, *rest = state["pending_jobs"]
        state["pending_jobs"] = rest
        post_job(item["temp_id"], item["payload"], state)
        sent = True
    return sent


def _detail(label: str, value: Any) -> None:
    text = "" if value is None else str(value)
    st.markdown(f"**{label}:** " + escape_markdown(text))


def render_job_card(job: dict[str, Any], index: int = 0) -> None:
    """Draw a single job posting card."""
    with st.container(border=True):
        _detail("Title", job.get("job_title"))
        _detail("Location", job.get("location"))
        _detail("Description", job.get("job_description"))
        _detail("Responsibilities", job.get("responsibilities"))
        if shows_salary(job):
            _detail("Salary Range", format_salary(job.get("salary_min"), job.get("salary_max")))
        if job.get("experience"):
            _detail("Experience", job["experience"])
        if job.get("application_deadline"):
            _detail("Application Deadline", format_date(job["application_deadline"]))
        st.button("Apply Now", key=f"apply_{index}_{job.get('id')}", type="primary")
        st.caption(job_age(job))


def render_job_board(state: MutableMapping[str, Any] | None = None) -> None:
    """Render the welcome text, status messages and the job grid."""
    state = _state(state)
    st.title("Welcome to the Job Portal")
    st.markdown(
        "Find your next career opportunity or post a job opening for talented individuals. "
        "Click the button below to post a new job."
    )
    if state.get("error"):
        st.error(f"Error: {state['error']}")
    if state.get("company_exists_error"):
        st.warning(state["company_exists_error"])

    st.header("Job Openings", divider="gray")
    jobs = state.get("created_jobs") or []
    if state.get("is_loading"):
        st.write("Loading job postings...")
    elif not jobs:
        st.markdown("*No job postings available at the moment.*")
    else:
        columns = st.columns(2, gap="large")
        for index, job in enumerate(jobs):
            with columns[index % 2]:
                render_job_card(job, index)

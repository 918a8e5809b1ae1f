from __future__ import annotations
from collections.abc import MutableMapping
from typing import Any, Callable, cast

import streamlit as st

from logic.job_tools import validate_job_form
from models.job_models import JOB_TYPES

FORM_KEY_PREFIX = "job_form_"
FORM_FIELDS = (
    "job_title",
    "company_name",
    "location",
    "salary_min",
    "salary_max",
    "experience",
    "application_deadline",
    "job_type",
    "job_description",
    "requirements",
    "responsibilities",
)


def _key(field: str) -> str:
    return f"{FORM_KEY_PREFIX}{field}"


def _field_error(errors: dict[str, str], field: str) -> None:
    if field in errors:
        st.caption(f":red[{errors[field]}]")


def _state(state: MutableMapping[str, Any] | None) -> MutableMapping[str, Any]:
    if state is None:
        return cast(MutableMapping[str, Any], st.session_state)
    return state


def form_values(state: MutableMapping[str, Any] | None = None) -> dict[str, Any]:
    """Collect the entered values from the form widgets' session keys."""
    state = _state(state)
    return {field: state.get(_key(field)) for field in FORM_FIELDS}


def clear_form(state: MutableMapping[str, Any] | None = None) -> None:
    """Forget entered values and errors so the next dialog starts empty."""
    state = _state(state)
    for field in FORM_FIELDS:
        state.pop(_key(field), None)
    state["job_form_errors"] = {}


def submit_form(
    on_submit: Callable[[dict[str, Any]], Any],
    state: MutableMapping[str, Any] | None = None,
) -> bool:
    """Validate the entered values and hand a valid payload to ``on_submit``.

    Returns ``False`` and stores per-field messages in ``job_form_errors``
    when validation fails; the entered values are kept. On success the form
    is cleared and ``True`` is returned.
    """
    state = _state(state)
    draft, errors = validate_job_form(form_values(state))
    if draft is None:
        state["job_form_errors"] = errors
        return False
    on_submit(draft.to_payload())
    clear_form(state)
    return True


@st.dialog("Create New Job Posting", width="large")
def job_posting_form(on_submit: Callable[[dict[str, Any]], Any]) -> None:
    """Collect a job posting, validate it and hand the plain record to ``on_submit``."""
    errors: dict[str, str] = st.session_state.get("job_form_errors") or {}
    with st.form("job_posting_form", border=False):
        st.text_input("Job Title *", key=_key("job_title"))
        _field_error(errors, "job_title")
        st.text_input("Company Name *", key=_key("company_name"))
        _field_error(errors, "company_name")
        st.text_input("Location *", key=_key("location"))
        _field_error(errors, "location")

        st.markdown("**Salary Range (Monthly, Optional)**")
        col_min, col_max = st.columns(2)
        with col_min:
            st.number_input(
                "Minimum (e.g., 50000)",
                value=None,
                step=1000,
                placeholder="Min Salary",
                key=_key("salary_min"),
            )
            _field_error(errors, "salary_min")
        with col_max:
            st.number_input(
                "Maximum (e.g., 80000)",
                value=None,
                step=1000,
                placeholder="Max Salary",
                key=_key("salary_max"),
            )
            _field_error(errors, "salary_max")

        st.text_input("Experience (Optional)", key=_key("experience"))
        st.date_input("Application Deadline (Optional)", value=None, key=_key("application_deadline"))
        _field_error(errors, "application_deadline")
        st.selectbox(
            "Job Type *",
            JOB_TYPES,
            index=None,
            placeholder="Select Job Type",
            key=_key("job_type"),
        )
        _field_error(errors, "job_type")
        st.text_area("Job Description *", key=_key("job_description"))
        _field_error(errors, "job_description")
        st.text_area("Requirements *", key=_key("requirements"))
        _field_error(errors, "requirements")
        st.text_area("Responsibilities *", key=_key("responsibilities"))
        _field_error(errors, "responsibilities")

        col_cancel, col_submit = st.columns(2)
        with col_cancel:
            cancelled = st.form_submit_button("Cancel")
        with col_submit:
            published = st.form_submit_button("Publish Job", type="primary")

    if cancelled:
        clear_form()
        st.rerun()
    if published:
        if submit_form(on_submit):
            st.rerun()
        else:
            # Show the messages below their fields, keep the dialog open
            st.rerun(scope="fragment")

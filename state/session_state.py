# state/session_state.py
# ─────────────────────────────────────────────────────────────────────────────
"""Helpers to initialize Streamlit session state for the job portal page."""

from __future__ import annotations
import copy
from collections.abc import MutableMapping
from typing import Any, cast

import streamlit as st

# Page state and its initial values
STATE_DEFAULTS: dict[str, Any] = {
    "show_form": False,
    "created_jobs": [],
    "is_loading": True,
    "jobs_loaded": False,
    "error": None,
    "company_exists_error": None,
    # Optimistic records still waiting for their POST
    "pending_jobs": [],
    "job_form_errors": {},
}


def _resolve(state: MutableMapping[str, Any] | None) -> MutableMapping[str, Any]:
    if state is None:
        return cast(MutableMapping[str, Any], st.session_state)
    return state


def initialize_session_state(state: MutableMapping[str, Any] | None = None) -> None:
    """Ensure all page keys exist in the session state (idempotent)."""
    state = _resolve(state)
    if state.get("_job_portal_state_init"):
        return  # already initialized
    for key, default in STATE_DEFAULTS.items():
        if key not in state:
            state[key] = copy.deepcopy(default)
    state["_job_portal_state_init"] = True


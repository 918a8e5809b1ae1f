"""Optimistic operations on the in-memory job list.

All functions work on a mutable mapping (``st.session_state`` in the app, a
plain ``dict`` in tests) holding the list under ``"created_jobs"``. The list is
always replaced, never mutated in place, so a rerun never observes a
half-applied update.
"""

from __future__ import annotations
import time
from collections.abc import MutableMapping
from datetime import datetime, timezone
from typing import Any

JOBS_KEY = "created_jobs"


def new_temp_id(existing: list[dict[str, Any]] | None = None) -> int:
    """Return a temporary id (epoch milliseconds) not used by ``existing``."""
    temp_id = int(time.time() * 1000)
    taken = {job.get("id") for job in existing or []}
    while temp_id in taken:
        temp_id += 1
    return temp_id


def replace_jobs(data: Any, state: MutableMapping[str, Any]) -> list[dict[str, Any]]:
    """Replace the job list with server data; anything but a list becomes ``[]``."""
    jobs = [job for job in data if isinstance(job, dict)] if isinstance(data, list) else []
    state[JOBS_KEY] = jobs
    return jobs


def insert_optimistic_job(
    payload: dict[str, Any], state: MutableMapping[str, Any]
) -> dict[str, Any]:
    """Put a local copy of ``payload`` at the front of the list.

    The copy gets a temporary ``id`` and a ``created_at`` timestamp until the
    backend confirms it.
    """
    jobs = list(state.get(JOBS_KEY) or [])
    record = {
        **payload,
        "id": new_temp_id(jobs),
        "created_at": datetime.now(timezone.utc),
    }
    state[JOBS_KEY] = [record, *jobs]
    return record


def reconcile_job_id(temp_id: Any, server_id: Any, state: MutableMapping[str, Any]) -> bool:
    """Swap ``temp_id`` for the server-assigned id, keeping all other fields.

    Returns ``False`` if no record carries ``temp_id`` or ``server_id`` is
    missing; the list is left untouched in that case.
    """
    jobs = list(state.get(JOBS_KEY) or [])
    if server_id is None or not any(job.get("id") == temp_id for job in jobs):
        return False
    state[JOBS_KEY] = [
        {**job, "id": server_id} if job.get("id") == temp_id else job for job in jobs
    ]
    return True

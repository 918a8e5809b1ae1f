from unittest.mock import patch

import pytest
import requests

from components.job_board import (
    LOAD_ERROR_MESSAGE,
    POST_ERROR_MESSAGE,
    handle_submit_job,
    load_jobs,
    open_job_form,
    post_job,
    submit_pending_jobs,
)
from services.jobs_api import CompanyExistsError, JobsApiError
from state.session_state import initialize_session_state

PAYLOAD = {"job_title": "Backend Engineer", "company_name": "ACME", "location": "Pune"}


def _state(**overrides) -> dict:
    state: dict = {}
    initialize_session_state(state)
    state.update(overrides)
    return state


def test_load_jobs_success() -> None:
    state = _state(error="old error")
    with patch("components.job_board.fetch_jobs", return_value=[{"id": 1}]):
        load_jobs(state)
    assert state["created_jobs"] == [{"id": 1}]
    assert state["error"] is None
    assert state["is_loading"] is False
    assert state["jobs_loaded"] is True


def test_load_jobs_failure_clears_list() -> None:
    state = _state(created_jobs=[{"id": 1}])
    with patch(
        "components.job_board.fetch_jobs", side_effect=requests.ConnectionError("down")
    ):
        load_jobs(state)
    assert state["created_jobs"] == []
    assert state["error"] == LOAD_ERROR_MESSAGE
    assert state["is_loading"] is False


def test_load_jobs_http_status_failure() -> None:
    state = _state()
    with patch(
        "components.job_board.fetch_jobs", side_effect=JobsApiError("HTTP error! status: 503", 503)
    ):
        load_jobs(state)
    assert state["error"] == LOAD_ERROR_MESSAGE


def test_open_job_form_resets_field_errors() -> None:
    state = _state(job_form_errors={"job_title": "Job Title is required"})
    open_job_form(state)
    assert state["show_form"] is True
    assert state["job_form_errors"] == {}


def test_handle_submit_job_is_optimistic() -> None:
    state = _state(
        created_jobs=[{"id": 1}],
        show_form=True,
        error="previous",
        company_exists_error="previous",
    )
    record = handle_submit_job(PAYLOAD, state)
    assert state["created_jobs"][0] == record
    assert record["job_title"] == "Backend Engineer"
    assert state["show_form"] is False
    assert state["error"] is None
    assert state["company_exists_error"] is None
    assert state["pending_jobs"] == [{"temp_id": record["id"], "payload": PAYLOAD}]


def test_post_job_reconciles_server_id() -> None:
    state = _state()
    record = handle_submit_job(PAYLOAD, state)
    with patch("components.job_board.create_job", return_value={"id": 501}) as mock_create:
        post_job(record["id"], PAYLOAD, state)
    mock_create.assert_called_once_with(PAYLOAD)
    assert state["created_jobs"][0]["id"] == 501
    assert state["created_jobs"][0]["created_at"] == record["created_at"]
    assert state["error"] is None


def test_post_job_conflict_keeps_optimistic_record() -> None:
    state = _state()
    record = handle_submit_job(PAYLOAD, state)
    with patch(
        "components.job_board.create_job",
        side_effect=CompanyExistsError("Company details already exist.", 409),
    ):
        post_job(record["id"], PAYLOAD, state)
    assert state["company_exists_error"] == "Company details already exist."
    assert state["error"] is None
    assert state["created_jobs"] == [record]


def test_post_job_failure_keeps_optimistic_record() -> None:
    state = _state()
    record = handle_submit_job(PAYLOAD, state)
    with patch(
        "components.job_board.create_job",
        side_effect=JobsApiError("Failed to create job in backend. Status: 500", 500),
    ):
        post_job(record["id"], PAYLOAD, state)
    assert state["error"] == "Failed to create job in backend. Status: 500"
    assert state["created_jobs"] == [record]


def test_post_job_blank_transport_error_uses_fallback() -> None:
    state = _state()
    record = handle_submit_job(PAYLOAD, state)
    with patch("components.job_board.create_job", side_effect=requests.Timeout()):
        post_job(record["id"], PAYLOAD, state)
    assert state["error"] == POST_ERROR_MESSAGE


def test_submit_pending_jobs_drains_queue_in_order() -> None:
    state = _state()
    first = handle_submit_job({**PAYLOAD, "job_title": "First"}, state)
    second = handle_submit_job({**PAYLOAD, "job_title": "Second"}, state)
    with patch(
        "components.job_board.create_job", side_effect=[{"id": 1}, {"id": 2}]
    ) as mock_create:
        assert submit_pending_jobs(state) is True
    assert [c.args[0]["job_title"] for c in mock_create.call_args_list] == ["First", "Second"]
    ids = {job["job_title"]: job["id"] for job in state["created_jobs"]}
    assert ids == {"First": 1, "Second": 2}
    assert first["id"] != second["id"]
    assert state["pending_jobs"] == []
    assert submit_pending_jobs(state) is False


def test_submit_pending_jobs_dequeues_one_record_per_post() -> None:
    state = _state()
    handle_submit_job({**PAYLOAD, "job_title": "First"}, state)
    handle_submit_job({**PAYLOAD, "job_title": "Second"}, state)
    queued_during_post = []

    def _create(payload):
        queued_during_post.append(len(state["pending_jobs"]))
        return {"id": payload["job_title"]}

    with patch("components.job_board.create_job", side_effect=_create):
        submit_pending_jobs(state)
    assert queued_during_post == [1, 0]


def test_interrupted_submission_keeps_unsent_records() -> None:
    state = _state()
    handle_submit_job({**PAYLOAD, "job_title": "First"}, state)
    second = handle_submit_job({**PAYLOAD, "job_title": "Second"}, state)
    with patch("components.job_board.create_job", side_effect=RuntimeError("rerun")):
        with pytest.raises(RuntimeError):
            submit_pending_jobs(state)
    assert [item["temp_id"] for item in state["pending_jobs"]] == [second["id"]]

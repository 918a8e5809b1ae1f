from state.session_state import STATE_DEFAULTS, initialize_session_state


def test_initialize_session_state_sets_defaults() -> None:
    state: dict = {}
    initialize_session_state(state)
    for key, default in STATE_DEFAULTS.items():
        assert state[key] == default
    assert state["is_loading"] is True
    assert state["jobs_loaded"] is False


def test_initialize_session_state_is_idempotent_and_keeps_values() -> None:
    state: dict = {"created_jobs": [{"id": 1}]}
    initialize_session_state(state)
    state["error"] = "boom"
    initialize_session_state(state)
    assert state["created_jobs"] == [{"id": 1}]
    assert state["error"] == "boom"


def test_defaults_are_not_shared_between_sessions() -> None:
    first: dict = {}
    second: dict = {}
    initialize_session_state(first)
    initialize_session_state(second)
    first["created_jobs"].append({"id": 1})
    assert second["created_jobs"] == []
    assert STATE_DEFAULTS["created_jobs"] == []

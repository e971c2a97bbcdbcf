"""Reducers — verifies pure transitions for alert, auth and profile slices.

Tests:
    - unknown actions return the identical state object
    - inputs are never mutated (frozen dataclasses, new instances)
    - each documented transition sets exactly the expected fields
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from devconnector.client.action_types import Action, ActionType
from devconnector.client.reducers import (
    alert_reducer, auth_reducer, profile_reducer, root_reducer,
)
from devconnector.client.state import Alert, AppState, AuthState, ProfileState
from devconnector.core.domain_types import AlertSeverity


def _alert(alert_id: str) -> Alert:
    return Alert(alert_id, "msg", AlertSeverity.INFO, datetime.now(timezone.utc))


def test_unknown_action_returns_same_state():
    state = AppState()
    assert alert_reducer(state.alerts, Action(ActionType.LOGOUT)) is state.alerts
    assert auth_reducer(state.auth, Action(ActionType.GET_PROFILE, {})) is state.auth
    assert profile_reducer(state.profile, Action(ActionType.LOGIN_SUCCESS, {})) is state.profile


def test_root_returns_same_object_when_no_slice_changes():
    state = AppState()
    assert root_reducer(state, Action(ActionType.REMOVE_ALERT, "missing")) == state
    assert root_reducer(state, Action(ActionType.SET_ALERT, _alert("a"))) is not state


def test_state_is_frozen():
    with pytest.raises(FrozenInstanceError):
        AuthState().token = "x"


def test_alerts_append_and_remove_by_id():
    a, b = _alert("a"), _alert("b")
    state = alert_reducer((), Action(ActionType.SET_ALERT, a))
    state = alert_reducer(state, Action(ActionType.SET_ALERT, b))
    assert [x.id for x in state] == ["a", "b"]
    assert alert_reducer(state, Action(ActionType.REMOVE_ALERT, "a")) == (b,)
    assert len(state) == 2


def test_login_success_sets_token():
    before = AuthState()
    after = auth_reducer(before, Action(ActionType.LOGIN_SUCCESS, {"token": "t"}))
    assert after.token == "t"
    assert after.is_authenticated is True
    assert after.loading is False
    assert before.token is None


def test_user_loaded_sets_user():
    after = auth_reducer(AuthState(token="t"), Action(ActionType.USER_LOADED, {"id": "1"}))
    assert after.user == {"id": "1"}
    assert after.is_authenticated is True
    assert after.token == "t"


@pytest.mark.parametrize("action_type", [
    ActionType.REGISTER_FAIL, ActionType.LOGIN_FAIL, ActionType.AUTH_ERROR,
    ActionType.LOGOUT, ActionType.ACCOUNT_DELETED,
])
def test_auth_cleared(action_type):
    state = AuthState(token="t", is_authenticated=True, loading=False, user={"id": "1"})
    after = auth_reducer(state, Action(action_type))
    assert after == AuthState(token=None, is_authenticated=False, loading=False, user=None)


def test_get_profile_and_update_profile():
    state = ProfileState()
    loaded = profile_reducer(state, Action(ActionType.GET_PROFILE, {"id": "p"}))
    assert loaded.profile == {"id": "p"}
    assert loaded.loading is False
    updated = profile_reducer(loaded, Action(ActionType.UPDATE_PROFILE, {"id": "p2"}))
    assert updated.profile == {"id": "p2"}
    assert loaded.profile == {"id": "p"}


def test_get_profiles_stores_tuple():
    after = profile_reducer(ProfileState(), Action(ActionType.GET_PROFILES, [{"id": "1"}]))
    assert after.profiles == ({"id": "1"},)


def test_profile_error_clears_profile():
    state = ProfileState(profile={"id": "p"}, loading=False)
    after = profile_reducer(
        state, Action(ActionType.PROFILE_ERROR, {"msg": "x", "status": 400}),
    )
    assert after.profile is None
    assert after.errors == {"msg": "x", "status": 400}


def test_clear_profile_keeps_profiles_list():
    state = ProfileState(profile={"id": "p"}, profiles=({"id": "p"},), repos=("r",))
    after = profile_reducer(state, Action(ActionType.CLEAR_PROFILE))
    assert after.profile is None
    assert after.repos == ()
    assert after.profiles == state.profiles


def test_reset_loading_touches_only_loading():
    state = ProfileState(profile={"id": "p"}, loading=False)
    after = profile_reducer(state, Action(ActionType.RESET_PROFILE_LOADING))
    assert after.loading is True
    assert after.profile == {"id": "p"}


def test_slices_commute():
    state = AppState()
    alert = Action(ActionType.SET_ALERT, _alert("a"))
    login = Action(ActionType.LOGIN_SUCCESS, {"token": "t"})
    one = root_reducer(root_reducer(state, alert), login)
    two = root_reducer(root_reducer(state, login), alert)
    assert one == two

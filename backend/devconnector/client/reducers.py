"""Reducers — pure (state, action) → state transition tables.

Invariants:
    - Never mutate the input state; unknown action types return the same object
    - Each slice reacts only to its own action types, so unrelated actions commute
    - RESET_PROFILE_LOADING touches only `loading`
"""

from dataclasses import replace

from devconnector.client.action_types import Action, ActionType
from devconnector.client.state import Alert, AppState, AuthState, ProfileState

_AUTH_CLEARED = (
    ActionType.REGISTER_FAIL,
    ActionType.LOGIN_FAIL,
    ActionType.AUTH_ERROR,
    ActionType.LOGOUT,
    ActionType.ACCOUNT_DELETED,
)


def alert_reducer(state: tuple[Alert, ...], action: Action) -> tuple[Alert, ...]:
    if action.type == ActionType.SET_ALERT:
        return (*state, action.payload)
    if action.type == ActionType.REMOVE_ALERT:
        return tuple(a for a in state if a.id != action.payload)
    return state


def auth_reducer(state: AuthState, action: Action) -> AuthState:
    t, payload = action.type, action.payload
    if t == ActionType.USER_LOADED:
        return replace(state, is_authenticated=True, loading=False, user=payload)
    if t in (ActionType.REGISTER_SUCCESS, ActionType.LOGIN_SUCCESS):
        return replace(
            state, token=payload["token"], is_authenticated=True, loading=False,
        )
    if t in _AUTH_CLEARED:
        return replace(
            state, token=None, is_authenticated=False, loading=False, user=None,
        )
    return state


def profile_reducer(state: ProfileState, action: Action) -> ProfileState:
    t, payload = action.type, action.payload
    if t in (ActionType.GET_PROFILE, ActionType.UPDATE_PROFILE):
        return replace(state, profile=payload, loading=False)
    if t == ActionType.GET_PROFILES:
        return replace(state, profiles=tuple(payload), loading=False)
    if t == ActionType.PROFILE_ERROR:
        return replace(state, errors=payload, loading=False, profile=None)
    if t == ActionType.CLEAR_PROFILE:
        return replace(state, profile=None, repos=(), loading=False)
    if t == ActionType.RESET_PROFILE_LOADING:
        return replace(state, loading=True)
    return state


def root_reducer(state: AppState, action: Action) -> AppState:
    alerts = alert_reducer(state.alerts, action)
    auth = auth_reducer(state.auth, action)
    profile = profile_reducer(state.profile, action)
    if alerts is state.alerts and auth is state.auth and profile is state.profile:
        return state
    return AppState(alerts=alerts, auth=auth, profile=profile)

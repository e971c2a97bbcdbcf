"""Action Types — the event vocabulary shared by dispatcher and reducers.

Invariants:
    - Every state change is an Action(type, payload) passed through Store.dispatch
    - Values are stable strings (safe to log and serialize)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ActionType(str, Enum):
    SET_ALERT = "set_alert"
    REMOVE_ALERT = "remove_alert"

    REGISTER_SUCCESS = "register_success"
    REGISTER_FAIL = "register_fail"
    USER_LOADED = "user_loaded"
    AUTH_ERROR = "auth_error"
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAIL = "login_fail"
    LOGOUT = "logout"
    ACCOUNT_DELETED = "account_deleted"

    GET_PROFILE = "get_profile"
    GET_PROFILES = "get_profiles"
    UPDATE_PROFILE = "update_profile"
    PROFILE_ERROR = "profile_error"
    CLEAR_PROFILE = "clear_profile"
    RESET_PROFILE_LOADING = "reset_profile_loading"


@dataclass(frozen=True)
class Action:
    type: ActionType
    payload: Any = None

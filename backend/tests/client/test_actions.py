"""Client Action Dispatcher — verifies actions against the live API and canned responses.

Invariants:
    - login/register resolve the identity through load_user
    - server {"errors": [...]} bodies become one danger alert each, then the failure event
    - only creating a profile navigates to the dashboard
    - a 401 on a profile action also clears authentication
"""

import httpx

from devconnector.client.action_types import ActionType
from devconnector.client.actions import DASHBOARD_PATH, error_items, error_payload
from devconnector.core.domain_types import AlertSeverity

PROFILE = {"status": "Developer", "skills": "Python"}


def _messages(session) -> list[str]:
    return [a.message for a in session.store.state.alerts]


async def _signed_in(session):
    await session.actions.register("alice", "a@x.com", "pw123456")
    assert session.store.state.auth.is_authenticated is True


# ─── Auth ────────────────────────────────────────────────────────

async def test_register_then_load_user(session, recorded):
    await session.actions.register("alice", "a@x.com", "pw123456")

    auth = session.store.state.auth
    assert auth.token
    assert auth.user["email"] == "a@x.com"
    assert recorded == [ActionType.REGISTER_SUCCESS, ActionType.USER_LOADED]


async def test_login_after_logout(session, recorded):
    await _signed_in(session)
    session.actions.logout()
    assert session.store.state.auth.token is None

    await session.actions.login("a@x.com", "pw123456")
    assert session.store.state.auth.user["name"] == "alice"
    assert recorded[-2:] == [ActionType.LOGIN_SUCCESS, ActionType.USER_LOADED]


async def test_register_failure_alerts_each_error(session, recorded):
    await session.actions.register("", "bad", "1")

    alerts = session.store.state.alerts
    assert [a.message for a in alerts] == [
        "Name is required",
        "Please include a valid email",
        "Please enter a password with 6 or more characters",
    ]
    assert {a.severity for a in alerts} == {AlertSeverity.DANGER}
    assert recorded[-1] == ActionType.REGISTER_FAIL
    assert session.store.state.auth.is_authenticated is False


async def test_login_failure(session, recorded):
    await session.actions.login("nobody@x.com", "pw123456")
    assert _messages(session) == ["Invalid credentials"]
    assert recorded[-1] == ActionType.LOGIN_FAIL


async def test_load_user_without_token_makes_no_request(mock_session):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={})

    s = await mock_session(handler)
    await s.actions.load_user()

    assert calls == []
    assert s.store.state.auth.is_authenticated is False
    assert s.store.state.alerts == ()


async def test_load_user_sends_saved_token(mock_session):
    seen = []

    def handler(request):
        seen.append(request.headers.get("x-auth-token"))
        return httpx.Response(200, json={"id": "1", "name": "alice"})

    s = await mock_session(handler, token="saved")
    await s.actions.load_user()

    assert seen == ["saved"]
    assert s.store.state.auth.user == {"id": "1", "name": "alice"}


# ─── Profile ─────────────────────────────────────────────────────

async def test_create_profile_navigates(session, navigated):
    await _signed_in(session)
    await session.actions.create_profile(PROFILE)

    assert session.store.state.profile.profile["status"] == "Developer"
    assert _messages(session) == ["Profile Created"]
    assert navigated == [DASHBOARD_PATH]


async def test_edit_profile_stays(session, navigated):
    await _signed_in(session)
    await session.actions.create_profile(PROFILE)
    await session.actions.create_profile({**PROFILE, "bio": "hi"}, edit=True)

    assert session.store.state.profile.profile["bio"] == "hi"
    assert _messages(session)[-1] == "Profile Updated"
    assert navigated == [DASHBOARD_PATH]


async def test_create_profile_validation_errors(session, recorded, navigated):
    await _signed_in(session)
    await session.actions.create_profile({})

    assert _messages(session) == ["Status is required", "Skills is required"]
    assert recorded[-1] == ActionType.PROFILE_ERROR
    assert session.store.state.profile.errors["status"] == 400
    assert navigated == []


async def test_experience_add_and_remove(session):
    await _signed_in(session)
    await session.actions.create_profile(PROFILE)
    await session.actions.add_experience(
        {"title": "Dev", "company": "Acme", "from": "2020-01-01"},
    )
    entries = session.store.state.profile.profile["experience"]
    assert [e["title"] for e in entries] == ["Dev"]

    await session.actions.delete_experience(entries[0]["id"])
    assert session.store.state.profile.profile["experience"] == []
    assert _messages(session)[-2:] == ["Experience Added", "Experience Removed"]


async def test_remove_missing_education_reports_error(session, recorded):
    await _signed_in(session)
    await session.actions.create_profile(PROFILE)
    await session.actions.delete_education("missing")

    assert _messages(session)[-1] == "Education not found"
    assert recorded[-1] == ActionType.PROFILE_ERROR
    assert session.store.state.profile.errors == {"msg": "Education not found", "status": 400}


async def test_get_profiles_clears_then_loads(session, recorded):
    await _signed_in(session)
    await session.actions.create_profile(PROFILE)
    await session.actions.get_profiles()

    assert recorded[-2:] == [ActionType.CLEAR_PROFILE, ActionType.GET_PROFILES]
    assert len(session.store.state.profile.profiles) == 1
    assert session.store.state.profile.profile is None


async def test_get_profile_by_id_resets_loading(session, recorded):
    await _signed_in(session)
    await session.actions.create_profile(PROFILE)
    user_id = session.store.state.auth.user["id"]

    await session.actions.get_profile_by_id(user_id)
    assert recorded[-2:] == [ActionType.RESET_PROFILE_LOADING, ActionType.GET_PROFILE]
    assert session.store.state.profile.profile["user"]["id"] == user_id


async def test_get_current_profile_without_profile_does_not_alert(session, recorded):
    await _signed_in(session)
    await session.actions.get_current_profile()

    assert recorded[-1] == ActionType.PROFILE_ERROR
    assert session.store.state.alerts == ()


async def test_delete_account(session, recorded):
    await _signed_in(session)
    await session.actions.create_profile(PROFILE)
    await session.actions.delete_account()

    assert session.store.state.auth.token is None
    assert session.store.state.profile.profile is None
    assert recorded[-1] == ActionType.SET_ALERT
    assert ActionType.ACCOUNT_DELETED in recorded
    assert _messages(session)[-1] == "Your account has been permanently deleted"


async def test_seeded_token_sent_without_load_user(mock_session):
    seen = []

    def handler(request):
        seen.append(request.headers.get("x-auth-token"))
        return httpx.Response(200, json={"id": "p", "experience": []})

    s = await mock_session(handler, token="saved")
    await s.actions.get_current_profile()

    assert seen == ["saved"]
    assert s.store.state.profile.profile == {"id": "p", "experience": []}
    assert s.store.state.auth.token == "saved"


async def test_header_follows_store_after_logout(session):
    await _signed_in(session)
    session.actions.logout()
    await session.actions.get_current_profile()

    assert session.store.state.profile.errors["status"] == 401
    assert "x-auth-token" not in session.actions.http.headers


async def test_unauthorized_profile_action_clears_auth(mock_session):
    def handler(request):
        return httpx.Response(401, json={"msg": "Token is not valid"})

    s = await mock_session(handler, token="stale")
    await s.actions.add_education({"school": "MIT"})

    state = s.store.state
    assert state.profile.errors == {"msg": "Token is not valid", "status": 401}
    assert state.auth.is_authenticated is False
    assert state.auth.token is None
    assert [a.message for a in state.alerts] == ["Token is not valid"]


async def test_network_failure_becomes_profile_error(mock_session):
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    s = await mock_session(handler)
    await s.actions.get_profiles()
    assert s.store.state.profile.errors == {"msg": "Network error", "status": None}


async def test_non_json_success_body_becomes_profile_error(mock_session):
    def handler(request):
        return httpx.Response(200, text="<html>ok</html>")

    s = await mock_session(handler, token="t")
    recorded = []
    s.store.subscribe(lambda action, state: recorded.append(action.type))

    await s.actions.get_profiles()
    assert recorded == [ActionType.CLEAR_PROFILE, ActionType.PROFILE_ERROR]
    assert s.store.state.profile.errors == {
        "msg": "Invalid response from server", "status": None,
    }

    await s.actions.add_experience({"title": "Dev"})
    assert [a.message for a in s.store.state.alerts] == ["Invalid response from server"]
    assert recorded[-1] == ActionType.PROFILE_ERROR


async def test_non_json_login_response_fails_login(mock_session):
    def handler(request):
        return httpx.Response(200, text="not json")

    s = await mock_session(handler)
    await s.actions.login("a@x.com", "pw123456")

    assert s.store.state.auth.is_authenticated is False
    assert [a.message for a in s.store.state.alerts] == ["Invalid response from server"]


# ─── Error helpers ───────────────────────────────────────────────

def _status_error(status: int, **kwargs) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "http://test/x")
    response = httpx.Response(status, request=request, **kwargs)
    return httpx.HTTPStatusError("failed", request=request, response=response)


def test_error_items_from_errors_body():
    exc = _status_error(400, json={"errors": [{"msg": "a"}, {"field": "x"}]})
    assert error_items(exc) == [{"msg": "a"}]


def test_error_payload_falls_back_to_reason_phrase():
    exc = _status_error(500, text="not json")
    assert error_payload(exc) == {"msg": "Internal Server Error", "status": 500}
    assert error_items(exc) == []

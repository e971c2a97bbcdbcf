"""Client Action Dispatcher — async actions that call the API and dispatch typed events.

Invariants:
    - Each action performs at most one request and dispatches one terminal event
      (a 401 adds AUTH_ERROR after it)
    - Server {"errors": [...]} bodies become one danger alert per item, before the failure event
    - Mutations that succeed enqueue a success alert; only creating a new profile navigates
    - load_user skips the request when no token is held and never alerts
    - No automatic retries

Design Decisions:
    - login/register await load_user afterwards: load_user reads the token that
      LOGIN_SUCCESS/REGISTER_SUCCESS just wrote into the store
    - The store is the only holder of the token: every request reads the auth header
      from state, so a token seeded at session start is sent from the first call
    - Any httpx.HTTPError (status, transport, undecodable body) is one failure path
"""

import logging
from collections.abc import Callable
from typing import Any

import httpx

from devconnector.client.action_types import Action, ActionType
from devconnector.client.alerts import NotificationQueue
from devconnector.client.store import Store
from devconnector.core.domain_types import AlertSeverity

logger = logging.getLogger(__name__)

DASHBOARD_PATH = "/dashboard"

Navigate = Callable[[str], None]


def error_items(exc: Exception) -> list[dict]:
    """Structured {"msg", "field"?} items carried by a failed response, if any."""
    if not isinstance(exc, httpx.HTTPStatusError):
        return []
    body = _json_or_empty(exc.response)
    errors = body.get("errors") if isinstance(body, dict) else None
    if not isinstance(errors, list):
        return []
    return [e for e in errors if isinstance(e, dict) and e.get("msg")]


def error_payload(exc: Exception) -> dict:
    """{"msg", "status"} summary for PROFILE_ERROR."""
    if isinstance(exc, httpx.HTTPStatusError):
        body = _json_or_empty(exc.response)
        msg = body.get("msg") if isinstance(body, dict) else None
        return {
            "msg": msg or exc.response.reason_phrase,
            "status": exc.response.status_code,
        }
    if isinstance(exc, httpx.DecodingError):
        return {"msg": "Invalid response from server", "status": None}
    return {"msg": "Network error", "status": None}


def _json_or_empty(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return {}


class ClientActionDispatcher:
    """Profile and auth actions bound to one store, alert queue and HTTP client."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        store: Store,
        alerts: NotificationQueue,
        navigate: Navigate | None = None,
        auth_header: str = "x-auth-token",
    ):
        self.http = http
        self.store = store
        self.alerts = alerts
        self.navigate = navigate or (lambda path: None)
        self.auth_header = auth_header

    # --- Plumbing -------------------------------------------------------------

    def _dispatch(self, action_type: ActionType, payload: Any = None) -> None:
        self.store.dispatch(Action(action_type, payload))

    def _auth_headers(self) -> dict[str, str]:
        token = self.store.state.auth.token
        return {self.auth_header: token} if token else {}

    async def _request(self, method: str, url: str, body: dict | None = None) -> Any:
        response = await self.http.request(
            method, url, json=body, headers=self._auth_headers(),
        )
        response.raise_for_status()
        try:
            return response.json()
        except ValueError:
            raise httpx.DecodingError(
                f"Non-JSON response from {method} {url}", request=response.request,
            )

    def _alert_failure(self, exc: Exception) -> None:
        """One danger alert per reported error; a single alert otherwise."""
        items = error_items(exc)
        if items:
            for item in items:
                self.alerts.enqueue(item["msg"], AlertSeverity.DANGER)
            return
        self.alerts.enqueue(error_payload(exc)["msg"], AlertSeverity.DANGER)

    def _clear_identity_on_401(self, exc: Exception) -> None:
        if isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code == 401:
            self._dispatch(ActionType.AUTH_ERROR)

    def _profile_failure(self, exc: Exception, alert: bool) -> None:
        logger.info(f"Profile action failed: {exc}")
        if alert:
            self._alert_failure(exc)
        self._dispatch(ActionType.PROFILE_ERROR, error_payload(exc))
        self._clear_identity_on_401(exc)

    # --- Auth -----------------------------------------------------------------

    async def load_user(self) -> None:
        token = self.store.state.auth.token
        if not token:
            self._dispatch(ActionType.AUTH_ERROR)
            return
        try:
            user = await self._request("GET", "/api/auth")
        except httpx.HTTPError as e:
            logger.info(f"load_user failed: {e}")
            self._dispatch(ActionType.AUTH_ERROR)
            return
        self._dispatch(ActionType.USER_LOADED, user)

    async def _obtain_token(
        self, url: str, body: dict, success: ActionType, failure: ActionType,
    ) -> None:
        try:
            data = await self._request("POST", url, body)
        except httpx.HTTPError as e:
            self._alert_failure(e)
            self._dispatch(failure)
            return
        self._dispatch(success, data)
        await self.load_user()

    async def register(self, name: str, email: str, password: str) -> None:
        await self._obtain_token(
            "/api/users", {"name": name, "email": email, "password": password},
            ActionType.REGISTER_SUCCESS, ActionType.REGISTER_FAIL,
        )

    async def login(self, email: str, password: str) -> None:
        await self._obtain_token(
            "/api/auth", {"email": email, "password": password},
            ActionType.LOGIN_SUCCESS, ActionType.LOGIN_FAIL,
        )

    def logout(self) -> None:
        self._dispatch(ActionType.CLEAR_PROFILE)
        self._dispatch(ActionType.LOGOUT)

    # --- Profile reads --------------------------------------------------------

    async def get_current_profile(self) -> None:
        try:
            profile = await self._request("GET", "/api/profile/me")
        except httpx.HTTPError as e:
            self._profile_failure(e, alert=False)
            return
        self._dispatch(ActionType.GET_PROFILE, profile)

    async def get_profiles(self) -> None:
        self._dispatch(ActionType.CLEAR_PROFILE)
        try:
            profiles = await self._request("GET", "/api/profile")
        except httpx.HTTPError as e:
            self._profile_failure(e, alert=False)
            return
        self._dispatch(ActionType.GET_PROFILES, profiles)

    async def get_profile_by_id(self, user_id: str) -> None:
        self._dispatch(ActionType.RESET_PROFILE_LOADING)
        try:
            profile = await self._request("GET", f"/api/profile/user/{user_id}")
        except httpx.HTTPError as e:
            self._profile_failure(e, alert=False)
            return
        self._dispatch(ActionType.GET_PROFILE, profile)

    # --- Profile mutations ----------------------------------------------------

    async def create_profile(self, form: dict, edit: bool = False) -> None:
        """Create (navigates to the dashboard) or edit (stays put) the own profile."""
        try:
            profile = await self._request("POST", "/api/profile", form)
        except httpx.HTTPError as e:
            self._profile_failure(e, alert=True)
            return
        self._dispatch(ActionType.GET_PROFILE, profile)
        self.alerts.enqueue(
            "Profile Updated" if edit else "Profile Created", AlertSeverity.SUCCESS,
        )
        if not edit:
            self.navigate(DASHBOARD_PATH)

    async def _mutate_profile(
        self, method: str, url: str, body: dict | None, success_message: str,
    ) -> None:
        try:
            profile = await self._request(method, url, body)
        except httpx.HTTPError as e:
            self._profile_failure(e, alert=True)
            return
        self._dispatch(ActionType.UPDATE_PROFILE, profile)
        self.alerts.enqueue(success_message, AlertSeverity.SUCCESS)

    async def add_experience(self, form: dict) -> None:
        await self._mutate_profile(
            "PUT", "/api/profile/experience", form, "Experience Added",
        )

    async def add_education(self, form: dict) -> None:
        await self._mutate_profile(
            "PUT", "/api/profile/education", form, "Education Added",
        )

    async def delete_experience(self, entry_id: str) -> None:
        await self._mutate_profile(
            "DELETE", f"/api/profile/experience/{entry_id}", None, "Experience Removed",
        )

    async def delete_education(self, entry_id: str) -> None:
        await self._mutate_profile(
            "DELETE", f"/api/profile/education/{entry_id}", None, "Education Removed",
        )

    async def delete_account(self) -> None:
        try:
            await self._request("DELETE", "/api/profile")
        except httpx.HTTPError as e:
            self._profile_failure(e, alert=True)
            return
        self._dispatch(ActionType.CLEAR_PROFILE)
        self._dispatch(ActionType.ACCOUNT_DELETED)
        self.alerts.enqueue("Your account has been permanently deleted", AlertSeverity.INFO)

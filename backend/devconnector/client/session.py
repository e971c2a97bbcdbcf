"""Client Session — owns the process-wide client state for its lifetime.

Invariants:
    - One Store, one NotificationQueue, one httpx.AsyncClient per session
    - Entering builds them; exiting cancels pending alert timers and closes the HTTP client
    - A previously saved token may seed the store; every request sends it from the first call

Design Decisions:
    - transport injectable so tests can drive the ASGI app in-process (httpx.ASGITransport)
"""

import logging

import httpx

from devconnector.client.actions import ClientActionDispatcher, Navigate
from devconnector.client.alerts import NotificationQueue
from devconnector.client.state import AppState, AuthState
from devconnector.client.store import Store
from devconnector.config import Settings, get_settings

logger = logging.getLogger(__name__)


class ClientSession:
    def __init__(
        self,
        settings: Settings | None = None,
        navigate: Navigate | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        token: str | None = None,
    ):
        self.settings = settings or get_settings()
        self._navigate = navigate
        self._transport = transport
        self._initial_token = token
        self.store: Store | None = None
        self.alerts: NotificationQueue | None = None
        self.actions: ClientActionDispatcher | None = None
        self._http: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "ClientSession":
        self._http = httpx.AsyncClient(
            base_url=self.settings.api_base_url,
            timeout=self.settings.client_timeout_seconds,
            transport=self._transport,
        )
        self.store = Store(initial=AppState(auth=AuthState(token=self._initial_token)))
        self.alerts = NotificationQueue(self.store, self.settings.alert_timeout_ms)
        self.actions = ClientActionDispatcher(
            self._http, self.store, self.alerts,
            navigate=self._navigate,
            auth_header=self.settings.auth_header_name,
        )
        logger.debug(f"Client session opened for {self.settings.api_base_url}")
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.alerts:
            self.alerts.shutdown()
        if self._http:
            await self._http.aclose()
        logger.debug("Client session closed")

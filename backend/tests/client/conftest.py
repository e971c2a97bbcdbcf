"""Client test fixtures — a ClientSession wired to the in-process API.

Invariants:
    - session talks to the real app through httpx.ASGITransport
    - recorded collects every dispatched action type, in order
    - navigated collects every navigation target
"""

import httpx
import pytest
from httpx import ASGITransport

from devconnector.client.session import ClientSession
from devconnector.config import Settings


def make_settings(**overrides) -> Settings:
    return Settings(api_base_url="http://test", alert_timeout_ms=5000, **overrides)


@pytest.fixture
def navigated():
    return []


@pytest.fixture
async def session(api_app, navigated):
    async with ClientSession(
        settings=make_settings(),
        navigate=navigated.append,
        transport=ASGITransport(app=api_app),
    ) as s:
        yield s


@pytest.fixture
def recorded(session):
    actions = []
    session.store.subscribe(lambda action, state: actions.append(action.type))
    return actions


@pytest.fixture
async def mock_session(navigated):
    """Factory for a session whose HTTP calls are answered by a handler."""
    sessions = []

    async def _open(handler, token=None):
        s = ClientSession(
            settings=make_settings(),
            navigate=navigated.append,
            transport=httpx.MockTransport(handler),
            token=token,
        )
        sessions.append(s)
        return await s.__aenter__()

    yield _open

    for s in sessions:
        await s.__aexit__(None, None, None)

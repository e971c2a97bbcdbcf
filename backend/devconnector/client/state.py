"""Client State — immutable snapshots of the UI's view of the server.

Invariants:
    - All state classes are frozen; reducers build new instances with dataclasses.replace
    - AppState is the single root held by Store
"""

from dataclasses import dataclass, field
from datetime import datetime

from devconnector.core.domain_types import AlertSeverity


@dataclass(frozen=True)
class Alert:
    id: str
    message: str
    severity: AlertSeverity
    created_at: datetime


@dataclass(frozen=True)
class AuthState:
    token: str | None = None
    is_authenticated: bool | None = None
    loading: bool = True
    user: dict | None = None


@dataclass(frozen=True)
class ProfileState:
    profile: dict | None = None
    profiles: tuple = ()
    repos: tuple = ()
    loading: bool = True
    errors: dict = field(default_factory=dict)


@dataclass(frozen=True)
class AppState:
    alerts: tuple[Alert, ...] = ()
    auth: AuthState = field(default_factory=AuthState)
    profile: ProfileState = field(default_factory=ProfileState)

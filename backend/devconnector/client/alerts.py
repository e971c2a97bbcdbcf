"""Notification Queue — self-expiring alerts in client state.

Invariants:
    - enqueue dispatches SET_ALERT immediately and schedules REMOVE_ALERT for that id only
    - Removal fires after `timeout` ms regardless of later alerts or state changes
    - No debouncing, no per-alert cancellation; shutdown() cancels timers at teardown only

Design Decisions:
    - loop.call_later over a task per alert: a timer handle is all that is needed
"""

import asyncio
import logging
import uuid
from datetime import datetime, timezone

from devconnector.client.action_types import Action, ActionType
from devconnector.client.state import Alert
from devconnector.client.store import Store
from devconnector.core.domain_types import DEFAULT_ALERT_TIMEOUT_MS, AlertSeverity

logger = logging.getLogger(__name__)


class NotificationQueue:
    def __init__(self, store: Store, default_timeout_ms: int = DEFAULT_ALERT_TIMEOUT_MS):
        self.store = store
        self.default_timeout_ms = default_timeout_ms
        self._pending: dict[str, asyncio.TimerHandle] = {}

    def enqueue(
        self,
        message: str,
        severity: AlertSeverity = AlertSeverity.INFO,
        timeout: int | None = None,
    ) -> str:
        """Add an alert and schedule its removal; returns the alert id."""
        alert_id = str(uuid.uuid4())
        alert = Alert(
            id=alert_id,
            message=message,
            severity=AlertSeverity(severity),
            created_at=datetime.now(timezone.utc),
        )
        self.store.dispatch(Action(ActionType.SET_ALERT, alert))

        delay_ms = self.default_timeout_ms if timeout is None else timeout
        loop = asyncio.get_running_loop()
        self._pending[alert_id] = loop.call_later(
            delay_ms / 1000, self._expire, alert_id,
        )
        return alert_id

    def _expire(self, alert_id: str) -> None:
        self._pending.pop(alert_id, None)
        self.store.dispatch(Action(ActionType.REMOVE_ALERT, alert_id))

    @property
    def pending(self) -> int:
        return len(self._pending)

    def shutdown(self) -> None:
        for handle in self._pending.values():
            handle.cancel()
        if self._pending:
            logger.debug(f"Dropped {len(self._pending)} pending alert timers")
        self._pending.clear()

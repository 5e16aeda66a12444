"""Service state owned by the application instance."""
from __future__ import annotations

from dataclasses import dataclass, field

from fastapi import Request

from .buffer import BoundedLog, IdGenerator
from .config import Settings
from .logs import ActivityLog
from .models import ActionLogEntry, WebhookEntry
from .relay import RelayClient


@dataclass
class RelayState:
    settings: Settings
    webhooks: BoundedLog[WebhookEntry]
    action_logs: BoundedLog[ActionLogEntry]
    activity: ActivityLog
    relay: RelayClient
    new_id: IdGenerator = field(default_factory=IdGenerator)

    @classmethod
    def build(cls, settings: Settings) -> "RelayState":
        new_id = IdGenerator()
        action_logs: BoundedLog[ActionLogEntry] = BoundedLog(settings.max_log_entries)
        activity = ActivityLog(settings.max_activity_entries)
        return cls(
            settings=settings,
            webhooks=BoundedLog(settings.max_entries),
            action_logs=action_logs,
            activity=activity,
            relay=RelayClient(settings, action_logs, activity, new_id),
            new_id=new_id,
        )


def get_state(request: Request) -> RelayState:
    return request.app.state.relay


__all__ = ["RelayState", "get_state"]

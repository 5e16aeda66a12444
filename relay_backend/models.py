"""Pydantic models used by API endpoints and the in-memory logs."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class WebhookEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    timestamp: str
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Any = None
    query: Dict[str, Any] = Field(default_factory=dict)
    method: str
    ip: Optional[str] = None


class ActionLogEntry(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    timestamp: str
    action: Any = None
    item_id: Any = None
    item_description: Any = Field(default=None, alias="Item_description")
    direction: Any = None
    delta_pct: Any = None
    suggested_price: Any = None
    status: Any = None
    confidence: Any = None
    reason: Any = None
    success: bool
    webhook_response: Any = Field(default=None, alias="webhookResponse")
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump(by_alias=True)
        if self.success:
            data.pop("error", None)
        else:
            data.pop("webhookResponse", None)
        return data


class ChatRequest(BaseModel):
    message: Optional[str] = None


class LogEntry(BaseModel):
    timestamp: str
    level: str
    message: str


class LogsResponse(BaseModel):
    success: bool = True
    total: int
    logs: List[LogEntry]


__all__ = [
    "WebhookEntry",
    "ActionLogEntry",
    "ChatRequest",
    "LogEntry",
    "LogsResponse",
]

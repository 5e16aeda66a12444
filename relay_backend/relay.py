"""Forwarding relay towards the n8n automation webhooks."""
from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

import requests

from .buffer import BoundedLog
from .config import USER_AGENT, Settings
from .errors import RelayError, classify_exception, classify_status
from .logs import ActivityLog
from .models import ActionLogEntry

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
    "User-Agent": USER_AGENT,
}


@dataclass
class RelayResult:
    success: bool
    status_code: int = 200
    data: Any = None
    error: Optional[str] = None
    message: Optional[str] = None
    response: Any = None

    @classmethod
    def failed(cls, err: RelayError) -> "RelayResult":
        return cls(success=False, status_code=err.status_code, error=err.message)

    def envelope(self) -> Dict[str, Any]:
        if not self.success:
            return {"success": False, "error": self.error}
        body: Dict[str, Any] = {"success": True}
        if self.message is not None:
            body["message"] = self.message
        if self.response is not None:
            body["response"] = self.response
        body["data"] = self.data
        return body


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _response_data(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def extract_chat_reply(data: Any) -> Any:
    if isinstance(data, str):
        return data
    if isinstance(data, dict):
        for key in ("response", "message", "data"):
            if data.get(key):
                return data[key]
    if data is None or isinstance(data, (dict, list)):
        return json.dumps(data, indent=2, ensure_ascii=False)
    return data


class RelayClient:
    """Sends operator traffic to fixed remote endpoints and records action attempts."""

    def __init__(
        self,
        settings: Settings,
        action_logs: BoundedLog[ActionLogEntry],
        activity: ActivityLog,
        new_id: Callable[[], int],
    ) -> None:
        self.settings = settings
        self.action_logs = action_logs
        self.activity = activity
        self.new_id = new_id

    def _post(self, url: str, payload: Dict[str, Any], timeout: float) -> requests.Response:
        return requests.post(url, json=payload, headers=JSON_HEADERS, timeout=timeout)

    def fetch(self) -> RelayResult:
        url = self.settings.fetch_url
        try:
            self.activity.add_log(f"Attempting to fetch from n8n webhook: {url}")
            response = self._post(url, {}, self.settings.timeout)
            self.activity.add_log(f"n8n webhook response status: {response.status_code}")
            if response.status_code >= 400:
                self.activity.add_log("POST failed, trying GET...")
                headers = {k: v for k, v in JSON_HEADERS.items() if k != "Content-Type"}
                response = requests.get(url, headers=headers, timeout=self.settings.timeout)
                self.activity.add_log(f"GET response status: {response.status_code}")
            if response.status_code >= 400:
                raise classify_status(response.status_code, response.reason, "Webhook")
            data = _response_data(response)
        except (RelayError, requests.RequestException) as exc:
            err = classify_exception(exc, url)
            self.activity.add_log(f"Error fetching from n8n webhook: {err.message}", "ERROR")
            return RelayResult.failed(err)
        self.activity.add_log("Successfully fetched data from n8n webhook")
        return RelayResult(success=True, data=data)

    def submit_action(self, payload: Dict[str, Any]) -> RelayResult:
        action = payload.get("action")
        self.activity.add_log(
            f"Submitting action: {action} (item_id={payload.get('item_id')}, "
            f"Item_description={payload.get('Item_description')})"
        )
        fields = {
            "id": self.new_id(),
            "timestamp": _now_iso(),
            "action": action,
            "item_id": payload.get("item_id"),
            "Item_description": payload.get("Item_description"),
            "direction": payload.get("direction"),
            "delta_pct": payload.get("delta_pct"),
            "suggested_price": payload.get("suggested_price"),
            "status": payload.get("status"),
            "confidence": payload.get("confidence"),
            "reason": payload.get("reason"),
        }
        url = self.settings.action_url
        try:
            response = self._post(url, payload, self.settings.timeout)
            if response.status_code >= 400:
                raise classify_status(response.status_code, response.reason, "Action webhook")
            data = _response_data(response)
        except (RelayError, requests.RequestException) as exc:
            err = classify_exception(exc, url)
            self.action_logs.append(ActionLogEntry(**fields, success=False, error=err.message))
            self.activity.add_log(f"Error submitting action {action}: {err.message}", "ERROR")
            return RelayResult.failed(err)

        self.action_logs.append(ActionLogEntry(**fields, success=True, webhookResponse=data))
        self.activity.add_log(f"Action submitted successfully: {action}")
        return RelayResult(success=True, data=data, message=f"Action {action} submitted successfully")

    def chat(self, message: str) -> RelayResult:
        self.activity.add_log(f"Chat message received: {message[:50]}...")
        url = self.settings.chat_url
        try:
            response = self._post(url, {"message": message}, self.settings.chat_timeout)
            if response.status_code >= 400:
                raise classify_status(response.status_code, response.reason, "Chat webhook")
            data = _response_data(response)
        except (RelayError, requests.RequestException) as exc:
            err = classify_exception(exc, url)
            self.activity.add_log(f"Error in chat: {err.message}", "ERROR")
            return RelayResult.failed(err)
        return RelayResult(success=True, data=data, response=extract_chat_reply(data))


__all__ = ["RelayClient", "RelayResult", "extract_chat_reply", "JSON_HEADERS"]

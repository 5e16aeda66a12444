"""HTTP helper functions wrapping the relay backend API."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests
import streamlit as st


def _error_text(response: requests.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text[:400]
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return response.text[:400]


def api_request(method: str, api_base: str, path: str, payload: Optional[Dict[str, Any]] = None, timeout: int = 30):
    """Call the backend and return the decoded envelope, or ``None`` after reporting the error."""
    try:
        response = requests.request(method, f"{api_base}{path}", json=payload, timeout=timeout)
    except requests.RequestException as exc:
        st.error(f"{method} {path}: {exc}")
        return None
    if response.status_code >= 400:
        st.error(f"{method} {path}: {response.status_code} | {_error_text(response)}")
        return None
    try:
        return response.json()
    except ValueError:
        st.error(f"{method} {path}: response is not JSON")
        return None


def api_get(api_base: str, path: str, timeout: int = 30):
    return api_request("GET", api_base, path, timeout=timeout)


def api_post(api_base: str, path: str, payload: Optional[Dict[str, Any]] = None, timeout: int = 30):
    return api_request("POST", api_base, path, payload or {}, timeout=timeout)


def api_delete(api_base: str, path: str, timeout: int = 30):
    return api_request("DELETE", api_base, path, timeout=timeout)


def health(api_base: str) -> Dict[str, Any]:
    try:
        response = requests.get(f"{api_base}/health", timeout=5)
        response.raise_for_status()
        return response.json()
    except (requests.RequestException, ValueError):
        return {}


def list_webhooks(api_base: str, limit: int = 50, offset: int = 0) -> Dict[str, Any]:
    return api_get(api_base, f"/api/webhooks?limit={limit}&offset={offset}") or {}


def clear_webhooks(api_base: str):
    return api_delete(api_base, "/api/webhooks")


def fetch_suggestions(api_base: str) -> List[Dict[str, Any]]:
    data = api_get(api_base, "/api/fetch-webhook", timeout=30)
    if not data:
        return []
    items = data.get("data")
    if isinstance(items, dict) and isinstance(items.get("items"), list):
        items = items["items"]
    if isinstance(items, dict):
        items = [items]
    return [item for item in (items or []) if isinstance(item, dict)]


def submit_action(api_base: str, suggestion: Dict[str, Any], action: str):
    payload = dict(suggestion)
    payload["action"] = action
    return api_post(api_base, "/api/submit-action", payload)


def price_change_logs(api_base: str, limit: int = 100, offset: int = 0) -> Dict[str, Any]:
    return api_get(api_base, f"/api/price-change-logs?limit={limit}&offset={offset}") or {}


def send_chat(api_base: str, message: str):
    return api_post(api_base, "/api/chat", {"message": message}, timeout=60)


def activity_logs(api_base: str, limit: int = 50) -> List[Dict[str, Any]]:
    data = api_get(api_base, f"/api/logs?limit={limit}", timeout=10) or {}
    return data.get("logs") or []


__all__ = [
    "api_delete",
    "api_get",
    "api_post",
    "api_request",
    "activity_logs",
    "clear_webhooks",
    "fetch_suggestions",
    "health",
    "list_webhooks",
    "price_change_logs",
    "send_chat",
    "submit_action",
]

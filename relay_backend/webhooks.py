"""Inbound webhook receipt and the webhook history endpoints."""
from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional, Tuple

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from .common import parse_paging
from .models import WebhookEntry
from .state import RelayState, get_state

router = APIRouter()

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _multi_dict(items: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    """Collapse repeated keys into a list of values, in arrival order."""
    result: Dict[str, Any] = {}
    for key, value in items:
        if key not in result:
            result[key] = value
        elif isinstance(result[key], list):
            result[key].append(value)
        else:
            result[key] = [result[key], value]
    return result


def _joined_headers(request: Request) -> Dict[str, str]:
    headers: Dict[str, str] = {}
    for key, value in request.headers.items():
        headers[key] = f"{headers[key]}, {value}" if key in headers else value
    return headers


async def _read_body(request: Request) -> Any:
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type in _FORM_TYPES:
        form = await request.form()
        return _multi_dict((key, value) for key, value in form.multi_items() if isinstance(value, str))
    raw = await request.body()
    if not raw.strip():
        return {}
    if content_type == "application/json" or content_type.endswith("+json"):
        try:
            return json.loads(raw)
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid JSON body")
    return raw.decode("utf-8", errors="replace")


@router.post("/webhook/receive")
async def receive_webhook(request: Request, state: RelayState = Depends(get_state)) -> Dict[str, Any]:
    body = await _read_body(request)
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    entry = WebhookEntry(
        id=state.new_id(),
        timestamp=timestamp,
        headers=_joined_headers(request),
        body=body,
        query=_multi_dict(request.query_params.multi_items()),
        method=request.method,
        ip=request.client.host if request.client else None,
    )
    state.webhooks.append(entry)

    body_keys = list(body.keys()) if isinstance(body, dict) else []
    state.activity.add_log(
        f"[{timestamp}] Webhook received: method={request.method} "
        f"bodyKeys={body_keys} headers={list(entry.headers.keys())}"
    )
    return {
        "success": True,
        "message": "Webhook received successfully",
        "id": entry.id,
        "timestamp": timestamp,
    }


@router.get("/api/webhooks")
def list_webhooks(
    limit: Optional[str] = None,
    offset: Optional[str] = None,
    state: RelayState = Depends(get_state),
) -> Dict[str, Any]:
    lim, off = parse_paging(limit, offset)
    page = state.webhooks.page(off, lim)
    return {
        "success": True,
        "total": page.total,
        "count": len(page.items),
        "offset": off,
        "limit": lim,
        "data": [entry.model_dump() for entry in page.items],
    }


@router.get("/api/webhooks/{entry_id}")
def get_webhook(entry_id: str, state: RelayState = Depends(get_state)) -> Dict[str, Any]:
    try:
        key = int(entry_id)
    except ValueError:
        key = None
    entry = state.webhooks.get_by_id(key) if key is not None else None
    if entry is None:
        raise HTTPException(status_code=404, detail="Webhook entry not found")
    return {"success": True, "data": entry.model_dump()}


@router.delete("/api/webhooks")
def clear_webhooks(state: RelayState = Depends(get_state)) -> Dict[str, Any]:
    count = state.webhooks.clear()
    state.activity.add_log(f"Cleared {count} webhook entries")
    return {"success": True, "message": f"Cleared {count} webhook entries"}


@router.get("/api/fetch-webhook")
def fetch_webhook(state: RelayState = Depends(get_state)) -> JSONResponse:
    result = state.relay.fetch()
    return JSONResponse(status_code=result.status_code, content=result.envelope())


__all__ = ["router"]

"""Operator-facing relay endpoints: price actions, their log, and chat."""
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from .common import parse_paging
from .models import ChatRequest
from .state import RelayState, get_state

router = APIRouter(prefix="/api")


@router.post("/submit-action")
def submit_action(
    payload: Optional[Dict[str, Any]] = Body(None), state: RelayState = Depends(get_state)
) -> JSONResponse:
    result = state.relay.submit_action(payload or {})
    return JSONResponse(status_code=result.status_code, content=result.envelope())


@router.get("/price-change-logs")
def price_change_logs(
    limit: Optional[str] = None,
    offset: Optional[str] = None,
    state: RelayState = Depends(get_state),
) -> Dict[str, Any]:
    lim, off = parse_paging(limit, offset)
    page = state.action_logs.page(off, lim)
    return {
        "success": True,
        "total": page.total,
        "count": len(page.items),
        "offset": off,
        "limit": lim,
        "logs": [entry.to_dict() for entry in page.items],
    }


@router.delete("/price-change-logs")
def clear_price_change_logs(state: RelayState = Depends(get_state)) -> Dict[str, Any]:
    count = state.action_logs.clear()
    state.activity.add_log(f"Cleared {count} price change log entries")
    return {"success": True, "message": f"Cleared {count} log entries"}


@router.post("/chat")
def chat(req: Optional[ChatRequest] = None, state: RelayState = Depends(get_state)) -> JSONResponse:
    if req is None or not req.message:
        return JSONResponse(status_code=400, content={"success": False, "error": "Message is required"})
    result = state.relay.chat(req.message)
    return JSONResponse(status_code=result.status_code, content=result.envelope())


__all__ = ["router"]

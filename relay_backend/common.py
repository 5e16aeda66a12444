"""Miscellaneous small endpoints shared across the app."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from .models import LogsResponse
from .state import RelayState, get_state

router = APIRouter()

DEFAULT_LIMIT = 100


def _int_or(value: Optional[str], default: int) -> int:
    try:
        return int(value) if value is not None else default
    except ValueError:
        return default


def parse_paging(limit: Optional[str], offset: Optional[str]) -> Tuple[int, int]:
    """Lenient query parsing: garbage or out-of-range values fall back to the defaults."""
    lim = _int_or(limit, DEFAULT_LIMIT)
    off = _int_or(offset, 0)
    return (lim if lim > 0 else DEFAULT_LIMIT), (off if off >= 0 else 0)


@router.get("/health")
def health(state: RelayState = Depends(get_state)) -> Dict[str, Any]:
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "totalEntries": len(state.webhooks),
        "totalLogs": len(state.action_logs),
    }


@router.get("/")
def dashboard(state: RelayState = Depends(get_state)):
    path = state.settings.dashboard_file
    if not path.is_file():
        raise HTTPException(status_code=404, detail="dashboard not found")
    return FileResponse(str(path), media_type="text/html")


@router.get("/api/logs", response_model=LogsResponse)
def activity_logs(limit: Optional[str] = None, state: RelayState = Depends(get_state)) -> LogsResponse:
    lim, _ = parse_paging(limit, None)
    page = state.activity.page(0, lim)
    return LogsResponse(total=page.total, logs=page.items)


__all__ = ["router", "parse_paging"]

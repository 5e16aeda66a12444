from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import pytest
from streamlit.testing.v1 import AppTest

from conftest import FakeResponse

FRONTEND_DIR = Path(__file__).resolve().parent.parent / "frontend"


def _webhooks_page():
    import streamlit as st
    from ui.webhooks import render_webhooks

    st.session_state.setdefault("page_size", 50)
    render_webhooks("http://relay.test")


@pytest.fixture
def backend(monkeypatch: pytest.MonkeyPatch) -> List[Dict[str, Any]]:
    """In-memory stand-in for the relay API behind the Streamlit helpers."""
    entries: List[Dict[str, Any]] = [
        {"id": 2, "timestamp": "2024-01-01T00:00:02Z", "method": "POST", "ip": "10.0.0.2", "body": {"n": 2}},
        {"id": 1, "timestamp": "2024-01-01T00:00:01Z", "method": "POST", "ip": "10.0.0.1", "body": {"n": 1}},
    ]

    def _request(method: str, url: str, json=None, timeout=None):
        if method == "DELETE":
            count = len(entries)
            entries.clear()
            return FakeResponse(200, {"success": True, "message": f"Cleared {count} webhook entries"})
        return FakeResponse(200, {"success": True, "total": len(entries), "data": list(entries)})

    monkeypatch.syspath_prepend(str(FRONTEND_DIR))
    monkeypatch.setattr("requests.request", _request)
    return entries


def test_clear_all_refreshes_the_table(backend):
    at = AppTest.from_function(_webhooks_page)
    at.run(timeout=30)
    assert not at.exception
    assert len(at.dataframe) == 1

    next(button for button in at.button if button.label == "🗑️ Clear all").click().run(timeout=30)

    assert not at.exception
    assert backend == []
    assert len(at.dataframe) == 0
    assert [info.value for info in at.info] == ["No webhooks received yet."]
    assert [msg.value for msg in at.success] == ["Cleared 2 webhook entries"]

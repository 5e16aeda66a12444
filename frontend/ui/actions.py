"""Widgets for reviewing price suggestions and the resulting change log."""
from __future__ import annotations

from typing import Any, Dict

import pandas as pd
import streamlit as st

from api import fetch_suggestions, price_change_logs, submit_action

SUGGESTION_FIELDS = ["direction", "delta_pct", "suggested_price", "status", "confidence", "reason"]


def _label(suggestion: Dict[str, Any]) -> str:
    return str(suggestion.get("Item_description") or suggestion.get("item_id") or "Unnamed item")


def _decide(api_base: str, suggestion: Dict[str, Any], action: str) -> None:
    res = submit_action(api_base, suggestion, action)
    if res and res.get("success"):
        st.success(res.get("message"))


def render_actions(api_base: str) -> None:
    st.header("Price suggestions")

    if st.button("🔄 Fetch suggestions from n8n"):
        st.session_state["suggestions"] = fetch_suggestions(api_base)

    suggestions = st.session_state.get("suggestions") or []
    if not suggestions:
        st.info("Nothing fetched yet.")
        return

    for idx, suggestion in enumerate(suggestions):
        with st.expander(f"{_label(suggestion)}", expanded=idx == 0):
            cols = st.columns(len(SUGGESTION_FIELDS))
            for col, field in zip(cols, SUGGESTION_FIELDS):
                col.metric(field, str(suggestion.get(field, "—")))
            c1, c2 = st.columns(2)
            with c1:
                if st.button("✅ Approve", key=f"approve_{idx}", use_container_width=True):
                    _decide(api_base, suggestion, "approve")
            with c2:
                if st.button("❌ Reject", key=f"reject_{idx}", use_container_width=True):
                    _decide(api_base, suggestion, "reject")


def render_price_logs(api_base: str) -> None:
    st.header("Price change log")

    page_size = int(st.session_state.get("page_size") or 50)
    data = price_change_logs(api_base, limit=page_size)
    logs = data.get("logs") or []
    st.write(f"{data.get('total', 0)} recorded attempts")
    if not logs:
        st.info("No actions submitted yet.")
        return

    df = pd.DataFrame(
        [
            {
                "Time": log.get("timestamp"),
                "Action": log.get("action"),
                "Item": log.get("Item_description") or log.get("item_id"),
                "Direction": log.get("direction"),
                "Δ %": log.get("delta_pct"),
                "Price": log.get("suggested_price"),
                "Result": "sent" if log.get("success") else (log.get("error") or "failed")[:200],
            }
            for log in logs
        ]
    )
    st.dataframe(df, use_container_width=True, hide_index=True)

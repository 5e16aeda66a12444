"""Widgets listing received webhooks."""
from __future__ import annotations

import json

import pandas as pd
import streamlit as st

from api import clear_webhooks, list_webhooks


def render_webhooks(api_base: str) -> None:
    st.header("Received webhooks")

    notice = st.session_state.pop("webhook_notice", None)
    if notice:
        st.success(notice)

    page_size = int(st.session_state.get("page_size") or 50)
    offset = int(st.session_state.get("webhook_offset") or 0)
    data = list_webhooks(api_base, limit=page_size, offset=offset)
    entries = data.get("data") or []
    total = data.get("total", 0)

    col1, col2, col3, col4 = st.columns([3, 1, 1, 1], gap="small")
    with col1:
        shown_to = offset + len(entries)
        st.write(f"Showing {offset + 1 if entries else 0}–{shown_to} of {total}")
    with col2:
        if st.button("⬅️ Newer", disabled=offset == 0, use_container_width=True):
            st.session_state["webhook_offset"] = max(offset - page_size, 0)
            st.rerun()
    with col3:
        if st.button("Older ➡️", disabled=offset + page_size >= total, use_container_width=True):
            st.session_state["webhook_offset"] = offset + page_size
            st.rerun()
    with col4:
        if st.button("🗑️ Clear all", type="secondary", use_container_width=True):
            res = clear_webhooks(api_base)
            if res and res.get("success"):
                st.session_state["webhook_notice"] = res.get("message")
                st.session_state["webhook_offset"] = 0
                st.rerun()

    if not entries:
        st.info("No webhooks received yet.")
        return

    df = pd.DataFrame(
        [
            {
                "ID": entry.get("id"),
                "Time": entry.get("timestamp"),
                "Method": entry.get("method"),
                "IP": entry.get("ip"),
                "Body": json.dumps(entry.get("body"), ensure_ascii=False)[:300],
            }
            for entry in entries
        ]
    )
    st.dataframe(df, use_container_width=True, hide_index=True)

    ids = [entry["id"] for entry in entries]
    selected = st.selectbox("Inspect entry", ids, key="inspect_webhook_id")
    entry = next((e for e in entries if e["id"] == selected), None)
    if entry:
        st.json(entry)

"""Sidebar widgets: backend address, health and recent activity."""
from __future__ import annotations

import streamlit as st

from api import activity_logs, health
from constants import PAGE_SIZE_OPTIONS
from state import on_change


def sidebar_ui() -> None:
    st.subheader("Backend")
    st.text_input("API base URL", key="api_base_url", on_change=on_change)
    st.selectbox("Rows per page", PAGE_SIZE_OPTIONS, key="page_size", on_change=on_change)

    api_base = st.session_state.get("api_base_url")
    status = health(api_base)
    if status.get("status") == "ok":
        st.success(f"Online: {status.get('totalEntries', 0)} webhooks, {status.get('totalLogs', 0)} logs")
    else:
        st.error("Backend unreachable")
        return

    st.markdown("---")
    st.subheader("Recent activity")
    for entry in activity_logs(api_base, limit=15):
        line = f"`{entry.get('timestamp')}` {entry.get('message')}"
        if entry.get("level") == "ERROR":
            st.markdown(f":red[{line}]")
        else:
            st.markdown(line)

"""State management helpers for the Streamlit frontend."""
from __future__ import annotations

import json
from typing import Any, Dict, List

import streamlit as st

from constants import DEFAULT_API_BASE_URL, STATE_FILE

_PERSISTED_KEYS = ["api_base_url", "page_size", "chat_history"]


def initialize_session_state() -> None:
    """Populate frequently used keys in :mod:`streamlit.session_state`."""
    st.session_state.setdefault("api_base_url", DEFAULT_API_BASE_URL)
    st.session_state.setdefault("page_size", 50)
    st.session_state.setdefault("webhook_offset", 0)
    st.session_state.setdefault("suggestions", [])
    st.session_state.setdefault("chat_history", [])


def load_state() -> Dict[str, Any]:
    if STATE_FILE.exists():
        try:
            return json.loads(STATE_FILE.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
    return {}


def save_state() -> None:
    state = {key: st.session_state.get(key) for key in _PERSISTED_KEYS}
    STATE_FILE.write_text(json.dumps(state, indent=2, ensure_ascii=False), encoding="utf-8")


def apply_state() -> None:
    saved = load_state()
    for key in _PERSISTED_KEYS:
        if key in saved and saved[key] is not None and key not in st.session_state:
            st.session_state[key] = saved[key]


def on_change() -> None:
    save_state()


def remember_chat_turn(role: str, content: str) -> None:
    history: List[Dict[str, str]] = st.session_state.get("chat_history") or []
    history.append({"role": role, "content": content})
    st.session_state["chat_history"] = history[-50:]
    save_state()

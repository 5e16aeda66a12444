"""Chat box proxied to the automation service."""
from __future__ import annotations

import streamlit as st

from api import send_chat
from state import remember_chat_turn, save_state


def render_chat(api_base: str) -> None:
    st.header("Chat")

    for turn in st.session_state.get("chat_history") or []:
        with st.chat_message(turn["role"]):
            st.markdown(turn["content"])

    prompt = st.chat_input("Ask the automation…")
    if prompt:
        remember_chat_turn("user", prompt)
        with st.chat_message("user"):
            st.markdown(prompt)
        res = send_chat(api_base, prompt)
        if res and res.get("success"):
            reply = res.get("response")
            reply = reply if isinstance(reply, str) else str(reply)
            remember_chat_turn("assistant", reply)
            with st.chat_message("assistant"):
                st.markdown(reply)

    if st.button("Clear conversation"):
        st.session_state["chat_history"] = []
        save_state()
        st.rerun()

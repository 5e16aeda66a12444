"""UI subpackage for Streamlit frontend."""

from .actions import render_actions, render_price_logs
from .chat import render_chat
from .sidebar import sidebar_ui
from .webhooks import render_webhooks

__all__ = [
    "render_actions",
    "render_chat",
    "render_price_logs",
    "render_webhooks",
    "sidebar_ui",
]

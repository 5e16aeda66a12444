"""Error classification for calls to the remote automation service."""
from __future__ import annotations

from typing import Optional

import requests


class RelayError(Exception):
    """A remote call failed; ``status_code`` is what the API reports to its caller."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def classify_status(status: int, reason: Optional[str], label: str = "Webhook") -> RelayError:
    if status == 530:
        return RelayError(
            f"{label} server is down or unreachable (530). "
            "The n8n workflow may not be active or the server is experiencing issues.",
            503,
        )
    if status == 404:
        return RelayError(
            f"{label} not found (404). Make sure the webhook URL is correct and the workflow is active.",
            404,
        )
    if status >= 500:
        return RelayError(f"{label} server error ({status}). The server is experiencing issues.", 502)
    return RelayError(f"{label} returned {status}: {reason or 'Unknown error'}", status)


def classify_exception(exc: Exception, url: str) -> RelayError:
    if isinstance(exc, RelayError):
        return exc
    # ConnectTimeout is both a ConnectionError and a Timeout
    if isinstance(exc, requests.Timeout):
        return RelayError("Connection timeout. The webhook server took too long to respond.", 504)
    if isinstance(exc, requests.ConnectionError):
        return RelayError(
            f"Cannot connect to webhook at {url}. Make sure the n8n instance is running and reachable.",
            503,
        )
    return RelayError(str(exc) or "Remote call failed", 500)


__all__ = ["RelayError", "classify_status", "classify_exception"]

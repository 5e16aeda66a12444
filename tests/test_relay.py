from __future__ import annotations

import pytest
import requests

from relay_backend.buffer import BoundedLog, IdGenerator
from relay_backend.errors import classify_exception, classify_status
from relay_backend.logs import ActivityLog
from relay_backend.relay import RelayClient, extract_chat_reply

from conftest import FakeResponse


@pytest.fixture
def relay(settings) -> RelayClient:
    return RelayClient(settings, BoundedLog(settings.max_log_entries), ActivityLog(50), IdGenerator())


PAYLOAD = {
    "action": "approve",
    "item_id": "SKU-1",
    "Item_description": "Blue mug",
    "direction": "up",
    "delta_pct": 5,
    "suggested_price": 12.5,
    "status": "pending",
    "confidence": 0.9,
    "reason": "competitor raised price",
}


@pytest.mark.parametrize(
    "status, expected_code, fragment",
    [
        (530, 503, "down or unreachable (530)"),
        (404, 404, "not found (404)"),
        (500, 502, "server error (500)"),
        (503, 502, "server error (503)"),
        (422, 422, "returned 422: Unprocessable"),
    ],
)
def test_classify_status(status, expected_code, fragment):
    err = classify_status(status, "Unprocessable", "Action webhook")
    assert err.status_code == expected_code
    assert fragment in err.message


def test_classify_exception_timeout_and_connection():
    assert classify_exception(requests.Timeout(), "http://x").status_code == 504
    assert classify_exception(requests.ConnectTimeout(), "http://x").status_code == 504
    refused = classify_exception(requests.ConnectionError(), "http://x")
    assert refused.status_code == 503
    assert "http://x" in refused.message


def test_submit_action_success_is_logged(relay, fake_remote):
    calls = fake_remote(FakeResponse(200, {"ok": True}))
    result = relay.submit_action(PAYLOAD)

    assert result.success
    assert result.envelope() == {
        "success": True,
        "message": "Action approve submitted successfully",
        "data": {"ok": True},
    }
    assert calls[0]["url"] == "http://n8n.test/action"
    assert calls[0]["json"] == PAYLOAD
    assert calls[0]["timeout"] == 10.0
    assert calls[0]["headers"]["User-Agent"] == "Webhook-Dashboard/1.0"

    [entry] = relay.action_logs.snapshot()
    logged = entry.to_dict()
    assert logged["success"] is True
    assert logged["webhookResponse"] == {"ok": True}
    assert logged["Item_description"] == "Blue mug"
    assert "error" not in logged


def test_submit_action_non_2xx_is_logged_as_failure(relay, fake_remote):
    fake_remote(FakeResponse(530, text="origin down"))
    result = relay.submit_action(PAYLOAD)

    assert not result.success
    assert result.status_code == 503
    [entry] = relay.action_logs.snapshot()
    logged = entry.to_dict()
    assert logged["success"] is False
    assert "(530)" in logged["error"]
    assert "webhookResponse" not in logged


def test_submit_action_connection_error_is_logged(relay, fake_remote):
    fake_remote(requests.ConnectionError("refused"))
    result = relay.submit_action(PAYLOAD)

    assert result.status_code == 503
    assert relay.action_logs.snapshot()[0].success is False


def test_action_log_is_bounded(relay, fake_remote):
    fake_remote(*[FakeResponse(200, {"n": i}) for i in range(3)])
    for _ in range(3):
        relay.submit_action(PAYLOAD)
    logs = relay.action_logs.snapshot()
    assert len(logs) == 2
    assert [entry.webhook_response for entry in logs] == [{"n": 2}, {"n": 1}]


def test_fetch_falls_back_to_get(relay, fake_remote):
    calls = fake_remote(FakeResponse(404), FakeResponse(200, [{"item_id": 1}]))
    result = relay.fetch()

    assert result.success
    assert result.data == [{"item_id": 1}]
    assert [c["method"] for c in calls] == ["POST", "GET"]
    assert calls[0]["json"] == {}


def test_fetch_reports_not_found_after_both_methods_fail(relay, fake_remote):
    fake_remote(FakeResponse(404), FakeResponse(404))
    result = relay.fetch()

    assert result.status_code == 404
    assert result.envelope()["success"] is False
    assert "not found (404)" in result.envelope()["error"]


def test_fetch_keeps_text_payloads(relay, fake_remote):
    fake_remote(FakeResponse(200, text="plain text"))
    assert relay.fetch().data == "plain text"


@pytest.mark.parametrize(
    "data, expected",
    [
        ("hello", "hello"),
        ({"response": "from response"}, "from response"),
        ({"message": "from message"}, "from message"),
        ({"data": "from data"}, "from data"),
        ({"response": "", "message": "fallback"}, "fallback"),
        ({"other": 1}, '{\n  "other": 1\n}'),
        (None, "null"),
        ([1, 2], "[\n  1,\n  2\n]"),
        (42, 42),
        (True, True),
    ],
)
def test_extract_chat_reply(data, expected):
    assert extract_chat_reply(data) == expected


def test_chat_uses_chat_timeout(relay, fake_remote):
    calls = fake_remote(FakeResponse(200, {"response": "hi there"}))
    result = relay.chat("hello")

    assert result.envelope() == {"success": True, "response": "hi there", "data": {"response": "hi there"}}
    assert calls[0]["json"] == {"message": "hello"}
    assert calls[0]["timeout"] == 30.0


def test_chat_timeout_is_classified(relay, fake_remote):
    fake_remote(requests.Timeout())
    result = relay.chat("hello")
    assert result.status_code == 504
    assert "timeout" in result.error.lower()

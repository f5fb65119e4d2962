"""Raw ASGI middleware tests (size limit, timeout, request id) against a stub app."""

import asyncio
import json

from bookhaven.middleware import RequestSizeLimitMiddleware, TimeoutMiddleware
from bookhaven.middleware.request_id import sanitize_request_id


async def _echo_app(scope, receive, send) -> None:
    body = b""
    while True:
        message = await receive()
        body += message.get("body", b"")
        if not message.get("more_body", False):
            break
    await send({"type": "http.response.start", "status": 200, "headers": []})
    await send({"type": "http.response.body", "body": body})


async def _slow_app(scope, receive, send) -> None:
    await asyncio.sleep(5)


async def _call(app, headers: list, chunks: list[bytes]) -> list[dict]:
    scope = {"type": "http", "method": "POST", "path": "/x", "headers": headers}
    pending = list(chunks)
    sent: list[dict] = []

    async def receive() -> dict:
        body = pending.pop(0) if pending else b""
        return {"type": "http.request", "body": body, "more_body": bool(pending)}

    async def send(message: dict) -> None:
        sent.append(message)

    await app(scope, receive, send)
    return sent


async def test_declared_length_over_limit_is_413() -> None:
    app = RequestSizeLimitMiddleware(_echo_app, max_bytes=4)
    sent = await _call(app, [(b"content-length", b"10")], [b"0123456789"])
    assert sent[0]["status"] == 413
    assert json.loads(sent[1]["body"])["error"] == "PAYLOAD_TOO_LARGE"


async def test_streamed_body_over_limit_is_413() -> None:
    app = RequestSizeLimitMiddleware(_echo_app, max_bytes=4)
    sent = await _call(app, [(b"transfer-encoding", b"chunked")], [b"012", b"345"])
    assert sent[0]["status"] == 413


async def test_body_within_limit_passes_through() -> None:
    app = RequestSizeLimitMiddleware(_echo_app, max_bytes=16)
    sent = await _call(app, [], [b"abc", b"def"])
    assert sent[0]["status"] == 200
    assert sent[1]["body"] == b"abcdef"


async def test_timeout_sends_504() -> None:
    app = TimeoutMiddleware(_slow_app, timeout_seconds=0.01)
    sent = await _call(app, [], [])
    assert sent[0]["status"] == 504
    assert json.loads(sent[1]["body"])["error"] == "GATEWAY_TIMEOUT"


def test_sanitize_request_id() -> None:
    assert sanitize_request_id("abc-123_X") == "abc-123_X"
    assert sanitize_request_id(" abc ") == "abc"
    assert len(sanitize_request_id("a" * 65)) == 36
    assert len(sanitize_request_id(None)) == 36
    assert len(sanitize_request_id("../etc")) == 36

"""Request body size limit middleware.

Cover images travel as data URIs inside JSON bodies, so the limit is
generous but finite. Declared Content-Length is checked up front; bodies
without one are counted while they stream in.
"""

from typing import Callable

from bookhaven.middleware._asgi import get_header, send_json_error


class _BodyTooLarge(Exception):
    def __init__(self, received: int) -> None:
        super().__init__(received)
        self.received = received


async def _too_large(send: Callable, max_bytes: int, actual: int) -> None:
    await send_json_error(
        send,
        413,
        "PAYLOAD_TOO_LARGE",
        f"Request body must be at most {max_bytes} bytes",
        {"max_bytes": max_bytes, "content_length": actual},
    )


def RequestSizeLimitMiddleware(app: Callable, max_bytes: int) -> Callable:
    """Reject requests whose body exceeds max_bytes with 413. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        declared = get_header(scope, "content-length")
        if declared is not None and declared.strip().isdigit():
            length = int(declared)
            if length > max_bytes:
                await _too_large(send, max_bytes, length)
                return
            await app(scope, receive, send)
            return

        received = 0
        response_started = False

        async def counting_receive() -> dict:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > max_bytes:
                    raise _BodyTooLarge(received)
            return message

        async def tracking_send(message: dict) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await app(scope, counting_receive, tracking_send)
        except _BodyTooLarge as exc:
            if response_started:
                raise
            await _too_large(send, max_bytes, exc.received)

    return asgi_app

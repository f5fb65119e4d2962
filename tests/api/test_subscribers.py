"""Newsletter subscriber API tests."""

import pytest
from httpx import AsyncClient

from bookhaven.core.limiter import PUBLIC_FORM_LIMIT, limiter

pytestmark = pytest.mark.requires_db

SUBSCRIBERS = "/api/v1/subscribers"


async def _count(client: AsyncClient) -> int:
    response = await client.get(f"{SUBSCRIBERS}/count")
    assert response.status_code == 200
    return response.json()["count"]


async def test_subscribe_unsubscribe_resubscribe_keeps_one_record(client: AsyncClient) -> None:
    created = await client.post(SUBSCRIBERS, json={"email": "reader@bookhaven-mail.com"})
    assert created.status_code == 201
    assert created.json()["isActive"] is True
    assert await _count(client) == 1

    response = await client.post(
        f"{SUBSCRIBERS}/unsubscribe", json={"email": "READER@bookhaven-mail.com"}
    )
    assert response.status_code == 200
    assert await _count(client) == 0

    again = await client.post(
        SUBSCRIBERS, json={"email": "reader@bookhaven-mail.com", "name": "Reader"}
    )
    assert again.status_code == 200
    assert again.json()["id"] == created.json()["id"]
    assert again.json()["name"] == "Reader"
    assert await _count(client) == 1


async def test_subscribe_twice_is_conflict(client: AsyncClient) -> None:
    await client.post(SUBSCRIBERS, json={"email": "Reader@BookHaven-Mail.com"})
    response = await client.post(SUBSCRIBERS, json={"email": "reader@bookhaven-mail.com"})
    assert response.status_code == 409
    assert response.json()["message"] == "This email is already subscribed."
    assert await _count(client) == 1


async def test_stored_email_is_normalized(client: AsyncClient) -> None:
    response = await client.post(SUBSCRIBERS, json={"email": "Reader@BookHaven-Mail.com"})
    assert response.json()["email"] == "reader@bookhaven-mail.com"


async def test_unsubscribe_blank_and_unknown(client: AsyncClient) -> None:
    response = await client.post(f"{SUBSCRIBERS}/unsubscribe", json={"email": "  "})
    assert response.status_code == 400
    response = await client.post(f"{SUBSCRIBERS}/unsubscribe", json={})
    assert response.status_code == 400
    response = await client.post(
        f"{SUBSCRIBERS}/unsubscribe", json={"email": "ghost@bookhaven-mail.com"}
    )
    assert response.status_code == 404
    assert response.json()["message"] == "Subscriber not found."


async def test_subscribe_invalid_email(client: AsyncClient) -> None:
    response = await client.post(SUBSCRIBERS, json={"email": "nope"})
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


@pytest.fixture
def rate_limited():
    limiter.reset()
    limiter.enabled = True
    yield limiter
    limiter.enabled = False
    limiter.reset()


async def test_subscribe_over_limit_uses_error_shape(
    client: AsyncClient, rate_limited
) -> None:
    allowed = int(PUBLIC_FORM_LIMIT.split("/")[0])
    for n in range(allowed):
        response = await client.post(
            SUBSCRIBERS, json={"email": f"reader{n}@bookhaven-mail.com"}
        )
        assert response.status_code == 201

    response = await client.post(SUBSCRIBERS, json={"email": "late@bookhaven-mail.com"})
    assert response.status_code == 429
    body = response.json()
    assert body["error"] == "RATE_LIMITED"
    assert body["message"]
    assert "20 per 1 minute" in body["details"]["limit"]

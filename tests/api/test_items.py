"""Catalog API tests: paging, search, enrichment, categories and item writes."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.requires_db

ITEMS = "/api/v1/items"


async def _post(client: AsyncClient, url: str, body: dict) -> dict:
    response = await client.post(url, json=body)
    assert response.status_code == 201, response.text
    return response.json()


async def _seed_catalog(client: AsyncClient) -> dict:
    """One author, two item types, twelve items (six per type)."""
    author = await _post(client, "/api/v1/authors", {"name": "Ursula K. Le Guin"})
    fantasy = await _post(client, "/api/v1/item-types", {"name": "Fantasy"})
    scifi = await _post(client, "/api/v1/item-types", {"name": "Science Fiction"})
    for n in range(1, 13):
        await _post(
            client,
            ITEMS,
            {
                "title": f"Book {n:02d}",
                "authorId": author["id"],
                "itemTypeId": fantasy["id"] if n <= 6 else scifi["id"],
                "description": "A story",
                "price": 12.5,
                "stockQuantity": n,
            },
        )
    return {"author": author, "fantasy": fantasy, "scifi": scifi}


async def test_first_page_uses_default_size(client: AsyncClient) -> None:
    await _seed_catalog(client)
    response = await client.get(ITEMS)
    assert response.status_code == 200
    body = response.json()
    assert body["pageNumber"] == 1
    assert body["pageSize"] == 6
    assert body["totalBooks"] == 12
    assert body["totalPages"] == 2
    assert body["searchTerm"] == ""
    assert [i["title"] for i in body["data"]] == [f"Book {n:02d}" for n in range(1, 7)]

    first = body["data"][0]
    assert first["authorName"] == "Ursula K. Le Guin"
    assert first["itemTypeName"] == "Fantasy"
    assert first["price"] == 12.5
    assert set(first) == {
        "id",
        "title",
        "authorId",
        "authorName",
        "itemTypeId",
        "itemTypeName",
        "publishedDate",
        "description",
        "price",
        "isbn",
        "stockQuantity",
        "coverImage",
    }


async def test_second_and_past_end_pages(client: AsyncClient) -> None:
    await _seed_catalog(client)
    body = (await client.get(ITEMS, params={"pageNumber": 2})).json()
    assert [i["title"] for i in body["data"]] == [f"Book {n:02d}" for n in range(7, 13)]

    body = (await client.get(ITEMS, params={"pageNumber": 3})).json()
    assert body["data"] == []
    assert body["totalBooks"] == 12


async def test_paging_values_are_clamped(client: AsyncClient) -> None:
    await _seed_catalog(client)
    body = (await client.get(ITEMS, params={"pageNumber": 0, "pageSize": 0})).json()
    assert (body["pageNumber"], body["pageSize"]) == (1, 6)

    body = (await client.get(ITEMS, params={"pageSize": 500})).json()
    assert body["pageSize"] == 50
    assert len(body["data"]) == 12
    assert body["totalPages"] == 1

    body = (await client.get(ITEMS, params={"pageSize": 51})).json()
    assert body["pageSize"] == 50

    body = (await client.get(ITEMS, params={"pageSize": 1})).json()
    assert body["pageSize"] == 1
    assert [i["title"] for i in body["data"]] == ["Book 01"]
    assert body["totalPages"] == 12


async def test_search_term_is_case_insensitive_substring(client: AsyncClient) -> None:
    await _seed_catalog(client)
    body = (await client.get(ITEMS, params={"search": "BOOK 1"})).json()
    assert body["searchTerm"] == "BOOK 1"
    assert body["totalBooks"] == 3
    assert [i["title"] for i in body["data"]] == ["Book 10", "Book 11", "Book 12"]


async def test_item_type_filter(client: AsyncClient) -> None:
    seeded = await _seed_catalog(client)
    body = (
        await client.get(ITEMS, params={"itemTypeId": seeded["scifi"]["id"], "search": "book"})
    ).json()
    assert body["totalBooks"] == 6
    assert {i["itemTypeName"] for i in body["data"]} == {"Science Fiction"}


async def test_search_matches_item_type_name(client: AsyncClient) -> None:
    await _seed_catalog(client)
    response = await client.get(f"{ITEMS}/search", params={"query": "fantasy"})
    assert response.status_code == 200
    body = response.json()
    assert body["searchQuery"] == "fantasy"
    assert body["totalBooks"] == 6
    assert {i["itemTypeName"] for i in body["data"]} == {"Fantasy"}


async def test_search_matches_author_name(client: AsyncClient) -> None:
    await _seed_catalog(client)
    body = (await client.get(f"{ITEMS}/search", params={"query": "le guin"})).json()
    assert body["totalBooks"] == 12
    assert body["totalPages"] == 2


async def test_search_requires_query(client: AsyncClient) -> None:
    for params in ({}, {"query": ""}, {"query": "   "}):
        response = await client.get(f"{ITEMS}/search", params=params)
        assert response.status_code == 400
        assert response.json()["message"] == "Search query is required."


async def test_dangling_references_render_unknown(client: AsyncClient) -> None:
    seeded = await _seed_catalog(client)
    await _post(
        client,
        ITEMS,
        {"title": "Orphan", "authorId": 999, "itemTypeId": 77, "price": 1},
    )
    body = (await client.get(ITEMS, params={"search": "orphan"})).json()
    assert body["data"][0]["authorName"] == "Unknown"
    assert body["data"][0]["itemTypeName"] == "Unknown"

    response = await client.delete(f"/api/v1/authors/{seeded['author']['id']}")
    assert response.status_code == 204
    body = (await client.get(ITEMS)).json()
    assert {i["authorName"] for i in body["data"]} == {"Unknown"}


async def test_categories_use_item_type_names(client: AsyncClient) -> None:
    seeded = await _seed_catalog(client)
    await _post(client, ITEMS, {"title": "Orphan", "authorId": 1, "itemTypeId": 77})
    response = await client.get(f"{ITEMS}/categories")
    assert response.status_code == 200
    assert response.json() == [
        {"id": seeded["fantasy"]["id"], "name": "Fantasy"},
        {"id": seeded["scifi"]["id"], "name": "Science Fiction"},
        {"id": 77, "name": "Unknown"},
    ]


async def test_get_item_returns_raw_record(client: AsyncClient) -> None:
    await _seed_catalog(client)
    response = await client.get(f"{ITEMS}/1")
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Book 01"
    assert "authorName" not in body


async def test_get_missing_item(client: AsyncClient) -> None:
    response = await client.get(f"{ITEMS}/4242")
    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "Item with ID 4242 not found."


async def test_create_then_get_round_trip(client: AsyncClient) -> None:
    payload = {
        "title": "The Dispossessed",
        "authorId": 1,
        "itemTypeId": 2,
        "publishedDate": "1974-05-01T00:00:00Z",
        "description": "An ambiguous utopia",
        "price": 15.99,
        "isbn": "9780061054884",
        "stockQuantity": 4,
        "coverImage": "data:image/png;base64,AAAA",
    }
    created = await _post(client, ITEMS, payload)
    fetched = (await client.get(f"{ITEMS}/{created['id']}")).json()
    assert fetched == created
    for key in ("title", "authorId", "itemTypeId", "description", "isbn", "stockQuantity"):
        assert fetched[key] == payload[key]
    assert fetched["price"] == 15.99
    assert fetched["publishedDate"].startswith("1974-05-01T00:00:00")


async def test_update_replaces_all_fields_and_is_idempotent(client: AsyncClient) -> None:
    created = await _post(
        client,
        ITEMS,
        {"title": "Draft", "authorId": 1, "itemTypeId": 1, "description": "old", "isbn": "1"},
    )
    body = {"title": "Final", "authorId": 2, "itemTypeId": 3, "price": 3}
    first = await client.put(f"{ITEMS}/{created['id']}", json=body)
    second = await client.put(f"{ITEMS}/{created['id']}", json=body)
    assert first.status_code == second.status_code == 200
    assert first.json() == second.json()
    assert first.json()["description"] is None
    assert first.json()["isbn"] is None

    response = await client.put(f"{ITEMS}/999", json=body)
    assert response.status_code == 404


async def test_delete_item(client: AsyncClient) -> None:
    created = await _post(client, ITEMS, {"title": "Gone", "authorId": 1, "itemTypeId": 1})
    response = await client.delete(f"{ITEMS}/{created['id']}")
    assert response.status_code == 204
    assert (await client.get(f"{ITEMS}/{created['id']}")).status_code == 404
    assert (await client.delete(f"{ITEMS}/{created['id']}")).status_code == 404


async def test_invalid_body_is_400_with_field_details(client: AsyncClient) -> None:
    response = await client.post(ITEMS, json={"authorId": "x", "price": -1})
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    fields = {e["field"] for e in body["details"]["errors"]}
    assert {"title", "authorId", "itemTypeId", "price"} <= fields


async def test_blank_title_is_rejected(client: AsyncClient) -> None:
    response = await client.post(ITEMS, json={"title": "  ", "authorId": 1, "itemTypeId": 1})
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "title"}

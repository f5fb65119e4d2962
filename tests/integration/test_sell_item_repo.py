"""SellItem and reference repository tests against an in-memory SQLite store."""

from decimal import Decimal

import pytest

from bookhaven.application.dtos.catalog import ItemSearchCriteria, SellItemWrite
from bookhaven.application.dtos.reference import AuthorWrite, ItemTypeWrite
from bookhaven.domain.value_objects.core import SearchTerm
from bookhaven.infrastructure.persistence.repositories import (
    AuthorRepository,
    ItemTypeRepository,
    SellItemRepository,
)

pytestmark = pytest.mark.requires_db


async def _seed(db_session) -> SellItemRepository:
    repo = SellItemRepository(db_session)
    rows = [
        ("Dune", "Desert planet epic", "9780441013593", 2),
        ("The Hobbit", "There and back again", "9780547928227", 1),
        ("A Wizard of Earthsea", "Magic school on Roke", None, 1),
        ("100% Chance", "Odds and ends", "1234567890", 3),
    ]
    for title, description, isbn, item_type_id in rows:
        await repo.create_sell_item(
            SellItemWrite(
                title=title,
                author_id=1,
                item_type_id=item_type_id,
                description=description,
                isbn=isbn,
                price=Decimal("10.50"),
                stock_quantity=2,
            )
        )
    return repo


async def test_find_page_orders_by_id_and_counts_total(db_session) -> None:
    repo = await _seed(db_session)
    items, total = await repo.find_page(ItemSearchCriteria(), skip=0, limit=3)
    assert total == 4
    assert [i.title for i in items] == ["Dune", "The Hobbit", "A Wizard of Earthsea"]

    items, total = await repo.find_page(ItemSearchCriteria(), skip=3, limit=3)
    assert total == 4
    assert [i.title for i in items] == ["100% Chance"]


async def test_page_past_the_end_is_empty(db_session) -> None:
    repo = await _seed(db_session)
    items, total = await repo.find_page(ItemSearchCriteria(), skip=30, limit=6)
    assert items == []
    assert total == 4


async def test_text_match_is_case_insensitive_substring(db_session) -> None:
    repo = await _seed(db_session)
    criteria = ItemSearchCriteria(like_pattern=SearchTerm("HOBB").like_pattern)
    items, total = await repo.find_page(criteria, skip=0, limit=6)
    assert total == 1
    assert items[0].title == "The Hobbit"

    criteria = ItemSearchCriteria(like_pattern=SearchTerm("roke").like_pattern)
    items, _ = await repo.find_page(criteria, skip=0, limit=6)
    assert [i.title for i in items] == ["A Wizard of Earthsea"]

    criteria = ItemSearchCriteria(like_pattern=SearchTerm("928227").like_pattern)
    items, _ = await repo.find_page(criteria, skip=0, limit=6)
    assert [i.title for i in items] == ["The Hobbit"]


async def test_percent_sign_matches_literally(db_session) -> None:
    repo = await _seed(db_session)
    criteria = ItemSearchCriteria(like_pattern=SearchTerm("%").like_pattern)
    items, total = await repo.find_page(criteria, skip=0, limit=6)
    assert total == 1
    assert items[0].title == "100% Chance"


async def test_item_type_filter_is_and_composed(db_session) -> None:
    repo = await _seed(db_session)
    items, total = await repo.find_page(ItemSearchCriteria(item_type_id=1), skip=0, limit=6)
    assert total == 2

    criteria = ItemSearchCriteria(like_pattern=SearchTerm("dune").like_pattern, item_type_id=1)
    items, total = await repo.find_page(criteria, skip=0, limit=6)
    assert total == 0


async def test_reference_ids_are_or_composed(db_session) -> None:
    repo = await _seed(db_session)
    criteria = ItemSearchCriteria(
        like_pattern=SearchTerm("no-such-text").like_pattern, item_type_ids=frozenset({3})
    )
    items, total = await repo.find_page(criteria, skip=0, limit=6)
    assert total == 1
    assert items[0].title == "100% Chance"


async def test_distinct_item_type_ids(db_session) -> None:
    repo = await _seed(db_session)
    assert await repo.list_distinct_item_type_ids() == [1, 2, 3]


async def test_replace_and_delete(db_session) -> None:
    repo = await _seed(db_session)
    data = SellItemWrite(title="Dune Messiah", author_id=2, item_type_id=2, price=Decimal("7"))
    updated = await repo.replace_sell_item(1, data)
    assert updated is not None
    assert updated.title == "Dune Messiah"
    assert updated.description is None
    assert updated.price == Decimal("7")

    assert await repo.replace_sell_item(999, data) is None
    assert await repo.delete_sell_item(1) is True
    assert await repo.delete_sell_item(1) is False
    assert await repo.get_by_id(1) is None


async def test_name_lookups(db_session) -> None:
    authors = AuthorRepository(db_session)
    types = ItemTypeRepository(db_session)
    le_guin = await authors.create_author(AuthorWrite(name="Ursula K. Le Guin"))
    herbert = await authors.create_author(AuthorWrite(name="Frank Herbert"))
    fantasy = await types.create_item_type(ItemTypeWrite(name="Fantasy"))

    names = await authors.get_names_by_ids({le_guin.id, herbert.id, 404})
    assert names == {le_guin.id: "Ursula K. Le Guin", herbert.id: "Frank Herbert"}
    assert await authors.get_names_by_ids(set()) == {}

    assert await authors.find_ids_by_name(SearchTerm("le guin").like_pattern) == {le_guin.id}
    assert await types.find_ids_by_name(SearchTerm("FANTASY").like_pattern) == {fantasy.id}

"""Unit tests for content document models and partial updates."""

import pytest
from pydantic import ValidationError

from app.application.services.content_defaults import default_content, fallback_content
from app.domain.enums import ArtistCategory, ContentId
from app.domain.ordering import is_dense
from app.schemas.content import (
    DOCUMENT_MODELS,
    UPDATE_MODELS,
    HomePageUpdate,
    LineupPage,
    LineupPageUpdate,
    Navigation,
    NavigationItem,
    SiteMetadataUpdate,
    TicketsPage,
)


def test_documents_read_camel_case_fields() -> None:
    page = TicketsPage.model_validate(
        {
            "ticketsEnabled": True,
            "contactEmail": "tickets@example.com",
            "tiers": [{"id": "1", "name": "GA", "price": 75, "soldOut": True, "order": 1}],
            "infoSection": {"title": "Info", "items": ["21+"]},
        }
    )
    assert page.tickets_enabled is True
    assert page.tiers[0].sold_out is True
    dumped = page.model_dump(by_alias=True)
    assert dumped["contactEmail"] == "tickets@example.com"
    assert dumped["infoSection"]["items"] == ["21+"]


def test_stored_list_is_sorted_and_repacked_on_read() -> None:
    page = LineupPage.model_validate(
        {
            "artists": [
                {"id": "b", "name": "Player", "order": 5},
                {"id": "a", "name": "Toto", "order": 2},
                {"id": "c", "name": "Ambrosia", "order": 9},
            ]
        }
    )
    assert [a.id for a in page.artists] == ["a", "b", "c"]
    assert [a.order for a in page.artists] == [1, 2, 3]


def test_artist_defaults() -> None:
    page = LineupPage.model_validate({"artists": [{"name": "Player"}]})
    artist = page.artists[0]
    assert artist.category == ArtistCategory.OPENER
    assert artist.id
    assert artist.order == 1


def test_update_writes_only_set_fields() -> None:
    update = HomePageUpdate(headline="New headline")
    assert update.to_write() == {"headline": "New headline"}


def test_update_replaces_nested_object_whole() -> None:
    update = HomePageUpdate.model_validate({"eventDetails": {"date": "SAT OCT 11"}})
    assert update.to_write() == {
        "eventDetails": {"date": "SAT OCT 11", "time": "", "venue": "", "address": ""}
    }


def test_update_rejects_unknown_fields_and_nulls() -> None:
    with pytest.raises(ValidationError):
        HomePageUpdate.model_validate({"headlin": "typo"})
    with pytest.raises(ValidationError):
        HomePageUpdate.model_validate({"headline": None})


def test_null_clears_nullable_fields() -> None:
    update = HomePageUpdate.model_validate({"formTitle": None})
    assert update.to_write() == {"formTitle": None}
    assert SiteMetadataUpdate.model_validate({"ogImage": None}).to_write() == {"ogImage": None}


def test_list_update_keeps_generated_item_ids() -> None:
    update = LineupPageUpdate.model_validate({"artists": [{"name": "Michael McDonald"}]})
    written = update.to_write()["artists"][0]
    assert written["id"] == update.artists[0].id
    assert written["category"] == "opener"
    assert written["time"] == ""


def test_list_update_is_repacked_in_given_order() -> None:
    update = LineupPageUpdate.model_validate(
        {"artists": [{"id": "x", "name": "Toto", "order": 4}, {"id": "y", "name": "Player", "order": 1}]}
    )
    written = update.to_write()["artists"]
    assert [(a["id"], a["order"]) for a in written] == [("x", 1), ("y", 2)]


def test_navigation_active_items() -> None:
    nav = Navigation(
        items=[
            NavigationItem(id="1", label="Lineup", order=1),
            NavigationItem(id="2", label="Secret", order=2, active=False),
        ]
    )
    assert [i.label for i in nav.active_items] == ["Lineup"]


def test_model_tables_cover_every_document() -> None:
    assert set(DOCUMENT_MODELS) == set(ContentId)
    assert set(UPDATE_MODELS) == set(ContentId)


@pytest.mark.parametrize("content_set", [default_content, fallback_content])
def test_default_and_fallback_sets_are_complete(content_set) -> None:
    documents = content_set()
    assert set(documents) == set(ContentId)
    for content_id, document in documents.items():
        assert document.id == content_id.value


def test_default_lists_are_dense() -> None:
    documents = default_content()
    assert is_dense(documents[ContentId.LINEUP].artists)
    assert is_dense(documents[ContentId.SCHEDULE].events)
    assert is_dense(documents[ContentId.TICKETS].tiers)
    assert is_dense(documents[ContentId.NAVIGATION].items)
    assert len(documents[ContentId.SCHEDULE].events) == 8


def test_fallback_lists_are_empty() -> None:
    documents = fallback_content()
    assert documents[ContentId.LINEUP].artists == []
    assert documents[ContentId.TICKETS].tiers == []
    assert documents[ContentId.NAVIGATION].items == []

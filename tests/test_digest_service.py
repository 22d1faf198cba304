"""Tests for the digest service."""

import logging

import pytest

from food_digest.adapters.json_food_source import InMemoryFoodSource
from food_digest.domain.errors import CategoryValueError
from food_digest.domain.queries import FoodQuery
from food_digest.services.digest import DigestService
from tests.conftest import food_records



def food_records_aliases() -> list[str]:
    return [record["alias"] for record in food_records()]


@pytest.fixture
def service(schema, food_source) -> DigestService:
    return DigestService(schema=schema, source=food_source)


def test_collection_is_loaded_once(service) -> None:
    first = service.collection()

    assert service.collection() is first
    assert len(first) == len(food_records())


def test_digest_accepts_raw_input(service) -> None:
    result = service.digest(
        {"search": "gra", "categoryJm": "Enjoy", "sortBy": "nameEn"}
    )

    assert result.aliases == ["caraway-seed", "grape-seed-oil"]


def test_digest_accepts_prepared_queries(service, schema) -> None:
    query = FoodQuery.from_raw(schema, {"categoryRen": "Minimize"})

    assert service.digest(query).aliases == ["green-tea"]


def test_digest_degrades_bad_input_to_the_full_catalog(service) -> None:
    result = service.digest({"search": "!!", "sortBy": "calories", "categoryJm": 1})

    assert result == service.collection()
    assert result.aliases == food_records_aliases()


def test_digest_returns_the_catalog_for_empty_queries(
    schema, food_source, caplog, monkeypatch
) -> None:
    service = DigestService(schema=schema, source=food_source, debug=True)
    monkeypatch.setattr(logging.getLogger("food_digest"), "propagate", True)

    with caplog.at_level(logging.INFO, logger="food_digest"):
        result = service.digest({"search": None, "sortBy": "calories"})

    assert result is service.collection()
    assert "Digest:" not in caplog.text


def test_digest_keeps_catalog_order(service) -> None:
    before = service.collection().aliases

    service.digest({"sortBy": "nameNative"})

    assert service.collection().aliases == before


def test_digest_logs_in_debug_mode(schema, food_source, caplog, monkeypatch) -> None:
    service = DigestService(schema=schema, source=food_source, debug=True)
    monkeypatch.setattr(logging.getLogger("food_digest"), "propagate", True)

    with caplog.at_level(logging.INFO, logger="food_digest"):
        service.digest({"search": "tea"})

    assert "search=tea" in caplog.text
    assert "results=1" in caplog.text


def test_find_by_alias(service) -> None:
    food = service.find("rutabaga")

    assert food is not None
    assert food.name_native == "Rutabaga (Navet)"
    assert service.find("kale") is None


def test_invalid_catalog_is_rejected(schema) -> None:
    records = food_records()
    records[2]["categoryRen"] = "Sometimes"
    service = DigestService(schema=schema, source=InMemoryFoodSource(records))

    with pytest.raises(CategoryValueError, match="caraway-seed"):
        service.collection()

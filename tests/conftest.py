"""Shared test fixtures."""

import copy

import pytest

from food_digest.adapters.json_food_source import InMemoryFoodSource
from food_digest.config import Settings
from food_digest.domain.collection import FoodCollection
from food_digest.domain.schema import CatalogSchema, configure_schema

FOOD_RECORDS: list[dict[str, str]] = [
    {
        "alias": "barley",
        "imageFile": "barley.jpg",
        "nameEn": "Barley",
        "nameNative": "Orge",
        "serving": "3 Onces (Cuit)",
        "categoryJm": "Minimize",
        "categoryRen": "Enjoy",
    },
    {
        "alias": "grape-seed-oil",
        "imageFile": "grape-seed-oil.jpg",
        "nameEn": "Grape Seed Oil",
        "nameNative": "Huile De Pépins De Raisin",
        "serving": "1 Cuillère À Soupe",
        "categoryJm": "Enjoy",
        "categoryRen": "Enjoy",
    },
    {
        "alias": "caraway-seed",
        "imageFile": "caraway-seed.jpg",
        "nameEn": "Caraway Seed",
        "nameNative": "Graine De Cumin",
        "serving": "1/4 Cuillère À Thé",
        "categoryJm": "Enjoy",
        "categoryRen": "Enjoy",
    },
    {
        "alias": "rutabaga",
        "imageFile": "rutabaga.jpg",
        "nameEn": "Rutabaga",
        "nameNative": "Rutabaga (Navet)",
        "serving": "1 Tasse (Tranché)",
        "categoryJm": "Enjoy",
        "categoryRen": "Enjoy",
    },
    {
        "alias": "green-tea",
        "imageFile": "green-tea.jpg",
        "nameEn": "Green Tea",
        "nameNative": "Thé Vert",
        "serving": "1 Tasse",
        "categoryJm": "Superfood",
        "categoryRen": "Minimize",
    },
]


def food_records() -> list[dict[str, str]]:
    """Return a fresh copy of the test dataset."""
    return copy.deepcopy(FOOD_RECORDS)


def food_record(alias: str) -> dict[str, str]:
    """Return a fresh copy of one record of the test dataset."""
    return next(record for record in food_records() if record["alias"] == alias)


@pytest.fixture
def schema() -> CatalogSchema:
    return configure_schema("Jm", "Ren")


@pytest.fixture
def collection(schema: CatalogSchema) -> FoodCollection:
    return FoodCollection(schema, food_records())


@pytest.fixture
def food_source() -> InMemoryFoodSource:
    return InMemoryFoodSource(records=food_records())


@pytest.fixture
def settings() -> Settings:
    return Settings(person_one_key="Jm", person_two_key="Ren")

"""Dependency container wiring for the application."""

import logging
from dataclasses import dataclass
from pathlib import Path

from food_digest.adapters.json_food_source import (
    InMemoryFoodSource,
    JsonFileFoodSource,
)
from food_digest.app_logging import configure_logging
from food_digest.config import Settings, parse_person_keys
from food_digest.domain.schema import CatalogSchema, configure_schema
from food_digest.services.digest import DigestService, FoodSource


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    schema: CatalogSchema
    digest_service: DigestService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(logging.DEBUG if resolved_settings.digest_debug else logging.INFO)
    person_keys = parse_person_keys(resolved_settings.person_keys) or (
        resolved_settings.person_one_key,
        resolved_settings.person_two_key,
    )
    schema = configure_schema(*person_keys)
    source: FoodSource
    if resolved_settings.catalog_path:
        source = JsonFileFoodSource(Path(resolved_settings.catalog_path))
    else:
        source = InMemoryFoodSource(records=[])
    digest_service = DigestService(
        schema=schema,
        source=source,
        debug=resolved_settings.digest_debug,
    )
    return AppContainer(
        settings=resolved_settings,
        schema=schema,
        digest_service=digest_service,
    )

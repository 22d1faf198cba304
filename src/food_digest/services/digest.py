"""Service for digesting the food catalog with user queries."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from food_digest.domain.collection import FoodCollection
from food_digest.domain.errors import CatalogError
from food_digest.domain.foods import Food
from food_digest.domain.queries import FoodQuery
from food_digest.domain.schema import CatalogSchema

_logger = logging.getLogger(__name__)


class FoodSource(Protocol):
    """Source of raw food records."""

    def load_records(self) -> list[dict[str, object]]:
        """Return raw food mappings in catalog order."""


@dataclass
class DigestService:
    """Application service holding the catalog and answering queries."""

    schema: CatalogSchema
    source: FoodSource
    debug: bool = False
    _catalog: FoodCollection | None = field(default=None, init=False, repr=False)

    def collection(self) -> FoodCollection:
        """Return the catalog, loading and validating it on first use."""
        if self._catalog is None:
            records = self.source.load_records()
            try:
                self._catalog = FoodCollection(self.schema, records)
            except CatalogError:
                _logger.exception(
                    "Rejected food catalog of %s records for persons %s and %s",
                    len(records),
                    self.schema.person_one,
                    self.schema.person_two,
                )
                raise
            _logger.info("Loaded food catalog with %s foods", len(self._catalog))
        return self._catalog

    def query(self, raw: object) -> FoodQuery:
        """Build a sanitized query from raw user input."""
        return FoodQuery.from_raw(self.schema, raw)

    def digest(self, raw: object) -> FoodCollection:
        """Filter and sort the catalog for raw user input."""
        query = raw if isinstance(raw, FoodQuery) else self.query(raw)
        catalog = self.collection()
        if query.is_empty():
            return catalog
        result = catalog.digest(query)
        if self.debug:
            _logger.info(
                "Digest: search=%s sort_by=%s categories=%s results=%s",
                query.search,
                query.sort_by,
                dict(query.categories),
                len(result),
            )
        return result

    def find(self, alias: str) -> Food | None:
        """Return the food with the given alias, if present."""
        for food in self.collection():
            if food.alias == alias:
                return food
        return None

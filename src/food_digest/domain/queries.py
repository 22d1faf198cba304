"""Self-healing queries over a food collection.

Query parameters come from untrusted user input. Each one goes through a
sanitizer that never raises: anything unusable becomes ``None``, which the
collection treats as "no filter" or "no sort".
"""

import re
import string
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from food_digest.domain.schema import STANDARD_CATEGORIES, CatalogSchema

# General punctuation, supplemental punctuation, ASCII punctuation, ASCII digits.
# Removing these leaves no regular expression metacharacter in a keyword.
_SEARCH_STRIP_PATTERN = re.compile(
    "[\u2000-\u206F\u2E00-\u2E7F" + re.escape(string.punctuation) + "0-9]"
)


def sanitize_search(value: object) -> str | None:
    """Return the keyword without punctuation and digits, or None."""
    if not isinstance(value, str) or not value:
        return None
    return _SEARCH_STRIP_PATTERN.sub("", value)


def sanitize_category(value: object) -> str | None:
    """Return the value if it is a standard category, else None."""
    if isinstance(value, str) and value in STANDARD_CATEGORIES:
        return value
    return None


def sanitize_sort_field(schema: CatalogSchema, value: object) -> str | None:
    """Return the value if the schema can sort by it, else None."""
    if isinstance(value, str) and value in schema.sortable_fields:
        return value
    return None


@dataclass(frozen=True)
class FoodQuery:
    """Sanitized filter and sort intent for ``FoodCollection.digest``."""

    schema: CatalogSchema
    search: str | None = None
    sort_by: str | None = None
    categories: Mapping[str, str | None] = field(default_factory=dict)

    def __post_init__(self) -> None:
        raw_categories = self.categories if isinstance(self.categories, Mapping) else {}
        categories = {
            name: sanitize_category(raw_categories.get(name))
            for name in self.schema.category_fields
        }
        object.__setattr__(self, "search", sanitize_search(self.search))
        object.__setattr__(
            self, "sort_by", sanitize_sort_field(self.schema, self.sort_by)
        )
        object.__setattr__(self, "categories", MappingProxyType(categories))

    def __hash__(self) -> int:
        return hash(
            (self.schema, self.search, self.sort_by, tuple(self.categories.items()))
        )

    @classmethod
    def from_raw(cls, schema: CatalogSchema, raw: object) -> "FoodQuery":
        """Build a query from raw input such as request parameters."""
        params = raw if isinstance(raw, Mapping) else {}
        return cls(
            schema=schema,
            search=params.get("search"),
            sort_by=params.get("sortBy"),
            categories={name: params.get(name) for name in schema.category_fields},
        )

    def category_filter(self, field_name: str) -> str | None:
        """Return the category filter for a category field."""
        return self.categories.get(field_name)

    def is_empty(self) -> bool:
        """Return True when the query neither filters nor sorts."""
        return (
            self.search is None
            and self.sort_by is None
            and all(value is None for value in self.categories.values())
        )

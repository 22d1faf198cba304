"""Ordered, validated collections of foods."""

import re
from collections.abc import Iterator, Mapping
from functools import lru_cache

from pyuca import Collator

from food_digest.domain.errors import (
    InvalidArgumentError,
    ItemTypeError,
    SchemaMismatchError,
)
from food_digest.domain.foods import Food
from food_digest.domain.queries import FoodQuery
from food_digest.domain.schema import CatalogSchema

ASCENDING = "ascending"
DESCENDING = "descending"
SORT_ORDERS: tuple[str, ...] = (ASCENDING, DESCENDING)


@lru_cache(maxsize=1)
def _collator() -> Collator:
    """Return the shared Unicode collator (loading its table is slow)."""
    return Collator()


class FoodCollection:
    """An ordered sequence of validated foods.

    Filters return new collections and leave the receiver alone, while
    ``sort_by_field`` reorders the receiver in place. Every operation that
    has nothing to do (a ``None`` argument) returns the receiver itself.
    """

    def __init__(self, schema: CatalogSchema, *items: object) -> None:
        """Build a collection from foods and/or raw mappings.

        Pass either one list or tuple of items, or the items themselves.
        When the first item is a list or tuple, the other arguments are
        ignored.
        """
        self.schema = schema
        if items and isinstance(items[0], list | tuple):
            self._foods: list[object] = list(items[0])
        else:
            self._foods = list(items)
        self.validate()

    def validate(self) -> "FoodCollection":
        """Validate every item, coercing raw mappings to foods."""
        for index, item in enumerate(self._foods):
            if isinstance(item, Food):
                if item.schema != self.schema:
                    raise SchemaMismatchError(
                        f"food {item.alias!r} was built for persons "
                        f"{item.schema.person_one!r} and {item.schema.person_two!r}, "
                        f"not {self.schema.person_one!r} and {self.schema.person_two!r}"
                    )
                item.validate()
            elif isinstance(item, Mapping):
                self._foods[index] = Food.from_raw(self.schema, item)
            else:
                raise ItemTypeError(
                    "items passed to FoodCollection must be Food instances or "
                    f"mappings, got {type(item).__name__} at position {index}"
                )
        return self

    def __len__(self) -> int:
        return len(self._foods)

    def __iter__(self) -> Iterator[Food]:
        return iter(self._foods)

    def __getitem__(self, index: int | slice) -> "Food | FoodCollection":
        if isinstance(index, slice):
            return FoodCollection(self.schema, self._foods[index])
        return self._foods[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FoodCollection):
            return NotImplemented
        return self.schema == other.schema and self._foods == other._foods

    def __repr__(self) -> str:
        return f"FoodCollection({self.aliases!r})"

    @property
    def aliases(self) -> list[str]:
        """Return the food aliases in collection order."""
        return [food.alias for food in self._foods]

    def copy(self) -> "FoodCollection":
        """Return a new collection holding the same foods in the same order."""
        return FoodCollection(self.schema, self._foods)

    def to_raw(self) -> list[dict[str, str]]:
        """Return the raw mappings of the foods in collection order."""
        return [food.to_raw() for food in self._foods]

    def filter_by_category(
        self, field_name: str, value: str | None = None
    ) -> "FoodCollection":
        """Keep foods whose category field equals the value exactly."""
        if not self.schema.is_category_field(field_name):
            raise InvalidArgumentError(
                "field_name must be one of "
                f"{', '.join(self.schema.category_fields)}, got {field_name!r}"
            )
        if value is None:
            return self
        return FoodCollection(
            self.schema,
            [food for food in self._foods if food.value_of(field_name) == value],
        )

    def filter_by_keyword(self, value: str | None = None) -> "FoodCollection":
        """Keep foods whose English or native name contains the keyword.

        Matching ignores case. The keyword is escaped, so it always matches
        as a literal substring.
        """
        if value is None:
            return self
        if not isinstance(value, str):
            raise InvalidArgumentError(f"keyword must be a string, got {value!r}")
        pattern = re.compile(re.escape(value), re.IGNORECASE)
        return FoodCollection(
            self.schema,
            [
                food
                for food in self._foods
                if pattern.search(food.name_en) or pattern.search(food.name_native)
            ],
        )

    def sort_by_field(
        self, field_name: str | None = None, order: str = ASCENDING
    ) -> "FoodCollection":
        """Sort the collection in place by a sortable field.

        Strings are compared with the Unicode Collation Algorithm, so accented
        letters sort next to their base letter. Descending order is the exact
        reverse of the (stable) ascending order.
        """
        if order not in SORT_ORDERS:
            raise InvalidArgumentError(
                f"order must be {ASCENDING!r} or {DESCENDING!r}, got {order!r}"
            )
        if field_name is None:
            return self
        if field_name not in self.schema.sortable_fields:
            raise InvalidArgumentError(
                "field_name must be one of "
                f"{', '.join(self.schema.sortable_fields)}, got {field_name!r}"
            )
        collator = _collator()
        self._foods.sort(key=lambda food: collator.sort_key(food.value_of(field_name)))
        if order == DESCENDING:
            self._foods.reverse()
        return self

    def digest(self, query: FoodQuery) -> "FoodCollection":
        """Filter by both categories, then by keyword, then sort ascending.

        Equality filters run before the keyword match to narrow the set
        early. The receiver is never reordered: when no filter applies, the
        sort runs on a copy.
        """
        if not isinstance(query, FoodQuery):
            raise InvalidArgumentError(
                f"query must be a FoodQuery, got {type(query).__name__}"
            )
        if query.schema != self.schema:
            raise InvalidArgumentError("query was built for a different schema")
        first, second = self.schema.category_fields
        digested = (
            self.filter_by_category(first, query.category_filter(first))
            .filter_by_category(second, query.category_filter(second))
            .filter_by_keyword(query.search)
        )
        if digested is self and query.sort_by is not None:
            digested = self.copy()
        return digested.sort_by_field(query.sort_by, ASCENDING)

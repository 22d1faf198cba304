"""Schema configuration binding category fields to tracked persons."""

from dataclasses import dataclass

from food_digest.domain.errors import InvalidArgumentError

STANDARD_CATEGORIES: tuple[str, ...] = ("Superfood", "Enjoy", "Minimize", "Avoid")

BASE_SORTABLE_FIELDS: tuple[str, ...] = ("alias", "nameEn", "nameNative")

CATEGORY_PREFIX = "category"


@dataclass(frozen=True)
class CatalogSchema:
    """Field layout shared by foods, collections and queries."""

    person_one: str
    person_two: str

    @property
    def category_fields(self) -> tuple[str, str]:
        """Return the category field names for both persons."""
        return (
            f"{CATEGORY_PREFIX}{self.person_one}",
            f"{CATEGORY_PREFIX}{self.person_two}",
        )

    @property
    def sortable_fields(self) -> tuple[str, ...]:
        """Return the field names a collection may be sorted by."""
        return BASE_SORTABLE_FIELDS + self.category_fields

    def is_category_field(self, field_name: object) -> bool:
        """Return True when the name is one of the two category fields."""
        return isinstance(field_name, str) and field_name in self.category_fields


def configure_schema(person_one: str, person_two: str) -> CatalogSchema:
    """Build a schema for two person keys, e.g. ``("Jm", "Ren")``."""
    for key in (person_one, person_two):
        if not isinstance(key, str) or not key:
            raise InvalidArgumentError(
                f"person keys must be non-empty strings, got {key!r}"
            )
    if person_one == person_two:
        raise InvalidArgumentError(
            f"person keys must be distinct, got {person_one!r} twice"
        )
    return CatalogSchema(person_one=person_one, person_two=person_two)

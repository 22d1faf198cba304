"""Domain model for a validated catalog food."""

from collections.abc import Mapping
from dataclasses import dataclass

from food_digest.domain.errors import (
    CategoryValueError,
    FieldTypeError,
    InvalidArgumentError,
    SchemaMismatchError,
)
from food_digest.domain.schema import STANDARD_CATEGORIES, CatalogSchema

_ATTRIBUTES_BY_FIELD = {
    "alias": "alias",
    "imageFile": "image_file",
    "nameEn": "name_en",
    "nameNative": "name_native",
    "serving": "serving",
}


@dataclass(frozen=True)
class Food:
    """Represents one food of the catalog.

    ``category_values`` holds the values of the two schema category fields,
    in the order of ``schema.category_fields``. Construction validates the
    instance, so a ``Food`` that exists is always valid.
    """

    schema: CatalogSchema
    alias: str
    name_en: str
    serving: str
    category_values: tuple[str, str]
    image_file: str = ""
    name_native: str | None = None

    def __post_init__(self) -> None:
        if self.name_native is None:
            object.__setattr__(self, "name_native", self.name_en)
        self.validate()

    @classmethod
    def from_raw(cls, schema: CatalogSchema, raw: Mapping[str, object]) -> "Food":
        """Build a food from a raw camelCase mapping."""
        alias = raw.get("alias")
        missing = [name for name in schema.category_fields if name not in raw]
        if missing:
            raise SchemaMismatchError(
                f"fields {', '.join(missing)} are missing; the schema for "
                f"persons {schema.person_one!r} and {schema.person_two!r} "
                f"does not match the data (food alias: {alias})"
            )
        image_file = raw.get("imageFile")
        return cls(
            schema=schema,
            alias=alias,
            name_en=raw.get("nameEn"),
            serving=raw.get("serving"),
            category_values=tuple(raw[name] for name in schema.category_fields),
            image_file="" if image_file is None else image_file,
            name_native=raw.get("nameNative"),
        )

    @property
    def categories(self) -> dict[str, str]:
        """Return category values keyed by category field name."""
        return dict(
            zip(self.schema.category_fields, self.category_values, strict=True)
        )

    def validate(self) -> "Food":
        """Check field types and category values, returning the food itself."""
        fields = self.schema.category_fields
        if (
            not isinstance(self.category_values, tuple)
            or len(self.category_values) != len(fields)
        ):
            raise SchemaMismatchError(
                f"expected values for {', '.join(fields)} (food alias: {self.alias})"
            )
        values = _raw_fields(self)
        values.update(self.categories)
        for name, value in values.items():
            if not isinstance(value, str):
                raise FieldTypeError(
                    f"property {name} must be a string, got "
                    f"{type(value).__name__} (food alias: {self.alias})"
                )
        for name, value in self.categories.items():
            if value not in STANDARD_CATEGORIES:
                raise CategoryValueError(
                    f"{value} is not a standard food category for property "
                    f"{name} (food alias: {self.alias})"
                )
        return self

    def value_of(self, field_name: str) -> str:
        """Return a field value by its raw field name."""
        attribute = _ATTRIBUTES_BY_FIELD.get(field_name)
        if attribute is not None:
            return getattr(self, attribute)
        if self.schema.is_category_field(field_name):
            return self.categories[field_name]
        raise InvalidArgumentError(f"unknown food field {field_name!r}")

    def to_raw(self) -> dict[str, str]:
        """Return the raw camelCase mapping for this food."""
        raw = _raw_fields(self)
        raw.update(self.categories)
        return raw


def _raw_fields(food: Food) -> dict[str, object]:
    """Map the fixed raw field names to the food's attribute values."""
    return {name: getattr(food, attr) for name, attr in _ATTRIBUTES_BY_FIELD.items()}

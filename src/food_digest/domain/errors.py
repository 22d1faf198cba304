"""Error taxonomy for catalog validation and queries."""


class CatalogError(Exception):
    """Base class for catalog failures."""


class SchemaMismatchError(CatalogError, LookupError):
    """Raised when record data does not match the configured schema."""


class FieldTypeError(CatalogError, TypeError):
    """Raised when a record field does not hold a string."""


class ItemTypeError(CatalogError, TypeError):
    """Raised when a collection item is neither a Food nor a mapping."""


class CategoryValueError(CatalogError, ValueError):
    """Raised when a category field holds a non-standard value."""


class InvalidArgumentError(CatalogError, ValueError):
    """Raised when a catalog operation receives a malformed argument."""

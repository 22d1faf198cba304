"""JSON file source for raw food records."""

from dataclasses import dataclass
from pathlib import Path

from pydantic import TypeAdapter

from food_digest.services.digest import FoodSource

_RECORDS_ADAPTER = TypeAdapter(list[dict[str, object]])


@dataclass
class JsonFileFoodSource(FoodSource):
    """Reads a JSON array of food objects from disk."""

    path: Path

    def load_records(self) -> list[dict[str, object]]:
        """Parse the file into raw food mappings."""
        return _RECORDS_ADAPTER.validate_json(Path(self.path).read_bytes())


@dataclass
class InMemoryFoodSource(FoodSource):
    """Serves raw food records held in memory."""

    records: list[dict[str, object]]

    def load_records(self) -> list[dict[str, object]]:
        """Return copies of the held records."""
        return [dict(record) for record in self.records]

"""JSON file repository for the restaurant document.

Every operation reads the whole document from disk, changes it in memory
and writes it back in full. Nothing is cached between calls and no locking
is done here, so callers that allow concurrent writers must serialize them.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from jmc.models import Restaurant, RestaurantData, SaveRequest

logger = logging.getLogger(__name__)

JSON_INDENT = 4


class RepositoryError(Exception):
    """Base exception for document storage failures."""


class StorageIOError(RepositoryError):
    """Raised when the document file cannot be read or written."""


class DocumentParseError(RepositoryError):
    """Raised when the file is not valid JSON matching the document schema."""


class DocumentSerializeError(RepositoryError):
    """Raised when the document cannot be encoded as JSON."""


class RestaurantNotFoundError(RepositoryError):
    """Raised when no restaurant carries the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Restaurant not found: {name}")


def merge_batch(restaurants: list[Restaurant], request: SaveRequest) -> list[Restaurant]:
    """Return ``restaurants`` with the batch applied: deletes, updates, then appends."""
    to_delete = set(request.delete)
    merged = [r for r in restaurants if r.name not in to_delete]

    # Later entries win when a name is repeated
    replacements = {item.name: item for item in request.update}
    merged = [replacements.get(r.name, r) for r in merged]

    merged.extend(request.new)
    return merged


class RestaurantRepository:
    """Owns read/write access to one JSON document."""

    def __init__(self, file_path: str | os.PathLike[str]) -> None:
        """Initialize the repository.

        Args:
            file_path: Location of the JSON document
        """
        self.file_path = Path(file_path)

    def exists(self) -> bool:
        """Return whether the document file is present."""
        return self.file_path.is_file()

    def load_all(self) -> RestaurantData:
        """Read and parse the whole document.

        Returns:
            The parsed document

        Raises:
            StorageIOError: If the file is missing or unreadable
            DocumentParseError: If the content is not a valid document
        """
        try:
            raw = self.file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DocumentParseError(f"Failed to decode {self.file_path}: {e}") from e
        except OSError as e:
            raise StorageIOError(f"Failed to read {self.file_path}: {e}") from e

        try:
            data = RestaurantData.model_validate_json(raw, strict=True)
        except ValidationError as e:
            raise DocumentParseError(f"Failed to parse {self.file_path}: {e}") from e

        logger.debug(
            f"Loaded {len(data.restaurants or [])} restaurants from {self.file_path}"
        )
        return data

    def save_all(self, data: RestaurantData) -> None:
        """Overwrite the document with ``data``.

        The content is written to a temporary sibling file first and then
        moved over the target, so readers never see a partial document.

        Raises:
            DocumentSerializeError: If ``data`` cannot be encoded
            StorageIOError: If the file cannot be written
        """
        try:
            payload = json.dumps(
                data.model_dump(),
                ensure_ascii=False,
                indent=JSON_INDENT,
                allow_nan=False,
            )
        except (TypeError, ValueError) as e:
            raise DocumentSerializeError(f"Failed to serialize document: {e}") from e

        tmp_path = self.file_path.with_name(self.file_path.name + ".tmp")
        try:
            tmp_path.write_text(payload + "\n", encoding="utf-8")
            os.replace(tmp_path, self.file_path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise StorageIOError(f"Failed to write {self.file_path}: {e}") from e

        logger.debug(f"Saved document to {self.file_path}")

    def create_one(self, item: Restaurant) -> None:
        """Append ``item`` to the end of the restaurant list."""
        data = self.load_all()
        data.restaurants = [*(data.restaurants or []), item]
        self.save_all(data)
        logger.info(f"Created restaurant: {item.name}")

    def update_one(self, name: str, item: Restaurant) -> None:
        """Replace the first restaurant named ``name`` with ``item``.

        Raises:
            RestaurantNotFoundError: If no restaurant has that name
        """
        data = self.load_all()
        restaurants = list(data.restaurants or [])
        index = self._find(restaurants, name)
        restaurants[index] = item
        data.restaurants = restaurants
        self.save_all(data)
        logger.info(f"Updated restaurant: {name}")

    def delete_one(self, name: str) -> None:
        """Remove the first restaurant named ``name``.

        Raises:
            RestaurantNotFoundError: If no restaurant has that name
        """
        data = self.load_all()
        restaurants = list(data.restaurants or [])
        del restaurants[self._find(restaurants, name)]
        data.restaurants = restaurants
        self.save_all(data)
        logger.info(f"Deleted restaurant: {name}")

    def save_batch(self, request: SaveRequest) -> RestaurantData:
        """Apply deletes, then updates, then appends, and persist the result.

        Deleting and updating the same name removes it. An update whose name
        also appears in ``request.new`` leaves two entries with that name.

        Returns:
            The document as written
        """
        data = self.load_all()
        data.restaurants = merge_batch(data.restaurants or [], request)

        self.save_all(data)
        logger.info(
            f"Saved batch: {len(request.new)} new, {len(request.update)} updated, "
            f"{len(request.delete)} deleted"
        )
        return data

    @staticmethod
    def _find(restaurants: list[Restaurant], name: str) -> int:
        for index, restaurant in enumerate(restaurants):
            if restaurant.name == name:
                return index
        raise RestaurantNotFoundError(name)

"""Persistence and use cases for the restaurant list."""

from jmc.services.restaurant_repository import (
    DocumentParseError,
    DocumentSerializeError,
    RepositoryError,
    RestaurantNotFoundError,
    RestaurantRepository,
    StorageIOError,
    merge_batch,
)
from jmc.services.restaurant_service import RestaurantService

__all__ = [
    "DocumentParseError",
    "DocumentSerializeError",
    "RepositoryError",
    "RestaurantNotFoundError",
    "RestaurantRepository",
    "RestaurantService",
    "StorageIOError",
    "merge_batch",
]

"""Validation rules for restaurants, menus and the whole document."""

from jmc.validation.errors import RestaurantValidationError, ValidationErrorKind
from jmc.validation.restaurant_validator import (
    validate_document,
    validate_menu,
    validate_restaurant,
    validate_unique_names,
)

__all__ = [
    "RestaurantValidationError",
    "ValidationErrorKind",
    "validate_document",
    "validate_menu",
    "validate_restaurant",
    "validate_unique_names",
]

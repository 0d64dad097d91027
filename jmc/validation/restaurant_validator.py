"""Validation rules applied before any restaurant is persisted.

Every function is pure and stops at the first rule that fails, raising
:class:`RestaurantValidationError` describing it.
"""

from jmc.models import Menu, Restaurant, RestaurantData
from jmc.validation.errors import RestaurantValidationError, ValidationErrorKind

MIN_RATING = 0
MAX_RATING = 5


def _require_text(value: str, field: str) -> None:
    if not value or not value.strip():
        raise RestaurantValidationError(
            ValidationErrorKind.EMPTY_FIELD, field, "must not be empty"
        )


def _check_rating(rating: float) -> None:
    if rating < MIN_RATING or rating > MAX_RATING:
        raise RestaurantValidationError(
            ValidationErrorKind.OUT_OF_RANGE,
            "rating",
            f"must be between {MIN_RATING} and {MAX_RATING}, got {rating}",
        )
    if not float(rating * 2).is_integer():
        raise RestaurantValidationError(
            ValidationErrorKind.INVALID_STEP,
            "rating",
            f"must be a multiple of 0.5, got {rating}",
        )


def validate_menu(menu: Menu) -> None:
    """Check a single menu entry."""
    _require_text(menu.name, "name")
    _check_rating(menu.rating)
    if menu.price < 0:
        raise RestaurantValidationError(
            ValidationErrorKind.NEGATIVE, "price", f"must not be negative, got {menu.price}"
        )


def validate_restaurant(restaurant: Restaurant) -> None:
    """Check a restaurant and each of its menus.

    Raises:
        RestaurantValidationError: On the first broken rule. Menu failures
            are located as ``menus[i]``.
    """
    _require_text(restaurant.name, "name")
    _check_rating(restaurant.rating)
    if not restaurant.categories:
        raise RestaurantValidationError(
            ValidationErrorKind.EMPTY_COLLECTION,
            "categories",
            "at least one category is required",
        )
    _require_text(restaurant.kakao_url, "kakao_url")
    for index, menu in enumerate(restaurant.menus):
        try:
            validate_menu(menu)
        except RestaurantValidationError as e:
            raise e.within("menus", index) from e


def validate_document(data: RestaurantData) -> None:
    """Check the whole document.

    The restaurant list must be present (an empty list is fine), every
    entry must be valid, and no two entries may share a name.
    """
    if data.restaurants is None:
        raise RestaurantValidationError(
            ValidationErrorKind.MISSING_COLLECTION,
            "restaurants",
            "field is missing",
        )

    for index, restaurant in enumerate(data.restaurants):
        try:
            validate_restaurant(restaurant)
        except RestaurantValidationError as e:
            raise e.within("restaurants", index) from e

    validate_unique_names(data.restaurants)


def validate_unique_names(restaurants: list[Restaurant]) -> None:
    """Check that no two restaurants share a name."""
    seen: set[str] = set()
    for index, restaurant in enumerate(restaurants):
        if restaurant.name in seen:
            raise RestaurantValidationError(
                ValidationErrorKind.DUPLICATE_NAME,
                "name",
                f"duplicate restaurant name '{restaurant.name}'",
                path=f"restaurants[{index}]",
            )
        seen.add(restaurant.name)

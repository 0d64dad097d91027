"""Data models for the restaurant document."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Menu(BaseModel):
    """A single dish on a restaurant's menu."""

    name: str = Field(default="", description="Menu name")
    rating: int | float = Field(default=0, description="Rating in 0.5 steps, 0 when unrated")
    price: int | float = Field(default=0, description="Price, zero allowed")
    description: str = Field(default="", description="Free-form notes")


class Restaurant(BaseModel):
    """Restaurant entry, keyed by name."""

    name: str = Field(default="", description="Restaurant name")
    rating: int | float = Field(default=0, description="Rating between 0 and 5 in 0.5 steps")
    categories: list[str] = Field(default_factory=list, description="Cuisine categories")
    kakao_url: str = Field(default="", description="Kakao map link")
    visited: bool = Field(default=False, description="Whether it has been visited")
    description: str = Field(default="", description="Free-form notes")
    menus: list[Menu] = Field(default_factory=list, description="Known menus")


class RestaurantData(BaseModel):
    """The whole JSON document.

    ``restaurants`` is ``None`` when the key is absent from the file, which
    is reported by document validation rather than by parsing. ``config`` is
    passed through untouched.
    """

    restaurants: list[Restaurant] | None = Field(
        default=None, description="Ordered restaurant list"
    )
    config: dict[str, Any] | None = Field(
        default_factory=dict, description="Opaque user configuration"
    )


class SaveRequest(BaseModel):
    """Batch of changes applied in one save."""

    model_config = ConfigDict(frozen=True)

    new: list[Restaurant] = Field(default_factory=list, description="Entries to append")
    update: list[Restaurant] = Field(
        default_factory=list, description="Replacements matched by name"
    )
    delete: list[str] = Field(default_factory=list, description="Names to remove")

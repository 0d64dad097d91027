"""Data models for jmc."""

from jmc.models.restaurant import Menu, Restaurant, RestaurantData, SaveRequest

__all__ = ["Menu", "Restaurant", "RestaurantData", "SaveRequest"]

"""Tests for data models."""

import pytest
from pydantic import ValidationError

from jmc.models import Menu, Restaurant, RestaurantData, SaveRequest


class TestRestaurant:
    """Tests for the Restaurant model."""

    def test_create_restaurant(self):
        """Test creating a restaurant."""
        restaurant = Restaurant(
            name="을지면옥",
            rating=4.5,
            categories=["한식", "냉면"],
            kakao_url="https://place.map.kakao.com/1",
            visited=True,
            menus=[Menu(name="평양냉면", rating=5, price=15000)],
        )

        assert restaurant.name == "을지면옥"
        assert restaurant.rating == 4.5
        assert restaurant.categories == ["한식", "냉면"]
        assert restaurant.visited is True
        assert restaurant.menus[0].price == 15000

    def test_missing_fields_default_to_zero_values(self):
        """Test that absent keys parse so validation can report them."""
        restaurant = Restaurant.model_validate({})

        assert restaurant.name == ""
        assert restaurant.rating == 0
        assert restaurant.categories == []
        assert restaurant.kakao_url == ""
        assert restaurant.visited is False
        assert restaurant.description == ""
        assert restaurant.menus == []

    def test_wrong_type_rejected(self):
        """Test that non-list categories fail parsing."""
        with pytest.raises(ValidationError):
            Restaurant.model_validate({"name": "x", "categories": "한식"})


class TestRestaurantData:
    """Tests for the RestaurantData model."""

    def test_absent_restaurants_is_none(self):
        """Test that a missing restaurants key is kept distinguishable from empty."""
        assert RestaurantData.model_validate({"config": {}}).restaurants is None
        assert RestaurantData.model_validate({"restaurants": []}).restaurants == []

    def test_config_passed_through(self):
        """Test that arbitrary config content is kept as-is."""
        config = {"theme": "dark", "nested": {"a": [1, 2, None]}, "flag": True}
        data = RestaurantData.model_validate({"restaurants": [], "config": config})

        assert data.config == config


class TestSaveRequest:
    """Tests for the SaveRequest model."""

    def test_defaults_to_empty_lists(self):
        """Test that omitted keys mean no changes."""
        request = SaveRequest.model_validate({"delete": ["A"]})

        assert request.new == []
        assert request.update == []
        assert request.delete == ["A"]

    def test_save_request_immutable(self):
        """Test that save request is frozen/immutable."""
        request = SaveRequest()

        with pytest.raises((ValidationError, AttributeError)):
            request.delete = ["A"]

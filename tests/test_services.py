"""Tests for the restaurant service."""

import pytest

from jmc.models import Restaurant, RestaurantData, SaveRequest
from jmc.services import RestaurantNotFoundError, RestaurantRepository, RestaurantService


def make_restaurant(name: str) -> Restaurant:
    return Restaurant(
        name=name, rating=4, categories=["분식"], kakao_url="https://example.com"
    )


@pytest.fixture
def repository(tmp_path):
    """Create a repository on a document with three restaurants."""
    repository = RestaurantRepository(tmp_path / "data.json")
    repository.save_all(
        RestaurantData(
            restaurants=[make_restaurant(n) for n in ("A", "B", "C")], config={}
        )
    )
    return repository


@pytest.fixture
def restaurant_service(repository):
    """Create a restaurant service for testing."""
    return RestaurantService(repository, seed=7)


class TestRestaurantService:
    """Tests for the RestaurantService."""

    def test_get_all(self, restaurant_service):
        """Test that get_all returns the stored document."""
        data = restaurant_service.get_all()

        assert [r.name for r in data.restaurants] == ["A", "B", "C"]

    def test_mutations_forward_to_repository(self, restaurant_service, repository):
        """Test create, update, delete and save_batch end to end."""
        restaurant_service.create(make_restaurant("D"))
        restaurant_service.update("A", make_restaurant("A2"))
        restaurant_service.delete("B")
        result = restaurant_service.save_batch(
            SaveRequest(new=[make_restaurant("E")], delete=["C"])
        )

        assert [r.name for r in result.restaurants] == ["A2", "D", "E"]
        assert repository.load_all() == result

    def test_update_missing_raises(self, restaurant_service):
        """Test that not-found errors pass through unchanged."""
        with pytest.raises(RestaurantNotFoundError):
            restaurant_service.update("Z", make_restaurant("Z"))

    def test_recommend_returns_member(self, restaurant_service):
        """Test that recommend picks one of the stored restaurants."""
        for _ in range(20):
            choice = restaurant_service.recommend()
            assert choice is not None
            assert choice.name in {"A", "B", "C"}

    def test_recommend_covers_all(self, restaurant_service):
        """Test that every restaurant can be picked."""
        picked = {restaurant_service.recommend().name for _ in range(200)}

        assert picked == {"A", "B", "C"}

    def test_recommend_seeded_is_repeatable(self, repository):
        """Test that the same seed gives the same sequence."""
        first = RestaurantService(repository, seed=42)
        second = RestaurantService(repository, seed=42)

        assert [first.recommend().name for _ in range(10)] == [
            second.recommend().name for _ in range(10)
        ]

    def test_recommend_empty(self, tmp_path):
        """Test that an empty list yields None instead of an error."""
        repository = RestaurantRepository(tmp_path / "data.json")
        repository.save_all(RestaurantData(restaurants=[], config={}))

        assert RestaurantService(repository).recommend() is None

    def test_recommend_absent_list(self, tmp_path):
        """Test that a document without a restaurant list yields None."""
        path = tmp_path / "data.json"
        path.write_text("{}", encoding="utf-8")

        assert RestaurantService(RestaurantRepository(path)).recommend() is None

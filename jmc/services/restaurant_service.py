"""Restaurant use cases on top of the JSON repository."""

import logging
import random

from jmc.models import Restaurant, RestaurantData, SaveRequest
from jmc.services.restaurant_repository import RestaurantRepository

logger = logging.getLogger(__name__)


class RestaurantService:
    """Service for reading, changing and recommending restaurants.

    Mutations forward straight to the repository; this class is the place
    to add business rules without changing the repository contract.
    """

    def __init__(self, repository: RestaurantRepository, seed: int | None = None) -> None:
        """Initialize the restaurant service.

        Args:
            repository: Repository owning the document
            seed: Optional seed for the recommendation RNG, OS entropy if omitted
        """
        self.repository = repository
        self._random = random.Random(seed)

    def get_all(self) -> RestaurantData:
        return self.repository.load_all()

    def create(self, item: Restaurant) -> None:
        self.repository.create_one(item)

    def update(self, name: str, item: Restaurant) -> None:
        self.repository.update_one(name, item)

    def delete(self, name: str) -> None:
        self.repository.delete_one(name)

    def save_batch(self, request: SaveRequest) -> RestaurantData:
        return self.repository.save_batch(request)

    def recommend(self) -> Restaurant | None:
        """Pick one restaurant uniformly at random.

        Returns:
            A restaurant, or None if the list is empty
        """
        restaurants = self.repository.load_all().restaurants or []
        if not restaurants:
            logger.info("No restaurants to recommend")
            return None
        choice = self._random.choice(restaurants)
        logger.debug(f"Recommending: {choice.name}")
        return choice

from typing import Optional

from sqlalchemy.orm import Session

from db.repositories import RestaurantRepository
from env import DEFAULT_PAGE_SIZE
from interfaces.restaurantModels import RestaurantCreate
from logger_manager import log_info
from utils.exceptions import ConflictError, NotFoundError


class RestaurantService:
    def __init__(self, db: Session):
        self.restaurants = RestaurantRepository(db)

    def list_page(self, search: Optional[str], page: int):
        return self.restaurants.search_page(search, page, DEFAULT_PAGE_SIZE)

    def get(self, restaurant_id: int):
        restaurant = self.restaurants.get_by_id(restaurant_id)
        if restaurant is None:
            raise NotFoundError("Restaurant does not exist")
        return restaurant

    def create(self, restaurant: RestaurantCreate):
        log_info(f"Creating restaurant: {restaurant.name}")
        if self.restaurants.get_by_email(restaurant.email):
            raise ConflictError("Restaurant already exists")
        return self.restaurants.create(restaurant.name, restaurant.email, restaurant.phone)

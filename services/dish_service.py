from typing import Optional

from sqlalchemy.orm import Session

from db.repositories import AllergyRepository, DishRepository, IngredientRepository, RestaurantRepository
from env import DISH_PAGE_SIZE
from interfaces.dishModels import DishCreate
from logger_manager import log_info
from services.tag_service import resolve_ids
from utils.exceptions import ConflictError, NotFoundError


class DishService:
    def __init__(self, db: Session):
        self.db = db
        self.dishes = DishRepository(db)

    def list_page(self, search: Optional[str], page: int):
        return self.dishes.find_page([], search, page, DISH_PAGE_SIZE)

    def get(self, dish_id: int):
        dish = self.dishes.get_by_id(dish_id)
        if dish is None:
            raise NotFoundError("Dish does not exist")
        return dish

    def _resolve_links(self, dish: DishCreate):
        if RestaurantRepository(self.db).get_by_id(dish.restaurant_id) is None:
            raise NotFoundError("Restaurant does not exist")
        allergies = resolve_ids(AllergyRepository(self.db), dish.allergy_ids, "Allergy")
        ingredients = resolve_ids(IngredientRepository(self.db), dish.ingredient_ids, "Ingredient")
        return allergies, ingredients

    def create(self, dish: DishCreate):
        log_info(f"Creating dish: {dish.name}")
        if self.dishes.get_by_name(dish.name):
            raise ConflictError("Dish name already exists")
        allergies, ingredients = self._resolve_links(dish)
        return self.dishes.create_dish(
            dish.name, dish.description, dish.price, dish.image,
            dish.restaurant_id, allergies, ingredients,
        )

    def update(self, dish_id: int, dish: DishCreate):
        db_dish = self.get(dish_id)
        existing = self.dishes.get_by_name(dish.name)
        if existing is not None and existing.id != db_dish.id:
            raise ConflictError("Dish name already exists")
        allergies, ingredients = self._resolve_links(dish)
        return self.dishes.update_dish(
            db_dish, dish.name, dish.description, dish.price, dish.image,
            dish.restaurant_id, allergies, ingredients,
        )

    def delete(self, dish_id: int):
        log_info(f"Deleting dish {dish_id}")
        self.dishes.delete(self.get(dish_id))

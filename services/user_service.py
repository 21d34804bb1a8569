from typing import List, Optional

from sqlalchemy.orm import Session

from db.models import UserRole
from db.repositories import AllergyRepository, IngredientRepository, UserRepository
from env import DEFAULT_PAGE_SIZE
from logger_manager import log_info
from services.tag_service import resolve_ids
from utils.exceptions import NotFoundError


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)

    def list_page(self, search: Optional[str], page: int):
        return self.users.search_page(search, page, DEFAULT_PAGE_SIZE)

    def get(self, user_id: int):
        user = self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User does not exist")
        return user

    def delete(self, user_id: int):
        log_info(f"Deleting user {user_id}")
        self.users.delete(self.get(user_id))

    def set_allergies(self, user_id: int, allergy_ids: List[int]):
        user = self.get(user_id)
        allergies = resolve_ids(AllergyRepository(self.db), allergy_ids, "Allergy")
        return self.users.set_allergies(user, allergies)

    def set_ingredients(self, user_id: int, ingredient_ids: List[int]):
        user = self.get(user_id)
        ingredients = resolve_ids(IngredientRepository(self.db), ingredient_ids, "Ingredient")
        return self.users.set_ingredients(user, ingredients)

    def set_role(self, user_id: int, role: UserRole):
        log_info(f"Setting role of user {user_id} to {role.value}")
        return self.users.set_role(self.get(user_id), role)

    def get_ingredients(self, user_id: int):
        return list(self.get(user_id).ingredients)

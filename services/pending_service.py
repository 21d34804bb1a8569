from typing import Optional

from sqlalchemy.orm import Session

from db.models import User
from db.repositories import IngredientRepository, PendingIngredientRepository
from env import DEFAULT_PAGE_SIZE
from logger_manager import log_info
from utils.exceptions import ConflictError, NotFoundError


class PendingIngredientService:
    def __init__(self, db: Session):
        self.db = db
        self.pending = PendingIngredientRepository(db)
        self.ingredients = IngredientRepository(db)

    def propose(self, name: str, user: User):
        log_info(f"User {user.id} proposed ingredient: {name}")
        if self.ingredients.get_by_name(name):
            raise ConflictError("Ingredient already exists")
        if self.pending.get_by_name(name):
            raise ConflictError("Ingredient is awaiting admin approval")
        return self.pending.create(name, user.id)

    def list_page(self, page: int):
        return self.pending.get_page(page, DEFAULT_PAGE_SIZE)

    def count(self) -> int:
        return self.pending.count()

    def get(self, pending_id: int):
        pending = self.pending.get_by_id(pending_id)
        if pending is None:
            raise NotFoundError("Ingredient does not exist")
        return pending

    def reject(self, pending_id: int):
        log_info(f"Rejecting pending ingredient {pending_id}")
        self.pending.delete(self.get(pending_id))

    def approve(self, pending_id: int, name: Optional[str] = None):
        pending = self.get(pending_id)
        name = name or pending.name
        if self.ingredients.get_by_name(name):
            raise ConflictError("Ingredient already exists")
        log_info(f"Approving pending ingredient {pending_id} as {name}")
        return self.pending.approve(pending, name)

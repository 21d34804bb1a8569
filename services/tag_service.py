from typing import List, Optional

from sqlalchemy.orm import Session

from db.repositories import AllergyRepository, IngredientRepository, NamedTagRepository
from env import DEFAULT_PAGE_SIZE
from logger_manager import log_info
from utils.exceptions import ConflictError, NotFoundError


def resolve_ids(repository: NamedTagRepository, ids: List[int], label: str):
    """Load every id in ``ids`` or fail if any of them is unknown."""
    entities = repository.get_by_ids(ids)
    if len(entities) != len(set(ids)):
        raise NotFoundError(f"{label} does not exist")
    return entities


class NamedTagService:
    """CRUD rules shared by allergies and ingredients."""

    repository_class = None
    label = None

    def __init__(self, db: Session):
        self.db = db
        self.repository = self.repository_class(db)

    def list_all(self):
        return self.repository.get_all()

    def list_page(self, search: Optional[str], page: int):
        return self.repository.search_page(search, page, DEFAULT_PAGE_SIZE)

    def get(self, entity_id: int):
        entity = self.repository.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(f"{self.label} does not exist")
        return entity

    def create(self, name: str):
        log_info(f"Creating {self.label}: {name}")
        if self.repository.get_by_name(name):
            raise ConflictError(f"{self.label} already exists")
        return self.repository.create(name)

    def update(self, entity_id: int, name: str):
        entity = self.get(entity_id)
        existing = self.repository.get_by_name(name)
        if existing is not None and existing.id != entity.id:
            raise ConflictError(f"{self.label} already exists")
        return self.repository.rename(entity, name)

    def delete(self, entity_id: int):
        log_info(f"Deleting {self.label}: {entity_id}")
        entity = self.get(entity_id)
        self.repository.delete_with_links(entity)


class AllergyService(NamedTagService):
    repository_class = AllergyRepository
    label = "Allergy"


class IngredientService(NamedTagService):
    repository_class = IngredientRepository
    label = "Ingredient"

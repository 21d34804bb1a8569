from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, selectinload

from logger_manager import log_debug
from . import models


LIKE_ESCAPE = "\\"


def contains_pattern(search: Optional[str]) -> str:
    """LIKE pattern for a literal substring match; ``%``, ``_`` and the escape char are escaped."""
    text = (search or "").strip()
    for char in (LIKE_ESCAPE, "%", "_"):
        text = text.replace(char, LIKE_ESCAPE + char)
    return f"%{text}%"


def icontains(column, search: Optional[str]):
    return column.ilike(contains_pattern(search), escape=LIKE_ESCAPE)


class BaseRepository:
    model = None

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, entity_id: int):
        return self.db.get(self.model, entity_id)

    def get_all(self):
        return self.db.query(self.model).order_by(self.model.id).all()

    def get_by_ids(self, ids: List[int]):
        if not ids:
            return []
        return self.db.query(self.model).filter(self.model.id.in_(ids)).order_by(self.model.id).all()

    def count(self) -> int:
        return self.db.query(func.count(self.model.id)).scalar()

    def add(self, entity):
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def save(self, entity):
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity):
        self.db.delete(entity)
        self.db.commit()

    def paginate(self, query, page: int, page_size: int):
        return query.order_by(self.model.id).offset((page - 1) * page_size).limit(page_size).all()


class NamedTagRepository(BaseRepository):
    """Allergies and ingredients: unique names linked to users and dishes."""

    # Name of the collection on User and Dish that holds this tag
    link_attribute = None

    def get_by_name(self, name: str):
        return self.db.query(self.model).filter(self.model.name == name).first()

    def search_page(self, search: Optional[str], page: int, page_size: int):
        query = self.db.query(self.model).filter(icontains(self.model.name, search))
        return self.paginate(query, page, page_size)

    def create(self, name: str):
        return self.add(self.model(name=name))

    def rename(self, entity, name: str):
        entity.name = name
        return self.save(entity)

    def delete_with_links(self, entity):
        # Drop every user and dish reference before the row itself
        for user in list(entity.users):
            getattr(user, self.link_attribute).remove(entity)
        for dish in list(entity.dishes):
            getattr(dish, self.link_attribute).remove(entity)
        self.db.flush()
        log_debug(f"Removed {self.model.__name__} {entity.id} from users and dishes")
        self.delete(entity)


class AllergyRepository(NamedTagRepository):
    model = models.Allergy
    link_attribute = "allergies"


class IngredientRepository(NamedTagRepository):
    model = models.Ingredient
    link_attribute = "ingredients"


class UserRepository(BaseRepository):
    model = models.User

    def get_by_email(self, email: str):
        return self.db.query(models.User).filter(func.lower(models.User.email) == email.lower()).first()

    def search_page(self, search: Optional[str], page: int, page_size: int):
        query = self.db.query(models.User).options(
            selectinload(models.User.allergies),
            selectinload(models.User.ingredients),
        ).filter(
            or_(
                icontains(models.User.full_name, search),
                icontains(models.User.email, search),
            )
        )
        return self.paginate(query, page, page_size)

    def create_user(self, full_name: str, email: str, hashed_password: str, allergies: List[models.Allergy]):
        db_user = models.User(
            full_name=full_name,
            email=email.lower(),
            hashed_password=hashed_password,
            allergies=allergies,
        )
        return self.add(db_user)

    def set_allergies(self, user: models.User, allergies: List[models.Allergy]):
        user.allergies = allergies
        return self.save(user)

    def set_ingredients(self, user: models.User, ingredients: List[models.Ingredient]):
        user.ingredients = ingredients
        return self.save(user)

    def add_ingredient(self, user: models.User, ingredient: models.Ingredient):
        if ingredient not in user.ingredients:
            user.ingredients.append(ingredient)
        return self.save(user)

    def set_role(self, user: models.User, role: models.UserRole):
        user.role = role
        return self.save(user)

    def set_password(self, user: models.User, hashed_password: str):
        user.hashed_password = hashed_password
        return self.save(user)


class RestaurantRepository(BaseRepository):
    model = models.Restaurant

    def get_by_email(self, email: str):
        return self.db.query(models.Restaurant).filter(func.lower(models.Restaurant.email) == email.lower()).first()

    def search_page(self, search: Optional[str], page: int, page_size: int):
        query = self.db.query(models.Restaurant).filter(
            or_(
                icontains(models.Restaurant.name, search),
                icontains(models.Restaurant.email, search),
            )
        )
        return self.paginate(query, page, page_size)

    def create(self, name: str, email: str, phone: str):
        return self.add(models.Restaurant(name=name, email=email.lower(), phone=phone))


class DishRepository(BaseRepository):
    model = models.Dish

    def get_by_name(self, name: str):
        return self.db.query(models.Dish).filter(models.Dish.name == name).first()

    def search_clause(self, search: Optional[str]):
        return or_(
            icontains(models.Dish.name, search),
            icontains(models.Dish.description, search),
            models.Dish.restaurant.has(icontains(models.Restaurant.name, search)),
        )

    def find_page(self, criteria: list, search: Optional[str], page: int, page_size: int):
        """Dishes matching every criterion and the free-text search, one page at a time."""
        query = self.db.query(models.Dish).options(
            selectinload(models.Dish.allergies),
            selectinload(models.Dish.ingredients),
            selectinload(models.Dish.restaurant),
        ).filter(*criteria, self.search_clause(search))
        return self.paginate(query, page, page_size)

    def create_dish(self, name, description, price, image, restaurant_id, allergies, ingredients):
        db_dish = models.Dish(
            name=name,
            description=description,
            price=price,
            image=image,
            restaurant_id=restaurant_id,
            allergies=allergies,
            ingredients=ingredients,
        )
        return self.add(db_dish)

    def update_dish(self, dish, name, description, price, image, restaurant_id, allergies, ingredients):
        dish.name = name
        dish.description = description
        dish.price = price
        dish.image = image
        dish.restaurant_id = restaurant_id
        # Replace the tag sets wholesale
        dish.allergies = allergies
        dish.ingredients = ingredients
        return self.save(dish)


class PendingIngredientRepository(BaseRepository):
    model = models.PendingIngredient

    def get_by_name(self, name: str):
        return self.db.query(models.PendingIngredient).filter(models.PendingIngredient.name == name).first()

    def get_page(self, page: int, page_size: int):
        return self.paginate(self.db.query(models.PendingIngredient), page, page_size)

    def create(self, name: str, user_id: Optional[int]):
        return self.add(models.PendingIngredient(name=name, user_id=user_id))

    def approve(self, pending: models.PendingIngredient, name: str):
        """Turn ``pending`` into an ingredient owned by the proposing user, in one commit."""
        ingredient = models.Ingredient(name=name)
        self.db.add(ingredient)
        if pending.user is not None:
            pending.user.ingredients.append(ingredient)
        self.db.delete(pending)
        self.db.commit()
        self.db.refresh(ingredient)
        return ingredient

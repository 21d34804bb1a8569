"""Personalized dish filtering.

A user carries a set of allergies A and a set of disliked ingredients I.

* With A non-empty, a dish qualifies when it is tagged with *every* allergy
  in A and contains none of the ingredients in I.
* With A empty, a dish qualifies when one of its allergy tags is linked back
  to the user and it contains none of the ingredients in I. Since the user has
  no allergies this matches nothing.

The first rule selects dishes flagged with the user's allergens rather than
dishes free of them. It is kept as-is pending product clarification.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from db.models import Allergy, Dish, Ingredient, User
from db.repositories import DishRepository
from env import DISH_PAGE_SIZE
from logger_manager import log_debug, log_info


def build_recommendation_criteria(user: User) -> List:
    """SQL criteria selecting the dishes ``user`` should be shown."""
    no_disliked_ingredients = ~Dish.ingredients.any(Ingredient.users.any(User.id == user.id))

    allergy_ids = [allergy.id for allergy in user.allergies]
    if allergy_ids:
        log_debug(f"Filtering dishes for user {user.id} by allergies {allergy_ids}")
        return [Dish.allergies.any(Allergy.id == allergy_id) for allergy_id in allergy_ids] + [no_disliked_ingredients]

    return [
        Dish.allergies.any(Allergy.users.any(User.id == user.id)),
        no_disliked_ingredients,
    ]


def recommend_dishes(db: Session, user: User, search: Optional[str] = None, page: int = 1,
                     page_size: int = DISH_PAGE_SIZE) -> List[Dish]:
    log_info(f"Recommending dishes for user {user.id}, page {page}")
    criteria = build_recommendation_criteria(user)
    return DishRepository(db).find_page(criteria, search, page, page_size)

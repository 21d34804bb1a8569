from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from db.database import get_db
from db.models import User
from interfaces.commonModels import MessageResponse
from interfaces.dishModels import DishCreate, DishResponse
from logger_manager import log_info
from services.auth_service import get_current_user, require_admin
from services.dish_service import DishService
from services.recommendation_service import recommend_dishes
from utils.pagination import parse_page

router = APIRouter()


@router.get("/user", response_model=List[DishResponse])
def get_user_dishes(page: Optional[str] = None, search: Optional[str] = None,
                    db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    """Dishes filtered by the caller's allergies and disliked ingredients."""
    log_info(f"Get user dishes endpoint called by {current_user.id}")
    return recommend_dishes(db, current_user, search, parse_page(page))


@router.get("/page", response_model=List[DishResponse])
def get_dishes_page(page: Optional[str] = None, search: Optional[str] = None,
                    db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    log_info("Get dishes page endpoint called")
    return DishService(db).list_page(search, parse_page(page))


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_dish(dish: DishCreate, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    log_info("Create dish endpoint called")
    DishService(db).create(dish)
    return {"message": "Dish added successfully"}


@router.get("/{dish_id}", response_model=DishResponse)
def get_dish(dish_id: int, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    return DishService(db).get(dish_id)


@router.put("/{dish_id}", response_model=MessageResponse)
def update_dish(dish_id: int, dish: DishCreate, db: Session = Depends(get_db),
                admin: User = Depends(require_admin)):
    log_info(f"Update dish endpoint called for {dish_id}")
    DishService(db).update(dish_id, dish)
    return {"message": "Dish updated successfully"}


@router.delete("/{dish_id}", response_model=MessageResponse)
def delete_dish(dish_id: int, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    log_info(f"Delete dish endpoint called for {dish_id}")
    DishService(db).delete(dish_id)
    return {"message": "Dish deleted successfully"}

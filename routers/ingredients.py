from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from db.database import get_db
from db.models import User
from interfaces.commonModels import MessageResponse
from interfaces.ingredientModels import IngredientCreate, IngredientResponse
from logger_manager import log_info
from services.auth_service import get_current_user, require_admin
from services.tag_service import IngredientService
from utils.pagination import parse_page

router = APIRouter()


@router.get("", response_model=List[IngredientResponse])
def get_all_ingredients(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    log_info("Get ingredients endpoint called")
    return IngredientService(db).list_all()


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_ingredient(ingredient: IngredientCreate, db: Session = Depends(get_db),
                      admin: User = Depends(require_admin)):
    log_info("Create ingredient endpoint called")
    IngredientService(db).create(ingredient.name)
    return {"message": "Ingredient added successfully"}


@router.get("/page", response_model=List[IngredientResponse])
def get_ingredients_page(page: Optional[str] = None, search: Optional[str] = None,
                         db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    return IngredientService(db).list_page(search, parse_page(page))


@router.get("/{ingredient_id}", response_model=IngredientResponse)
def get_ingredient(ingredient_id: int, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    return IngredientService(db).get(ingredient_id)


@router.put("/{ingredient_id}", response_model=MessageResponse)
def update_ingredient(ingredient_id: int, ingredient: IngredientCreate, db: Session = Depends(get_db),
                      admin: User = Depends(require_admin)):
    log_info(f"Update ingredient endpoint called for {ingredient_id}")
    IngredientService(db).update(ingredient_id, ingredient.name)
    return {"message": "Ingredient updated successfully"}


@router.delete("/{ingredient_id}", response_model=MessageResponse)
def delete_ingredient(ingredient_id: int, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    log_info(f"Delete ingredient endpoint called for {ingredient_id}")
    IngredientService(db).delete(ingredient_id)
    return {"message": "Ingredient deleted successfully"}

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from db.database import get_db
from db.models import User
from interfaces.authModels import UserResponse
from interfaces.commonModels import MessageResponse
from interfaces.ingredientModels import IngredientResponse
from interfaces.userModels import IdsUpdate, RoleUpdate
from logger_manager import log_info
from services.auth_service import ensure_self_or_admin, get_current_user, require_admin
from services.user_service import UserService
from utils.pagination import parse_page

router = APIRouter()


@router.get("", response_model=List[UserResponse])
def get_all_users(page: Optional[str] = None, search: Optional[str] = None,
                  db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    log_info("Get all users endpoint called")
    return UserService(db).list_page(search, parse_page(page))


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(user_id: int, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    log_info(f"Delete user endpoint called for {user_id}")
    UserService(db).delete(user_id)
    return {"message": "User deleted successfully"}


@router.put("/{user_id}/like", response_model=UserResponse)
def update_user_ingredients(user_id: int, update: IdsUpdate, db: Session = Depends(get_db),
                            current_user: User = Depends(get_current_user)):
    log_info(f"Update ingredients endpoint called for {user_id}")
    ensure_self_or_admin(current_user, user_id)
    return UserService(db).set_ingredients(user_id, update.ids)


@router.put("/{user_id}/allergy", response_model=UserResponse)
def update_user_allergies(user_id: int, update: IdsUpdate, db: Session = Depends(get_db),
                          current_user: User = Depends(get_current_user)):
    log_info(f"Update allergies endpoint called for {user_id}")
    ensure_self_or_admin(current_user, user_id)
    return UserService(db).set_allergies(user_id, update.ids)


@router.put("/{user_id}/role", response_model=UserResponse)
def update_user_role(user_id: int, update: RoleUpdate, db: Session = Depends(get_db),
                     admin: User = Depends(require_admin)):
    log_info(f"Update role endpoint called for {user_id}")
    return UserService(db).set_role(user_id, update.role)


@router.get("/{user_id}/ingr", response_model=List[IngredientResponse])
def get_user_ingredients(user_id: int, db: Session = Depends(get_db),
                         current_user: User = Depends(get_current_user)):
    ensure_self_or_admin(current_user, user_id)
    return UserService(db).get_ingredients(user_id)

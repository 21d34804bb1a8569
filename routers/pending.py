from typing import List, Optional

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from db.database import get_db
from db.models import User
from interfaces.commonModels import CountResponse, MessageResponse
from interfaces.ingredientModels import IngredientCreate, PendingApprove, PendingResponse
from logger_manager import log_info
from services.auth_service import get_current_user, require_admin
from services.pending_service import PendingIngredientService
from utils.pagination import parse_page

router = APIRouter()


@router.get("/len", response_model=CountResponse)
def get_pending_count(db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    return {"len": PendingIngredientService(db).count()}


@router.get("", response_model=List[PendingResponse])
def get_all_pending(page: Optional[str] = None, db: Session = Depends(get_db),
                    admin: User = Depends(require_admin)):
    log_info("Get pending ingredients endpoint called")
    return PendingIngredientService(db).list_page(parse_page(page))


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_pending(ingredient: IngredientCreate, db: Session = Depends(get_db),
                   current_user: User = Depends(get_current_user)):
    log_info("Create pending ingredient endpoint called")
    PendingIngredientService(db).propose(ingredient.name, current_user)
    return {"message": "Ingredient added and awaiting approval"}


@router.delete("/{pending_id}", response_model=MessageResponse)
def reject_pending(pending_id: int, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    log_info(f"Reject pending ingredient endpoint called for {pending_id}")
    PendingIngredientService(db).reject(pending_id)
    return {"message": "Ingredient deleted successfully"}


@router.post("/{pending_id}", response_model=MessageResponse)
def approve_pending(pending_id: int, approval: Optional[PendingApprove] = Body(default=None),
                    db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    log_info(f"Approve pending ingredient endpoint called for {pending_id}")
    name = approval.name if approval else None
    PendingIngredientService(db).approve(pending_id, name)
    return {"message": "Ingredient added successfully"}

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from db.database import get_db
from db.models import User
from interfaces.allergyModels import AllergyCreate, AllergyResponse
from interfaces.commonModels import MessageResponse
from logger_manager import log_info
from services.auth_service import require_admin
from services.tag_service import AllergyService
from utils.pagination import parse_page

router = APIRouter()


@router.get("", response_model=List[AllergyResponse])
def get_allergies(db: Session = Depends(get_db)):
    log_info("Get allergies endpoint called")
    return AllergyService(db).list_all()


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_allergy(allergy: AllergyCreate, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    log_info("Create allergy endpoint called")
    AllergyService(db).create(allergy.name)
    return {"message": "Allergy added successfully"}


@router.get("/page", response_model=List[AllergyResponse])
def get_allergies_page(page: Optional[str] = None, search: Optional[str] = None,
                       db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    return AllergyService(db).list_page(search, parse_page(page))


@router.get("/{allergy_id}", response_model=AllergyResponse)
def get_allergy(allergy_id: int, db: Session = Depends(get_db)):
    return AllergyService(db).get(allergy_id)


@router.put("/{allergy_id}", response_model=MessageResponse)
def update_allergy(allergy_id: int, allergy: AllergyCreate, db: Session = Depends(get_db),
                   admin: User = Depends(require_admin)):
    log_info(f"Update allergy endpoint called for {allergy_id}")
    AllergyService(db).update(allergy_id, allergy.name)
    return {"message": "Allergy updated successfully"}


@router.delete("/{allergy_id}", response_model=MessageResponse)
def delete_allergy(allergy_id: int, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    log_info(f"Delete allergy endpoint called for {allergy_id}")
    AllergyService(db).delete(allergy_id)
    return {"message": "Allergy deleted successfully"}

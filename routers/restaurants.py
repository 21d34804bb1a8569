from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from db.database import get_db
from db.models import User
from interfaces.commonModels import MessageResponse
from interfaces.restaurantModels import RestaurantCreate, RestaurantResponse
from logger_manager import log_info
from services.auth_service import require_admin
from services.restaurant_service import RestaurantService
from utils.pagination import parse_page

router = APIRouter()


@router.get("", response_model=List[RestaurantResponse])
def get_all_restaurants(page: Optional[str] = None, search: Optional[str] = None,
                        db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    log_info("Get restaurants endpoint called")
    return RestaurantService(db).list_page(search, parse_page(page))


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_restaurant(restaurant: RestaurantCreate, db: Session = Depends(get_db),
                      admin: User = Depends(require_admin)):
    log_info("Create restaurant endpoint called")
    RestaurantService(db).create(restaurant)
    return {"message": "Restaurant added successfully"}


@router.get("/{restaurant_id}", response_model=RestaurantResponse)
def get_restaurant(restaurant_id: int, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    return RestaurantService(db).get(restaurant_id)

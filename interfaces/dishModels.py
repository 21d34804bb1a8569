from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from interfaces.commonModels import TagResponse
from interfaces.validators import fail


class DishCreate(BaseModel):
    name: str
    description: str
    price: float
    image: Optional[str] = None
    restaurant_id: int = Field(alias="restaurantId")
    allergy_ids: List[int] = Field(default_factory=list, alias="allergyIds")
    ingredient_ids: List[int] = Field(default_factory=list, alias="ingredientIds")

    @field_validator("name")
    @classmethod
    def check_name(cls, value):
        value = value.strip()
        if len(value) < 2:
            fail("Dish name must contain at least 2 characters")
        if len(value) > 50:
            fail("Dish name can contain up to 50 characters")
        return value

    @field_validator("description")
    @classmethod
    def check_description(cls, value):
        value = value.strip()
        if len(value) < 2:
            fail("Description must contain at least 2 characters")
        if len(value) > 500:
            fail("Description can contain up to 500 characters")
        return value

    @field_validator("price")
    @classmethod
    def check_price(cls, value):
        if value <= 0:
            fail("Price must be a positive number")
        return value

    @field_validator("image")
    @classmethod
    def strip_image(cls, value):
        return value.strip() if value else value

    class Config:
        populate_by_name = True


class RestaurantSummary(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class DishResponse(BaseModel):
    id: int
    name: str
    description: str
    price: float
    image: Optional[str] = None
    ingredients: List[TagResponse] = []
    allergies: List[TagResponse] = []
    restaurant: RestaurantSummary

    class Config:
        from_attributes = True

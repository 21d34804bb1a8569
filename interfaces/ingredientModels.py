from typing import Optional

from pydantic import BaseModel, Field, field_validator

from interfaces.validators import validate_tag_name


class IngredientCreate(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def check_name(cls, value):
        return validate_tag_name(value, "Ingredient")


class IngredientResponse(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class PendingApprove(BaseModel):
    # Lets the admin fix the spelling while approving
    name: Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, value):
        if value is None:
            return value
        return validate_tag_name(value, "Ingredient")


class PendingResponse(BaseModel):
    id: int
    name: str
    user_id: Optional[int] = Field(default=None, alias="userId")

    class Config:
        from_attributes = True
        populate_by_name = True

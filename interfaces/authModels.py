from typing import List

from pydantic import BaseModel, Field, field_validator

from db.models import UserRole
from interfaces.commonModels import TagResponse
from interfaces.validators import validate_email, validate_password, validate_person_name


class EmailRequest(BaseModel):
    email: str

    @field_validator("email")
    @classmethod
    def check_email(cls, value):
        return validate_email(value)


class UserLogin(EmailRequest):
    password: str

    @field_validator("password")
    @classmethod
    def check_password(cls, value):
        return validate_password(value)


class PasswordReset(UserLogin):
    pass


class UserCreate(UserLogin):
    full_name: str = Field(alias="fullName")
    allergy_ids: List[int] = Field(default_factory=list, alias="allergyIds")

    @field_validator("full_name")
    @classmethod
    def check_full_name(cls, value):
        return validate_person_name(value)

    class Config:
        populate_by_name = True


class UserResponse(BaseModel):
    id: int
    full_name: str = Field(alias="fullName")
    email: str
    role: UserRole
    allergies: List[TagResponse] = []
    ingredients: List[TagResponse] = []

    class Config:
        from_attributes = True  # This enables ORM mode
        populate_by_name = True


class AuthResponse(BaseModel):
    user: UserResponse
    token: str


class TokenData(BaseModel):
    id: int | None = None
    full_name: str | None = None

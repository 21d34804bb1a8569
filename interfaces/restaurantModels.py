from pydantic import BaseModel, field_validator

from interfaces.validators import validate_email, validate_person_name, validate_phone


class RestaurantCreate(BaseModel):
    name: str
    email: str
    phone: str

    @field_validator("name")
    @classmethod
    def check_name(cls, value):
        return validate_person_name(value)

    @field_validator("email")
    @classmethod
    def check_email(cls, value):
        return validate_email(value)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, value):
        return validate_phone(value)


class RestaurantResponse(BaseModel):
    id: int
    name: str
    email: str
    phone: str

    class Config:
        from_attributes = True

from pydantic import BaseModel, field_validator

from interfaces.validators import validate_tag_name


class AllergyCreate(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def check_name(cls, value):
        return validate_tag_name(value, "Allergy")


class AllergyResponse(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True

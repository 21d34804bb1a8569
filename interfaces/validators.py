import re

from pydantic_core import PydanticCustomError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
# English or Hebrew letters and spaces
NAME_PATTERN = re.compile(r"^[A-Za-z\u0590-\u05FF ]+$")
PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[\W_]).{8,}$")
PHONE_PATTERN = re.compile(r"^[0-9].{9,10}$")

# Messages for fields absent from the request body, keyed by the wire name
REQUIRED_MESSAGES = {
    "email": "Email is required",
    "password": "Password is required",
    "fullName": "Full name is required",
    "name": "Name is required",
    "phone": "Phone is required",
    "price": "Price is required",
    "description": "Description is required",
    "restaurantId": "Restaurant is required",
    "role": "Role is required",
    "ids": "Ids are required",
}


def fail(message: str):
    raise PydanticCustomError("value_error", message)


def validate_email(value: str) -> str:
    value = value.strip()
    if not EMAIL_PATTERN.match(value):
        fail("Email address is invalid")
    return value.lower()


def validate_person_name(value: str) -> str:
    value = value.strip()
    if len(value) < 2:
        fail("Name must contain at least 2 characters")
    if len(value) > 50:
        fail("Name can contain up to 50 characters")
    if not NAME_PATTERN.match(value):
        fail("Name can only contain English or Hebrew letters and spaces")
    return value


def validate_password(value: str) -> str:
    value = value.strip()
    if len(value) < 8:
        fail("Password must contain at least 8 characters")
    if len(value) > 50:
        fail("Password can contain up to 50 characters")
    if not PASSWORD_PATTERN.match(value):
        fail("Password must contain an uppercase letter, a lowercase letter, a digit and a special character")
    return value


def validate_tag_name(value: str, label: str) -> str:
    """Shared rule for allergy and ingredient names."""
    value = value.strip()
    if len(value) < 2:
        fail(f"{label} name must contain at least 2 characters")
    if len(value) > 25:
        fail(f"{label} name can contain up to 25 characters")
    if not NAME_PATTERN.match(value):
        fail(f"{label} name can only contain letters and spaces")
    return value


def validate_phone(value: str) -> str:
    value = value.strip()
    if not PHONE_PATTERN.match(value):
        fail("Phone number is invalid")
    return value

from datetime import datetime, timedelta, timezone

from fastapi import Depends, Request
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from db.database import get_db
from db.models import User, UserRole
from db.repositories import AllergyRepository, UserRepository
from env import ACCESS_TOKEN_EXPIRE_DAYS, ALGORITHM, SECRET_KEY
from interfaces.authModels import PasswordReset, TokenData, UserCreate, UserLogin
from logger_manager import log_error, log_info
from utils.exceptions import AuthenticationError, ConflictError, NotFoundError, PermissionDeniedError

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password, hashed_password):
    log_info("Verifying password")
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    log_info("Hashing password")
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: timedelta | None = None):
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(days=ACCESS_TOKEN_EXPIRE_DAYS)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt


def issue_token(user: User) -> str:
    return create_access_token({"id": user.id, "fullName": user.full_name})


def decode_access_token(token: str) -> TokenData:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        log_error(f"JWT verification failed: {str(e)}", e)
        raise AuthenticationError("Not authorized, please log in")

    user_id = payload.get("id")
    if user_id is None:
        log_error("Token missing 'id' claim")
        raise AuthenticationError("Not authorized, please log in")
    return TokenData(id=user_id, full_name=payload.get("fullName"))


def get_token_from_request(request: Request):
    """Extract the bearer token from the Authorization header."""
    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.startswith("Bearer "):
        return auth_header[len("Bearer "):].strip() or None
    return None


async def get_current_user(request: Request, db: Session = Depends(get_db)) -> User:
    log_info("Getting current user")
    token = get_token_from_request(request)
    if not token:
        log_error("No authentication token found")
        raise AuthenticationError("Not authorized, please log in")

    token_data = decode_access_token(token)
    user = UserRepository(db).get_by_id(token_data.id)
    if user is None:
        log_error(f"User not found: {token_data.id}")
        raise AuthenticationError("User not found")
    return user


async def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != UserRole.ADMIN:
        log_error(f"User {current_user.id} is not an admin")
        raise PermissionDeniedError("Admin permission required")
    return current_user


def ensure_self_or_admin(current_user: User, user_id: int):
    if current_user.role != UserRole.ADMIN and current_user.id != user_id:
        raise PermissionDeniedError("You can only change your own account")


def register_user(db: Session, user_create: UserCreate) -> User:
    log_info(f"Registering user: {user_create.email}")
    users = UserRepository(db)
    if users.get_by_email(user_create.email):
        raise ConflictError("User already exists")

    allergies = AllergyRepository(db).get_by_ids(user_create.allergy_ids)
    if len(allergies) != len(set(user_create.allergy_ids)):
        raise NotFoundError("Allergy does not exist")

    hashed_password = get_password_hash(user_create.password)
    return users.create_user(user_create.full_name, user_create.email, hashed_password, allergies)


def authenticate_user(db: Session, credentials: UserLogin) -> User:
    user = UserRepository(db).get_by_email(credentials.email)
    if not user:
        raise NotFoundError("User does not exist")
    if not verify_password(credentials.password, user.hashed_password):
        raise AuthenticationError("Wrong password")
    return user


def reset_password(db: Session, reset: PasswordReset) -> User:
    users = UserRepository(db)
    user = users.get_by_email(reset.email)
    if not user:
        raise NotFoundError("User does not exist")
    return users.set_password(user, get_password_hash(reset.password))

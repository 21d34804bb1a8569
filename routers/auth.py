from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from db.database import get_db
from db.models import User
from db.repositories import UserRepository
from interfaces.authModels import AuthResponse, EmailRequest, PasswordReset, UserCreate, UserLogin, UserResponse
from interfaces.commonModels import CodeResponse, MessageResponse
from logger_manager import log_info
from services.auth_service import authenticate_user, get_current_user, issue_token, register_user, reset_password
from services.notification_service import generate_verification_code, send_verification_code
from utils.exceptions import ConflictError, NotFoundError

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user: UserCreate, db: Session = Depends(get_db)):
    log_info("Register endpoint called")
    db_user = register_user(db, user)
    log_info("User registered successfully")
    return {"user": db_user, "token": issue_token(db_user)}


@router.post("/login", response_model=AuthResponse)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    log_info("Login endpoint called")
    user = authenticate_user(db, credentials)
    log_info("User logged in successfully")
    return {"user": user, "token": issue_token(user)}


@router.post("/verifyCode", response_model=CodeResponse)
def verify_code(request: EmailRequest, db: Session = Depends(get_db)):
    """Email a code to an address that is about to register."""
    log_info("Verify code endpoint called")
    if UserRepository(db).get_by_email(request.email):
        raise ConflictError("User already exists")
    code = generate_verification_code()
    send_verification_code(request.email, code)
    return {"code": code}


@router.post("/verifyEmail", response_model=CodeResponse)
def verify_email(request: EmailRequest, db: Session = Depends(get_db)):
    """Email a code to an existing user, e.g. before a password reset."""
    log_info("Verify email endpoint called")
    if not UserRepository(db).get_by_email(request.email):
        raise NotFoundError("User does not exist")
    code = generate_verification_code()
    send_verification_code(request.email, code)
    return {"code": code}


@router.post("/resetPassword", response_model=MessageResponse)
def reset_password_endpoint(request: PasswordReset, db: Session = Depends(get_db)):
    log_info("Reset password endpoint called")
    reset_password(db, request)
    return {"message": "Password changed successfully"}


@router.get("/me", response_model=UserResponse)
def read_users_me(current_user: User = Depends(get_current_user)):
    log_info("Read users/me endpoint called")
    return current_user

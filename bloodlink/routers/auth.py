import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bloodlink.core.database import get_db
from bloodlink.dependencies.auth import get_current_user
from bloodlink.schemas.auth import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse, UserRead
from bloodlink.services.auth_service import AuthService
from bloodlink.utils.errors import InternalError, InvalidCredentialsError, ValidationError
from bloodlink.utils.helpers import get_client_ip

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["authentication"])


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    account_type: Optional[str] = Form(None, alias="accountType"),
    profile_image: Optional[UploadFile] = File(None, alias="profileImage"),
    db: Session = Depends(get_db),
):
    """
    Register a donor or recipient (multipart form)
    - Validate fields
    - Store optional profile image
    - Create user
    """
    try:
        data = RegisterRequest.model_validate({
            "name": name,
            "email": email,
            "password": password,
            "location": location,
            "accountType": account_type,
        })
    except PydanticValidationError as e:
        raise ValidationError.from_error_list(e.errors())

    try:
        return await AuthService.register(db=db, data=data, profile_image=profile_image)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Registration error")
        raise InternalError("Registration failed")


@router.post("/login", response_model=LoginResponse, status_code=200)
async def login(
    request: LoginRequest,
    http_request: Request,
    db: Session = Depends(get_db),
):
    """
    Email/password login
    - Verify credentials
    - Return a signed JWT
    """
    try:
        return AuthService.login(db=db, email=request.email, password=request.password)
    except InvalidCredentialsError:
        logger.info("Failed login for %s from %s", request.email, get_client_ip(http_request))
        raise
    except SQLAlchemyError:
        logger.exception("Login error")
        raise InternalError("Login failed")


@router.get("/me", response_model=UserRead)
async def me(current_user=Depends(get_current_user)):
    """Server-side check of a session token; returns the account it belongs to."""
    return current_user

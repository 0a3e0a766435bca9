from typing import Optional
import logging

from fastapi import UploadFile
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from bloodlink.core.config import settings
from bloodlink.core.security import hash_password, verify_password, create_access_token, decode_token
from bloodlink.models.user import User
from bloodlink.schemas.auth import RegisterRequest
from bloodlink.services import storage_service
from bloodlink.utils.errors import DuplicateEmailError, InvalidCredentialsError, Unauthorized

logger = logging.getLogger(__name__)


class AuthService:

    @staticmethod
    async def register(
        db: Session,
        data: RegisterRequest,
        profile_image: Optional[UploadFile] = None,
    ) -> dict:
        """
        Create a donor or recipient account
        - Reject emails that are already registered
        - Store the optional profile image under a generated name
        - Persist the argon2 hash, never the password
        """
        existing_user = db.query(User).filter(User.email == data.email).first()
        if existing_user:
            raise DuplicateEmailError()

        image_path = None
        if profile_image is not None and profile_image.filename:
            image_path = await storage_service.save_profile_image(profile_image)

        new_user = User(
            name=data.name,
            email=data.email,
            password_hash=hash_password(data.password),
            location=data.location,
            account_type=data.account_type.value,
            profile_image=image_path,
        )

        db.add(new_user)
        try:
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            if image_path:
                storage_service.discard_profile_image(image_path)
            if isinstance(e, IntegrityError):
                # Lost a race against a concurrent registration for the same email
                raise DuplicateEmailError()
            raise
        db.refresh(new_user)

        logger.info("Registered %s account %s", new_user.account_type, new_user.id)
        return {
            "message": "User registered successfully",
            "user_id": new_user.id,
            "profile_image": image_path,
        }

    @staticmethod
    def login(db: Session, email: str, password: str) -> dict:
        """
        Email/password login
        - Verify credentials
        - Issue a signed, expiring access token
        """
        user = db.query(User).filter(User.email == email).first()
        if not user or not verify_password(password, user.password_hash or ""):
            raise InvalidCredentialsError()

        token = create_access_token(
            user_id=user.id,
            email=user.email,
            account_type=user.account_type,
            name=user.name,
        )
        return {
            "message": "Login successful",
            "token": token,
            "token_type": "bearer",
            "expires_in": settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        }

    @staticmethod
    def get_user_from_token(db: Session, token: str) -> User:
        payload = decode_token(token)
        if payload is None:
            raise Unauthorized("Invalid or expired token")

        try:
            user_id = int(payload.get("sub"))
        except (TypeError, ValueError):
            raise Unauthorized("Invalid token payload")

        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            raise Unauthorized("User not found")
        return user

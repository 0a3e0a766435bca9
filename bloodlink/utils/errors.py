"""Custom error definitions for API exceptions.

Each error carries a stable ``code`` that the error handlers put in the
``error`` field of the JSON body, next to the human-readable ``message``.
"""
from typing import Dict, Iterable, Optional

from fastapi import HTTPException
from starlette import status


class APIError(HTTPException):
    code: str = "Error"

    def __init__(self, status_code: int, detail: str, errors: Optional[Dict[str, str]] = None):
        super().__init__(status_code=status_code, detail=detail)
        self.errors = errors


class ValidationError(APIError):
    code = "ValidationError"

    def __init__(self, errors: Dict[str, str], detail: str = "Validation error"):
        super().__init__(status.HTTP_400_BAD_REQUEST, detail, errors=errors)

    @classmethod
    def from_error_list(cls, error_list: Iterable[dict]) -> "ValidationError":
        """Build from pydantic/FastAPI ``errors()`` output, keyed by wire field name."""
        errors: Dict[str, str] = {}
        for err in error_list:
            loc = [part for part in err.get("loc", ()) if part not in ("body", "query", "path", "form")]
            field = ".".join(str(part) for part in loc) or "body"
            errors.setdefault(field, err.get("msg", "Invalid value"))
        return cls(errors)


class DuplicateEmailError(APIError):
    code = "DuplicateEmail"

    def __init__(self, detail: str = "Email already registered"):
        super().__init__(status.HTTP_400_BAD_REQUEST, detail)


class InvalidCredentialsError(APIError):
    code = "InvalidCredentials"

    def __init__(self, detail: str = "Invalid credentials"):
        super().__init__(status.HTTP_400_BAD_REQUEST, detail)


class ProfileAlreadyExistsError(APIError):
    code = "ProfileAlreadyExists"

    def __init__(self, detail: str = "Profile already exists for this user. Use PUT to update."):
        super().__init__(status.HTTP_400_BAD_REQUEST, detail)


class ProfileNotFoundError(APIError):
    code = "ProfileNotFound"

    def __init__(self, detail: str = "Donor profile not found"):
        super().__init__(status.HTTP_404_NOT_FOUND, detail)


class Unauthorized(APIError):
    code = "Unauthorized"

    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(status.HTTP_401_UNAUTHORIZED, detail)


class InternalError(APIError):
    code = "InternalError"

    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, detail)

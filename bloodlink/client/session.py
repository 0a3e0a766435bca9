"""Durable client-side session state.

The store is the only place that reads or writes the session token and the
identity decoded from it. Claims are decoded without verifying the signature,
so they are fit for display only; ``BloodLinkClient.verify_session`` asks the
server to confirm them.
"""
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

from jose import JWTError, jwt
from pydantic import BaseModel, ValidationError

from bloodlink.core.constants import AccountType

logger = logging.getLogger(__name__)

SESSION_TOKEN_KEY = "bloodlink_token"
SESSION_USER_KEY = "bloodlink_user"

DEFAULT_SESSION_PATH = Path.home() / ".bloodlink" / "session.json"


class SessionError(Exception):
    pass


class SessionIdentity(BaseModel):
    id: int
    name: str
    email: str
    account_type: AccountType
    expires_at: Optional[datetime] = None

    @classmethod
    def from_claims(cls, claims: Dict[str, Any]) -> "SessionIdentity":
        exp = claims.get("exp")
        return cls(
            id=claims.get("id", claims.get("sub")),
            name=claims.get("name"),
            email=claims.get("email"),
            account_type=claims.get("accountType"),
            expires_at=datetime.fromtimestamp(exp, tz=timezone.utc) if exp is not None else None,
        )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self.expires_at is None:
            return False
        return self.expires_at <= (now or datetime.now(timezone.utc))


class SessionStore:
    def __init__(self, path: Union[str, Path, None] = DEFAULT_SESSION_PATH):
        # path=None keeps the session in memory only
        self._path = Path(path) if path else None
        self._data: Dict[str, Any] = self._load()

    @property
    def token(self) -> Optional[str]:
        return self._current().get(SESSION_TOKEN_KEY)

    @property
    def identity(self) -> Optional[SessionIdentity]:
        raw = self._current().get(SESSION_USER_KEY)
        return SessionIdentity.model_validate(raw) if raw else None

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    @property
    def account_type(self) -> Optional[AccountType]:
        identity = self.identity
        return identity.account_type if identity else None

    def sign_in(self, token: str) -> SessionIdentity:
        try:
            identity = SessionIdentity.from_claims(jwt.get_unverified_claims(token))
        except (JWTError, ValidationError) as e:
            raise SessionError(f"Malformed session token: {e}") from e
        if identity.is_expired():
            raise SessionError("Session token already expired")

        self._data = {
            SESSION_TOKEN_KEY: token,
            SESSION_USER_KEY: identity.model_dump(mode="json"),
        }
        self._save()
        return identity

    def sign_out(self) -> None:
        self._data = {}
        self._save()

    def _current(self) -> Dict[str, Any]:
        raw = self._data.get(SESSION_USER_KEY)
        if not raw:
            return {}
        try:
            expired = SessionIdentity.model_validate(raw).is_expired()
        except ValidationError:
            logger.warning("Discarding unreadable stored session")
            expired = True
        if expired:
            self.sign_out()
            return {}
        return self._data

    def _load(self) -> Dict[str, Any]:
        if not self._path or not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Could not read session file %s: %s", self._path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self) -> None:
        if not self._path:
            return
        if not self._data:
            self._path.unlink(missing_ok=True)
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(self._data), encoding="utf-8")

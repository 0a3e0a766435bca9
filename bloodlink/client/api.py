"""HTTP client for the BloodLink API."""
import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from bloodlink.client.session import SessionIdentity, SessionStore

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"

# (filename, content, content_type)
ImageUpload = Tuple[str, bytes, str]


class ApiError(Exception):
    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        errors: Optional[Dict[str, str]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code
        self.errors = errors or {}

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        return cls(
            status_code=response.status_code,
            message=body.get("message") or response.reason_phrase or "Request failed",
            code=body.get("error"),
            errors=body.get("errors"),
        )


class BloodLinkClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[SessionStore] = None,
        http: Optional[httpx.Client] = None,
    ):
        self.session = session if session is not None else SessionStore()
        self._http = http or httpx.Client(base_url=base_url)

    def close(self) -> None:
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        headers = kwargs.pop("headers", {})
        token = self.session.token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        response = self._http.request(method, path, headers=headers, **kwargs)
        if response.is_error:
            error = ApiError.from_response(response)
            logger.debug("%s %s failed: %s %s", method, path, error.status_code, error.message)
            raise error
        return response.json()

    # Accounts

    def register(
        self,
        name: str,
        email: str,
        password: str,
        location: str,
        account_type: str,
        profile_image: Optional[ImageUpload] = None,
    ) -> Dict[str, Any]:
        data = {
            "name": name,
            "email": email,
            "password": password,
            "location": location,
            "accountType": account_type,
        }
        files = {"profileImage": profile_image} if profile_image else None
        return self._request("POST", "/api/register", data=data, files=files)

    def login(self, email: str, password: str) -> SessionIdentity:
        body = self._request("POST", "/api/login", json={"email": email, "password": password})
        return self.session.sign_in(body["token"])

    def logout(self) -> None:
        self.session.sign_out()

    def me(self) -> Dict[str, Any]:
        return self._request("GET", "/api/me")

    def verify_session(self) -> Optional[Dict[str, Any]]:
        """Confirm the stored session with the server; signs out if it is rejected."""
        if not self.session.token:
            return None
        try:
            return self.me()
        except ApiError as e:
            if e.status_code == 401:
                self.session.sign_out()
                return None
            raise

    # Donor profiles

    def get_donor_profile(self, user_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/api/donor-profile/{user_id}")

    def create_donor_profile(self, user_id: int, fields: Dict[str, Any]) -> Dict[str, Any]:
        payload = {k: v for k, v in fields.items() if k != "id"}
        payload["userId"] = user_id
        return self._request("POST", "/api/donor-profile", json=payload)

    def update_donor_profile(self, profile_id: int, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/api/donor-profile/{profile_id}", json=fields)

    def search_donors(
        self,
        blood_type: Optional[str] = None,
        available_only: bool = False,
        search_term: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        params: Dict[str, Any] = {}
        if blood_type:
            params["bloodType"] = blood_type
        if available_only:
            params["availableOnly"] = "true"
        if search_term:
            params["searchTerm"] = search_term
        return self._request("GET", "/api/donors", params=params)

    # Postings

    def list_blood_requests(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/blood-requests")

    def create_blood_request(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/blood-requests", json=fields)

    def list_events(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/events")

    def create_event(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/events", json=fields)

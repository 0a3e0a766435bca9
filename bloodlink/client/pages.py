"""Per-page view state for the client.

Each page owns its list and refetches on its own; nothing is shared between
pages, so two pages may briefly disagree until one of them reloads.
"""
from typing import Any, Callable, Dict, List, Optional

from bloodlink.client.api import ApiError, BloodLinkClient
from bloodlink.client.session import SessionError, SessionIdentity, SessionStore
from bloodlink.core.constants import ALL_BLOOD_TYPES, AccountType, DonationType

DONOR_VIEW = "donor"
RECIPIENT_VIEW = "recipient"
LOGIN_VIEW = "login"

PROFILE_NOT_FOUND = "ProfileNotFound"


def dashboard_for(session: SessionStore) -> str:
    """Pick the dashboard for the signed-in account, or the login page."""
    account_type = session.account_type
    if account_type is None:
        return LOGIN_VIEW
    if account_type == AccountType.DONOR:
        return DONOR_VIEW
    return RECIPIENT_VIEW


def blank_profile() -> Dict[str, Any]:
    return {
        "age": "",
        "bloodType": "",
        "lastDonation": "",
        "sickness": "",
        "medication": "",
        "donationType": DonationType.UNPAID.value,
        "available": True,
        "contactPhone": "",
        "donationNumber": 0,
    }


class DonorDashboard:
    def __init__(self, client: BloodLinkClient):
        self.client = client
        self.profile: Dict[str, Any] = blank_profile()

    @property
    def identity(self) -> SessionIdentity:
        identity = self.client.session.identity
        if identity is None:
            raise SessionError("Not signed in")
        return identity

    @property
    def has_saved_profile(self) -> bool:
        return bool(self.profile.get("id"))

    def load(self) -> Dict[str, Any]:
        try:
            self.profile = self.client.get_donor_profile(self.identity.id)
        except ApiError as e:
            if e.code != PROFILE_NOT_FOUND:
                raise
            # No profile yet: offer an empty form
            self.profile = blank_profile()
        return self.profile

    def edit(self, **changes: Any) -> Dict[str, Any]:
        self.profile = {**self.profile, **changes}
        return self.profile

    def save(self) -> Dict[str, Any]:
        if self.has_saved_profile:
            body = self.client.update_donor_profile(self.profile["id"], self.profile)
        else:
            body = self.client.create_donor_profile(self.identity.id, self.profile)
        self.profile = body["profile"]
        return self.profile

    def toggle_availability(self) -> bool:
        """Flip availability; local state only changes once the server confirms."""
        new_value = not self.profile.get("available", True)
        if not self.has_saved_profile:
            # Unsaved form: the value goes to the server with save()
            self.profile = {**self.profile, "available": new_value}
            return new_value

        body = self.client.update_donor_profile(self.profile["id"], {"available": new_value})
        self.profile = body["profile"]
        return self.profile["available"]


class DonorSearchPage:
    def __init__(self, client: BloodLinkClient):
        self.client = client
        self.blood_type = ALL_BLOOD_TYPES
        self.available_only = True
        self.search_term = ""
        self.results: List[Dict[str, Any]] = []

    def load(self) -> List[Dict[str, Any]]:
        self.results = self.client.search_donors(
            blood_type=self.blood_type,
            available_only=self.available_only,
            search_term=self.search_term or None,
        )
        return self.results

    def set_filters(
        self,
        blood_type: Optional[str] = None,
        available_only: Optional[bool] = None,
        search_term: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Update any filter; a change triggers a refetch."""
        changed = False
        if blood_type is not None and blood_type != self.blood_type:
            self.blood_type = blood_type
            changed = True
        if available_only is not None and available_only != self.available_only:
            self.available_only = available_only
            changed = True
        if search_term is not None and search_term != self.search_term:
            self.search_term = search_term
            changed = True
        if changed:
            return self.load()
        return self.results


class PostingsPage:
    """Fetch-on-load list where new submissions are prepended once created."""

    def __init__(
        self,
        fetch: Callable[[], List[Dict[str, Any]]],
        create: Callable[[Dict[str, Any]], Dict[str, Any]],
    ):
        self._fetch = fetch
        self._create = create
        self.items: List[Dict[str, Any]] = []

    def load(self) -> List[Dict[str, Any]]:
        self.items = list(self._fetch())
        return self.items

    def submit(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        created = self._create(fields)
        self.items.insert(0, created)
        return created


class BloodRequestsPage(PostingsPage):
    def __init__(self, client: BloodLinkClient):
        super().__init__(client.list_blood_requests, client.create_blood_request)


class EventsPage(PostingsPage):
    def __init__(self, client: BloodLinkClient):
        super().__init__(client.list_events, client.create_event)

"""Python client for the BloodLink API: session store, HTTP client and page state."""
from bloodlink.client.api import ApiError, BloodLinkClient
from bloodlink.client.pages import (
    BloodRequestsPage, DonorDashboard, DonorSearchPage, EventsPage, dashboard_for,
)
from bloodlink.client.session import SessionError, SessionIdentity, SessionStore

__all__ = [
    "ApiError",
    "BloodLinkClient",
    "BloodRequestsPage",
    "DonorDashboard",
    "DonorSearchPage",
    "EventsPage",
    "SessionError",
    "SessionIdentity",
    "SessionStore",
    "dashboard_for",
]

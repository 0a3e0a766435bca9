"""Service layer package."""

__all__ = [
    "auth_service",
    "donor_service",
    "blood_request_service",
    "event_service",
    "storage_service",
]

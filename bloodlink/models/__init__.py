"""Models package placeholder."""

__all__ = [
    "user",
    "donor_profile",
    "blood_request",
    "event",
]

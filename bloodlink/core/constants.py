"""Application constants such as account types and posting enums."""
from enum import Enum


class AccountType(str, Enum):
    DONOR = "donor"
    RECIPIENT = "recipient"


class DonationType(str, Enum):
    PAID = "paid"
    UNPAID = "unpaid"


class Urgency(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class EventType(str, Enum):
    BLOOD_DONATION = "blood_donation"
    AWARENESS = "awareness"


# Query value meaning "no blood type filter" on donor search
ALL_BLOOD_TYPES = "all"

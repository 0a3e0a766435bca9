"""Donor profile schemas."""
from pydantic import ConfigDict, Field
from typing import Optional

from bloodlink.core.constants import DonationType
from bloodlink.schemas.common import CamelModel


class DonorProfileFields(CamelModel):
    # Forms post age and phone numbers as either strings or numbers
    model_config = ConfigDict(coerce_numbers_to_str=True)

    age: Optional[str] = Field(None, max_length=10)
    blood_type: Optional[str] = Field(None, max_length=5)
    last_donation: Optional[str] = Field(None, max_length=50)
    sickness: Optional[str] = None
    medication: Optional[str] = None
    donation_type: Optional[DonationType] = None
    contact_phone: Optional[str] = Field(None, max_length=20)
    donation_number: Optional[int] = None
    location: Optional[str] = Field(None, max_length=255)


class DonorProfileCreate(DonorProfileFields):
    user_id: int
    available: bool = True


class DonorProfileUpdate(DonorProfileFields):
    available: Optional[bool] = None


class DonorProfileRead(DonorProfileFields):
    id: int
    user_id: int
    available: bool


class DonorProfileEnvelope(CamelModel):
    message: str
    profile: DonorProfileRead

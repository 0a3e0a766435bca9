from pydantic import ConfigDict, Field
from typing import Optional
from datetime import datetime

from bloodlink.core.constants import Urgency
from bloodlink.schemas.common import CamelModel


class BloodRequestCreate(CamelModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    organization_name: str = Field(..., min_length=1, max_length=255)
    blood_type: str = Field(..., min_length=1, max_length=5)
    location: str = Field(..., min_length=1, max_length=255)
    contact_number: str = Field(..., min_length=1, max_length=20)
    price: float = Field(..., ge=0)
    urgency: Urgency


class BloodRequestRead(CamelModel):
    id: int
    organization_name: str
    blood_type: str
    location: str
    contact_number: str
    price: float
    urgency: Urgency
    created_at: Optional[datetime] = None

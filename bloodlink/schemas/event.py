from pydantic import Field
from typing import Optional
import datetime as dt

from bloodlink.core.constants import EventType
from bloodlink.schemas.common import CamelModel


class EventCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    date: dt.date
    location: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    type: EventType
    expected_attendees: int = Field(..., ge=0)


class EventRead(CamelModel):
    id: int
    title: str
    date: dt.date
    location: str
    description: str
    type: EventType
    expected_attendees: int
    created_at: Optional[dt.datetime] = None

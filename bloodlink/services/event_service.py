from typing import List

from sqlalchemy.orm import Session

from bloodlink.models.event import Event
from bloodlink.schemas.event import EventCreate


class EventService:
    @staticmethod
    def create(db: Session, payload: EventCreate) -> Event:
        event = Event(
            title=payload.title,
            date=payload.date,
            location=payload.location,
            description=payload.description,
            type=payload.type.value,
            expected_attendees=payload.expected_attendees,
        )
        db.add(event)
        db.commit()
        db.refresh(event)
        return event

    @staticmethod
    def list_all(db: Session) -> List[Event]:
        return db.query(Event).order_by(Event.id).all()

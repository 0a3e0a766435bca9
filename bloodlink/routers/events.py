"""Event postings."""
import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bloodlink.core.database import get_db
from bloodlink.schemas.event import EventCreate, EventRead
from bloodlink.services.event_service import EventService
from bloodlink.utils.errors import InternalError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("", response_model=List[EventRead])
async def list_events(db: Session = Depends(get_db)):
    try:
        return EventService.list_all(db)
    except SQLAlchemyError:
        logger.exception("Error fetching events")
        raise InternalError()


@router.post("", response_model=EventRead, status_code=201)
async def create_event(payload: EventCreate, db: Session = Depends(get_db)):
    try:
        return EventService.create(db, payload)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error creating event")
        raise InternalError()

"""Blood request postings."""
import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bloodlink.core.database import get_db
from bloodlink.schemas.blood_request import BloodRequestCreate, BloodRequestRead
from bloodlink.services.blood_request_service import BloodRequestService
from bloodlink.utils.errors import InternalError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/blood-requests", tags=["blood-requests"])


@router.get("", response_model=List[BloodRequestRead])
async def list_blood_requests(db: Session = Depends(get_db)):
    try:
        return BloodRequestService.list_all(db)
    except SQLAlchemyError:
        logger.exception("Error fetching blood requests")
        raise InternalError()


@router.post("", response_model=BloodRequestRead, status_code=201)
async def create_blood_request(payload: BloodRequestCreate, db: Session = Depends(get_db)):
    try:
        return BloodRequestService.create(db, payload)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error creating blood request")
        raise InternalError()

"""Donor profile and donor search endpoints."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bloodlink.core.database import get_db
from bloodlink.schemas.donor_profile import (
    DonorProfileCreate, DonorProfileEnvelope, DonorProfileRead, DonorProfileUpdate,
)
from bloodlink.services.donor_service import DonorProfileService
from bloodlink.utils.errors import InternalError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["donors"])


@router.post("/donor-profile", response_model=DonorProfileEnvelope, status_code=201)
async def create_donor_profile(payload: DonorProfileCreate, db: Session = Depends(get_db)):
    try:
        profile = DonorProfileService.create(db, payload)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error creating donor profile")
        raise InternalError()
    return DonorProfileEnvelope(
        message="Profile created successfully",
        profile=DonorProfileRead.model_validate(profile),
    )


@router.put("/donor-profile/{profile_id}", response_model=DonorProfileEnvelope)
async def update_donor_profile(
    profile_id: int,
    payload: DonorProfileUpdate,
    db: Session = Depends(get_db),
):
    try:
        profile = DonorProfileService.update(db, profile_id, payload)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error updating donor profile %s", profile_id)
        raise InternalError()
    return DonorProfileEnvelope(
        message="Profile updated successfully",
        profile=DonorProfileRead.model_validate(profile),
    )


@router.get("/donor-profile/{user_id}", response_model=DonorProfileRead)
async def get_donor_profile(user_id: int, db: Session = Depends(get_db)):
    try:
        return DonorProfileService.get_by_user(db, user_id)
    except SQLAlchemyError:
        logger.exception("Error fetching donor profile for user %s", user_id)
        raise InternalError("Failed to fetch donor profile")


@router.get("/donors", response_model=List[DonorProfileRead])
async def search_donors(
    blood_type: Optional[str] = Query(None, alias="bloodType"),
    available_only: bool = Query(False, alias="availableOnly"),
    search_term: Optional[str] = Query(None, alias="searchTerm"),
    db: Session = Depends(get_db),
):
    try:
        return DonorProfileService.search(
            db,
            blood_type=blood_type,
            available_only=available_only,
            search_term=search_term,
        )
    except SQLAlchemyError:
        logger.exception("Error searching donors")
        raise InternalError("Server error")

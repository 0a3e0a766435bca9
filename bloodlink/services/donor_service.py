import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bloodlink.core.constants import ALL_BLOOD_TYPES
from bloodlink.models.donor_profile import DonorProfile
from bloodlink.models.user import User
from bloodlink.schemas.donor_profile import DonorProfileCreate, DonorProfileUpdate
from bloodlink.utils.errors import ProfileAlreadyExistsError, ProfileNotFoundError

logger = logging.getLogger(__name__)

PROFILE_FIELDS = (
    "age",
    "blood_type",
    "last_donation",
    "sickness",
    "medication",
    "donation_type",
    "available",
    "contact_phone",
    "donation_number",
    "location",
)


LIKE_ESCAPE = "\\"


def _substring_pattern(term: str) -> str:
    # The term is matched literally, never as a LIKE wildcard
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def _column_value(value):
    # Enum members are stored by value
    return getattr(value, "value", value)


class DonorProfileService:
    @staticmethod
    def get_by_user(db: Session, user_id: int) -> DonorProfile:
        profile = db.query(DonorProfile).filter(DonorProfile.user_id == int(user_id)).first()
        if not profile:
            raise ProfileNotFoundError()
        return profile

    @staticmethod
    def create(db: Session, payload: DonorProfileCreate) -> DonorProfile:
        existing = db.query(DonorProfile).filter(DonorProfile.user_id == payload.user_id).first()
        if existing:
            raise ProfileAlreadyExistsError()

        data = payload.model_dump(exclude={"user_id"})
        profile = DonorProfile(
            user_id=payload.user_id,
            **{field: _column_value(data[field]) for field in PROFILE_FIELDS},
        )
        if not profile.location:
            owner = db.query(User).filter(User.id == payload.user_id).first()
            if owner:
                profile.location = owner.location

        db.add(profile)
        try:
            db.commit()
        except IntegrityError:
            # uq_donor_profiles_user_id: a concurrent create won
            db.rollback()
            raise ProfileAlreadyExistsError()
        db.refresh(profile)
        logger.info("Created donor profile %s for user %s", profile.id, profile.user_id)
        return profile

    @staticmethod
    def update(db: Session, profile_id: int, payload: DonorProfileUpdate) -> DonorProfile:
        profile = db.query(DonorProfile).filter(DonorProfile.id == int(profile_id)).first()
        if not profile:
            raise ProfileNotFoundError("Profile not found")

        changes = payload.model_dump(exclude_unset=True)
        if changes.get("available") is None:
            changes.pop("available", None)

        for field in PROFILE_FIELDS:
            if field in changes:
                setattr(profile, field, _column_value(changes[field]))
        db.commit()
        db.refresh(profile)
        return profile

    @staticmethod
    def search(
        db: Session,
        blood_type: Optional[str] = None,
        available_only: bool = False,
        search_term: Optional[str] = None,
    ) -> List[DonorProfile]:
        query = db.query(DonorProfile)

        if blood_type and blood_type != ALL_BLOOD_TYPES:
            query = query.filter(DonorProfile.blood_type == blood_type)

        if available_only:
            query = query.filter(DonorProfile.available.is_(True))

        if search_term:
            pattern = _substring_pattern(search_term)
            query = query.filter(
                or_(
                    DonorProfile.blood_type.ilike(pattern, escape=LIKE_ESCAPE),
                    DonorProfile.location.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )

        return query.order_by(DonorProfile.id).all()

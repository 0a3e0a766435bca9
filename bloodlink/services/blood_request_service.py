from typing import List

from sqlalchemy.orm import Session

from bloodlink.models.blood_request import BloodRequest
from bloodlink.schemas.blood_request import BloodRequestCreate


class BloodRequestService:
    @staticmethod
    def create(db: Session, payload: BloodRequestCreate) -> BloodRequest:
        request = BloodRequest(
            organization_name=payload.organization_name,
            blood_type=payload.blood_type,
            location=payload.location,
            contact_number=payload.contact_number,
            price=payload.price,
            urgency=payload.urgency.value,
        )
        db.add(request)
        db.commit()
        db.refresh(request)
        return request

    @staticmethod
    def list_all(db: Session) -> List[BloodRequest]:
        return db.query(BloodRequest).order_by(BloodRequest.id).all()

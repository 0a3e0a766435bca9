from datetime import datetime
from sqlalchemy import Column, Integer, String, Float, DateTime
from bloodlink.core.database import Base


class BloodRequest(Base):
    __tablename__ = "blood_requests"

    id = Column(Integer, primary_key=True, index=True)
    organization_name = Column(String(255), nullable=False)
    blood_type = Column(String(5), nullable=False)
    location = Column(String(255), nullable=False)
    contact_number = Column(String(20), nullable=False)
    price = Column(Float, nullable=False)
    urgency = Column(String(10), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)

"""Donor profile model."""
from datetime import datetime
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Text, UniqueConstraint
from bloodlink.core.database import Base


class DonorProfile(Base):
    __tablename__ = "donor_profiles"
    __table_args__ = (
        UniqueConstraint("user_id", name="uq_donor_profiles_user_id"),
    )

    id = Column(Integer, primary_key=True, index=True)
    # Soft reference to users.id; only uniqueness is enforced
    user_id = Column(Integer, nullable=False, index=True)

    age = Column(String(10), nullable=True)
    blood_type = Column(String(5), nullable=True, index=True)
    last_donation = Column(String(50), nullable=True)
    sickness = Column(Text, nullable=True)
    medication = Column(Text, nullable=True)
    donation_type = Column(String(10), nullable=True)
    available = Column(Boolean, default=True, nullable=False, index=True)
    contact_phone = Column(String(20), nullable=True)
    donation_number = Column(Integer, nullable=True)
    location = Column(String(255), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<DonorProfile user={self.user_id} {self.blood_type}>"

from datetime import datetime
from sqlalchemy import Column, Integer, String, Date, DateTime, Text
from bloodlink.core.database import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    date = Column(Date, nullable=False)
    location = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    type = Column(String(20), nullable=False)
    expected_attendees = Column(Integer, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)

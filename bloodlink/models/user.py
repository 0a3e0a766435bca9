from sqlalchemy import Column, Integer, String, DateTime, Text
from datetime import datetime
from bloodlink.core.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)

    # donor | recipient
    account_type = Column(String(20), index=True, nullable=False)

    # Relative path (/uploads/...) or absolute URL for S3 uploads
    profile_image = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    def __repr__(self):
        return f"<User {self.email}>"

import uuid

from sqlalchemy import Column, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from ..core.database import Base


class Profile(Base):
    __tablename__ = "profiles"
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    full_name = Column(String(255))
    address = Column(Text)
    gps_location = Column(String(255))
    phone_number = Column(String(50))
    birthday = Column(String(50))
    gender = Column(String(20))
    referral_source = Column(String(100))
    referral_id = Column(String(50))

    user = relationship("User", back_populates="profile")

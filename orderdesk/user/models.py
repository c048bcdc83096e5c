import uuid

from sqlalchemy import Column, String, Text, TIMESTAMP, text
from sqlalchemy.orm import relationship

from ..core.database import Base, utcnow


class User(Base):
    __tablename__ = "users"
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP, default=utcnow, server_default=text("CURRENT_TIMESTAMP"))

    profile = relationship("Profile", back_populates="user", uselist=False, cascade="all, delete-orphan")
    orders = relationship("Order", back_populates="user", cascade="all, delete-orphan")

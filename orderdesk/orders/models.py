import uuid

from sqlalchemy import Column, Integer, String, ForeignKey, DECIMAL, TIMESTAMP, text
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import relationship

from ..core.database import Base, utcnow


class Order(Base):
    __tablename__ = "orders"
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False)
    total_price = Column(DECIMAL(10, 2), nullable=False)
    status = Column(String(50), default="pending", server_default=text("'pending'"))
    # Millisecond precision on MySQL; the cancellation window is measured from this value
    created_at = Column(TIMESTAMP().with_variant(mysql.DATETIME(fsp=3), "mysql"), default=utcnow, nullable=False)

    user = relationship("User", back_populates="orders")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "product_id": self.product_id,
            "quantity": self.quantity,
            "total_price": float(self.total_price) if self.total_price is not None else None,
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

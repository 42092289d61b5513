from core.database import Base
from sqlalchemy.orm import relationship
from sqlalchemy import (Column, Integer, ForeignKey, Numeric, String)
from .mixins import CreatedAtMixin, UpdatedAtMixin

ORDER_STATUS_PENDING = "pending"

class Order(Base, CreatedAtMixin, UpdatedAtMixin):
    __tablename__ = "orders"

    #pk
    id = Column(Integer, primary_key=True, index=True)

    #fk
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    #relationships
    user = relationship("User", back_populates="orders")

    total_amount = Column(Numeric(10, 2), nullable=False)
    # No transitions exist yet, every order stays pending
    status = Column(String, default=ORDER_STATUS_PENDING, nullable=False)

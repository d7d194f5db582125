from decimal import Decimal

from shopcart.db import Base
from shopcart.models.item import from_cents
from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, func, text
from sqlalchemy.orm import relationship

CART_ACTIVE = "active"
CART_ORDERED = "ordered"


class Cart(Base):
    __tablename__ = "carts"
    __table_args__ = (
        # at most one active cart per user
        Index(
            "uq_carts_active_user",
            "user_id",
            unique=True,
            sqlite_where=text("status = 'active'"),
            postgresql_where=text("status = 'active'"),
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id"), nullable=False, index=True
    )
    status = Column(String(16), nullable=False, default=CART_ACTIVE)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    lines = relationship(
        "CartLine",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="CartLine.id",
    )

    @property
    def total(self) -> Decimal:
        """Value of the cart at current catalog prices."""
        return from_cents(sum(line.quantity * line.item.price_cents for line in self.lines))

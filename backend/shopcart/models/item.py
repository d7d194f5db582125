from decimal import Decimal

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, Text, func

from shopcart.db import Base

CENTS = Decimal("0.01")


def to_cents(amount: Decimal) -> int:
    return int((Decimal(amount) * 100).to_integral_value())


def from_cents(cents: int) -> Decimal:
    return (Decimal(cents or 0) / 100).quantize(CENTS)


class Item(Base):
    __tablename__ = "items"
    __table_args__ = (CheckConstraint("price_cents >= 0", name="ck_items_price_non_negative"),)

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(256), nullable=False)
    description = Column(Text, nullable=True)
    price_cents = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    @property
    def price(self) -> Decimal:
        return from_cents(self.price_cents)

    def __repr__(self):
        return f"<Item id={self.id} name={self.name}>"

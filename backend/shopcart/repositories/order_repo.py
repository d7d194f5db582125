from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from shopcart.models.item import Item  # noqa: F401  (OrderLine.item target)
from shopcart.models.order import Order, OrderLine


def _with_lines(query):
    return query.options(selectinload(Order.lines).selectinload(OrderLine.item))


class OrderRepository:
    def __init__(self, db: Session):
        self.db = db

    def add(self, order: Order) -> Order:
        self.db.add(order)
        self.db.flush()
        return order

    def get(self, order_id: int) -> Optional[Order]:
        return _with_lines(self.db.query(Order)).filter(Order.id == order_id).first()

    def list_for_user(self, user_id: int) -> List[Order]:
        return (
            _with_lines(self.db.query(Order))
            .filter(Order.user_id == user_id)
            .order_by(Order.id)
            .all()
        )

from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.orm import Session, selectinload

from shopcart.db import SQL_INT_MAX
from shopcart.exceptions import ValidationError
from shopcart.models.cart import CART_ACTIVE, CART_ORDERED, Cart
from shopcart.models.cart_line import CartLine
from shopcart.models.item import Item  # noqa: F401  (CartLine.item target)


def _with_lines(query):
    return query.options(selectinload(Cart.lines).selectinload(CartLine.item))


class CartRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, cart_id: int) -> Optional[Cart]:
        return _with_lines(self.db.query(Cart)).filter(Cart.id == cart_id).first()

    def get_active_for_user(self, user_id: int) -> Optional[Cart]:
        return (
            self.db.query(Cart)
            .filter(Cart.user_id == user_id, Cart.status == CART_ACTIVE)
            .first()
        )

    def get_active_owned(self, cart_id: int, user_id: int) -> Optional[Cart]:
        """The cart only if it exists, belongs to the user and still accepts changes."""
        return (
            _with_lines(self.db.query(Cart))
            .filter(
                Cart.id == cart_id,
                Cart.user_id == user_id,
                Cart.status == CART_ACTIVE,
            )
            .first()
        )

    def list_for_user(self, user_id: int) -> List[Cart]:
        return (
            _with_lines(self.db.query(Cart))
            .filter(Cart.user_id == user_id)
            .order_by(Cart.id)
            .all()
        )

    def create_active_cart(self, user_id: int) -> Cart:
        c = Cart(user_id=user_id, status=CART_ACTIVE)
        self.db.add(c)
        self.db.flush()
        return c

    def get_line(self, cart_id: int, item_id: int) -> Optional[CartLine]:
        return (
            self.db.query(CartLine)
            .filter(CartLine.cart_id == cart_id, CartLine.item_id == item_id)
            .first()
        )

    def add_or_accumulate_line(self, cart: Cart, item_id: int, qty: int) -> CartLine:
        line = self.get_line(cart.id, item_id)
        current = line.quantity if line else 0
        if current + qty > SQL_INT_MAX:
            raise ValidationError("quantity: too large")
        if line:
            line.quantity += qty
        else:
            line = CartLine(cart_id=cart.id, item_id=item_id, quantity=qty)
            self.db.add(line)
        self.db.flush()
        return line

    def mark_ordered(self, cart_id: int) -> bool:
        """
        Flip an active cart to ordered. Returns False when the cart was no
        longer active, i.e. another checkout already claimed it.
        """
        res = self.db.execute(
            update(Cart)
            .where(Cart.id == cart_id, Cart.status == CART_ACTIVE)
            .values(status=CART_ORDERED)
            .execution_options(synchronize_session=False)
        )
        return res.rowcount == 1

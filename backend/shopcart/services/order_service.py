from typing import List, Optional

from sqlalchemy.orm import Session

from shopcart.db import SQL_INT_MAX
from shopcart.exceptions import BadRequest, NotFound
from shopcart.models.order import ORDER_COMPLETED, Order, OrderLine
from shopcart.repositories.cart_repo import CartRepository
from shopcart.repositories.order_repo import OrderRepository
from shopcart.utils.locks import LockManager
from shopcart.utils.logging import get_logger
from shopcart.utils.transactions import atomic

log = get_logger(__name__)

CART_UNAVAILABLE = "Cart not found or already ordered"


class OrderService:
    def __init__(self, db: Session, locks: Optional[LockManager] = None):
        self.db = db
        self.cart_repo = CartRepository(db)
        self.order_repo = OrderRepository(db)
        self.locks = locks or LockManager()

    def checkout(self, user_id: int, cart_id: int) -> Order:
        """
        Turn the user's active cart into an order.

        Prices are read from the catalog now and copied into the order lines;
        the order, its lines and the cart's switch to `ordered` are committed
        together or not at all. A cart that is missing, owned by someone else
        or already ordered is reported the same way (NotFound).

        The user lock is the one add_item holds, so no line can land in the
        cart between reading its lines and marking it ordered.
        """
        with self.locks.for_user(user_id), self.locks.for_cart(cart_id):
            with atomic(self.db):
                cart = self.cart_repo.get_active_owned(cart_id, user_id)
                if not cart:
                    raise NotFound(CART_UNAVAILABLE)
                if not cart.lines:
                    raise BadRequest("Cart is empty")

                if not self.cart_repo.mark_ordered(cart.id):
                    raise NotFound(CART_UNAVAILABLE)

                order = Order(user_id=user_id, cart_id=cart.id, status=ORDER_COMPLETED)
                total_cents = 0
                for line in cart.lines:
                    price_cents = line.item.price_cents
                    order.lines.append(
                        OrderLine(
                            item_id=line.item_id,
                            quantity=line.quantity,
                            unit_price_cents=price_cents,
                        )
                    )
                    total_cents += price_cents * line.quantity
                if total_cents > SQL_INT_MAX:
                    raise BadRequest("Order total too large")
                order.total_cents = total_cents
                self.order_repo.add(order)
                order_id = order.id

        log.info(
            "Order %s created from cart %s for user %s (total_cents=%s)",
            order_id, cart_id, user_id, total_cents,
        )
        return self.order_repo.get(order_id)

    def list_orders(self, user_id: int) -> List[Order]:
        return self.order_repo.list_for_user(user_id)

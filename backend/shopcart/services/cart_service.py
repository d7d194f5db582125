from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shopcart.exceptions import InternalFailure, NotFound
from shopcart.models.cart import Cart
from shopcart.repositories.cart_repo import CartRepository
from shopcart.repositories.item_repo import ItemRepository
from shopcart.utils.locks import LockManager
from shopcart.utils.logging import get_logger
from shopcart.utils.transactions import atomic

log = get_logger(__name__)

# one retry covers losing the active-cart unique index race to another host
CART_CREATE_ATTEMPTS = 2


class CartService:
    def __init__(self, db: Session, locks: Optional[LockManager] = None):
        self.db = db
        self.cart_repo = CartRepository(db)
        self.item_repo = ItemRepository(db)
        self.locks = locks or LockManager()

    def add_item(self, user_id: int, item_id: int, qty: Optional[int] = None) -> Cart:
        """
        Merge `qty` of an item into the user's active cart, creating the cart
        on first use. Non-positive or missing quantities count as 1.
        Returns the cart with its lines and their items loaded.
        """
        if qty is None or qty <= 0:
            qty = 1

        with self.locks.for_user(user_id):
            for attempt in range(1, CART_CREATE_ATTEMPTS + 1):
                try:
                    with atomic(self.db):
                        if not self.item_repo.get(item_id):
                            raise NotFound("Item not found")
                        cart = self.cart_repo.get_active_for_user(user_id)
                        if cart is None:
                            cart = self.cart_repo.create_active_cart(user_id)
                            log.info("Created cart %s for user %s", cart.id, user_id)
                        line = self.cart_repo.add_or_accumulate_line(cart, item_id, qty)
                        cart_id = cart.id
                        log.info(
                            "Cart %s: item %s now at quantity %s", cart_id, item_id, line.quantity
                        )
                    break
                except IntegrityError:
                    if attempt == CART_CREATE_ATTEMPTS:
                        log.exception("Could not add item %s for user %s", item_id, user_id)
                        raise InternalFailure("Failed to add item to cart")
                    log.warning("Active cart race for user %s, retrying", user_id)

        return self.cart_repo.get(cart_id)

    def list_carts(self, user_id: int) -> List[Cart]:
        return self.cart_repo.list_for_user(user_id)

import concurrent.futures

from shopcart.db import SessionLocal
from shopcart.exceptions import NotFound
from shopcart.models.cart import CART_ACTIVE, Cart
from shopcart.models.cart_line import CartLine
from shopcart.models.order import Order
from shopcart.services.cart_service import CartService
from shopcart.services.order_service import OrderService

WORKERS = 8


def _add_in_own_session(user_id, item_id, qty):
    s = SessionLocal()
    try:
        return CartService(s).add_item(user_id, item_id, qty).id
    finally:
        s.close()


def _checkout_in_own_session(user_id, cart_id):
    s = SessionLocal()
    try:
        return ("ok", OrderService(s).checkout(user_id, cart_id).id)
    except NotFound:
        return ("not_found", None)
    finally:
        s.close()


def test_concurrent_adds_create_a_single_active_cart(db, make_user, make_item):
    user = make_user()
    item = make_item()
    user_id, item_id = user.id, item.id

    with concurrent.futures.ThreadPoolExecutor(max_workers=WORKERS) as ex:
        futures = [ex.submit(_add_in_own_session, user_id, item_id, 2) for _ in range(WORKERS)]
        cart_ids = {f.result() for f in futures}

    assert len(cart_ids) == 1
    carts = db.query(Cart).filter(Cart.user_id == user_id, Cart.status == CART_ACTIVE).all()
    assert len(carts) == 1
    lines = db.query(CartLine).filter(CartLine.cart_id == carts[0].id).all()
    assert [(l.item_id, l.quantity) for l in lines] == [(item_id, 2 * WORKERS)]


def test_concurrent_checkouts_produce_one_order(db, make_user, make_item):
    user = make_user()
    item = make_item()
    cart_id = CartService(db).add_item(user.id, item.id, 1).id
    user_id = user.id

    with concurrent.futures.ThreadPoolExecutor(max_workers=WORKERS) as ex:
        futures = [ex.submit(_checkout_in_own_session, user_id, cart_id) for _ in range(WORKERS)]
        outcomes = [f.result()[0] for f in futures]

    assert outcomes.count("ok") == 1
    assert outcomes.count("not_found") == WORKERS - 1
    assert db.query(Order).filter(Order.cart_id == cart_id).count() == 1

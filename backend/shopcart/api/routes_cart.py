from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shopcart.api.deps import get_current_user_id
from shopcart.db import get_db
from shopcart.schemas.cart_schema import AddToCartIn, CartOut
from shopcart.services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["cart"])


@router.post("", response_model=CartOut, summary="Add item to the active cart")
def add_to_cart(
    payload: AddToCartIn,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return CartService(db).add_item(user_id, payload.item_id, payload.quantity)


@router.get("", response_model=List[CartOut], summary="List the caller's carts")
def list_carts(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return CartService(db).list_carts(user_id)

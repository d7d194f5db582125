from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shopcart.api.deps import get_current_user_id
from shopcart.db import get_db
from shopcart.schemas.order_schema import CheckoutIn, OrderOut
from shopcart.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderOut, status_code=status.HTTP_201_CREATED, summary="Create order (checkout)")
def create_order(
    payload: CheckoutIn,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return OrderService(db).checkout(user_id, payload.cart_id)


@router.get("", response_model=List[OrderOut], summary="List the caller's orders")
def list_orders(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return OrderService(db).list_orders(user_id)

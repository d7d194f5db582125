from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from shopcart.db import SQL_INT_MAX
from shopcart.schemas.item_schema import ItemOut, Money


class CheckoutIn(BaseModel):
    cart_id: int = Field(..., ge=1, le=SQL_INT_MAX)


class OrderLineOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    order_id: int
    item_id: int
    quantity: int
    # unit price captured at checkout
    price: Money = Field(validation_alias="unit_price")
    item: ItemOut


class OrderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    user_id: int
    cart_id: int
    status: str
    total_price: Money = Field(validation_alias="total")
    created_at: datetime
    order_items: List[OrderLineOut] = Field(validation_alias="lines")

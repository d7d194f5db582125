from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from shopcart.db import SQL_INT_MAX
from shopcart.schemas.item_schema import ItemOut, Money


class AddToCartIn(BaseModel):
    item_id: int = Field(..., ge=1, le=SQL_INT_MAX)
    # non-positive or missing quantities are treated as 1 by the cart service
    quantity: Optional[int] = Field(None, le=SQL_INT_MAX)


class CartLineOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    cart_id: int
    item_id: int
    quantity: int
    item: ItemOut


class CartOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    user_id: int
    status: str
    cart_items: List[CartLineOut] = Field(validation_alias="lines")
    total: Money
    created_at: Optional[datetime] = None

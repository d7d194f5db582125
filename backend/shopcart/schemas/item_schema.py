# backend/shopcart/schemas/item_schema.py
from decimal import Decimal
from typing import Annotated, Optional
from pydantic import BaseModel, Field, PlainSerializer
from pydantic import ConfigDict

# money leaves the API as a JSON number
Money = Annotated[
    Decimal, PlainSerializer(lambda v: float(v), return_type=float, when_used="json")
]

class ItemCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=256)
    description: Optional[str] = None
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)

class ItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    description: Optional[str] = None
    price: Money

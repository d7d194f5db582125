from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from shopcart.exceptions import NotFound, ValidationError
from shopcart.models.item import Item, to_cents
from shopcart.repositories.item_repo import ItemRepository
from shopcart.utils.transactions import atomic


class CatalogService:
    """Read-only item lookups, plus the administrative create."""

    def __init__(self, db: Session):
        self.db = db
        self.item_repo = ItemRepository(db)

    def get_item(self, item_id: int) -> Item:
        item = self.item_repo.get(item_id)
        if not item:
            raise NotFound("Item not found")
        return item

    def list_items(self) -> List[Item]:
        return self.item_repo.list()

    def create_item(self, name: str, price: Decimal, description: Optional[str] = None) -> Item:
        if not name:
            raise ValidationError("Item name is required")
        if price is None or Decimal(price) < 0:
            raise ValidationError("Price must be a non-negative amount")
        with atomic(self.db):
            item = self.item_repo.create(name, to_cents(price), description=description)
        return item

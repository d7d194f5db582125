from typing import List, Optional

from sqlalchemy.orm import Session

from shopcart.models.item import Item


class ItemRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, item_id: int) -> Optional[Item]:
        return self.db.get(Item, item_id)

    def list(self) -> List[Item]:
        return self.db.query(Item).order_by(Item.id).all()

    def count(self) -> int:
        return self.db.query(Item).count()

    def create(self, name: str, price_cents: int, description: str = None) -> Item:
        item = Item(name=name, description=description, price_cents=price_cents)
        self.db.add(item)
        self.db.flush()
        return item

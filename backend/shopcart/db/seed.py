from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from shopcart.adapters.password_hasher import BcryptPasswordHasher
from shopcart.models.item import to_cents
from shopcart.repositories.item_repo import ItemRepository
from shopcart.repositories.user_repo import UserRepository

SAMPLE_ITEMS = [
    {"name": "iPhone 14", "description": "Latest Apple smartphone with advanced features", "price": "999.99"},
    {"name": "Samsung Galaxy S23", "description": "Android flagship phone with excellent camera", "price": "899.99"},
    {"name": "MacBook Pro", "description": "Professional laptop from Apple for developers", "price": "1999.99"},
    {"name": "Dell XPS 13", "description": "Ultrabook perfect for students and professionals", "price": "1299.99"},
    {"name": "Nike Air Max", "description": "Comfortable running shoes for daily use", "price": "129.99"},
    {"name": "Adidas Ultraboost", "description": "Premium athletic shoes for serious runners", "price": "149.99"},
    {"name": "Sony WH-1000XM4", "description": "Noise-canceling wireless headphones", "price": "349.99"},
    {"name": "Apple Watch Series 8", "description": "Smartwatch with health monitoring features", "price": "399.99"},
]

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


def seed_sample_items(db: Session) -> int:
    """Insert the sample catalog if the catalog is empty. Returns the number created."""
    repo = ItemRepository(db)
    if repo.count():
        return 0
    for ent in SAMPLE_ITEMS:
        repo.create(ent["name"], to_cents(Decimal(ent["price"])), description=ent["description"])
    db.commit()
    return len(SAMPLE_ITEMS)


def seed_admin_user(
    db: Session,
    username: str = ADMIN_USERNAME,
    password: str = ADMIN_PASSWORD,
    hasher: Optional[BcryptPasswordHasher] = None,
) -> bool:
    """Create the sample admin account unless it exists. Returns True if created."""
    repo = UserRepository(db)
    if repo.get_by_username(username):
        return False
    hasher = hasher or BcryptPasswordHasher()
    repo.create(username, hasher.hash(password))
    db.commit()
    return True

from typing import List, Optional

from sqlalchemy.orm import Session

from shopcart.models.user import User


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def get_by_token(self, token: str) -> Optional[User]:
        return self.db.query(User).filter(User.token == token).first()

    def list(self) -> List[User]:
        return self.db.query(User).order_by(User.id).all()

    def create(self, username: str, password_hash: str) -> User:
        u = User(username=username, password_hash=password_hash)
        self.db.add(u)
        self.db.flush()
        return u

    def set_token(self, user: User, token: str) -> User:
        user.token = token
        self.db.flush()
        return user

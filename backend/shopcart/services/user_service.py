from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shopcart.adapters.password_hasher import BcryptPasswordHasher, PasswordHashError
from shopcart.exceptions import Conflict, InternalFailure, Unauthorized, ValidationError
from shopcart.models.user import User
from shopcart.repositories.user_repo import UserRepository
from shopcart.services.session_service import SessionStore
from shopcart.utils.logging import get_logger
from shopcart.utils.transactions import atomic

log = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


class UserService:
    def __init__(self, db: Session, hasher: Optional[BcryptPasswordHasher] = None):
        self.db = db
        self.user_repo = UserRepository(db)
        self.sessions = SessionStore(db)
        self.hasher = hasher or BcryptPasswordHasher()

    def register(self, username: str, password: str) -> User:
        if not username or not password:
            raise ValidationError("Username and password are required")
        try:
            digest = self.hasher.hash(password)
        except PasswordHashError:
            raise ValidationError("Password is too long")
        except Exception:
            log.exception("Password hashing failed")
            raise InternalFailure("Failed to hash password")

        try:
            with atomic(self.db):
                if self.user_repo.get_by_username(username):
                    raise Conflict("Username already exists")
                user = self.user_repo.create(username, digest)
        except IntegrityError:
            # lost a race against a concurrent registration of the same name
            raise Conflict("Username already exists")
        log.info("Registered user %s (id=%s)", username, user.id)
        return user

    def login(self, username: str, password: str) -> Tuple[str, User]:
        """Check credentials and issue a new session token, superseding the old one."""
        with atomic(self.db):
            user = self.user_repo.get_by_username(username)
            if not user or not self.hasher.verify(user.password_hash, password):
                raise Unauthorized(INVALID_CREDENTIALS)
            token = self.sessions.issue(user.id)
        log.info("User %s logged in", user.id)
        return token, user

    def list_users(self) -> List[User]:
        return self.user_repo.list()

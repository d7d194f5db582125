import secrets
from typing import Optional

from sqlalchemy.orm import Session

from shopcart.config import settings
from shopcart.exceptions import Unauthorized
from shopcart.repositories.user_repo import UserRepository
from shopcart.utils.logging import get_logger

log = get_logger(__name__)

BEARER_PREFIX = "bearer "


def extract_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of an Authorization header value.
    Accepts both "Bearer <token>" and a bare token.
    """
    if not authorization:
        raise Unauthorized("Authorization header required")
    token = authorization.lstrip()
    if token[: len(BEARER_PREFIX)].lower() == BEARER_PREFIX:
        token = token[len(BEARER_PREFIX):]
    token = token.strip()
    if not token:
        raise Unauthorized("Authorization header required")
    return token


class SessionStore:
    """
    Single active session per user: issuing a token overwrites the previous
    one, which stops authenticating immediately. Tokens do not expire.
    """

    def __init__(self, db: Session, token_bytes: Optional[int] = None):
        self.db = db
        self.user_repo = UserRepository(db)
        self.token_bytes = token_bytes or settings.SESSION_TOKEN_BYTES

    def _new_token(self) -> str:
        return secrets.token_hex(self.token_bytes)

    def issue(self, user_id: int) -> str:
        """Store a fresh token for the user (caller commits)."""
        user = self.user_repo.get(user_id)
        if not user:
            raise Unauthorized("Invalid username or password")
        token = self._new_token()
        self.user_repo.set_token(user, token)
        log.info("Issued session token for user %s", user_id)
        return token

    def authenticate(self, token: Optional[str]) -> int:
        if not token:
            raise Unauthorized("Authorization header required")
        user = self.user_repo.get_by_token(token)
        if not user:
            raise Unauthorized("Invalid token")
        return user.id

    def authenticate_header(self, authorization: Optional[str]) -> int:
        return self.authenticate(extract_token(authorization))

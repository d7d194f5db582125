from typing import Optional

import bcrypt

from shopcart.config import settings


class PasswordHashError(Exception):
    """Raised when a password cannot be hashed (e.g. longer than bcrypt accepts)."""
    pass


class BcryptPasswordHasher:
    """
    Credential hashing backed by bcrypt.

    `verify` never raises: a wrong password, an empty digest or a digest that
    is not a bcrypt hash all simply return False.
    """

    def __init__(self, rounds: Optional[int] = None):
        self.rounds = rounds or settings.BCRYPT_ROUNDS

    def hash(self, password: str) -> str:
        try:
            return bcrypt.hashpw(
                password.encode("utf-8"), bcrypt.gensalt(rounds=self.rounds)
            ).decode("utf-8")
        except ValueError as e:
            raise PasswordHashError(str(e))

    def verify(self, digest: str, password: str) -> bool:
        if not digest or password is None:
            return False
        try:
            return bcrypt.checkpw(password.encode("utf-8"), digest.encode("utf-8"))
        except ValueError:
            return False

import os
from contextlib import contextmanager
from typing import Iterator, Optional

from filelock import FileLock, Timeout

from shopcart.config import settings
from shopcart.exceptions import InternalFailure


class LockManager:
    """
    Named advisory locks backed by lock files, so they hold across threads
    and across worker processes sharing the same lock directory.
    """

    def __init__(self, lock_dir: Optional[str] = None, timeout: Optional[float] = None):
        self.lock_dir = lock_dir or settings.LOCK_DIR
        self.timeout = settings.LOCK_TIMEOUT_SECONDS if timeout is None else timeout
        os.makedirs(self.lock_dir, exist_ok=True)

    def _path(self, name: str) -> str:
        return os.path.join(self.lock_dir, f"{name}.lock")

    @contextmanager
    def hold(self, name: str) -> Iterator[None]:
        lock = FileLock(self._path(name))
        try:
            with lock.acquire(timeout=self.timeout):
                yield
        except Timeout:
            raise InternalFailure("Could not acquire lock; try again")

    def for_user(self, user_id: int):
        return self.hold(f"user_{user_id}")

    def for_cart(self, cart_id: int):
        return self.hold(f"cart_{cart_id}")

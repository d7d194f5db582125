from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from shopcart.db import get_db
from shopcart.services.session_service import SessionStore


def get_current_user_id(
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
) -> int:
    """Resolve the caller from `Authorization: Bearer <token>` (or a bare token)."""
    return SessionStore(db).authenticate_header(authorization)

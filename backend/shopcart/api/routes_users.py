from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shopcart.db import get_db
from shopcart.schemas.user_schema import LoginIn, LoginOut, UserCreate, UserOut
from shopcart.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED, summary="Register user")
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    return UserService(db).register(payload.username, payload.password)


@router.get("", response_model=List[UserOut], summary="List users")
def list_users(db: Session = Depends(get_db)):
    return UserService(db).list_users()


@router.post("/login", response_model=LoginOut, summary="Log in and get a session token")
def login(payload: LoginIn, db: Session = Depends(get_db)):
    token, user = UserService(db).login(payload.username, payload.password)
    return {"token": token, "user": user}

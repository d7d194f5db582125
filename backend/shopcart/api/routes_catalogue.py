from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from shopcart.db import SQL_INT_MAX, get_db
from shopcart.schemas.item_schema import ItemCreate, ItemOut
from shopcart.services.catalog_service import CatalogService

router = APIRouter(prefix="/items", tags=["catalogue"])


@router.get("", response_model=List[ItemOut], summary="List items")
def list_items(db: Session = Depends(get_db)):
    return CatalogService(db).list_items()


@router.get("/{item_id}", response_model=ItemOut, summary="Get item by id")
def get_item(item_id: int = Path(..., ge=1, le=SQL_INT_MAX), db: Session = Depends(get_db)):
    return CatalogService(db).get_item(item_id)


@router.post("", response_model=ItemOut, status_code=status.HTTP_201_CREATED, summary="Create item")
def create_item(payload: ItemCreate, db: Session = Depends(get_db)):
    return CatalogService(db).create_item(
        payload.name, payload.price, description=payload.description
    )

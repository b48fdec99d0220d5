# server/api/inventory.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from server.api.auth import get_current_user
from server.core import inventory as inventory_service
from server.database import get_db
from server.models import User
from server.models.schemas import ItemFields, ItemOut


# -------------------------------
# Router Configuration
# -------------------------------

router = APIRouter(prefix="/inventory", tags=["inventory"])


def _dump(item) -> dict:
    return ItemOut.model_validate(item).model_dump(mode="json")


# -------------------------------
# Inventory Endpoints
# -------------------------------

@router.get("")
def list_items(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Lists every item owned by the caller, oldest first.
    """
    items = inventory_service.list_items(db, current_user)
    return {"success": True, "data": [_dump(item) for item in items]}


@router.get("/{item_id}")
def get_item(
    item_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    item = inventory_service.get_item(db, current_user, item_id)
    return {"success": True, "data": _dump(item)}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_item(
    payload: ItemFields,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    item = inventory_service.create_item(db, current_user, payload)
    return {"success": True, "data": _dump(item)}


@router.put("/{item_id}")
def update_item(
    item_id: str,
    payload: ItemFields,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Replaces all writable fields of an owned item.
    """
    item = inventory_service.update_item(db, current_user, item_id, payload)
    return {"success": True, "data": _dump(item)}


@router.delete("/{item_id}")
def delete_item(
    item_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    inventory_service.delete_item(db, current_user, item_id)
    return {"success": True}

# server/core/inventory.py

"""
Inventory resource service.

Every query is filtered by the owning account. An item that exists but
belongs to somebody else raises exactly the same NotFoundError as an item
that does not exist at all, so ids cannot be probed across accounts.
"""

import logging
from datetime import timedelta
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from server.core.errors import ConflictError, NotFoundError
from server.database import translate_storage_errors
from server.models import InventoryItem, User
from server.models.item import utcnow
from server.models.schemas import ItemFields, parse


logger = logging.getLogger(__name__)

SKU_CONFLICT_MESSAGE = "An item with this SKU already exists"


def _owned_item(db: Session, owner: User, item_id) -> InventoryItem:
    item = None
    if isinstance(item_id, str) and item_id:
        item = (
            db.query(InventoryItem)
            .filter(InventoryItem.id == item_id, InventoryItem.owner_id == owner.id)
            .first()
        )
    if item is None:
        raise NotFoundError()
    return item


def _sku_taken(db: Session, owner: User, sku: str, exclude_id: str | None = None) -> bool:
    query = db.query(InventoryItem.id).filter(
        InventoryItem.owner_id == owner.id,
        InventoryItem.sku == sku,
    )
    if exclude_id is not None:
        query = query.filter(InventoryItem.id != exclude_id)
    return query.first() is not None


def _commit(db: Session):
    try:
        db.commit()
    except IntegrityError as exc:
        # another request claimed the same (owner, sku) between check and write
        db.rollback()
        raise ConflictError(SKU_CONFLICT_MESSAGE) from exc


# -------------------------------
# Operations
# -------------------------------

@translate_storage_errors
def list_items(db: Session, owner: User) -> list[InventoryItem]:
    return (
        db.query(InventoryItem)
        .filter(InventoryItem.owner_id == owner.id)
        .order_by(InventoryItem.created_at, InventoryItem.id)
        .all()
    )


@translate_storage_errors
def get_item(db: Session, owner: User, item_id: str) -> InventoryItem:
    return _owned_item(db, owner, item_id)


@translate_storage_errors
def create_item(db: Session, owner: User, fields) -> InventoryItem:
    data = parse(ItemFields, fields)

    if _sku_taken(db, owner, data.sku):
        raise ConflictError(SKU_CONFLICT_MESSAGE)

    now = utcnow()
    item = InventoryItem(
        owner_id=owner.id,
        created_at=now,
        updated_at=now,
        **data.model_dump(),
    )
    db.add(item)
    _commit(db)
    db.refresh(item)

    logger.info("Account %s created item %s", owner.id, item.id)
    return item


@translate_storage_errors
def update_item(db: Session, owner: User, item_id: str, fields) -> InventoryItem:
    item = _owned_item(db, owner, item_id)
    data = parse(ItemFields, fields)

    if _sku_taken(db, owner, data.sku, exclude_id=item.id):
        raise ConflictError(SKU_CONFLICT_MESSAGE)

    for key, value in data.model_dump().items():
        setattr(item, key, value)
    now = utcnow()
    if now <= item.updated_at:
        now = item.updated_at + timedelta(microseconds=1)
    item.updated_at = now
    _commit(db)
    db.refresh(item)

    logger.info("Account %s updated item %s", owner.id, item.id)
    return item


@translate_storage_errors
def delete_item(db: Session, owner: User, item_id: str) -> None:
    item = _owned_item(db, owner, item_id)
    db.delete(item)
    db.commit()
    logger.info("Account %s deleted item %s", owner.id, item_id)

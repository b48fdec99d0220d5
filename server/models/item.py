# server/models/item.py

from datetime import datetime, timezone
from uuid import uuid4
from sqlalchemy import Column, Integer, String, Text, Numeric, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from . import Base


def utcnow() -> datetime:
    # naive UTC; SQLite drops tzinfo on the way in
    return datetime.now(timezone.utc).replace(tzinfo=None)


class InventoryItem(Base):
    __tablename__ = "inventory_items"
    __table_args__ = (
        UniqueConstraint("owner_id", "sku", name="uq_inventory_items_owner_sku"),
    )

    id = Column(String(32), primary_key=True, default=lambda: uuid4().hex)
    owner_id = Column(String(32), ForeignKey("users.id"), index=True, nullable=False)
    name = Column(String(200), nullable=False)
    sku = Column(String(64), nullable=False)
    category = Column(String(100), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    price = Column(Numeric(12, 2), nullable=False, default=0)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    owner = relationship("User", back_populates="items")

# server/models/user.py

from uuid import uuid4
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from . import Base
from .item import utcnow


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for application accounts.
    Email is stored lower-cased so the unique index is case-insensitive.
    Only the password hash is ever persisted.
    """
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=lambda: uuid4().hex)
    name = Column(String(120), nullable=False)
    email = Column(String(254), unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    items = relationship("InventoryItem", back_populates="owner", cascade="all, delete-orphan")

# server/database.py

import logging
from functools import wraps
from pathlib import Path
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from server.core.config import DATABASE_URL
from server.core.errors import StorageError
from server.models import Base


logger = logging.getLogger(__name__)


def _connect_args(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    DATABASE_URL,
    connect_args=_connect_args(DATABASE_URL),
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def init_db(bind=None):
    bind = bind or engine
    database = bind.url.database
    if bind.url.get_backend_name() == "sqlite" and database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=bind)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def translate_storage_errors(func):
    """
    Wraps a service function whose first argument is the DB session.
    Any SQLAlchemy failure that escapes it rolls the session back and is
    re-raised as StorageError, so engine text never reaches the caller.
    """
    @wraps(func)
    def wrapper(db, *args, **kwargs):
        try:
            return func(db, *args, **kwargs)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Storage failure in %s", func.__name__)
            raise StorageError() from exc
    return wrapper

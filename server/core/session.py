# server/core/session.py

"""
Session service: account registration, credential checks and bearer tokens.

Tokens are stateless JWTs. Nothing is stored server-side when a token is
minted, so logging out is simply the client discarding its token.
"""

import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from server.core.errors import AuthError, ConflictError, InvalidCredentialsError
from server.core.security import (
    TokenError,
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)
from server.database import translate_storage_errors
from server.models import User
from server.models.schemas import RegisterRequest, parse


logger = logging.getLogger(__name__)

# Hash compared against when the email is unknown, so both failure paths cost the same.
_DUMMY_HASH = get_password_hash("not-a-real-password")


def normalize_email(email: str) -> str:
    return email.strip().lower()


@translate_storage_errors
def register(db: Session, name: str, email: str, password: str) -> tuple[User, str]:
    data = parse(RegisterRequest, {"name": name, "email": email, "password": password})
    email = normalize_email(data.email)

    if db.query(User).filter(User.email == email).first():
        raise ConflictError("Email is already registered")

    user = User(name=data.name, email=email, hashed_password=get_password_hash(data.password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError("Email is already registered") from exc
    db.refresh(user)

    logger.info("Registered account %s", user.id)
    return user, create_access_token(user.id)


@translate_storage_errors
def login(db: Session, email: str, password: str) -> tuple[User, str]:
    user = None
    if isinstance(email, str):
        user = db.query(User).filter(User.email == normalize_email(email)).first()

    hashed = user.hashed_password if user else _DUMMY_HASH
    if not verify_password(password, hashed) or user is None:
        logger.warning("Rejected login attempt")
        raise InvalidCredentialsError()

    logger.info("Account %s logged in", user.id)
    return user, create_access_token(user.id)


@translate_storage_errors
def verify(db: Session, token: str | None) -> User:
    if not token:
        raise AuthError("Not authenticated")

    try:
        subject = decode_access_token(token)
    except TokenError as exc:
        logger.warning("Rejected token: %s", exc)
        raise AuthError("Invalid or expired token") from exc

    user = db.get(User, subject)
    if user is None:
        logger.warning("Token subject %s no longer exists", subject)
        raise AuthError("Invalid or expired token")
    return user

# server/api/auth.py

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from server.core import session as session_service
from server.database import get_db
from server.models import User
from server.models.schemas import LoginRequest, RegisterRequest, UserOut


router = APIRouter(prefix="/auth", tags=["auth"])

# auto_error=False so a missing header flows into AuthError and the shared 401 payload
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)


def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    return session_service.verify(db, token)


def _session_payload(user: User, token: str) -> dict:
    return {
        "success": True,
        "token": token,
        "user": UserOut.model_validate(user).model_dump(),
    }


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    user, token = session_service.register(db, payload.name, payload.email, payload.password)
    return _session_payload(user, token)


@router.post("/login")
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    user, token = session_service.login(db, payload.email, payload.password)
    return _session_payload(user, token)


@router.get("/me")
def read_users_me(current_user: User = Depends(get_current_user)):
    return {"success": True, "user": UserOut.model_validate(current_user).model_dump()}

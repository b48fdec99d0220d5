# server/core/config.py

import os
import logging
from dotenv import load_dotenv


load_dotenv()

logger = logging.getLogger(__name__)


# -------------------------------
# Database
# -------------------------------

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/inventory.db")


# -------------------------------
# Tokens & Passwords
# -------------------------------

SECRET_KEY = os.getenv("JWT_SECRET_KEY") or "CHANGE_ME_IN_PRODUCTION"
ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")

try:
    ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))
except ValueError:
    ACCESS_TOKEN_EXPIRE_MINUTES = 1440

try:
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))
except ValueError:
    BCRYPT_ROUNDS = 12

try:
    PASSWORD_MIN_LENGTH = int(os.getenv("PASSWORD_MIN_LENGTH", "6"))
except ValueError:
    PASSWORD_MIN_LENGTH = 6


# -------------------------------
# HTTP & Logging
# -------------------------------

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    if not os.getenv("JWT_SECRET_KEY"):
        logger.warning("JWT_SECRET_KEY is not set; using an insecure development secret")

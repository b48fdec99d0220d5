# server/models/schemas.py

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Type, TypeVar
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_serializer, field_validator
from pydantic import ValidationError as PydanticValidationError
from server.core.config import PASSWORD_MIN_LENGTH
from server.core.errors import ValidationError


FIELD_LABELS = {
    "name": "Name",
    "sku": "SKU",
    "category": "Category",
    "quantity": "Quantity",
    "price": "Price",
    "description": "Description",
    "email": "Email",
    "password": "Password",
}

CENT = Decimal("0.01")

# upper bounds of the Integer and Numeric(12, 2) columns
MAX_QUANTITY = 2**31 - 1
MAX_PRICE = Decimal("9999999999.99")

Schema = TypeVar("Schema", bound=BaseModel)


# -------------------------------
# Error Conversion
# -------------------------------

def field_errors(errors) -> dict[str, str]:
    """
    Flattens pydantic error entries into a field -> message mapping.
    Only the first message per field is kept.
    """
    result = {}
    for err in errors:
        loc = [part for part in err.get("loc", ()) if part != "body"]
        if err.get("type") == "json_invalid" or any(isinstance(part, int) for part in loc):
            # malformed JSON reports a character offset, not a field
            loc = []
        field = ".".join(str(part) for part in loc) or "body"
        if field in result:
            continue

        label = FIELD_LABELS.get(field, field.capitalize())
        if err.get("type") == "missing":
            message = f"{label} is required"
        else:
            message = err.get("msg", "Invalid value")
            if message.startswith("Value error, "):
                message = message[len("Value error, "):]
        result[field] = message
    return result


def parse(schema: Type[Schema], data) -> Schema:
    """Validate `data` against `schema`, raising the service ValidationError."""
    if isinstance(data, schema):
        return data
    if not isinstance(data, dict):
        raise ValidationError({"body": "Request body must be a JSON object"})
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(field_errors(exc.errors())) from exc


def _required_text(value, field_name: str):
    if value is None:
        raise ValueError(f"{FIELD_LABELS[field_name]} is required")
    if not isinstance(value, str):
        raise ValueError(f"{FIELD_LABELS[field_name]} must be a string")
    value = value.strip()
    if not value:
        raise ValueError(f"{FIELD_LABELS[field_name]} is required")
    return value


# -------------------------------
# Auth Schemas
# -------------------------------

class RegisterRequest(BaseModel):
    name: str
    email: EmailStr
    password: str

    @field_validator("name", mode="before")
    @classmethod
    def name_required(cls, v):
        return _required_text(v, "name")

    @field_validator("email", mode="before")
    @classmethod
    def email_strip(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("password")
    @classmethod
    def password_length(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        if len(v) < PASSWORD_MIN_LENGTH:
            raise ValueError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
        return v


class LoginRequest(BaseModel):
    email: str
    password: str


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str


# -------------------------------
# Inventory Schemas
# -------------------------------

class ItemFields(BaseModel):
    """
    Writable fields of an inventory item, shared by create and update.
    Every field is checked so a single response lists all problems.
    """
    name: str = Field(max_length=200)
    sku: str = Field(max_length=64)
    category: str = Field(max_length=100)
    quantity: int = Field(ge=0, le=MAX_QUANTITY)
    price: Decimal = Field(ge=0, le=MAX_PRICE, allow_inf_nan=False)
    description: Optional[str] = None

    @field_validator("name", "sku", "category", mode="before")
    @classmethod
    def strip_required(cls, v, info):
        return _required_text(v, info.field_name)

    @field_validator("price")
    @classmethod
    def round_price(cls, v: Decimal) -> Decimal:
        return v.quantize(CENT, rounding=ROUND_HALF_UP)

    @field_validator("description", mode="before")
    @classmethod
    def blank_description(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    sku: str
    category: str
    quantity: int
    price: Decimal
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @field_serializer("price")
    def price_as_number(self, v: Decimal) -> float:
        return float(v)

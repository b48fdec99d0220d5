# app/services/inventory.py

from decimal import Decimal, InvalidOperation


LOW_STOCK_THRESHOLD = 10
MEDIUM_STOCK_THRESHOLD = 25
RECENT_ITEMS = 5

EMPTY_FORM = {
    "name": "",
    "sku": "",
    "category": "",
    "quantity": "",
    "price": "",
    "description": "",
}


# -------------------------------
# Table & Dashboard Helpers
# -------------------------------

def filter_items(items, term):
    """
    Case-insensitive substring match on name, SKU and category.
    A blank term returns every item.
    """
    term = (term or "").strip().lower()
    if not term:
        return list(items)
    return [
        item for item in items
        if any(term in str(item.get(key, "")).lower() for key in ("name", "sku", "category"))
    ]


def stock_level(quantity):
    if quantity < LOW_STOCK_THRESHOLD:
        return "low"
    if quantity < MEDIUM_STOCK_THRESHOLD:
        return "medium"
    return "ok"


def summarize(items):
    items = list(items)
    return {
        "total_items": len(items),
        "low_stock": sum(1 for item in items if item["quantity"] < LOW_STOCK_THRESHOLD),
        "total_value": sum(float(item["price"]) * item["quantity"] for item in items),
        "categories": len({item["category"] for item in items}),
        # items arrive oldest first
        "recent": list(reversed(items[-RECENT_ITEMS:])),
    }


def format_currency(amount):
    return f"${float(amount):,.2f}"


# -------------------------------
# Form Handling
# -------------------------------

def form_from_item(item):
    return {
        "name": item.get("name") or "",
        "sku": item.get("sku") or "",
        "category": item.get("category") or "",
        "quantity": str(item.get("quantity", "")),
        "price": str(item.get("price", "")),
        "description": item.get("description") or "",
    }


def validate_form(form):
    """
    Checks raw form strings before they are sent to the server.
    Returns (fields, errors); `fields` is only meaningful when `errors` is empty.
    """
    errors = {}
    fields = {}

    for key, label in (("name", "Name"), ("sku", "SKU"), ("category", "Category")):
        value = str(form.get(key) or "").strip()
        if not value:
            errors[key] = f"{label} is required"
        fields[key] = value

    try:
        quantity = int(str(form.get("quantity", "")).strip())
        if quantity < 0:
            raise ValueError
        fields["quantity"] = quantity
    except ValueError:
        errors["quantity"] = "Valid quantity is required"

    try:
        price = Decimal(str(form.get("price", "")).strip())
        if not price.is_finite() or price < 0:
            raise InvalidOperation
        fields["price"] = float(price)
    except InvalidOperation:
        errors["price"] = "Valid price is required"

    description = str(form.get("description") or "").strip()
    fields["description"] = description or None
    return fields, errors

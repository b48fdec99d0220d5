# app/ui/item_form.py

import streamlit as st
from app.services.api import ApiError, SessionExpired, create_item, get_item, update_item
from app.services.inventory import EMPTY_FORM, form_from_item, validate_form


def add_item_page(session):
    st.title("Add New Item")
    st.caption("Create a new inventory item")

    form = item_form("add_item_form", EMPTY_FORM, "Add Item")
    if form is None:
        return

    try:
        create_item(session, form)
    except SessionExpired:
        st.rerun()
    except ApiError as e:
        show_api_error("Failed to add item", e)
        return

    st.toast("Item added successfully!")
    st.session_state["page"] = "inventory"
    st.rerun()


def edit_item_page(session):
    st.title("Edit Item")

    item_id = st.session_state.get("edit_item_id")
    if not item_id:
        st.session_state["page"] = "inventory"
        st.rerun()

    try:
        item = get_item(session, item_id)
    except SessionExpired:
        st.rerun()
    except ApiError as e:
        st.error(f"Failed to fetch item details: {e.message}")
        st.session_state.pop("edit_item_id", None)
        return

    form = item_form(f"edit_item_form_{item_id}", form_from_item(item), "Save Changes")
    if form is None:
        return

    try:
        update_item(session, item_id, form)
    except SessionExpired:
        st.rerun()
    except ApiError as e:
        show_api_error("Failed to update item", e)
        return

    st.toast("Item updated successfully!")
    st.session_state.pop("edit_item_id", None)
    st.session_state["page"] = "inventory"
    st.rerun()


def item_form(key, initial, submit_label):
    """
    Renders the shared item form. Returns validated fields on a clean
    submit, otherwise None (field errors are shown inline).
    """
    with st.form(key):
        raw = {
            "name": st.text_input("Product Name *", value=initial["name"]),
            "sku": st.text_input("SKU (Stock Keeping Unit) *", value=initial["sku"], placeholder="e.g., PRD-001"),
            "category": st.text_input("Category *", value=initial["category"], placeholder="e.g., Electronics, Clothing, Food"),
        }
        qty_col, price_col = st.columns(2)
        raw["quantity"] = qty_col.text_input("Quantity *", value=initial["quantity"], placeholder="0")
        raw["price"] = price_col.text_input("Price ($) *", value=initial["price"], placeholder="0.00")
        raw["description"] = st.text_area("Description (Optional)", value=initial["description"])
        submitted = st.form_submit_button(submit_label)

    if st.button("← Back to Inventory", key=f"{key}_back"):
        st.session_state["page"] = "inventory"
        st.rerun()

    if not submitted:
        return None

    fields, errors = validate_form(raw)
    if errors:
        for message in errors.values():
            st.error(message)
        return None
    return fields


def show_api_error(prefix, error):
    st.error(f"{prefix}: {error.message}")
    for message in error.errors.values():
        st.caption(message)

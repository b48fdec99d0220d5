# app/ui/inventory.py

import streamlit as st
from app.services.api import ApiError, SessionExpired, delete_item, list_items
from app.services.inventory import filter_items, format_currency, stock_level


STOCK_BADGES = {"low": "🔴", "medium": "🟠", "ok": "🟢"}


def inventory_page(session):
    st.title("📦 Inventory")

    if st.button("➕ Add New Item"):
        st.session_state["page"] = "add"
        st.rerun()

    try:
        items = list_items(session)
    except SessionExpired:
        st.rerun()
    except ApiError as e:
        st.error(f"Failed to fetch inventory items: {e.message}")
        return

    search = st.text_input("🔍 Search by name, SKU or category", key="inventory_search")
    visible = filter_items(items, search)

    if not items:
        st.info("No items yet. Add your first inventory item.")
        return
    if not visible:
        st.info("No items match your search.")
        return

    handle_delete_confirm(session)

    header = st.columns([3, 2, 2, 1, 2, 2])
    for col, label in zip(header, ["Name", "SKU", "Category", "Qty", "Price", ""]):
        col.markdown(f"**{label}**")

    for item in visible:
        row = st.columns([3, 2, 2, 1, 2, 2])
        row[0].write(item["name"])
        row[1].write(item["sku"])
        row[2].write(item["category"])
        row[3].write(f"{STOCK_BADGES[stock_level(item['quantity'])]} {item['quantity']}")
        row[4].write(format_currency(item["price"]))
        with row[5]:
            edit_col, delete_col = st.columns(2)
            if edit_col.button("✏️", key=f"edit_{item['id']}"):
                st.session_state["edit_item_id"] = item["id"]
                st.session_state["page"] = "edit"
                st.rerun()
            if delete_col.button("🗑️", key=f"delete_{item['id']}"):
                st.session_state["delete_target"] = item
                st.rerun()


def handle_delete_confirm(session):
    target = st.session_state.get("delete_target")
    if not target:
        return

    st.warning(f"⚠️ Delete '{target['name']}' ({target['sku']})? This cannot be undone.")
    confirm_col, cancel_col = st.columns(2)
    if confirm_col.button("Delete", key="delete_confirm"):
        try:
            delete_item(session, target["id"])
            st.toast("Item deleted successfully")
        except SessionExpired:
            # session already cleared; the rerun lands on the login page
            pass
        except ApiError as e:
            st.error(f"Failed to delete item: {e.message}")
        st.session_state.pop("delete_target", None)
        st.rerun()
    if cancel_col.button("Cancel", key="delete_cancel"):
        st.session_state.pop("delete_target", None)
        st.rerun()

# app/ui/dashboard.py

import streamlit as st
from app.services.api import ApiError, SessionExpired, list_items
from app.services.inventory import format_currency, summarize


def dashboard_page(session):
    name = (session.user or {}).get("name", "")
    st.title(f"Welcome back, {name}!")
    st.caption("Here's an overview of your inventory")

    try:
        items = list_items(session)
    except SessionExpired:
        st.rerun()
    except ApiError as e:
        st.error(f"Failed to load inventory: {e.message}")
        return

    stats = summarize(items)
    cols = st.columns(4)
    cols[0].metric("📦 Total Items", stats["total_items"])
    cols[1].metric("⚠️ Low Stock Items", stats["low_stock"])
    cols[2].metric("💰 Total Inventory Value", format_currency(stats["total_value"]))
    cols[3].metric("🏷️ Categories", stats["categories"])

    st.subheader("Recent Items")
    if not stats["recent"]:
        st.info("No items yet. Start by adding your first inventory item.")
        if st.button("Add First Item"):
            st.session_state["page"] = "add"
            st.rerun()
        return

    st.dataframe(
        [
            {
                "Name": item["name"],
                "SKU": item["sku"],
                "Category": item["category"],
                "Quantity": item["quantity"],
                "Price": format_currency(item["price"]),
            }
            for item in stats["recent"]
        ],
        hide_index=True,
        use_container_width=True,
    )

# app/main.py

import os
import streamlit as st
from dotenv import load_dotenv
from streamlit_cookies_manager import EncryptedCookieManager
from app.services.api import logout_user
from app.services.session import SessionContext
from app.ui.dashboard import dashboard_page
from app.ui.inventory import inventory_page
from app.ui.item_form import add_item_page, edit_item_page
from app.ui.login import login_page


load_dotenv()

st.set_page_config(page_title="Inventory Tracker", layout="wide")

cookies = EncryptedCookieManager(password=os.getenv("COOKIE_PASSWORD", "change-me"))
if not cookies.ready():
    st.stop()

if "session" not in st.session_state:
    st.session_state["session"] = SessionContext.load(cookies)

PAGES = {
    "dashboard": dashboard_page,
    "inventory": inventory_page,
    "add": add_item_page,
    "edit": edit_item_page,
}


def main_page(session):
    st.sidebar.markdown("## 📋 Menu")

    if st.sidebar.button("🏠 Dashboard"):
        st.session_state["page"] = "dashboard"
    if st.sidebar.button("📦 Inventory"):
        st.session_state["page"] = "inventory"
    if st.sidebar.button("➕ Add Item"):
        st.session_state["page"] = "add"
    if st.sidebar.button("🔓 Log out"):
        logout_user(session)
        st.session_state.clear()
        st.rerun()

    page = st.session_state.get("page", "dashboard")
    PAGES.get(page, dashboard_page)(session)


session = st.session_state["session"]
if not session.is_authenticated:
    login_page(session)
else:
    main_page(session)

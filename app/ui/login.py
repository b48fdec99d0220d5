# app/ui/login.py

import streamlit as st
from app.services.api import ApiError, login_user, register_user


def login_page(session):
    st.title("🔐 Log in")

    if "show_register" not in st.session_state:
        st.session_state["show_register"] = False

    if st.session_state["show_register"]:
        show_register_form(session)
    else:
        show_login_form(session)


def show_login_form(session):
    with st.form("login_form"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Log in")

    if submitted:
        if not email.strip() or not password:
            st.error("❌ Email and password are required")
        else:
            with st.spinner("Logging in..."):
                try:
                    user = login_user(session, email, password)
                except ApiError as e:
                    st.error(f"❌ Login failed: {e.message}")
                else:
                    st.toast(f"✅ Welcome back, {user['name']}!")
                    st.rerun()

    if st.button("Create an account"):
        st.session_state["show_register"] = True
        st.rerun()


def show_register_form(session):
    st.subheader("📝 Register")

    with st.form("register_form"):
        name = st.text_input("Name")
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        confirm = st.text_input("Confirm password", type="password")
        submitted = st.form_submit_button("Register")

    if submitted:
        if password != confirm:
            st.error("❌ Passwords do not match")
        else:
            with st.spinner("Creating account..."):
                try:
                    register_user(session, name, email, password)
                except ApiError as e:
                    st.error(f"❌ Registration failed: {e.message}")
                    for field, message in e.errors.items():
                        st.caption(f"{field}: {message}")
                else:
                    st.session_state["show_register"] = False
                    st.toast("🎉 Account created!")
                    st.rerun()

    if st.button("← Back to log in"):
        st.session_state["show_register"] = False
        st.rerun()

# app/services/api.py

import os
import requests
from dotenv import load_dotenv


load_dotenv()

# Base URL of the FastAPI backend
FASTAPI_URL = os.getenv("FASTAPI_URL", "http://localhost:8000")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))


class ApiError(Exception):
    def __init__(self, message, status_code=None, errors=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or {}


class SessionExpired(ApiError):
    pass


def _request(method, path, session=None, **kwargs):
    """
    Sends a request to the backend and returns the decoded success payload.
    When `session` is given its token is attached, and a 401 clears it.
    """
    headers = session.auth_headers if session is not None else {}
    try:
        res = requests.request(
            method,
            f"{FASTAPI_URL}{path}",
            headers=headers,
            timeout=REQUEST_TIMEOUT,
            **kwargs,
        )
    except requests.RequestException as e:
        raise ApiError(f"Could not reach the server: {e}") from e

    try:
        data = res.json()
    except ValueError:
        data = {}
    if not isinstance(data, dict):
        data = {}

    if res.status_code == 401 and session is not None:
        session.clear()
        raise SessionExpired(data.get("message", "Session expired. Please log in again."), 401)

    if res.status_code >= 400 or not data.get("success"):
        raise ApiError(
            data.get("message") or f"Error: Status {res.status_code}",
            res.status_code,
            data.get("errors"),
        )
    return data


# -------------------------------
# Authentication-related functions
# -------------------------------

def register_user(session, name, email, password):
    """
    Registers a new account and starts the session with the issued token.
    """
    data = _request("POST", "/auth/register", json={"name": name, "email": email, "password": password})
    session.start(data["token"], data["user"])
    return data["user"]


def login_user(session, email, password):
    """
    Logs in and starts the session with the issued token.
    """
    data = _request("POST", "/auth/login", json={"email": email, "password": password})
    session.start(data["token"], data["user"])
    return data["user"]


def logout_user(session):
    # tokens are stateless; dropping ours is the whole logout
    session.clear()


# -------------------------
# Inventory
# -------------------------

def list_items(session):
    return _request("GET", "/inventory", session=session)["data"]


def get_item(session, item_id):
    return _request("GET", f"/inventory/{item_id}", session=session)["data"]


def create_item(session, fields):
    return _request("POST", "/inventory", session=session, json=fields)["data"]


def update_item(session, item_id, fields):
    return _request("PUT", f"/inventory/{item_id}", session=session, json=fields)["data"]


def delete_item(session, item_id):
    _request("DELETE", f"/inventory/{item_id}", session=session)

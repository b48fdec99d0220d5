import json

import pytest
import requests

from app.services import api
from app.services.inventory import filter_items, format_currency, stock_level, summarize, validate_form
from app.services.session import SessionContext


class FakeResponse:
    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class CookieStore(dict):
    saves = 0

    def save(self):
        self.saves += 1


@pytest.fixture()
def calls(monkeypatch):
    recorded = []
    responses = []

    def fake_request(method, url, headers=None, timeout=None, **kwargs):
        recorded.append({"method": method, "url": url, "headers": headers, **kwargs})
        return responses.pop(0)

    monkeypatch.setattr(api.requests, "request", fake_request)
    return recorded, responses


def make_item(name, sku, category, quantity, price):
    return {"id": sku, "name": name, "sku": sku, "category": category, "quantity": quantity, "price": price}


# -------------------------------
# Session Context
# -------------------------------

def test_session_start_persists_to_store():
    store = CookieStore()
    session = SessionContext(store)

    session.start("tok", {"id": "1", "name": "Alice", "email": "a@x.com"})

    assert session.is_authenticated
    assert store["access_token"] == "tok"
    assert json.loads(store["user"])["name"] == "Alice"
    assert store.saves == 1


def test_session_load_restores_and_clear_discards():
    store = CookieStore(access_token="tok", user=json.dumps({"name": "Alice"}))

    session = SessionContext.load(store)
    assert session.token == "tok"
    assert session.auth_headers == {"Authorization": "Bearer tok"}

    session.clear()
    assert not session.is_authenticated
    assert session.auth_headers == {}
    assert "access_token" not in store


def test_session_load_ignores_corrupt_user():
    session = SessionContext.load({"access_token": "tok", "user": "{not json"})
    assert not session.is_authenticated


# -------------------------------
# API Client
# -------------------------------

def test_login_starts_session(calls):
    recorded, responses = calls
    responses.append(FakeResponse(200, {"success": True, "token": "tok", "user": {"name": "Alice"}}))
    session = SessionContext()

    user = api.login_user(session, "a@x.com", "secret1")

    assert user == {"name": "Alice"}
    assert session.token == "tok"
    assert recorded[0]["url"].endswith("/auth/login")
    assert recorded[0]["headers"] == {}


def test_login_failure_raises_without_touching_session(calls):
    _, responses = calls
    responses.append(FakeResponse(401, {"success": False, "message": "Invalid credentials"}))
    session = SessionContext()

    with pytest.raises(api.ApiError) as exc:
        api.login_user(session, "a@x.com", "nope")

    assert not isinstance(exc.value, api.SessionExpired)
    assert exc.value.message == "Invalid credentials"


def test_authenticated_calls_send_bearer_token(calls):
    recorded, responses = calls
    responses.append(FakeResponse(200, {"success": True, "data": []}))
    session = SessionContext()
    session.start("tok", {"name": "Alice"})

    assert api.list_items(session) == []
    assert recorded[0]["headers"] == {"Authorization": "Bearer tok"}


def test_401_clears_session(calls):
    _, responses = calls
    responses.append(FakeResponse(401, {"success": False, "message": "Invalid or expired token"}))
    store = CookieStore()
    session = SessionContext(store)
    session.start("tok", {"name": "Alice"})

    with pytest.raises(api.SessionExpired):
        api.get_item(session, "abc")

    assert not session.is_authenticated
    assert "access_token" not in store


def test_validation_errors_are_carried(calls):
    _, responses = calls
    responses.append(FakeResponse(400, {
        "success": False,
        "message": "Validation failed",
        "errors": {"sku": "SKU is required"},
    }))
    session = SessionContext()
    session.start("tok", {})

    with pytest.raises(api.ApiError) as exc:
        api.create_item(session, {"name": "Widget"})

    assert exc.value.status_code == 400
    assert exc.value.errors == {"sku": "SKU is required"}
    assert session.is_authenticated


def test_non_json_error_response(calls):
    _, responses = calls
    responses.append(FakeResponse(502, None))

    with pytest.raises(api.ApiError) as exc:
        api.delete_item(SessionContext(), "abc")
    assert exc.value.message == "Error: Status 502"


def test_connection_failure_becomes_api_error(monkeypatch):
    def unreachable(*args, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(api.requests, "request", unreachable)

    with pytest.raises(api.ApiError) as exc:
        api.list_items(SessionContext())
    assert "Could not reach the server" in exc.value.message


# -------------------------------
# View Helpers
# -------------------------------

ITEMS = [
    make_item("Hammer", "T-1", "Tools", 3, 12.5),
    make_item("Screws", "H-9", "Hardware", 40, 0.1),
    make_item("Saw", "T-2", "Tools", 12, 30),
]


def test_filter_matches_name_sku_or_category_case_insensitively():
    assert [i["sku"] for i in filter_items(ITEMS, "tools")] == ["T-1", "T-2"]
    assert [i["sku"] for i in filter_items(ITEMS, "h-9")] == ["H-9"]
    assert [i["sku"] for i in filter_items(ITEMS, "SAW")] == ["T-2"]
    assert filter_items(ITEMS, "  ") == ITEMS


def test_summarize():
    stats = summarize(ITEMS)

    assert stats["total_items"] == 3
    assert stats["low_stock"] == 1
    assert stats["total_value"] == pytest.approx(3 * 12.5 + 40 * 0.1 + 12 * 30)
    assert stats["categories"] == 2
    assert [i["sku"] for i in stats["recent"]] == ["T-2", "H-9", "T-1"]


def test_stock_level_thresholds():
    assert [stock_level(q) for q in (0, 9, 10, 24, 25)] == ["low", "low", "medium", "medium", "ok"]


def test_format_currency():
    assert format_currency(1234.5) == "$1,234.50"


def test_validate_form_collects_every_error():
    fields, errors = validate_form({"name": "", "sku": " ", "category": "", "quantity": "-1", "price": "x"})

    assert set(errors) == {"name", "sku", "category", "quantity", "price"}


def test_validate_form_converts_values():
    fields, errors = validate_form({
        "name": " Widget ", "sku": "W1", "category": "Tools",
        "quantity": "5", "price": "9.99", "description": "",
    })

    assert errors == {}
    assert fields == {
        "name": "Widget", "sku": "W1", "category": "Tools",
        "quantity": 5, "price": 9.99, "description": None,
    }

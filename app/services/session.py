# app/services/session.py

import json


TOKEN_KEY = "access_token"
USER_KEY = "user"


class SessionContext:
    """
    Holds the bearer token and the signed-in user for one browser session.

    `store` is any mutable mapping of strings (the encrypted cookie manager in
    the running app, a plain dict in tests). If it has a `save()` method it is
    called after every change so the cookie is written back.
    """

    def __init__(self, store=None):
        self.store = store if store is not None else {}
        self.token = None
        self.user = None

    @classmethod
    def load(cls, store):
        session = cls(store)
        token = store.get(TOKEN_KEY)
        raw_user = store.get(USER_KEY)
        if token and raw_user:
            try:
                session.token = token
                session.user = json.loads(raw_user)
            except (TypeError, ValueError):
                session.clear()
        return session

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    @property
    def auth_headers(self) -> dict:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def start(self, token: str, user: dict):
        self.token = token
        self.user = user
        self.store[TOKEN_KEY] = token
        self.store[USER_KEY] = json.dumps(user)
        self._save()

    def clear(self):
        self.token = None
        self.user = None
        for key in (TOKEN_KEY, USER_KEY):
            if key in self.store:
                del self.store[key]
        self._save()

    def _save(self):
        save = getattr(self.store, "save", None)
        if callable(save):
            save()

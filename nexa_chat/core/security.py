"""Login gate over a static username -> password table. Demo grade: plaintext, no throttling."""
from typing import Mapping, MutableMapping, Optional

from nexa_chat.core.errors import InvalidCredentials
from nexa_chat.core.sessions import SessionStore

SESSION_ID_KEY = "sid"
SESSION_USER_KEY = "user"


class AuthGate:
    """`cookie` is the signed cookie payload (request.session); it only ever holds the sid."""

    def __init__(self, users: Mapping[str, str], sessions: SessionStore):
        self._users = dict(users)
        self.sessions = sessions

    def login(self, cookie: MutableMapping, username: str, password: str) -> str:
        expected = self._users.get(username)
        if expected is None or expected != password:
            raise InvalidCredentials()
        # Fresh sid on every login, the previous session (if any) is dropped
        self.sessions.destroy(cookie.get(SESSION_ID_KEY))
        cookie.clear()
        cookie[SESSION_ID_KEY] = self.sessions.create({SESSION_USER_KEY: username})
        return username

    def current_user(self, cookie: Mapping) -> Optional[str]:
        session = self.sessions.get(cookie.get(SESSION_ID_KEY))
        if not session:
            return None
        return session.get(SESSION_USER_KEY) or None

    def is_authenticated(self, cookie: Mapping) -> bool:
        return self.current_user(cookie) is not None

    def logout(self, cookie: MutableMapping) -> None:
        # Server-side entry goes first, so a replayed copy of the cookie is worthless
        self.sessions.destroy(cookie.get(SESSION_ID_KEY))
        cookie.clear()

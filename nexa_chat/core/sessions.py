"""Server-side session state. The signed cookie only carries an opaque session id."""
import secrets
import threading
from typing import Dict, Optional


class SessionStore:
    """In-process sid -> session dict. Sessions do not survive a restart."""

    def __init__(self):
        self._sessions: Dict[str, dict] = {}
        self._lock = threading.Lock()

    def create(self, data: dict) -> str:
        sid = secrets.token_urlsafe(32)
        with self._lock:
            self._sessions[sid] = dict(data)
        return sid

    def get(self, sid: Optional[str]) -> Optional[dict]:
        if not sid:
            return None
        with self._lock:
            data = self._sessions.get(sid)
            return dict(data) if data is not None else None

    def destroy(self, sid: Optional[str]) -> None:
        if not sid:
            return
        with self._lock:
            self._sessions.pop(sid, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

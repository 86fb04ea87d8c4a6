"""Central config. Everything comes from the environment (.env supported); defaults live here only."""
import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parents[2]

DEFAULT_SESSION_SECRET = "nexa-secret"
DEFAULT_PORT = 3000

# Demo accounts only. Override with CHAT_USERS="name:pass,name:pass".
DEFAULT_USERS = {
    "vishnu": "pass123",
    "sarath": "pass234",
    "devadath": "pass345",
    "alan": "pass456",
    "abhishek": "pass567",
}


class Settings(BaseModel):
    database_url: Optional[str] = None
    db_ssl: bool = False
    session_secret: str = DEFAULT_SESSION_SECRET
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    store_file: Path = PROJECT_ROOT / "chat_store.json"
    static_dir: Path = PROJECT_ROOT / "static"
    users: Dict[str, str] = DEFAULT_USERS

    @property
    def mode(self) -> str:
        return "postgres" if self.database_url else "file"


def parse_users(raw: str) -> Dict[str, str]:
    """'alice:secret,bob:hunter2' -> {'alice': 'secret', 'bob': 'hunter2'}."""
    users = {}
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        name, sep, password = pair.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"CHAT_USERS entry must look like name:password, got {pair!r}")
        users[name.strip()] = password
    return users


def normalize_database_url(url: Optional[str]) -> Optional[str]:
    url = (url or "").strip()
    if not url:
        return None
    # Hosted Postgres providers hand out postgres://, SQLAlchemy only knows postgresql://
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    return url


def get_settings() -> Settings:
    """Build settings once from env. Pass the result to create_app."""
    users_raw = (os.getenv("CHAT_USERS") or "").strip()
    return Settings(
        database_url=normalize_database_url(os.getenv("DATABASE_URL")),
        db_ssl=os.getenv("DB_SSL") == "true" or os.getenv("APP_ENV") == "production",
        session_secret=(os.getenv("SESSION_SECRET") or "").strip() or DEFAULT_SESSION_SECRET,
        host=(os.getenv("HOST") or "").strip() or "0.0.0.0",
        port=int(os.getenv("PORT") or DEFAULT_PORT),
        store_file=Path(os.getenv("CHAT_STORE_FILE") or PROJECT_ROOT / "chat_store.json"),
        static_dir=Path(os.getenv("STATIC_DIR") or PROJECT_ROOT / "static"),
        users=parse_users(users_raw) if users_raw else dict(DEFAULT_USERS),
    )

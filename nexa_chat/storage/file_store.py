"""
JSON file store, {"lastId": N, "messages": [...]} rewritten on every append.

The whole document is read, mutated and written back, so appends from this
process are serialized with a lock. Several processes sharing one file can
still lose updates (last writer wins); use DATABASE_URL for that setup.
"""
import json
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from loguru import logger
from pydantic import ValidationError

from nexa_chat.core.errors import StoreError
from nexa_chat.schemas.message import HealthStatus, Message
from nexa_chat.storage.base import MessageStore

EMPTY_STORE = {"lastId": 0, "messages": []}


class JsonFileMessageStore(MessageStore):
    mode = "file"

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def initialize(self) -> None:
        with self._lock:
            if self.path.exists():
                return
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._write(dict(EMPTY_STORE))
        logger.info(f"Initialized file-based chat store at {self.path}")

    def _read(self) -> dict:
        try:
            store = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error(f"Error reading chat store {self.path}: {e}")
            raise StoreError() from e
        if not isinstance(store, dict):
            logger.error(f"Chat store {self.path} is not a JSON object")
            raise StoreError()
        last_id = store.get("lastId") or 0
        messages = store.get("messages") or []
        # bool is an int subclass, reject it explicitly
        if not isinstance(last_id, int) or isinstance(last_id, bool) or not isinstance(messages, list):
            logger.error(f"Chat store {self.path} has a malformed lastId or messages field")
            raise StoreError()
        store["lastId"] = last_id
        store["messages"] = messages
        return store

    def _write(self, store: dict) -> None:
        try:
            self.path.write_text(json.dumps(store, indent=2), encoding="utf-8")
        except OSError as e:
            logger.error(f"Error writing chat store {self.path}: {e}")
            raise StoreError() from e

    def list_messages(self, chat_name: str) -> List[Message]:
        with self._lock:
            store = self._read()
        try:
            msgs = [Message.model_validate(m) for m in store["messages"] if m.get("chat_name") == chat_name]
            # sorted() is stable: equal timestamps keep insertion order
            return sorted(msgs, key=lambda m: m.timestamp)
        except (AttributeError, TypeError, ValidationError) as e:
            logger.error(f"Malformed message in chat store {self.path}: {e}")
            raise StoreError() from e

    def append_message(self, chat_name: str, sender: str, text: str) -> Message:
        with self._lock:
            store = self._read()
            next_id = store["lastId"] + 1
            message = Message(
                id=next_id,
                chat_name=chat_name,
                sender=sender,
                text=text,
                timestamp=datetime.now(timezone.utc),
            )
            store["lastId"] = next_id
            store["messages"].append(message.model_dump(mode="json"))
            self._write(store)
        logger.info(f"Saved message ({self.mode}) chat={chat_name} sender={sender} id={next_id}")
        return message

    def health_check(self) -> HealthStatus:
        if self.path.is_file():
            return HealthStatus(ok=True)
        return HealthStatus(ok=False, error="File store not accessible")

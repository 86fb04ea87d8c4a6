from typing import List

from loguru import logger
from sqlalchemy import text as sql_text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from nexa_chat.core.errors import StoreError
from nexa_chat.db.session import Base, make_session_factory
from nexa_chat.models.message import ChatMessage
from nexa_chat.schemas.message import HealthStatus, Message
from nexa_chat.storage.base import MessageStore


class SqlMessageStore(MessageStore):
    mode = "postgres"

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = make_session_factory(engine)

    def initialize(self) -> None:
        # A dead DB must not crash the server; each later query fails on its own.
        try:
            Base.metadata.create_all(bind=self.engine, tables=[ChatMessage.__table__])
            logger.info("Connected to database and ensured messages table exists")
        except SQLAlchemyError as e:
            logger.error(f"Error initializing database: {e}")

    def list_messages(self, chat_name: str) -> List[Message]:
        try:
            with self.SessionLocal() as db:
                rows = (
                    db.query(ChatMessage)
                    .filter(ChatMessage.chat_name == chat_name)
                    .order_by(ChatMessage.timestamp.asc(), ChatMessage.id.asc())
                    .all()
                )
                return [Message.model_validate(r) for r in rows]
        except SQLAlchemyError as e:
            logger.error(f"Error fetching messages for {chat_name!r}: {e}")
            raise StoreError() from e

    def append_message(self, chat_name: str, sender: str, text: str) -> Message:
        try:
            with self.SessionLocal() as db:
                row = ChatMessage(chat_name=chat_name, sender=sender, text=text)
                db.add(row)
                db.commit()
                db.refresh(row)
                message = Message.model_validate(row)
        except SQLAlchemyError as e:
            logger.error(f"Error saving message to {chat_name!r}: {e}")
            raise StoreError() from e
        logger.info(f"Saved message ({self.mode}) chat={chat_name} sender={sender} id={message.id}")
        return message

    def health_check(self) -> HealthStatus:
        try:
            with self.engine.connect() as conn:
                ok = conn.execute(sql_text("SELECT 1")).scalar() == 1
            return HealthStatus(ok=ok)
        except SQLAlchemyError as e:
            return HealthStatus(ok=False, error=str(e))

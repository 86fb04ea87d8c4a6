from loguru import logger

from nexa_chat.core.config import Settings
from nexa_chat.db.session import make_engine
from nexa_chat.storage.base import MessageStore
from nexa_chat.storage.file_store import JsonFileMessageStore
from nexa_chat.storage.sql import SqlMessageStore


def create_store(settings: Settings) -> MessageStore:
    """DATABASE_URL set -> relational table, otherwise the JSON file fallback."""
    if settings.mode == "postgres":
        logger.info("Using database message store")
        return SqlMessageStore(make_engine(settings.database_url, ssl=settings.db_ssl))
    logger.info(f"DATABASE_URL not set, using file store {settings.store_file}")
    return JsonFileMessageStore(settings.store_file)
